from __future__ import annotations

import html
from typing import Iterable, List, Optional

from .colors import TIME_COLOR, get_area_color, get_product_type_color
from .models import BoothGrid, NoBoothsMessage, Record, RenderState


PLACEHOLDER_IMAGE = "/placeholder.svg"

EMPTY_TITLE = "目前沒有攤位資料"
EMPTY_DETAIL = "請檢查 public/booths.csv 檔案"
ERROR_TITLE = "讀取攤位資料時發生錯誤"
ERROR_DETAIL = "請檢查主控台以獲取更多資訊。"

_BADGE_CLASS = "inline-flex items-center px-2.5 py-0.5 rounded-full text-xs font-medium"
_LINK_CLASS = (
    "inline-flex items-center justify-center px-3 py-1.5 border border-transparent "
    "text-sm font-medium rounded-md text-white bg-blue-500 hover:bg-blue-600 transition-colors"
)


def _text(value: Optional[str]) -> str:
    return html.escape(value or "")


def _badge(label: Optional[str], color: str) -> str:
    return f'<span class="{_BADGE_CLASS} {color}">{_text(label)}</span>'


def render_card(booth: Record) -> str:
    """一筆攤位 -> 卡片 HTML。所有欄位值都經過 escape。"""
    name = booth.get("攤位名稱")
    area = booth.get("區域")
    product_type = booth.get("商品類型")
    image = booth.get("攤位圖片") or PLACEHOLDER_IMAGE

    badges = "".join(
        [
            _badge(area, get_area_color(area)),
            _badge(product_type, get_product_type_color(product_type)),
            _badge(booth.get("時間"), TIME_COLOR),
        ]
    )

    return (
        '<div class="overflow-hidden rounded-lg shadow-md hover:shadow-xl '
        'transition-shadow duration-300 bg-white">'
        '<div class="relative">'
        f'<img src="{_text(image)}" alt="{_text(name)}" width="300" height="200" '
        'class="w-full h-48 object-cover" />'
        f'<div class="absolute top-2 left-2 flex flex-wrap gap-1">{badges}</div>'
        "</div>"
        '<div class="p-4">'
        f'<h3 class="font-bold text-lg mb-2 text-gray-800">{_text(name)}</h3>'
        f'<p class="text-gray-600 mb-3">{_text(booth.get("攤主帳號"))}</p>'
        '<div class="flex items-center justify-between">'
        f'<a href="{_text(booth.get("攤位介紹連結"))}" target="_blank" '
        f'rel="noopener noreferrer" class="{_LINK_CLASS}">查看攤位介紹</a>'
        f'<div class="text-lg font-bold text-orange-600">{_text(booth.get("攤位編號"))}</div>'
        "</div>"
        "</div>"
        "</div>"
    )


def render_grid(booths: Iterable[Record]) -> str:
    """卡片依輸入順序串接"""
    return "".join(render_card(booth) for booth in booths)


def apply_records(
    booths: List[Record],
    grid: BoothGrid,
    message: NoBoothsMessage,
) -> RenderState:
    if not booths:
        message.show(EMPTY_TITLE, EMPTY_DETAIL)
        grid.clear()
        return RenderState.empty

    message.hide()
    grid.inner_html = render_grid(booths)
    return RenderState.rendered


def apply_error(grid: BoothGrid, message: NoBoothsMessage) -> RenderState:
    message.show(ERROR_TITLE, ERROR_DETAIL)
    grid.clear()
    return RenderState.errored
