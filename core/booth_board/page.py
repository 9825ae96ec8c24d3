from __future__ import annotations

import html

from .models import BoothGrid, NoBoothsMessage


PAGE_TITLE = "攤位一覽"

_TEMPLATE = """<!DOCTYPE html>
<html lang="zh-Hant">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width, initial-scale=1" />
<title>{title}</title>
<script src="https://cdn.tailwindcss.com"></script>
</head>
<body class="bg-gray-50">
<main class="container mx-auto px-4 py-8">
<h1 class="text-3xl font-bold text-center mb-8 text-gray-800">{title}</h1>
<div id="{message_id}" class="{message_class}">
<p class="text-xl mb-2">{message_title}</p>
<p class="text-sm">{message_detail}</p>
</div>
<div id="{grid_id}" class="grid grid-cols-1 sm:grid-cols-2 lg:grid-cols-3 xl:grid-cols-4 gap-6">{grid_html}</div>
</main>
</body>
</html>
"""


def render_page(grid: BoothGrid, message: NoBoothsMessage, title: str = PAGE_TITLE) -> str:
    """兩個輸出區域嵌入整頁 HTML。grid.inner_html 已經 escape 過，直接放入。"""
    message_class = "text-center text-gray-500 py-12"
    if message.hidden:
        message_class += " hidden"

    return _TEMPLATE.format(
        title=html.escape(title),
        message_id=message.element_id,
        message_class=message_class,
        message_title=html.escape(message.title),
        message_detail=html.escape(message.detail),
        grid_id=grid.element_id,
        grid_html=grid.inner_html,
    )
