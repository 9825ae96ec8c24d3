from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


# 欄位集合完全由 CSV 第一行決定，不做 schema 驗證
Record = Dict[str, Optional[str]]


class RenderState(str, Enum):
    """
    一次顯示流程的狀態。
    - loading  : 讀取中（提示訊息先顯示）
    - rendered : 已產生攤位卡片
    - empty    : 沒有任何資料列
    - errored  : 讀取或解析失敗
    """

    loading = "loading"
    rendered = "rendered"
    empty = "empty"
    errored = "errored"


class BoothGrid(BaseModel):
    """攤位卡片的網格區域（id="booth-grid"）"""

    element_id: str = "booth-grid"
    inner_html: str = ""

    def clear(self) -> None:
        self.inner_html = ""


class NoBoothsMessage(BaseModel):
    """
    沒有資料或發生錯誤時顯示的提示區域（id="no-booths-message"）。
    title / detail 對應兩個 <p>。
    """

    element_id: str = "no-booths-message"
    hidden: bool = False
    title: str = "載入中..."
    detail: str = ""

    def show(self, title: Optional[str] = None, detail: Optional[str] = None) -> None:
        self.hidden = False
        if title is not None:
            self.title = title
        if detail is not None:
            self.detail = detail

    def hide(self) -> None:
        self.hidden = True


class DisplayResult(BaseModel):
    state: RenderState
    count: int = 0
    grid: BoothGrid
    message: NoBoothsMessage


class BoothsResponse(BaseModel):
    """GET /api/booths 的回應"""

    count: int
    data: List[Record] = Field(default_factory=list)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "count": 1,
                "data": [
                    {
                        "攤位名稱": "老王雜貨",
                        "區域": "A區",
                        "商品類型": "二手商品",
                        "時間": "10:00-17:00",
                        "攤位編號": "A01",
                    }
                ],
            }
        }
    )
