from __future__ import annotations

from enum import Enum
from typing import Dict, Optional


DEFAULT_COLOR = "bg-gray-100 text-gray-800"
TIME_COLOR = "bg-blue-100 text-blue-800"


class Area(str, Enum):
    a = "A區"
    b = "B區"
    c = "C區"
    d = "D區"


class ProductType(str, Enum):
    second_hand = "二手商品"
    handmade = "自創商品"


AREA_COLORS: Dict[Area, str] = {
    Area.a: "bg-red-100 text-red-800",
    Area.b: "bg-blue-100 text-blue-800",
    Area.c: "bg-green-100 text-green-800",
    Area.d: "bg-yellow-100 text-yellow-800",
}

PRODUCT_TYPE_COLORS: Dict[ProductType, str] = {
    ProductType.second_hand: "bg-orange-100 text-orange-800",
    ProductType.handmade: "bg-purple-100 text-purple-800",
}


def get_area_color(area: Optional[str]) -> str:
    """區域名稱（例如 "A區"）-> Tailwind CSS class，未知則為灰色"""
    try:
        return AREA_COLORS[Area(area)]
    except ValueError:
        return DEFAULT_COLOR


def get_product_type_color(product_type: Optional[str]) -> str:
    """商品類型（例如 "二手商品"）-> Tailwind CSS class，未知則為灰色"""
    try:
        return PRODUCT_TYPE_COLORS[ProductType(product_type)]
    except ValueError:
        return DEFAULT_COLOR
