from core.booth_board.colors import (
    DEFAULT_COLOR,
    Area,
    get_area_color,
    get_product_type_color,
)


def test_area_colors():
    assert get_area_color("A區") == "bg-red-100 text-red-800"
    assert get_area_color("B區") == "bg-blue-100 text-blue-800"
    assert get_area_color("C區") == "bg-green-100 text-green-800"
    assert get_area_color(Area.d) == "bg-yellow-100 text-yellow-800"


def test_unknown_area_is_gray():
    assert get_area_color("Z區") == "bg-gray-100 text-gray-800"
    assert get_area_color(None) == DEFAULT_COLOR
    assert get_area_color("") == DEFAULT_COLOR


def test_product_type_colors():
    assert get_product_type_color("二手商品") == "bg-orange-100 text-orange-800"
    assert get_product_type_color("自創商品") == "bg-purple-100 text-purple-800"
    assert get_product_type_color("食物") == DEFAULT_COLOR
    assert get_product_type_color(None) == DEFAULT_COLOR
