"""
Tests for display helpers
"""
import pytest

from shopcolor.config import FALLBACK_SWATCH
from shopcolor.models import Shop
from shopcolor.utils import cell_hit, color_label, heading_text, swatch_color


def test_heading_text():
    assert heading_text(0) == "Shops (0)"
    assert heading_text(12) == "Shops (12)"


def test_color_label():
    assert color_label(Shop(name="Acme", favorite_color="#ff0000")) == "— #ff0000"


X11 = {"blue": (0, 0, 65535), "light blue": (44461, 55512, 59110), "navy blue": (0, 0, 32896)}


def test_swatch_color_is_hex():
    assert swatch_color(" blue ", X11.get) == "#0000ff"
    assert swatch_color("#FF8800", lambda c: (65535, 34952, 0)) == "#ff8800"


@pytest.mark.parametrize("name,expected", [("light blue", "#add8e6"), ("navy blue", "#000080")])
def test_swatch_color_multi_word_name_is_single_token(name, expected):
    fill = swatch_color(name, X11.get)
    assert fill == expected
    assert len(fill.split()) == 1


def test_swatch_color_falls_back():
    assert swatch_color("rgb(1, 2, 3)", lambda c: None) == FALLBACK_SWATCH
    assert swatch_color("", X11.get) == FALLBACK_SWATCH


def test_cell_hit():
    bbox = (100, 0, 80, 26)
    assert cell_hit(bbox, 100)
    assert cell_hit(bbox, 150)
    assert not cell_hit(bbox, 170)
    assert not cell_hit(bbox, 90)
    assert not cell_hit(None, 120)
    assert not cell_hit((), 120)
