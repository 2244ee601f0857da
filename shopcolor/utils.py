"""
Design (utils.py)
- Purpose: Small display helpers for the UI: labels, swatch colors, and hit-testing the Delete cell.
- Inputs: Shops, color strings, Treeview geometry.
- Outputs: Strings and bools.
- Side effects: None.
- Thread-safety: Stateless; safe to call from any thread.
"""

from typing import Callable

from .config import FALLBACK_SWATCH
from .models import Shop


def heading_text(count: int) -> str:
    return f"Shops ({count})"


def color_label(shop: Shop) -> str:
    """Purpose: Text shown next to the name, e.g. '— #ff0000'."""
    return f"— {shop.favorite_color}"


def swatch_color(color: str, rgb_of: Callable[[str], tuple[int, int, int] | None]) -> str:
    """
    Purpose: Pick the fill for a row's swatch as a single "#rrggbb" token.
    Inputs: color (stored value), rgb_of (16-bit channels as from Tk winfo_rgb, or None if unknown).
    Outputs: Hex form of the color if it can be drawn, else FALLBACK_SWATCH.
    Notes: Tk understands "#rgb"/"#rrggbb" and X11 names ("light blue") but not CSS functions like rgb(...).
           Photo image data splits on whitespace, so names are never passed through as-is.
    """
    color = (color or "").strip()
    if not color:
        return FALLBACK_SWATCH
    rgb = rgb_of(color)
    if rgb is None:
        return FALLBACK_SWATCH
    return "#%02x%02x%02x" % tuple(c >> 8 for c in rgb)


def cell_hit(cell_bbox: tuple[int, int, int, int] | None, click_x: int, width: int = 60) -> bool:
    """
    Purpose: Detect if a click lands on the label drawn at the left of a Treeview cell.
    Inputs: cell_bbox = (x, y, width, height) from tree.bbox(...), click_x = event.x.
    Outputs: True if inside the first `width` px of the cell.
    """
    if not cell_bbox:
        return False
    x1, _, _, _ = cell_bbox
    return 0 <= (click_x - x1) <= width
