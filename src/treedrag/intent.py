"""Drop intent classification.

Maps a pointer's vertical position inside a row to where the dragged row should land:
before the row, nested under it, or after it.
"""

from __future__ import annotations

import math
from enum import Enum

from treedrag.config import DEFAULT_GUTTER_SIZE
from treedrag.models.geometry import RowRect


class DropIntent(str, Enum):
    """Where a dragged row lands relative to the hovered row."""

    ABOVE = "above"
    OVER = "over"
    BELOW = "below"


def _non_negative(value: float) -> float:
    if not math.isfinite(value) or value < 0:
        return 0.0
    return float(value)


def classify_drop_intent(
    offset_y: float,
    row_height: float,
    gutter: float = DEFAULT_GUTTER_SIZE,
) -> DropIntent:
    """Classify a pointer offset measured from the top of a row.

    The edge zones are ``max(gutter, row_height / 3)`` tall. When the two zones overlap on a
    short row, a point inside both goes to the nearer edge, so ``over`` can vanish but never
    wins at a boundary.

    Args:
        offset_y: Pointer offset from the row's top edge.
        row_height: Row height.
        gutter: Minimum edge-zone size.

    Returns:
        The classified intent. Never raises; NaN, infinite and negative geometry is clamped.
    """

    height = _non_negative(row_height)
    zone = max(_non_negative(gutter), height / 3)

    if math.isnan(offset_y):
        offset = 0.0
    else:
        offset = min(max(float(offset_y), 0.0), height)

    in_top = offset <= zone
    in_bottom = offset >= height - zone

    if in_top and in_bottom:
        return DropIntent.ABOVE if offset <= height / 2 else DropIntent.BELOW
    if in_top:
        return DropIntent.ABOVE
    if in_bottom:
        return DropIntent.BELOW
    return DropIntent.OVER


def classify_pointer(
    pointer_y: float,
    rect: RowRect,
    gutter: float = DEFAULT_GUTTER_SIZE,
) -> DropIntent:
    """Classify an absolute pointer position against a row's bounding box."""

    return classify_drop_intent(pointer_y - rect.top, rect.height, gutter)
