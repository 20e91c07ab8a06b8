"""Drag-and-drop reordering and nesting for hierarchical row lists."""

from __future__ import annotations

from treedrag.intent import DropIntent, classify_drop_intent, classify_pointer
from treedrag.models import Forest, Node, RowRect, forest_from_rows, forest_to_rows
from treedrag.reorder import apply_reorder, find_record, find_row
from treedrag.session import DragCallbacks, DragSession, DragState, RowStyle

__all__ = [
    "DragCallbacks",
    "DragSession",
    "DragState",
    "DropIntent",
    "Forest",
    "Node",
    "RowRect",
    "RowStyle",
    "apply_reorder",
    "classify_drop_intent",
    "classify_pointer",
    "find_record",
    "find_row",
    "forest_from_rows",
    "forest_to_rows",
]
