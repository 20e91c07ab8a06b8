"""Pydantic models used across the project."""

from __future__ import annotations

from treedrag.models.geometry import RowRect
from treedrag.models.node import Forest, Node, forest_from_rows, forest_to_rows, node_to_row

__all__ = [
    "Forest",
    "Node",
    "RowRect",
    "forest_from_rows",
    "forest_to_rows",
    "node_to_row",
]
