"""Event model for recorded drag interactions.

A drag session produces a sequence of events. Events can be recorded to JSONL so an
interaction can be replayed later against the same tree (e.g., for debugging bug reports).
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class DragEventType(str, Enum):
    """State machine transitions."""

    DRAG_START = "drag_start"
    DRAG_OVER = "drag_over"
    DRAG_LEAVE = "drag_leave"
    DROP = "drop"
    DRAG_END = "drag_end"


class DragEvent(BaseModel):
    """A single recorded transition."""

    session_id: str
    seq: int = Field(ge=1)
    ts: datetime = Field(default_factory=datetime.utcnow)

    event_type: DragEventType
    data: dict[str, Any] = Field(default_factory=dict)
