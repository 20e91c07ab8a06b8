"""Drag interaction state machine.

``DragSession`` turns a stream of pointer-drag events into drop intents and, on release, a
reordered tree. It is UI-agnostic: the presentation layer feeds it row ids, pointer positions
and row geometry, and renders whatever ``style_for`` says.

States are ``idle`` (no active row) and ``dragging`` (active row set, optionally hovering a
target with an intent). Every entry point runs to completion synchronously, and callbacks fire
in the same call. Exceptions raised by callbacks propagate to the caller.
"""

from __future__ import annotations

import itertools
import uuid
from dataclasses import dataclass, replace
from datetime import datetime
from enum import Enum
from typing import Any, Callable, Protocol

from treedrag.config import load_settings
from treedrag.events import DragEvent, DragEventType
from treedrag.intent import DropIntent, classify_pointer
from treedrag.logging import get_logger, session_context
from treedrag.models.geometry import RowRect
from treedrag.models.node import Forest, Node
from treedrag.reorder import apply_reorder, find_record

logger = get_logger(__name__)


class RowStyle(str, Enum):
    """Visual role of a row under the current drag state."""

    ACTIVE = "active"
    ABOVE = "above"
    OVER = "over"
    BELOW = "below"
    NEUTRAL = "neutral"


@dataclass(frozen=True)
class DragState:
    """Immutable view of the current drag."""

    active_id: str | None = None
    target_id: str | None = None
    intent: DropIntent | None = None

    @property
    def is_dragging(self) -> bool:
        return self.active_id is not None


@dataclass
class DragCallbacks:
    """Optional lifecycle hooks, all synchronous."""

    on_drag_start: Callable[[str, Node], None] | None = None
    on_drag_over: Callable[[str, str, DropIntent], None] | None = None
    on_drop: Callable[[str, str, DropIntent, Forest], None] | None = None
    on_drag_end: Callable[[], None] | None = None


class EventRecorder(Protocol):
    """Anything that accepts recorded drag events."""

    def append(self, event: DragEvent) -> None: ...


IsWithin = Callable[[Any, Any], bool]


def _never_within(candidate: Any, container: Any) -> bool:
    return False


class DragSession:
    """Stateful drag controller over one tree.

    Args:
        rows: Current forest.
        on_data_change: Receives the new forest after a drop.
        callbacks: Lifecycle hooks.
        gutter_size: Minimum edge-zone size; defaults to ``Settings.gutter_size``.
        is_within: ``is_within(candidate, container)`` predicate used by ``drag_leave`` to
            ignore leaves that land back inside the same row.
        recorder: Optional sink for :class:`DragEvent` records.
        session_id: Identifier used in logs and recorded events.
    """

    def __init__(
        self,
        rows: Forest,
        *,
        on_data_change: Callable[[Forest], None] | None = None,
        callbacks: DragCallbacks | None = None,
        gutter_size: float | None = None,
        is_within: IsWithin | None = None,
        recorder: EventRecorder | None = None,
        session_id: str | None = None,
    ) -> None:
        self._rows = rows
        self._on_data_change = on_data_change
        self._callbacks = callbacks or DragCallbacks()
        self.gutter_size = gutter_size if gutter_size is not None else load_settings().gutter_size
        self._is_within = is_within or _never_within
        self._recorder = recorder
        self.session_id = session_id or uuid.uuid4().hex[:8]

        self._state = DragState()
        self._seq = itertools.count(1)

    @property
    def state(self) -> DragState:
        return self._state

    @property
    def is_dragging(self) -> bool:
        return self._state.is_dragging

    @property
    def rows(self) -> Forest:
        return self._rows

    def set_rows(self, rows: Forest) -> None:
        """Replace the tree, e.g. after an external data change."""

        self._rows = rows

    def drag_start(self, row_id: str) -> None:
        """Begin dragging ``row_id``.

        Starting while already dragging ends the previous drag first, ``on_drag_end``
        included.
        """

        if self._state.is_dragging:
            logger.debug("Drag restart: ending active=%s", self._state.active_id)
            self.drag_end()

        with session_context(session_id=self.session_id, phase="drag_start"):
            self._state = DragState(active_id=row_id)
            self._record(DragEventType.DRAG_START, {"row_id": row_id})
            logger.debug("Drag start: active=%s", row_id)

            node = find_record(self._rows, row_id)
            if node is None:
                logger.debug("Drag start: id=%s not in tree, skipping notification", row_id)
                return
            if self._callbacks.on_drag_start:
                self._callbacks.on_drag_start(row_id, node)

    def drag_over(self, row_id: str, pointer_y: float, rect: RowRect) -> DropIntent | None:
        """Pointer moved over ``row_id``; classify and hover it.

        Returns:
            The classified intent, or ``None`` when no drag is active.
        """

        if not self._state.is_dragging:
            return None
        intent = classify_pointer(pointer_y, rect, self.gutter_size)
        self.hover(row_id, intent)
        return intent

    def hover(self, row_id: str, intent: DropIntent) -> None:
        """Set the hovered target and intent directly.

        Used by ``drag_over`` and by callers that classify on their own (e.g. replay).
        Repeating the current ``(target, intent)`` pair changes nothing and notifies nobody.
        """

        state = self._state
        if state.active_id is None:
            return
        intent = DropIntent(intent)
        if state.target_id == row_id and state.intent == intent:
            return

        with session_context(session_id=self.session_id, phase="drag_over"):
            self._state = replace(state, target_id=row_id, intent=intent)
            self._record(DragEventType.DRAG_OVER, {"row_id": row_id, "intent": intent.value})
            logger.debug("Drag over: active=%s target=%s intent=%s", state.active_id, row_id, intent.value)
            if self._callbacks.on_drag_over:
                self._callbacks.on_drag_over(state.active_id, row_id, intent)

    def drag_leave(self, related_target: Any = None, container: Any = None) -> None:
        """Pointer left a row.

        Ignored when ``related_target`` lies within ``container`` (the row being left), so
        crossing nested element boundaries inside one row does not flicker the target.
        """

        if related_target is not None and self._is_within(related_target, container):
            return
        if self._state.target_id is None and self._state.intent is None:
            return

        with session_context(session_id=self.session_id, phase="drag_leave"):
            self._state = replace(self._state, target_id=None, intent=None)
            self._record(DragEventType.DRAG_LEAVE, {})

    def drop(self, row_id: str) -> Forest:
        """Release over ``row_id``.

        Applies the move when both an active row and an intent are set. Always returns to
        idle, even if a callback raises.

        Returns:
            The session's tree after the drop (unchanged when nothing moved).
        """

        state = self._state
        self._state = DragState()

        with session_context(session_id=self.session_id, phase="drop"):
            if state.active_id is not None:
                self._record(DragEventType.DROP, {"row_id": row_id})
            if state.active_id is None or state.intent is None:
                logger.debug("Drop ignored: active=%s intent=%s", state.active_id, state.intent)
                return self._rows

            new_rows = apply_reorder(self._rows, state.active_id, row_id, state.intent)
            self._rows = new_rows
            logger.info(
                "Drop: source=%s target=%s intent=%s", state.active_id, row_id, state.intent.value
            )

            if self._on_data_change:
                self._on_data_change(new_rows)
            if self._callbacks.on_drop:
                self._callbacks.on_drop(state.active_id, row_id, state.intent, new_rows)
            return new_rows

    def drag_end(self) -> None:
        """Cancel or finish the gesture. Unconditional."""

        self._state = DragState()
        with session_context(session_id=self.session_id, phase="drag_end"):
            self._record(DragEventType.DRAG_END, {})
            if self._callbacks.on_drag_end:
                self._callbacks.on_drag_end()

    def style_for(self, row_id: str) -> RowStyle:
        """Project the current state onto one row."""

        state = self._state
        if state.active_id == row_id:
            return RowStyle.ACTIVE
        if state.target_id == row_id and state.intent is not None:
            return RowStyle(state.intent.value)
        return RowStyle.NEUTRAL

    def _record(self, event_type: DragEventType, data: dict[str, Any]) -> None:
        if self._recorder is None:
            return
        self._recorder.append(
            DragEvent(
                session_id=self.session_id,
                seq=next(self._seq),
                ts=datetime.utcnow(),
                event_type=event_type,
                data=data,
            )
        )
