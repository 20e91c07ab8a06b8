"""Replay recorded drag events against a tree."""

from __future__ import annotations

from typing import Iterable

from treedrag.events import DragEvent, DragEventType
from treedrag.logging import get_logger
from treedrag.models.node import Forest
from treedrag.session import DragSession

logger = get_logger(__name__)


def group_sessions(events: Iterable[DragEvent]) -> list[list[DragEvent]]:
    """Split events into per-session runs.

    Sessions keep the order in which they first appear; within a session events are
    ordered by ``seq``. A recording file is append-only and may hold several sessions, each
    numbering its events from 1.
    """

    sessions: dict[str, list[DragEvent]] = {}
    for ev in events:
        sessions.setdefault(ev.session_id, []).append(ev)
    return [sorted(evs, key=lambda ev: ev.seq) for evs in sessions.values()]


def replay_events(
    events: Iterable[DragEvent],
    rows: Forest,
    *,
    gutter_size: float | None = None,
) -> Forest:
    """Feed recorded events into fresh sessions and return the resulting tree.

    Each recorded session is replayed in turn, starting from the tree the previous one left.
    Hover events carry the intent that was classified at record time, so geometry is not
    needed.
    """

    groups = group_sessions(events)
    for group in groups:
        session = DragSession(rows, gutter_size=gutter_size, session_id=group[0].session_id)
        for ev in group:
            if ev.event_type == DragEventType.DRAG_START:
                session.drag_start(str(ev.data["row_id"]))
            elif ev.event_type == DragEventType.DRAG_OVER:
                session.hover(str(ev.data["row_id"]), ev.data["intent"])
            elif ev.event_type == DragEventType.DRAG_LEAVE:
                session.drag_leave()
            elif ev.event_type == DragEventType.DROP:
                session.drop(str(ev.data["row_id"]))
            elif ev.event_type == DragEventType.DRAG_END:
                session.drag_end()
        rows = session.rows

    logger.info("Replayed %d sessions", len(groups))
    return rows
