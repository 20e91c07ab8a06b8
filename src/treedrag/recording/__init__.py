"""Recording utilities for drag events."""

from __future__ import annotations

from treedrag.recording.file_recorder import FileEventRecorder, iter_events
from treedrag.recording.replay import group_sessions, replay_events

__all__ = ["FileEventRecorder", "group_sessions", "iter_events", "replay_events"]
