"""Logging utilities."""

from __future__ import annotations

import contextlib
import contextvars
import logging
from typing import Any

from rich.logging import RichHandler


_session_id_var: contextvars.ContextVar[str] = contextvars.ContextVar("treedrag_session_id", default="-")
_phase_var: contextvars.ContextVar[str] = contextvars.ContextVar("treedrag_phase", default="-")


class _ContextFilter(logging.Filter):
    """Inject drag session context into log records."""

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: A003
        record.session = _session_id_var.get()  # type: ignore[attr-defined]
        record.phase = _phase_var.get()  # type: ignore[attr-defined]
        return True


@contextlib.contextmanager
def session_context(*, session_id: str, phase: str | None = None) -> Any:
    """Temporarily bind drag session context for structured logging.

    Args:
        session_id: Drag session identifier.
        phase: Optional interaction phase (e.g. ``drag_over``).
    """

    token_session = _session_id_var.set(session_id)
    token_phase = _phase_var.set(phase or _phase_var.get())
    try:
        yield
    finally:
        _session_id_var.reset(token_session)
        _phase_var.reset(token_phase)


def configure_logging(level: str = "INFO") -> None:
    """Configure application logging.

    Args:
        level: Logging level name.
    """

    handler = RichHandler(rich_tracebacks=True, show_time=True, show_level=True)
    handler.addFilter(_ContextFilter())

    formatter = logging.Formatter(
        fmt="%(asctime)s %(levelname)s session=%(session)s phase=%(phase)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(level)
    # Avoid duplicate handlers if configure_logging is called multiple times
    if not any(isinstance(h, RichHandler) for h in root.handlers):
        root.addHandler(handler)
    else:
        for h in root.handlers:
            if isinstance(h, RichHandler):
                h.addFilter(_ContextFilter())
                h.setFormatter(formatter)


def get_logger(name: str) -> logging.Logger:
    """Get a module logger."""

    return logging.getLogger(name)
