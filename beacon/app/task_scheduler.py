"""Scheduler helper that defers UI-triggered work to the next event-loop turn.

The controller passes Tk ``after`` and ``after_cancel`` callables into this
class so a save never runs inside the input event that triggered it. That
keeps shared collections (open windows, overlays) from being mutated while
the toolkit is still iterating them.
"""

from __future__ import annotations


import logging
from dataclasses import dataclass
from typing import Callable, Dict, Optional


ScheduleFn = Callable[[int, Callable[[], None]], str]
CancelFn = Callable[[str], None]


@dataclass
class TaskHandle:
    """Timer token associated with a single deferred task.

    Attributes:
        key: Task key (e.g. ``save``).
        token: Scheduler token returned by the UI scheduler implementation.
    """
    key: str
    token: str


class TaskScheduler:
    """Manage keyed deferred tasks using a UI scheduler (for example Tk)."""

    def __init__(self, schedule: ScheduleFn, cancel: CancelFn) -> None:
        """Store schedule/cancel functions and initialize handle registry.

        Args:
            schedule: Function compatible with ``after(delay_ms, callback)``.
            cancel: Function compatible with ``after_cancel(token)``.
        """
        self._log = logging.getLogger(__name__)
        self._schedule = schedule
        self._cancel = cancel
        self._handles: Dict[str, TaskHandle] = {}

    def defer(self, key: str, callback: Callable[[], None], delay_ms: int = 0) -> None:
        """Queue ``callback`` for a later loop iteration.

        A pending task with the same key is replaced, so repeated triggers
        collapse into a single run.
        """
        delay = max(0, int(delay_ms))
        self.cancel(key)

        def _run() -> None:
            self._handles.pop(key, None)
            callback()

        token = self._schedule(delay, _run)
        self._handles[key] = TaskHandle(key=key, token=token)

    def pending(self, key: str) -> bool:
        return key in self._handles

    def cancel(self, key: str) -> None:
        """Cancel a pending task."""
        handle = self._handles.pop(key, None)
        if not handle:
            return
        try:
            self._cancel(handle.token)
        except Exception:
            # Token already fired or the window is gone.
            self._log.debug("Cancel of %s failed", key, exc_info=True)

    def cancel_all(self) -> None:
        """Cancel all pending tasks."""
        for key in list(self._handles.keys()):
            self.cancel(key)

    def handle_for(self, key: str) -> Optional[TaskHandle]:
        """Return the current handle for a key, if scheduled."""
        return self._handles.get(key)


__all__ = ["TaskHandle", "TaskScheduler"]
