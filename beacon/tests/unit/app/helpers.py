from __future__ import annotations

from typing import Callable, Dict, List


class FakeLoop:
    """List-backed stand-in for Tk ``after``/``after_cancel``."""

    def __init__(self) -> None:
        self._next = 0
        self.queue: Dict[str, Callable[[], None]] = {}
        self.delays: List[int] = []

    def after(self, delay_ms: int, callback: Callable[[], None]) -> str:
        self._next += 1
        token = f"after#{self._next}"
        self.queue[token] = callback
        self.delays.append(delay_ms)
        return token

    def after_cancel(self, token: str) -> None:
        self.queue.pop(token, None)

    def run_pending(self) -> int:
        ran = 0
        while self.queue:
            token = next(iter(self.queue))
            callback = self.queue.pop(token)
            callback()
            ran += 1
        return ran
