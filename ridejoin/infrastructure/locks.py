"""
In-flight lock for the join flow.

Guards the Guard -> Executor -> Classifier -> Dispatcher sequence of one
page so a second confirmation cannot issue a second request while the first
is pending.  Acquire never waits: a held lock means the caller is rejected.
The lock lives on a single event loop, so a plain flag is enough.
"""

from __future__ import annotations

from ridejoin.domain.entities import BookingInProgress


class InFlightLock:
    def __init__(self, key: str):
        self.key = f"lock:{key}"
        self._held = False

    @property
    def locked(self) -> bool:
        return self._held

    def acquire(self) -> bool:
        """Try to acquire. Returns True on success."""
        if self._held:
            return False
        self._held = True
        return True

    def release(self) -> None:
        self._held = False

    # context-manager support
    async def __aenter__(self):
        if not self.acquire():
            raise BookingInProgress(f"Join already in flight: {self.key}")
        return self

    async def __aexit__(self, *args):
        self.release()
