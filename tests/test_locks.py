"""Tests for the in-flight lock."""

from __future__ import annotations

import pytest

from ridejoin.domain.entities import BookingInProgress
from ridejoin.infrastructure.locks import InFlightLock


class TestInFlightLock:
    def test_acquire_succeeds(self):
        lock = InFlightLock("ride-1")
        assert lock.acquire() is True
        assert lock.locked

    def test_acquire_fails_if_held(self):
        lock = InFlightLock("ride-1")
        lock.acquire()
        assert lock.acquire() is False

    def test_release_allows_reacquire(self):
        lock = InFlightLock("ride-1")
        lock.acquire()
        lock.release()
        assert lock.acquire() is True

    @pytest.mark.asyncio
    async def test_context_manager_rejects_when_held(self):
        lock = InFlightLock("ride-1")
        async with lock:
            with pytest.raises(BookingInProgress):
                async with lock:
                    pass
            assert lock.locked
        assert not lock.locked
