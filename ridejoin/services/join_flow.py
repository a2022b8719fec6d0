"""
Join Ride Flow
==============

Runs one booking attempt end to end, strictly in order:

1. **Guard** -- no signed-in user short-circuits to UNAUTHENTICATED and no
   request is sent.
2. **Executor** -- one ``GET rides/{id}/join``; transport failures become
   UNKNOWN_ERROR with the executor's diagnostic.
3. **Classifier** -- ``(status, body)`` to exactly one ``Outcome``.
4. **Dispatcher** -- one notification, then at most one navigation.

With an ``InFlightLock`` the whole sequence is single-flight per page.
"""

from __future__ import annotations

import logging
from typing import Optional

from ridejoin.domain.classifier import classify
from ridejoin.domain.dispatcher import EffectDispatcher
from ridejoin.domain.entities import Outcome, RideNotLoaded, RideSummary, UserIdentity
from ridejoin.domain.guard import check_preconditions
from ridejoin.infrastructure.executor import JoinRequestExecutor, TransportError
from ridejoin.infrastructure.locks import InFlightLock

logger = logging.getLogger(__name__)


class JoinRideFlow:
    def __init__(
        self,
        executor: JoinRequestExecutor,
        dispatcher: EffectDispatcher,
        lock: Optional[InFlightLock] = None,
    ):
        self.executor = executor
        self.dispatcher = dispatcher
        self.lock = lock

    async def run(
        self,
        ride_id: str,
        ride: Optional[RideSummary],
        user: Optional[UserIdentity],
    ) -> Outcome:
        if ride is None:
            raise RideNotLoaded(f"Ride {ride_id} has not been loaded")

        if self.lock is None:
            return await self._run(ride_id, ride, user)
        async with self.lock:
            return await self._run(ride_id, ride, user)

    async def _run(
        self, ride_id: str, ride: RideSummary, user: Optional[UserIdentity]
    ) -> Outcome:
        outcome = check_preconditions(user)
        if outcome is None:
            outcome = await self._attempt(ride_id)

        logger.info("Join ride %s resolved to %s", ride_id, outcome.kind.value)
        self.dispatcher.dispatch(outcome, ride_id, ride)
        return outcome

    async def _attempt(self, ride_id: str) -> Outcome:
        try:
            result = await self.executor.execute(ride_id)
        except TransportError as exc:
            return Outcome.unknown_error(exc.message)
        return classify(result)
