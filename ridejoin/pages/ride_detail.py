"""
Ride detail page controller.

Holds the page's fetch state and the two-step booking gate: the booking
control opens a confirmation prompt, and only confirming it runs the join
flow.  The creator of a ride sees a disabled control; that is a display
affordance only, the join flow itself is not blocked.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from ridejoin.domain.entities import FetchState, Outcome, RideNotLoaded
from ridejoin.domain.guard import is_self_ride
from ridejoin.domain.ports import AuthProvider, RideSource
from ridejoin.services.join_flow import JoinRideFlow

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BookingControl:
    label: str
    disabled: bool


@dataclass(frozen=True)
class ConfirmationPrompt:
    title: str = "Confirm your booking"
    description: str = (
        "Are you sure to confirm your ride? This action will finalize your "
        "participation in the shared journey."
    )
    confirm_label: str = "Continue"
    cancel_label: str = "Cancel"


class RideDetailPage:
    def __init__(
        self,
        ride_id: str,
        ride_source: RideSource,
        auth: AuthProvider,
        flow: JoinRideFlow,
    ):
        self.ride_id = ride_id
        self.ride_source = ride_source
        self.auth = auth
        self.flow = flow
        self.state = FetchState(loading=True)
        self.prompt: Optional[ConfirmationPrompt] = None

    async def load(self) -> FetchState:
        """Fetch the ride; the new state replaces the old one wholesale."""
        self.state = FetchState(loading=True)
        self.state = await self.ride_source.fetch(self.ride_id)
        return self.state

    def booking_control(self) -> BookingControl:
        ride = self.state.data
        creator_id = ride.creator.id if ride is not None else None
        if is_self_ride(self.auth.current_user(), creator_id):
            return BookingControl("Cannot Book Own Ride", disabled=True)
        return BookingControl("Book Ride", disabled=not self.state.is_ready)

    def open_confirmation(self) -> ConfirmationPrompt:
        if not self.state.is_ready:
            raise RideNotLoaded(f"Ride {self.ride_id} is not available for booking")
        self.prompt = ConfirmationPrompt()
        return self.prompt

    def cancel_confirmation(self) -> None:
        self.prompt = None

    async def confirm(self) -> Optional[Outcome]:
        """Run the join flow if a confirmation prompt is open."""
        if self.prompt is None:
            logger.debug("Confirm ignored for ride %s: no open prompt", self.ride_id)
            return None
        self.prompt = None
        if not self.state.is_ready:
            raise RideNotLoaded(f"Ride {self.ride_id} is not available for booking")
        return await self.flow.run(self.ride_id, self.state.data, self.auth.current_user())
