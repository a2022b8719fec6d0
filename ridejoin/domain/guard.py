"""Precondition checks run before any network call."""

from __future__ import annotations

from typing import Optional

from .entities import Outcome, UserIdentity


def check_preconditions(user: Optional[UserIdentity]) -> Optional[Outcome]:
    """Return ``None`` to proceed, or the ``UNAUTHENTICATED`` outcome."""
    if user is None:
        return Outcome.unauthenticated()
    return None


def is_self_ride(user: Optional[UserIdentity], creator_id: Optional[str]) -> bool:
    """True when the signed-in user created the ride.

    Only disables the booking control; the ride service remains the
    authority and rejects self-bookings on its own.
    """
    return user is not None and creator_id is not None and user.id == creator_id
