"""
Domain entities and value objects for the ride join flow.

Patterns used
-------------
- **Value Objects** for everything read from collaborators (``RideSummary``,
  ``UserIdentity``): frozen, replaced wholesale on refetch.
- ``Outcome`` is a closed classification; only ``GENERIC_REJECTION`` and
  ``UNKNOWN_ERROR`` carry a message, and it is never empty.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional, Union

from .enums import MESSAGE_OUTCOMES, NotificationKind, OutcomeKind


class RideNotLoaded(Exception):
    """Raised when a booking is attempted before the ride has loaded."""


class BookingInProgress(Exception):
    """Raised when a confirmation arrives while another join is in flight."""


class InvalidOutcome(Exception):
    """Raised when an ``Outcome`` is built with an inconsistent message."""


# ── Value Objects ─────────────────────────────────────────────────────


@dataclass(frozen=True)
class Location:
    latitude: float
    longitude: float


@dataclass(frozen=True)
class Place:
    name: str
    location: Optional[Location] = None


@dataclass(frozen=True)
class Creator:
    id: str
    name: str
    stars: Optional[float] = None
    rides_published: int = 0
    smoking: Optional[str] = None
    music: Optional[str] = None


@dataclass(frozen=True)
class RideSummary:
    id: str
    origin: Place
    destination: Place
    start_time: datetime
    end_time: datetime
    available_seats: int
    price: float
    creator: Creator
    tags: tuple[str, ...] = ()
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class UserIdentity:
    id: str
    name: str = ""
    email: Optional[str] = None


Body = Union[str, dict[str, Any], list[Any], None]


@dataclass(frozen=True)
class JoinAttemptResult:
    status_code: int
    body: Body = ""


@dataclass(frozen=True)
class FetchState:
    loading: bool = False
    data: Optional[RideSummary] = None
    error: Optional[str] = None

    @property
    def is_ready(self) -> bool:
        return not self.loading and self.data is not None and self.error is None


# ── Outcome & effects ─────────────────────────────────────────────────


@dataclass(frozen=True)
class Outcome:
    kind: OutcomeKind
    message: Optional[str] = None

    def __post_init__(self) -> None:
        if self.kind in MESSAGE_OUTCOMES:
            if not self.message:
                raise InvalidOutcome(f"{self.kind.value} requires a message")
        elif self.message is not None:
            raise InvalidOutcome(f"{self.kind.value} does not carry a message")

    @classmethod
    def unauthenticated(cls) -> Outcome:
        return cls(OutcomeKind.UNAUTHENTICATED)

    @classmethod
    def success(cls) -> Outcome:
        return cls(OutcomeKind.SUCCESS)

    @classmethod
    def generic_rejection(cls, message: str) -> Outcome:
        return cls(OutcomeKind.GENERIC_REJECTION, message)

    @classmethod
    def unknown_error(cls, message: str) -> Outcome:
        return cls(OutcomeKind.UNKNOWN_ERROR, message)


@dataclass(frozen=True)
class Notification:
    kind: NotificationKind
    message: str


@dataclass(frozen=True)
class Navigation:
    route: str
    state: dict[str, Any] = field(default_factory=dict)
