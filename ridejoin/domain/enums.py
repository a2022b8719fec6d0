"""Domain enumerations and the rejection-literal lookup."""

import enum


class OutcomeKind(str, enum.Enum):
    UNAUTHENTICATED = "UNAUTHENTICATED"
    ALREADY_JOINED = "ALREADY_JOINED"
    SELF_RIDE = "SELF_RIDE"
    FULL = "FULL"
    GENERIC_REJECTION = "GENERIC_REJECTION"
    SUCCESS = "SUCCESS"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


class NotificationKind(str, enum.Enum):
    ERROR = "error"
    INFO = "info"
    SUCCESS = "success"


# The ride service reports known rejections as exact string bodies on a 400.
# Matching is case-sensitive with no trimming.
REJECTION_OUTCOMES: dict[str, OutcomeKind] = {
    "You already joined this ride!": OutcomeKind.ALREADY_JOINED,
    "You cannot join your own ride!": OutcomeKind.SELF_RIDE,
    "Ride is full!": OutcomeKind.FULL,
}

# Outcomes that carry their own message text
MESSAGE_OUTCOMES: frozenset[OutcomeKind] = frozenset(
    {OutcomeKind.GENERIC_REJECTION, OutcomeKind.UNKNOWN_ERROR}
)
