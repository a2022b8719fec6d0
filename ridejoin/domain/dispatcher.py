"""
Effect Dispatcher
=================

Turns an ``Outcome`` into one notification and at most one navigation.

``OUTCOME_EFFECTS`` is the whole state machine: one row per outcome, each
row terminal.  ``plan_effects`` is pure; ``EffectDispatcher`` applies the
plan through the notifier and navigator ports, notification first.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple, Optional

from .entities import Navigation, Notification, Outcome, RideSummary
from .enums import NotificationKind, OutcomeKind
from .ports import Navigator, Notifier


class EffectRule(NamedTuple):
    kind: NotificationKind
    message: Optional[str]  # None -> use the outcome's own message
    navigates: bool


OUTCOME_EFFECTS: dict[OutcomeKind, EffectRule] = {
    OutcomeKind.UNAUTHENTICATED: EffectRule(
        NotificationKind.ERROR, "Please log in to join a ride", False
    ),
    OutcomeKind.ALREADY_JOINED: EffectRule(
        NotificationKind.INFO, "You have already joined this ride", True
    ),
    OutcomeKind.SELF_RIDE: EffectRule(
        NotificationKind.ERROR, "You cannot join your own ride", False
    ),
    OutcomeKind.FULL: EffectRule(
        NotificationKind.ERROR, "Sorry, this ride is full", False
    ),
    OutcomeKind.GENERIC_REJECTION: EffectRule(NotificationKind.ERROR, None, False),
    OutcomeKind.SUCCESS: EffectRule(
        NotificationKind.SUCCESS, "Booking successful!", True
    ),
    OutcomeKind.UNKNOWN_ERROR: EffectRule(NotificationKind.ERROR, None, False),
}


@dataclass(frozen=True)
class EffectPlan:
    notification: Notification
    navigation: Optional[Navigation] = None


def plan_effects(
    outcome: Outcome,
    ride_id: str,
    ride: Optional[RideSummary],
    confirmation_route: str = "/ride/{ride_id}/confirmed",
) -> EffectPlan:
    rule = OUTCOME_EFFECTS[outcome.kind]
    notification = Notification(rule.kind, rule.message or outcome.message or "")

    navigation = None
    if rule.navigates:
        navigation = Navigation(
            route=confirmation_route.format(ride_id=ride_id),
            state={"ride_data": ride},
        )
    return EffectPlan(notification, navigation)


class EffectDispatcher:
    def __init__(
        self,
        notifier: Notifier,
        navigator: Navigator,
        confirmation_route: str = "/ride/{ride_id}/confirmed",
    ):
        self.notifier = notifier
        self.navigator = navigator
        self.confirmation_route = confirmation_route

    def dispatch(
        self, outcome: Outcome, ride_id: str, ride: Optional[RideSummary]
    ) -> EffectPlan:
        plan = plan_effects(outcome, ride_id, ride, self.confirmation_route)
        self.notifier.notify(plan.notification.kind, plan.notification.message)
        if plan.navigation is not None:
            self.navigator.navigate(plan.navigation.route, plan.navigation.state)
        return plan
