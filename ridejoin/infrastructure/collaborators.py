"""In-process implementations of the collaborator ports."""

from __future__ import annotations

import logging
from typing import Any, Optional

from ridejoin.domain.entities import Navigation, Notification, UserIdentity
from ridejoin.domain.enums import NotificationKind
from ridejoin.domain.ports import AuthProvider, Navigator, Notifier

logger = logging.getLogger(__name__)

_LEVELS = {
    NotificationKind.ERROR: logging.ERROR,
    NotificationKind.INFO: logging.INFO,
    NotificationKind.SUCCESS: logging.INFO,
}


class SessionAuthProvider(AuthProvider):
    def __init__(self, user: Optional[UserIdentity] = None):
        self._user = user

    def sign_in(self, user: UserIdentity) -> None:
        self._user = user

    def sign_out(self) -> None:
        self._user = None

    def current_user(self) -> Optional[UserIdentity]:
        return self._user


class LoggingNotifier(Notifier):
    """Logs each notification and keeps the history for inspection."""

    def __init__(self):
        self.history: list[Notification] = []

    def notify(self, kind: NotificationKind, message: str) -> None:
        self.history.append(Notification(kind, message))
        logger.log(_LEVELS[kind], "[%s] %s", kind.value, message)


class HistoryNavigator(Navigator):
    def __init__(self, initial_route: str = "/"):
        self.initial_route = initial_route
        self.history: list[Navigation] = []

    @property
    def current_route(self) -> str:
        return self.history[-1].route if self.history else self.initial_route

    def navigate(self, route: str, state: Optional[dict[str, Any]] = None) -> None:
        self.history.append(Navigation(route, dict(state or {})))
