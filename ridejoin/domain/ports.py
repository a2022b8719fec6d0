"""
Collaborator ports.

The join flow only talks to the outside world through these abstractions,
so the domain stays independent of the UI toolkit and HTTP stack.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional

from .entities import FetchState, UserIdentity
from .enums import NotificationKind


class AuthProvider(ABC):
    @abstractmethod
    def current_user(self) -> Optional[UserIdentity]: ...


class Notifier(ABC):
    @abstractmethod
    def notify(self, kind: NotificationKind, message: str) -> None: ...


class Navigator(ABC):
    @abstractmethod
    def navigate(self, route: str, state: Optional[dict[str, Any]] = None) -> None: ...


class RideSource(ABC):
    @abstractmethod
    async def fetch(self, ride_id: str) -> FetchState: ...
