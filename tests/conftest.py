"""
Shared test fixtures.

The remote ride service is replaced by a small FastAPI app mounted through
``httpx.ASGITransport``, so the real client stack (base URL, cookies,
status handling, body decoding) runs without a network.  Join responses are
scripted per ride id.
"""

from __future__ import annotations

import copy
from typing import Any, AsyncGenerator

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from ridejoin.api.schemas import RideDocument
from ridejoin.app import create_http_client
from ridejoin.config import Settings
from ridejoin.domain.entities import RideSummary, UserIdentity
from ridejoin.infrastructure.collaborators import (
    HistoryNavigator,
    LoggingNotifier,
    SessionAuthProvider,
)

BASE_URL = "http://ride.test/api"
RIDE_ID = "ride-1"
CREATOR_ID = "driver-7"

RIDE_DOC: dict[str, Any] = {
    "_id": RIDE_ID,
    "origin": {"place": "Pune Station", "coordinates": [73.8743, 18.5286]},
    "destination": {"place": "Mumbai Airport"},
    "startTime": "2024-05-01T09:00:00.000Z",
    "endTime": "2024-05-01T12:30:00.000Z",
    "availableSeats": 3,
    "price": 650,
    "tags": ["AC", "Music"],
    "creator": {
        "_id": CREATOR_ID,
        "name": "Asha",
        "stars": 4.8,
        "ridesCreated": ["ride-1", "ride-0"],
        "profile": {"preferences": {"smoking": "No smoking", "music": "Any music"}},
    },
    "createdAt": "2023-11-20T08:00:00.000Z",
}


# ── Fake ride service ─────────────────────────────────────────────────


class FakeRideService:
    """Scriptable stand-in for the remote ride service."""

    def __init__(self):
        self.rides: dict[str, dict[str, Any]] = {RIDE_ID: copy.deepcopy(RIDE_DOC)}
        self.join_responses: dict[str, tuple[int, Any]] = {}
        self.join_calls: list[str] = []

    def script_join(self, ride_id: str, status: int, body: Any) -> None:
        self.join_responses[ride_id] = (status, body)

    def build_app(self) -> FastAPI:
        app = FastAPI()

        @app.get("/api/rides/{ride_id}")
        async def get_ride(ride_id: str):
            if ride_id not in self.rides:
                return JSONResponse({"message": "Ride not found"}, status_code=404)
            return self.rides[ride_id]

        @app.get("/api/rides/{ride_id}/join")
        async def join_ride(ride_id: str, request: Request):
            self.join_calls.append(ride_id)
            if "token" not in request.cookies:
                return JSONResponse({"message": "Unauthorized"}, status_code=401)
            status, body = self.join_responses.get(
                ride_id, (200, {"message": "Joined ride"})
            )
            if isinstance(body, str):
                return PlainTextResponse(body, status_code=status)
            return JSONResponse(body, status_code=status)

        return app


# ── Fixtures ──────────────────────────────────────────────────────────


@pytest.fixture
def config() -> Settings:
    return Settings(api_base_url=BASE_URL, session_cookie_name="token")


@pytest.fixture
def ride_service() -> FakeRideService:
    return FakeRideService()


@pytest_asyncio.fixture
async def http_client(
    ride_service: FakeRideService, config: Settings
) -> AsyncGenerator[httpx.AsyncClient, None]:
    """Client carrying a session cookie."""
    transport = httpx.ASGITransport(app=ride_service.build_app())
    async with create_http_client(config, "session-abc", transport) as client:
        yield client


@pytest_asyncio.fixture
async def anonymous_client(
    ride_service: FakeRideService, config: Settings
) -> AsyncGenerator[httpx.AsyncClient, None]:
    transport = httpx.ASGITransport(app=ride_service.build_app())
    async with create_http_client(config, None, transport) as client:
        yield client


@pytest.fixture
def ride() -> RideSummary:
    return RideDocument.model_validate(RIDE_DOC).to_entity()


@pytest.fixture
def user() -> UserIdentity:
    return UserIdentity(id="rider-42", name="Ravi", email="ravi@example.com")


@pytest.fixture
def creator() -> UserIdentity:
    return UserIdentity(id=CREATOR_ID, name="Asha")


@pytest.fixture
def notifier() -> LoggingNotifier:
    return LoggingNotifier()


@pytest.fixture
def navigator() -> HistoryNavigator:
    return HistoryNavigator()


@pytest.fixture
def auth() -> SessionAuthProvider:
    return SessionAuthProvider()
