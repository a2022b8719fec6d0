"""
Client application factory.

* Builds the shared ``httpx.AsyncClient`` for the ride service.
* Wires executor, dispatcher, optional in-flight lock and page controller.
* ``configure_logging`` is called once by the process entry point.
"""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from ridejoin.config import Settings, settings as default_settings
from ridejoin.domain.dispatcher import EffectDispatcher
from ridejoin.domain.ports import AuthProvider, Navigator, Notifier, RideSource
from ridejoin.infrastructure.executor import JoinRequestExecutor
from ridejoin.infrastructure.locks import InFlightLock
from ridejoin.infrastructure.rides import HttpRideSource
from ridejoin.pages.ride_detail import RideDetailPage
from ridejoin.services.join_flow import JoinRideFlow


def configure_logging(config: Settings = default_settings) -> None:
    logging.basicConfig(level=getattr(logging, config.log_level.upper(), logging.INFO))


def create_http_client(
    config: Settings = default_settings,
    session_token: Optional[str] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.AsyncClient:
    """Async client bound to the ride service, with the session cookie attached."""
    cookies = {config.session_cookie_name: session_token} if session_token else None
    return httpx.AsyncClient(
        base_url=config.api_base_url,
        cookies=cookies,
        headers={"Accept": "application/json"},
        transport=transport,
    )


def create_join_flow(
    http: httpx.AsyncClient,
    notifier: Notifier,
    navigator: Navigator,
    config: Settings = default_settings,
    lock_key: str = "join",
) -> JoinRideFlow:
    dispatcher = EffectDispatcher(notifier, navigator, config.confirmation_route)
    lock = InFlightLock(lock_key) if config.single_flight else None
    return JoinRideFlow(JoinRequestExecutor(http), dispatcher, lock)


def create_ride_detail_page(
    ride_id: str,
    *,
    http: httpx.AsyncClient,
    auth: AuthProvider,
    notifier: Notifier,
    navigator: Navigator,
    ride_source: Optional[RideSource] = None,
    config: Settings = default_settings,
) -> RideDetailPage:
    flow = create_join_flow(http, notifier, navigator, config, lock_key=f"join:{ride_id}")
    return RideDetailPage(
        ride_id,
        ride_source or HttpRideSource(http),
        auth,
        flow,
    )
