"""HTTP-backed ride source: loads ride details by id."""

from __future__ import annotations

import logging
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from ridejoin.api.schemas import RideDocument
from ridejoin.domain.classifier import body_text
from ridejoin.domain.entities import FetchState
from ridejoin.domain.ports import RideSource

logger = logging.getLogger(__name__)


class HttpRideSource(RideSource):
    def __init__(self, http: httpx.AsyncClient):
        self.http = http

    async def fetch(self, ride_id: str) -> FetchState:
        try:
            response = await self.http.get(f"rides/{quote(ride_id, safe='')}")
            response.raise_for_status()
            ride = RideDocument.model_validate(response.json()).to_entity()
        except httpx.HTTPStatusError as exc:
            try:
                detail = body_text(exc.response.json())
            except ValueError:
                detail = None
            message = detail or f"Request failed with status code {exc.response.status_code}"
            logger.warning("Could not load ride %s: %s", ride_id, message)
            return FetchState(error=message)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.warning("Could not load ride %s: %s", ride_id, exc)
            return FetchState(error=str(exc) or "Failed to load ride")
        except (ValidationError, ValueError) as exc:
            logger.warning("Ride %s returned an invalid document: %s", ride_id, exc)
            return FetchState(error="Invalid ride data")
        return FetchState(data=ride)
