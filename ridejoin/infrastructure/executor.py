"""
Join Request Executor
=====================

Issues ``GET rides/{ride_id}/join`` on the ride service.

Transport rules
---------------
* Any status in ``[200, 500)`` is a delivered answer and is returned as a
  ``JoinAttemptResult``; 4xx bodies carry the rejection reason.
* Status ``>= 500``, network errors, unbuildable URLs and non-200 bodies
  that claim to be JSON but do not decode raise ``TransportError`` with the
  best available diagnostic.  An undecodable 200 body is kept as text.
* The ride id is percent-encoded as a single path segment.
* One request per call, no retry, httpx default timeout.
"""

from __future__ import annotations

import logging
from urllib.parse import quote

import httpx

from ridejoin.domain.classifier import transport_failure_message
from ridejoin.domain.entities import Body, JoinAttemptResult

logger = logging.getLogger(__name__)

JSON_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
    "X-Requested-With": "XMLHttpRequest",
}


class TransportError(Exception):
    """The join request produced no interpretable application response."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def is_delivered(status_code: int) -> bool:
    return 200 <= status_code < 500


def decode_body(response: httpx.Response) -> Body:
    """JSON for JSON content types, text otherwise, ``""`` when empty.

    Raises ``ValueError`` when a JSON content type does not decode.
    """
    if not response.content:
        return ""
    content_type = response.headers.get("content-type", "")
    if "json" in content_type:
        return response.json()
    return response.text


class JoinRequestExecutor:
    def __init__(self, http: httpx.AsyncClient):
        self.http = http

    async def execute(self, ride_id: str) -> JoinAttemptResult:
        path = f"rides/{quote(ride_id, safe='')}/join"
        logger.info("Joining ride at: %s", path)

        try:
            response = await self.http.get(path, headers=JSON_HEADERS)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            message = transport_failure_message(None, str(exc))
            logger.warning("Join request for ride %s failed: %s", ride_id, message)
            raise TransportError(message) from exc

        logger.info("Join response: %s", response.status_code)

        try:
            body = decode_body(response)
        except ValueError as exc:
            if response.status_code == 200:
                body = response.text
            elif is_delivered(response.status_code):
                message = f"Malformed response body: {exc}"
                logger.warning("Join request for ride %s failed: %s", ride_id, message)
                raise TransportError(message, response.status_code) from exc
            else:
                body = None

        if not is_delivered(response.status_code):
            message = transport_failure_message(
                body, f"Request failed with status code {response.status_code}"
            )
            logger.warning("Join request for ride %s failed: %s", ride_id, message)
            raise TransportError(message, response.status_code)

        return JoinAttemptResult(status_code=response.status_code, body=body)
