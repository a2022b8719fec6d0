"""
Outcome Classifier
==================

Maps a join attempt's ``(status_code, body)`` to exactly one ``Outcome``.

Order of checks
---------------
1. ``401`` -> UNAUTHENTICATED
2. ``400`` + known literal body -> the literal's outcome (``REJECTION_OUTCOMES``)
3. ``400`` + anything else -> GENERIC_REJECTION with the server text
4. ``200`` -> SUCCESS, whatever the body
5. anything else -> UNKNOWN_ERROR

The function is pure; no I/O and no logging.
"""

from __future__ import annotations

from typing import Optional

from .entities import Body, JoinAttemptResult, Outcome
from .enums import REJECTION_OUTCOMES

REJECTION_FALLBACK = "Failed to join ride"
TRANSPORT_FALLBACK = "Failed to book ride"


def body_text(body: Body) -> Optional[str]:
    """Best human-readable text in a response body, or ``None``.

    Structured bodies prefer ``error`` over ``message``.
    """
    if isinstance(body, str):
        return body or None
    if isinstance(body, dict):
        for key in ("error", "message"):
            value = body.get(key)
            if isinstance(value, str) and value:
                return value
    return None


def transport_failure_message(
    body: Body = None, transport_message: Optional[str] = None
) -> str:
    """Diagnostic for a failed transport: body error, body message, transport text."""
    if isinstance(body, dict):
        text = body_text(body)
        if text:
            return text
    return transport_message or TRANSPORT_FALLBACK


def classify(result: JoinAttemptResult) -> Outcome:
    status, body = result.status_code, result.body

    if status == 401:
        return Outcome.unauthenticated()

    if status == 400:
        if isinstance(body, str) and body in REJECTION_OUTCOMES:
            return Outcome(REJECTION_OUTCOMES[body])
        return Outcome.generic_rejection(body_text(body) or REJECTION_FALLBACK)

    if status == 200:
        return Outcome.success()

    return Outcome.unknown_error(body_text(body) or REJECTION_FALLBACK)
