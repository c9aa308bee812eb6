"""
Error classification — map raw failures onto the closed taxonomy.
"""

from __future__ import annotations

from collections.abc import Mapping

import structlog

from cartflow.errors._types import CheckoutError, RequestError
from cartflow.transport import Response, TransportError

logger = structlog.get_logger(__name__)


def _message_from(response: Response) -> str | None:
    body = response.body
    if isinstance(body, Mapping):
        for key in ("title", "detail", "message"):
            value = body.get(key)
            if isinstance(value, str) and value:
                return value
    return response.status_text or None


def classify(exc: BaseException) -> CheckoutError:
    """
    Classify a failure.

    - CheckoutError: returned unchanged
    - TransportError: RequestError carrying the response
    - TimeoutError: RequestError("Request timed out")
    - anything else: RequestError with the original as cause
    """
    match exc:
        case CheckoutError():
            return exc
        case TransportError(response=response):
            message = _message_from(response) or RequestError.message
            return RequestError(message=message, cause=exc, response=response)
        case TimeoutError():
            return RequestError(message="Request timed out", cause=exc)
        case _:
            logger.warning("Unclassified failure", error_type=type(exc).__name__, error=str(exc))
            return RequestError(cause=exc)


__all__ = ("classify",)
