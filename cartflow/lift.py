"""
Lift — Helpers for lifting transport calls into cartflow monads.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Awaitable

from combinators import lift as L

from cartflow._types import Lazy
from cartflow.errors import CheckoutError, classify
from cartflow.transport import RequestOptions


def request[T](
    call: Callable[[], Awaitable[T]],
    options: RequestOptions | None = None,
) -> Lazy[T, CheckoutError]:
    """
    Lift a request sender call.

    Applies ``options.timeout`` and classifies any failure.

    Example:
        result = await request(lambda: client.load_order(42, options), options)
    """
    timeout = options.timeout if options is not None else None

    async def guarded() -> T:
        if timeout is None:
            return await call()
        async with asyncio.timeout(timeout.total_seconds()):
            return await call()

    return L.catching_async(guarded, on_error=classify)


__all__ = ("request",)
