"""
Transport boundary — what orchestrators need from the request senders.

The HTTP layer itself lives outside cartflow; implement these protocols
on top of whatever client the application uses.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import timedelta
from typing import TYPE_CHECKING, Any, Protocol

from cartflow._types import Body
from cartflow.flow import CancellationToken

if TYPE_CHECKING:
    from cartflow.config import CheckoutConfig

# ═══════════════════════════════════════════════════════════════════════════════
# Response / Options
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Response[T]:
    """Transport response: body plus headers."""

    body: T
    headers: Mapping[str, str] = field(default_factory=dict)
    status: int = 200
    status_text: str = "OK"


@dataclass(frozen=True, slots=True)
class RequestOptions:
    """
    Per-call request options.

    timeout: applied around every network call of a flow
    cancellation: stops event delivery once cancelled
    """

    timeout: timedelta | None = None
    cancellation: CancellationToken | None = None

    @classmethod
    def from_config(
        cls,
        config: CheckoutConfig,
        cancellation: CancellationToken | None = None,
    ) -> RequestOptions:
        return cls(timeout=config.request_timeout, cancellation=cancellation)


def cancellation_of(options: RequestOptions | None) -> CancellationToken | None:
    return options.cancellation if options is not None else None


class TransportError(Exception):
    """Raised by request senders for non-success responses."""

    def __init__(self, response: Response[Any]) -> None:
        super().__init__(f"{response.status} {response.status_text}")
        self.response = response


# ═══════════════════════════════════════════════════════════════════════════════
# Request Sender Protocols
# ═══════════════════════════════════════════════════════════════════════════════


class BillingAddressRequestSender(Protocol):
    async def create_address(
        self, checkout_id: str, address: Body, options: RequestOptions | None = None
    ) -> Response[Body]: ...

    async def update_address(
        self, checkout_id: str, address: Body, options: RequestOptions | None = None
    ) -> Response[Body]: ...


class CustomerRequestSender(Protocol):
    async def update_customer(
        self, customer: Body, options: RequestOptions | None = None
    ) -> Response[Body]: ...


class CheckoutClient(Protocol):
    """Order and cart endpoints. Bodies follow ``{"data": ..., "meta": ...}``."""

    async def load_order(
        self, order_id: int, options: RequestOptions | None = None
    ) -> Response[Body]: ...

    async def submit_order(
        self, payload: Body, options: RequestOptions | None = None
    ) -> Response[Body]: ...

    async def finalize_order(
        self, order_id: int, options: RequestOptions | None = None
    ) -> Response[Body]: ...

    async def load_cart(self, options: RequestOptions | None = None) -> Response[Body]: ...


__all__ = (
    "Response",
    "RequestOptions",
    "TransportError",
    "cancellation_of",
    "BillingAddressRequestSender",
    "CustomerRequestSender",
    "CheckoutClient",
)
