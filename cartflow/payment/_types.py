"""
Payment types.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from cartflow._types import Body
    from cartflow.transport import RequestOptions


class PaymentMethodType(StrEnum):
    STANDARD = "PAYMENT_TYPE_API"
    OFFLINE = "PAYMENT_TYPE_OFFLINE"
    HOSTED = "PAYMENT_TYPE_HOSTED"
    OTHER = "PAYMENT_TYPE_OTHER"


class StrategyToken(StrEnum):
    """Bucket tokens used when no exact factory exists for a method."""

    OFFLINE = "offline"
    LEGACY = "legacy"
    OFFSITE = "offsite"
    CREDIT_CARD = "creditcard"


@dataclass(frozen=True, slots=True)
class PaymentMethod:
    """Payment method descriptor as returned by the payment methods endpoint."""

    id: str
    type: PaymentMethodType = PaymentMethodType.STANDARD
    gateway: str | None = None
    config: Mapping[str, Any] = field(default_factory=dict)

    @property
    def method_id(self) -> str:
        """Registry token candidate and cache token: gateway wins over id."""
        return self.gateway or self.id


class PaymentStrategy(Protocol):
    """Capability every strategy variant exposes."""

    async def initialize(
        self, method: PaymentMethod, options: RequestOptions | None = None
    ) -> Any: ...

    async def execute(self, payload: Body, options: RequestOptions | None = None) -> Any: ...

    async def finalize(self, options: RequestOptions | None = None) -> Any: ...


__all__ = ("PaymentMethodType", "StrategyToken", "PaymentMethod", "PaymentStrategy")
