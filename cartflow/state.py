"""
State accessor — read-only view of the checkout store.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol

from cartflow.payment._types import PaymentMethod


@dataclass(frozen=True, slots=True)
class Checkout:
    id: str
    grand_total: float = 0.0


@dataclass(frozen=True, slots=True)
class Customer:
    id: int | None
    email: str = ""
    is_guest: bool = True


class StateAccessor(Protocol):
    def get_checkout(self) -> Checkout | None: ...

    def get_customer(self) -> Customer | None: ...

    def get_billing_address(self) -> Mapping[str, Any] | None: ...

    def get_payment_method(
        self, method_id: str, gateway: str | None = None
    ) -> PaymentMethod | None: ...


@dataclass(frozen=True, slots=True)
class StateSnapshot:
    """Immutable StateAccessor. Replace it, never mutate it."""

    checkout: Checkout | None = None
    customer: Customer | None = None
    billing_address: Mapping[str, Any] | None = None
    payment_methods: tuple[PaymentMethod, ...] = field(default=())

    def get_checkout(self) -> Checkout | None:
        return self.checkout

    def get_customer(self) -> Customer | None:
        return self.customer

    def get_billing_address(self) -> Mapping[str, Any] | None:
        return self.billing_address

    def get_payment_method(
        self, method_id: str, gateway: str | None = None
    ) -> PaymentMethod | None:
        for method in self.payment_methods:
            if method.id == method_id and method.gateway == gateway:
                return method
        return None


__all__ = ("Checkout", "Customer", "StateAccessor", "StateSnapshot")
