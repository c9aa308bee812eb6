"""Shared fakes and fixtures."""

from __future__ import annotations

import asyncio
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import pytest
from kungfu import Ok, Error, Result

from cartflow import Checkout, Customer, StateSnapshot
from cartflow.transport import RequestOptions, Response, TransportError


def unwrap[T](result: Result[T, Any]) -> T:
    match result:
        case Ok(value):
            return value
        case Error(e):
            pytest.fail(f"Expected Ok, got Error({e!r})")


def unwrap_err[E](result: Result[Any, E]) -> E:
    match result:
        case Error(e):
            return e
        case Ok(value):
            pytest.fail(f"Expected Error, got Ok({value!r})")


def failure_response(status: int = 400, title: str = "Bad Request") -> Response[Any]:
    return Response(body={"title": title, "status": status}, status=status, status_text="Bad Request")


# ═══════════════════════════════════════════════════════════════════════════════
# Fake Transports
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(slots=True)
class FakeBillingAddressSender:
    fail_with: Exception | None = None
    gate: asyncio.Event | None = None
    calls: list[tuple[str, str, dict[str, Any]]] = field(default_factory=list)

    async def _respond(self, kind: str, checkout_id: str, address: Mapping[str, Any]) -> Response[Any]:
        self.calls.append((kind, checkout_id, dict(address)))
        if self.gate is not None:
            await self.gate.wait()
        if self.fail_with is not None:
            raise self.fail_with
        return Response(body={"id": checkout_id, "billing_address": dict(address)})

    async def create_address(
        self, checkout_id: str, address: Mapping[str, Any], options: RequestOptions | None = None
    ) -> Response[Any]:
        return await self._respond("create", checkout_id, address)

    async def update_address(
        self, checkout_id: str, address: Mapping[str, Any], options: RequestOptions | None = None
    ) -> Response[Any]:
        return await self._respond("update", checkout_id, address)


@dataclass(slots=True)
class FakeCustomerSender:
    fail_with: Exception | None = None
    gate: asyncio.Event | None = None
    calls: list[dict[str, Any]] = field(default_factory=list)

    async def update_customer(
        self, customer: Mapping[str, Any], options: RequestOptions | None = None
    ) -> Response[Any]:
        self.calls.append(dict(customer))
        if self.gate is not None:
            await self.gate.wait()
        if self.fail_with is not None:
            raise self.fail_with
        return Response(body={"email": customer["email"], "accepts_marketing": customer["accepts_marketing"]})


@dataclass(slots=True)
class FakeCheckoutClient:
    cart: Mapping[str, Any] | None = None
    fail: dict[str, Exception] = field(default_factory=dict)
    delay: float = 0.0
    token: str | None = "order-token"
    submit_body: Any = None
    cart_body: Any = None
    calls: list[str] = field(default_factory=list)

    async def _call(self, name: str, body: Any, headers: Mapping[str, str] | None = None) -> Response[Any]:
        self.calls.append(name)
        if self.delay:
            await asyncio.sleep(self.delay)
        if name in self.fail:
            raise self.fail[name]
        return Response(body=body, headers=headers or {})

    async def load_order(self, order_id: int, options: RequestOptions | None = None) -> Response[Any]:
        return await self._call("load_order", {"data": {"order": {"order_id": order_id}}})

    async def submit_order(self, payload: Mapping[str, Any], options: RequestOptions | None = None) -> Response[Any]:
        headers = {"token": self.token} if self.token else {}
        return await self._call(
            "submit_order",
            self.submit_body or {"data": {"order": {"order_id": 295}}, "meta": {"device_fingerprint": "abc"}},
            headers,
        )

    async def finalize_order(self, order_id: int, options: RequestOptions | None = None) -> Response[Any]:
        return await self._call("finalize_order", {"data": {"order": {"order_id": order_id, "status": "COMPLETED"}}})

    async def load_cart(self, options: RequestOptions | None = None) -> Response[Any]:
        return await self._call("load_cart", self.cart_body or {"data": {"cart": self.cart}})


# ═══════════════════════════════════════════════════════════════════════════════
# Fixtures
# ═══════════════════════════════════════════════════════════════════════════════


@pytest.fixture
def checkout() -> Checkout:
    return Checkout(id="b20deef4-6b7f-4a2e-9cf4-6f8a1c0d1a3e", grand_total=190.0)


@pytest.fixture
def state(checkout: Checkout) -> StateSnapshot:
    return StateSnapshot(checkout=checkout)


@pytest.fixture
def guest() -> Customer:
    return Customer(id=0, email="", is_guest=True)


@pytest.fixture
def signed_in() -> Customer:
    return Customer(id=4, email="test@bigcommerce.com", is_guest=False)


@pytest.fixture
def address_sender() -> FakeBillingAddressSender:
    return FakeBillingAddressSender()


@pytest.fixture
def customer_sender() -> FakeCustomerSender:
    return FakeCustomerSender()


@pytest.fixture
def cart() -> dict[str, Any]:
    return {
        "id": "b20deef4",
        "currency": "USD",
        "grand_total": 190.0,
        "updated_time": "2024-05-01T10:00:00Z",
        "items": [
            {"id": "666", "name": "Canvas Laundry Cart", "quantity": 1, "amount": 200.0},
            {"id": "667", "name": "Gift Certificate", "quantity": 1, "amount": 10.0},
        ],
    }


@pytest.fixture
def checkout_client(cart: dict[str, Any]) -> FakeCheckoutClient:
    return FakeCheckoutClient(cart=cart)


__all__ = (
    "unwrap",
    "unwrap_err",
    "failure_response",
    "FakeBillingAddressSender",
    "FakeCustomerSender",
    "FakeCheckoutClient",
    "TransportError",
)
