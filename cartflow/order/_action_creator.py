"""
Order orchestration.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import structlog
from kungfu import LazyCoroResult, Result, Ok, Error

from cartflow import flow as F
from cartflow import lift
from cartflow._types import Body, CartSnapshot, Lazy
from cartflow.cart import CartComparator
from cartflow.errors import CartChangedError
from cartflow.flow import Action, ActionError
from cartflow.order._actions import OrderActionType as O
from cartflow.transport import CheckoutClient, RequestOptions, cancellation_of

logger = structlog.get_logger(__name__)


def _data(body: Any) -> Any:
    return _mapping(body).get("data")


def _mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


class OrderActionCreator:
    """
    Order lifecycle flows.

    Response bodies follow ``{"data": ..., "meta": ...}``; succeeded
    actions carry ``data`` as payload.
    """

    def __init__(
        self,
        checkout_client: CheckoutClient,
        cart_comparator: CartComparator | None = None,
    ) -> None:
        self._checkout_client = checkout_client
        self._cart_comparator = cart_comparator or CartComparator()

    def load_order(self, order_id: int, options: RequestOptions | None = None) -> F.Flow[Action]:
        client = self._checkout_client

        async def produce(emit: F.Emit[Action]) -> None:
            emit(Action(O.LOAD_ORDER_REQUESTED))

            match await lift.request(lambda: client.load_order(order_id, options), options):
                case Ok(response):
                    emit(Action(O.LOAD_ORDER_SUCCEEDED, payload=_data(response.body)))
                case Error(e):
                    raise ActionError(Action.failure(O.LOAD_ORDER_FAILED, e)) from e

        return F.flow(produce, cancellation=cancellation_of(options))

    def submit_order(
        self,
        payload: Body,
        cart: CartSnapshot | None = None,
        options: RequestOptions | None = None,
    ) -> F.Flow[Action]:
        """
        Submit order, verifying the cart first when a snapshot is given.

        A changed cart (or a cart that cannot be loaded) fails the flow with
        CartChangedError and submit_order is never called.
        """
        client = self._checkout_client
        verify_cart = self._verify_cart

        async def produce(emit: F.Emit[Action]) -> None:
            emit(Action(O.SUBMIT_ORDER_REQUESTED))

            match await verify_cart(cart, options):
                case Ok(_):
                    pass
                case Error(e):
                    raise ActionError(Action.failure(O.SUBMIT_ORDER_FAILED, e)) from e

            match await lift.request(lambda: client.submit_order(payload, options), options):
                case Ok(response):
                    body = _mapping(response.body)
                    meta = {**_mapping(body.get("meta")), "token": response.headers.get("token")}
                    logger.info("Order submitted", has_token=meta["token"] is not None)
                    emit(Action(O.SUBMIT_ORDER_SUCCEEDED, payload=body.get("data"), meta=meta))
                case Error(e):
                    raise ActionError(Action.failure(O.SUBMIT_ORDER_FAILED, e)) from e

        return F.flow(produce, cancellation=cancellation_of(options))

    def finalize_order(self, order_id: int, options: RequestOptions | None = None) -> F.Flow[Action]:
        client = self._checkout_client

        async def produce(emit: F.Emit[Action]) -> None:
            emit(Action(O.FINALIZE_ORDER_REQUESTED))

            match await lift.request(lambda: client.finalize_order(order_id, options), options):
                case Ok(response):
                    emit(Action(O.FINALIZE_ORDER_SUCCEEDED, payload=_data(response.body)))
                case Error(e):
                    raise ActionError(Action.failure(O.FINALIZE_ORDER_FAILED, e)) from e

        return F.flow(produce, cancellation=cancellation_of(options))

    def _verify_cart(
        self,
        existing: CartSnapshot | None,
        options: RequestOptions | None,
    ) -> Lazy[None, CartChangedError]:
        client = self._checkout_client
        comparator = self._cart_comparator

        async def verify() -> Result[None, CartChangedError]:
            if existing is None:
                return Ok(None)

            match await lift.request(lambda: client.load_cart(options), options):
                case Ok(response):
                    current = _mapping(_data(response.body)).get("cart")
                    if current is not None and comparator.is_equal(existing, current):
                        return Ok(None)
                    logger.warning("Cart changed before order submission")
                    return Error(CartChangedError())
                case Error(e):
                    logger.warning("Cart could not be verified", error=str(e))
                    return Error(CartChangedError(cause=e, response=e.response))

        return LazyCoroResult(verify)


__all__ = ("OrderActionCreator",)
