"""
Payment strategy orchestration — resolve strategy, run it, report lifecycle.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any

import structlog
from kungfu import Ok, Error

from cartflow import flow as F
from cartflow import lift
from cartflow._types import Body
from cartflow.errors import MissingDataError, MissingDataType
from cartflow.flow import Action, ActionError
from cartflow.payment._actions import PaymentStrategyActionType as T
from cartflow.payment._resolver import StrategyResolver
from cartflow.payment._types import PaymentMethod, PaymentStrategy
from cartflow.transport import RequestOptions, cancellation_of

if TYPE_CHECKING:
    from cartflow.state import StateAccessor

logger = structlog.get_logger(__name__)

type _Run = Callable[[PaymentStrategy], Awaitable[Any]]


class PaymentStrategyActionCreator:
    """
    Runs payment strategies selected through the resolver.

    Every operation resolves the method from state first; a missing method
    raises MissingDataError before any action is emitted.
    """

    def __init__(self, resolver: StrategyResolver) -> None:
        self._resolver = resolver

    def initialize(
        self,
        state: StateAccessor,
        method_id: str,
        gateway: str | None = None,
        options: RequestOptions | None = None,
    ) -> F.Flow[Action]:
        method = _require_method(state, method_id, gateway)
        return self._run(
            method,
            lambda strategy: strategy.initialize(method, options),
            (T.INITIALIZE_REQUESTED, T.INITIALIZE_SUCCEEDED, T.INITIALIZE_FAILED),
            options,
        )

    def execute(
        self,
        state: StateAccessor,
        payload: Body,
        options: RequestOptions | None = None,
    ) -> F.Flow[Action]:
        """
        Execute payment for an order payload.

        ``payload["payment"]`` must name the method via ``method_id`` and,
        for gateway-backed methods, ``gateway``.
        """
        payment = payload.get("payment") or {}
        method_id = payment.get("method_id")
        if not method_id:
            raise MissingDataError.of(MissingDataType.PAYMENT_METHOD)

        method = _require_method(state, method_id, payment.get("gateway"))
        return self._run(
            method,
            lambda strategy: strategy.execute(payload, options),
            (T.EXECUTE_REQUESTED, T.EXECUTE_SUCCEEDED, T.EXECUTE_FAILED),
            options,
        )

    def finalize(
        self,
        state: StateAccessor,
        method_id: str,
        gateway: str | None = None,
        options: RequestOptions | None = None,
    ) -> F.Flow[Action]:
        method = _require_method(state, method_id, gateway)
        return self._run(
            method,
            lambda strategy: strategy.finalize(options),
            (T.FINALIZE_REQUESTED, T.FINALIZE_SUCCEEDED, T.FINALIZE_FAILED),
            options,
        )

    def _run(
        self,
        method: PaymentMethod,
        run: _Run,
        types: tuple[T, T, T],
        options: RequestOptions | None,
    ) -> F.Flow[Action]:
        requested, succeeded, failed = types
        meta = {"method_id": method.id}
        resolver = self._resolver

        async def produce(emit: F.Emit[Action]) -> None:
            emit(Action(requested, meta=meta))

            match await resolver.resolve_for(method):
                case Ok(strategy):
                    pass
                case Error(e):
                    logger.error("No strategy for payment method", method_id=method.id, error=str(e))
                    raise ActionError(Action.failure(failed, e, meta)) from e

            match await lift.request(lambda: run(strategy), options):
                case Ok(value):
                    emit(Action(succeeded, payload=value, meta=meta))
                case Error(e):
                    raise ActionError(Action.failure(failed, e, meta)) from e

        return F.flow(produce, cancellation=cancellation_of(options))


def _require_method(
    state: StateAccessor, method_id: str, gateway: str | None
) -> PaymentMethod:
    method = state.get_payment_method(method_id, gateway)
    if method is None:
        raise MissingDataError.of(MissingDataType.PAYMENT_METHOD)
    return method


__all__ = ("PaymentStrategyActionCreator",)
