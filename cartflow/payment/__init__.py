"""
Payment — strategy resolution and payment strategy orchestration.

    from cartflow import payment as P

    resolver = P.create_strategy_resolver(config, {"creditcard": CreditCardStrategy})
    strategy = await resolver.resolve_for(method)

    actions = P.PaymentStrategyActionCreator(resolver).execute(state, payload)
"""

from __future__ import annotations

from cartflow.payment._types import (
    PaymentMethodType,
    StrategyToken,
    PaymentMethod,
    PaymentStrategy,
)
from cartflow.payment._actions import PaymentStrategyActionType
from cartflow.payment._resolver import StrategyResolver, create_strategy_resolver
from cartflow.payment._action_creator import PaymentStrategyActionCreator

__all__ = (
    "PaymentMethodType",
    "StrategyToken",
    "PaymentMethod",
    "PaymentStrategy",
    "PaymentStrategyActionType",
    "StrategyResolver",
    "create_strategy_resolver",
    "PaymentStrategyActionCreator",
)
