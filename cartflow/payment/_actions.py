from __future__ import annotations

from enum import StrEnum


class PaymentStrategyActionType(StrEnum):
    EXECUTE_REQUESTED = "PAYMENT_STRATEGY_EXECUTE_REQUESTED"
    EXECUTE_SUCCEEDED = "PAYMENT_STRATEGY_EXECUTE_SUCCEEDED"
    EXECUTE_FAILED = "PAYMENT_STRATEGY_EXECUTE_FAILED"

    INITIALIZE_REQUESTED = "PAYMENT_STRATEGY_INITIALIZE_REQUESTED"
    INITIALIZE_SUCCEEDED = "PAYMENT_STRATEGY_INITIALIZE_SUCCEEDED"
    INITIALIZE_FAILED = "PAYMENT_STRATEGY_INITIALIZE_FAILED"

    FINALIZE_REQUESTED = "PAYMENT_STRATEGY_FINALIZE_REQUESTED"
    FINALIZE_SUCCEEDED = "PAYMENT_STRATEGY_FINALIZE_SUCCEEDED"
    FINALIZE_FAILED = "PAYMENT_STRATEGY_FINALIZE_FAILED"


__all__ = ("PaymentStrategyActionType",)
