from __future__ import annotations

from enum import StrEnum


class OrderActionType(StrEnum):
    LOAD_ORDER_REQUESTED = "LOAD_ORDER_REQUESTED"
    LOAD_ORDER_SUCCEEDED = "LOAD_ORDER_SUCCEEDED"
    LOAD_ORDER_FAILED = "LOAD_ORDER_FAILED"

    SUBMIT_ORDER_REQUESTED = "SUBMIT_ORDER_REQUESTED"
    SUBMIT_ORDER_SUCCEEDED = "SUBMIT_ORDER_SUCCEEDED"
    SUBMIT_ORDER_FAILED = "SUBMIT_ORDER_FAILED"

    FINALIZE_ORDER_REQUESTED = "FINALIZE_ORDER_REQUESTED"
    FINALIZE_ORDER_SUCCEEDED = "FINALIZE_ORDER_SUCCEEDED"
    FINALIZE_ORDER_FAILED = "FINALIZE_ORDER_FAILED"


__all__ = ("OrderActionType",)
