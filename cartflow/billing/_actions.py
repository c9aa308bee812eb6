from __future__ import annotations

from enum import StrEnum


class BillingAddressActionType(StrEnum):
    CONTINUE_AS_GUEST_REQUESTED = "CONTINUE_AS_GUEST_REQUESTED"
    CONTINUE_AS_GUEST_SUCCEEDED = "CONTINUE_AS_GUEST_SUCCEEDED"
    CONTINUE_AS_GUEST_FAILED = "CONTINUE_AS_GUEST_FAILED"

    UPDATE_BILLING_ADDRESS_REQUESTED = "UPDATE_BILLING_ADDRESS_REQUESTED"
    UPDATE_BILLING_ADDRESS_SUCCEEDED = "UPDATE_BILLING_ADDRESS_SUCCEEDED"
    UPDATE_BILLING_ADDRESS_FAILED = "UPDATE_BILLING_ADDRESS_FAILED"


class CustomerActionType(StrEnum):
    UPDATE_CUSTOMER_REQUESTED = "UPDATE_CUSTOMER_REQUESTED"
    UPDATE_CUSTOMER_SUCCEEDED = "UPDATE_CUSTOMER_SUCCEEDED"
    UPDATE_CUSTOMER_FAILED = "UPDATE_CUSTOMER_FAILED"


__all__ = ("BillingAddressActionType", "CustomerActionType")
