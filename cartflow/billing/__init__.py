"""
Billing — guest continuation and billing address updates.

    from cartflow import billing as B

    creator = B.BillingAddressActionCreator(address_sender, customer_sender)
    async for action in creator.continue_as_guest(state, B.GuestCredentials("a@b.c", Some(True))):
        store.dispatch(action)
"""

from __future__ import annotations

from cartflow.billing._actions import BillingAddressActionType, CustomerActionType
from cartflow.billing._types import GuestCredentials
from cartflow.billing._action_creator import BillingAddressActionCreator

__all__ = (
    "BillingAddressActionType",
    "CustomerActionType",
    "GuestCredentials",
    "BillingAddressActionCreator",
)
