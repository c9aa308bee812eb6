"""
Errors — closed checkout error taxonomy and classifier.

    from cartflow import errors as X

    err = X.classify(exc)
    if err.kind is X.ErrorKind.CART_CHANGED:
        ...
"""

from __future__ import annotations

from cartflow.errors._types import (
    ErrorKind,
    MissingDataType,
    CheckoutError,
    MissingDataError,
    UnableToContinueAsGuestError,
    NotFoundError,
    CartChangedError,
    UpdateCustomerError,
    RequestError,
)
from cartflow.errors._classify import classify

__all__ = (
    "ErrorKind",
    "MissingDataType",
    "CheckoutError",
    "MissingDataError",
    "UnableToContinueAsGuestError",
    "NotFoundError",
    "CartChangedError",
    "UpdateCustomerError",
    "RequestError",
    "classify",
)
