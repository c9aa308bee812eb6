"""
Error taxonomy — closed set of domain error kinds.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from cartflow.transport import Response

# ═══════════════════════════════════════════════════════════════════════════════
# Error Kind
# ═══════════════════════════════════════════════════════════════════════════════


class ErrorKind(Enum):
    """Kinds of checkout errors."""

    MISSING_DATA = auto()  # Required snapshot absent
    UNABLE_TO_CONTINUE_AS_GUEST = auto()  # Signed-in customer present
    NOT_FOUND = auto()  # No factory for token
    CART_CHANGED = auto()  # Consistency check failed
    UPDATE_CUSTOMER = auto()  # Consent update failed
    REQUEST = auto()  # Any other transport / validation failure


class MissingDataType(Enum):
    """Which snapshot was missing."""

    CHECKOUT = "checkout"
    CART = "cart"
    PAYMENT_METHOD = "payment method"


# ═══════════════════════════════════════════════════════════════════════════════
# Base Error
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(eq=False)
class CheckoutError(Exception):
    """
    Base checkout error.

    ``cause`` keeps the original failure, ``response`` the transport response
    when there was one.
    """

    kind: ClassVar[ErrorKind]

    message: str
    cause: BaseException | None = None
    response: Response | None = None

    def __post_init__(self) -> None:
        Exception.__init__(self, self.message)

    def __str__(self) -> str:
        return self.message


# ═══════════════════════════════════════════════════════════════════════════════
# Concrete Errors
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(eq=False)
class MissingDataError(CheckoutError):
    kind: ClassVar[ErrorKind] = ErrorKind.MISSING_DATA

    message: str = "Required data is missing"
    subject: MissingDataType | None = None

    @classmethod
    def of(cls, subject: MissingDataType) -> MissingDataError:
        return cls(
            message=f"Unable to proceed because {subject.value} data is unavailable",
            subject=subject,
        )


@dataclass(eq=False)
class UnableToContinueAsGuestError(CheckoutError):
    kind: ClassVar[ErrorKind] = ErrorKind.UNABLE_TO_CONTINUE_AS_GUEST

    message: str = (
        "Unable to continue as guest because the customer is already signed in. "
        "Sign out first to continue as a guest."
    )


@dataclass(eq=False)
class NotFoundError(CheckoutError):
    kind: ClassVar[ErrorKind] = ErrorKind.NOT_FOUND

    message: str = "Handler not found"
    token: str | None = None

    @classmethod
    def for_token(cls, token: str) -> NotFoundError:
        return cls(message=f"No factory registered for token '{token}'", token=token)


@dataclass(eq=False)
class CartChangedError(CheckoutError):
    kind: ClassVar[ErrorKind] = ErrorKind.CART_CHANGED

    message: str = (
        "The cart has changed since it was last loaded. "
        "Review the cart before submitting the order."
    )


@dataclass(eq=False)
class UpdateCustomerError(CheckoutError):
    kind: ClassVar[ErrorKind] = ErrorKind.UPDATE_CUSTOMER

    message: str = "Unable to update customer details"

    @classmethod
    def wrap(cls, cause: BaseException) -> UpdateCustomerError:
        response = getattr(cause, "response", None)
        return cls(cause=cause, response=response)


@dataclass(eq=False)
class RequestError(CheckoutError):
    kind: ClassVar[ErrorKind] = ErrorKind.REQUEST

    message: str = "An unexpected error occurred while processing the request"


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

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
)
