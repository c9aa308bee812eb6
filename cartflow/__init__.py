"""
cartflow — checkout orchestration for Python clients.

    from cartflow import flow as F       # Action streams, fan-in, cancellation
    from cartflow import registry as R   # Keyed factories with caching
    from cartflow import payment as P    # Strategy resolution
    from cartflow import billing as B    # Guest continuation, billing address
    from cartflow import order as O      # Order submission with cart check
    from cartflow import errors as X     # Error taxonomy
"""

from cartflow import errors
from cartflow import flow
from cartflow import registry
from cartflow import cart
from cartflow import payment
from cartflow import billing
from cartflow import order
from cartflow import lift
from cartflow._types import (
    Lazy,
    Body,
    CartSnapshot,
)
from cartflow._log import configure_logging
from cartflow.config import CheckoutConfig
from cartflow.state import Checkout, Customer, StateAccessor, StateSnapshot
from cartflow.transport import RequestOptions, Response, TransportError

__version__ = "0.1.0"

__all__ = (
    "errors",
    "flow",
    "registry",
    "cart",
    "payment",
    "billing",
    "order",
    "lift",
    "Lazy",
    "Body",
    "CartSnapshot",
    "configure_logging",
    "CheckoutConfig",
    "Checkout",
    "Customer",
    "StateAccessor",
    "StateSnapshot",
    "RequestOptions",
    "Response",
    "TransportError",
)
