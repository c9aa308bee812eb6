"""
Order — load, submit (with cart consistency check) and finalize.

    from cartflow import order as O

    creator = O.OrderActionCreator(checkout_client)
    result = await F.collect(creator.submit_order(payload, cart=known_cart))
"""

from __future__ import annotations

from cartflow.order._actions import OrderActionType
from cartflow.order._action_creator import OrderActionCreator

__all__ = ("OrderActionType", "OrderActionCreator")
