"""
Flow — lifecycle action streams with fan-in and cancellation.

    from cartflow import flow as F

    combined = F.merge(address_flow, consent_flow)
    async for action in combined:
        store.dispatch(action)

    result = await F.collect(combined)
"""

from __future__ import annotations

from cartflow.flow._types import Action, ActionError, FlowFailure
from cartflow.flow._cancel import CancellationToken
from cartflow.flow._flow import (
    Emit,
    Producer,
    Flow,
    flow,
    empty,
    merge,
    collect,
)

__all__ = (
    "Action",
    "ActionError",
    "FlowFailure",
    "CancellationToken",
    "Emit",
    "Producer",
    "Flow",
    "flow",
    "empty",
    "merge",
    "collect",
)
