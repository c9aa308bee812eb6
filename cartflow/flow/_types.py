"""
Flow types — actions and flow failures.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any

# ═══════════════════════════════════════════════════════════════════════════════
# Action — Lifecycle Event
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Action:
    """
    Tagged lifecycle event consumed by the state store.

    type: member of the flow's closed action type enum
    payload: response data for *Succeeded actions
    error: classified error for *Failed actions
    meta: extra data (order token, method id, ...)
    """

    type: StrEnum
    payload: Any = None
    error: BaseException | None = None
    meta: Any = None

    @property
    def is_error(self) -> bool:
        return self.error is not None

    @classmethod
    def failure(cls, type: StrEnum, error: BaseException, meta: Any = None) -> Action:
        return cls(type=type, error=error, meta=meta)


# ═══════════════════════════════════════════════════════════════════════════════
# Errors
# ═══════════════════════════════════════════════════════════════════════════════


class ActionError(Exception):
    """
    Terminal failure of a flow.

    Carries the *Failed action so the consumer can still dispatch it.
    """

    def __init__(self, action: Action) -> None:
        super().__init__(f"{action.type}: {action.error}")
        self.action = action

    @property
    def error(self) -> BaseException | None:
        return self.action.error


@dataclass(frozen=True, slots=True)
class FlowFailure[A]:
    """Failed flow with the actions delivered before the failure."""

    error: ActionError
    delivered: tuple[A, ...]

    @property
    def action(self) -> Action:
        return self.error.action


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = ("Action", "ActionError", "FlowFailure")
