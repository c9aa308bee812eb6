"""
Core types for cartflow.

Re-exports from kungfu + custom type aliases.
"""

from __future__ import annotations

from typing import Any
from collections.abc import Mapping

# Re-export from kungfu
from kungfu import Result, Ok, Error, Option, Some, Nothing, LazyCoroResult

# ═══════════════════════════════════════════════════════════════════════════════
# Lazy Computation Aliases
# ═══════════════════════════════════════════════════════════════════════════════

type Lazy[T, E] = LazyCoroResult[T, E]
"""Lazy async computation that may fail."""

# ═══════════════════════════════════════════════════════════════════════════════
# Wire Shapes
# ═══════════════════════════════════════════════════════════════════════════════

type Body = Mapping[str, Any]
"""JSON-shaped request or response body."""

type CartSnapshot = Mapping[str, Any]
"""Cart as loaded from the server. Compared structurally, never mutated."""

# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    # Re-exports from kungfu
    "Result",
    "Ok",
    "Error",
    "Option",
    "Some",
    "Nothing",
    "LazyCoroResult",
    # Type aliases
    "Lazy",
    "Body",
    "CartSnapshot",
)
