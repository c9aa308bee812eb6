"""
Registry types.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

type Factory[T] = Callable[[], T | Awaitable[T]]
"""Zero-argument constructor. May be sync or async."""


@dataclass(frozen=True, slots=True)
class RegistryOptions:
    """
    default_token: token used by get() when no token is given
    """

    default_token: str | None = None


__all__ = ("Factory", "RegistryOptions")
