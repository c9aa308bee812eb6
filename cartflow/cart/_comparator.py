"""
Cart comparator — structural equality between two cart snapshots.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from cartflow._types import CartSnapshot

# Change on every read without the cart itself changing.
DEFAULT_IGNORED_KEYS = frozenset({"updated_time", "updatedTime"})


class CartComparator:
    """
    Compares carts structurally.

    Volatile keys are dropped at every depth and line items are compared
    without regard to order (keyed by ``id``).

    Example:
        CartComparator().is_equal(known_cart, fresh_cart)
    """

    def __init__(self, ignored_keys: Iterable[str] = DEFAULT_IGNORED_KEYS) -> None:
        self._ignored = frozenset(ignored_keys)

    def is_equal(self, a: CartSnapshot, b: CartSnapshot) -> bool:
        return self._normalize(a) == self._normalize(b)

    def _normalize(self, value: Any) -> Any:
        if isinstance(value, Mapping):
            return {
                k: self._normalize_items(v) if k in ("items", "line_items") else self._normalize(v)
                for k, v in value.items()
                if k not in self._ignored
            }
        if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
            return [self._normalize(v) for v in value]
        return value

    def _normalize_items(self, items: Any) -> Any:
        normalized = self._normalize(items)
        if isinstance(normalized, list) and all(
            isinstance(i, dict) and "id" in i for i in normalized
        ):
            return sorted(normalized, key=lambda i: str(i["id"]))
        return normalized


__all__ = ("CartComparator", "DEFAULT_IGNORED_KEYS")
