"""
Cart — consistency checking for cart snapshots.
"""

from __future__ import annotations

from cartflow.cart._comparator import CartComparator, DEFAULT_IGNORED_KEYS

__all__ = ("CartComparator", "DEFAULT_IGNORED_KEYS")
