"""
Registry — keyed factories with construct-on-first-access caching.

    from cartflow import registry as R

    registry = R.Registry[Strategy]().register("offline", OfflineStrategy)
    result = await registry.get("offline", cache_token="cod")
"""

from __future__ import annotations

from cartflow.registry._types import Factory, RegistryOptions
from cartflow.registry._registry import Registry

__all__ = ("Factory", "RegistryOptions", "Registry")
