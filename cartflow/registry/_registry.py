"""
Keyed factory registry — token → lazily constructed, cached instance.
"""

from __future__ import annotations

import asyncio
import inspect
from typing import cast

import structlog
from kungfu import LazyCoroResult, Result, Ok, Error

from cartflow._types import Lazy
from cartflow.errors import NotFoundError
from cartflow.registry._types import Factory, RegistryOptions

logger = structlog.get_logger(__name__)

# ═══════════════════════════════════════════════════════════════════════════════
# Registry
# ═══════════════════════════════════════════════════════════════════════════════


class Registry[T]:
    """
    Factory registry with an instance cache.

    Instances are cached by cache token (defaults to the token), so two
    lookups resolving to the same factory can still get distinct instances.

    Example:
        registry = (
            Registry[PaymentStrategy](RegistryOptions(default_token="creditcard"))
            .register("creditcard", CreditCardStrategy)
            .register("offline", OfflineStrategy)
        )

        match await registry.get("offline"):
            case Ok(strategy):
                ...
            case Error(e):
                ...
    """

    def __init__(self, options: RegistryOptions | None = None) -> None:
        self._options = options or RegistryOptions()
        self._factories: dict[str, Factory[T]] = {}
        self._instances: dict[str, T] = {}
        self._locks: dict[str, asyncio.Lock] = {}

    def register(self, token: str, factory: Factory[T]) -> Registry[T]:
        """
        Register factory for token.

        Raises:
            ValueError: token already has a factory
        """
        if token in self._factories:
            raise ValueError(f"Factory for token '{token}' is already registered")
        self._factories[token] = factory
        return self

    def has_factory(self, token: str) -> bool:
        return token in self._factories

    def get(
        self,
        token: str | None = None,
        cache_token: str | None = None,
    ) -> Lazy[T, NotFoundError]:
        """
        Get instance for token, constructing it on first access.

        Without token the default token is used. At most one factory call
        per cache token, even under concurrent lookups. A factory may look up
        other tokens, never its own cache token.
        """

        async def execute() -> Result[T, NotFoundError]:
            key = token if token is not None else self._options.default_token
            if key is None:
                return Error(NotFoundError(message="No default token configured"))

            cache_key = cache_token or key
            if cache_key in self._instances:
                return Ok(self._instances[cache_key])

            # Per cache token; other keys construct concurrently
            async with self._locks.setdefault(cache_key, asyncio.Lock()):
                # Another lookup may have constructed it while we waited
                if cache_key in self._instances:
                    return Ok(self._instances[cache_key])

                factory = self._factories.get(key)
                if factory is None:
                    return Error(NotFoundError.for_token(key))

                instance = factory()
                if inspect.isawaitable(instance):
                    instance = await instance

                self._instances[cache_key] = cast(T, instance)
                logger.debug("Instance constructed", token=key, cache_token=cache_key)
                return Ok(cast(T, instance))

        return LazyCoroResult(execute)

    def dispose(self) -> None:
        """Drop every cached instance. Factories stay registered."""
        self._instances.clear()


__all__ = ("Registry",)
