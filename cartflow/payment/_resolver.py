"""
Strategy resolution — payment method → strategy token → cached instance.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

import structlog

from cartflow._types import Lazy
from cartflow.config import CheckoutConfig
from cartflow.errors import NotFoundError
from cartflow.payment._types import (
    PaymentMethod,
    PaymentMethodType,
    PaymentStrategy,
    StrategyToken,
)
from cartflow.registry import Factory, Registry, RegistryOptions

logger = structlog.get_logger(__name__)

# Always handled client-side, allow-list or not.
_NEVER_LEGACY_GATEWAYS = frozenset({"adyen"})


class StrategyResolver:
    """
    Resolves the strategy for a payment method.

    Fallback chain, first match wins:
        exact factory for gateway/id → offline → legacy → offsite → creditcard

    The cache token is always gateway or id, so two methods sharing a
    bucket token still get separate strategy instances.
    """

    def __init__(
        self,
        registry: Registry[PaymentStrategy],
        client_side_payment_providers: Iterable[str] | None = None,
    ) -> None:
        self._registry = registry
        self._client_side_providers = (
            frozenset(client_side_payment_providers)
            if client_side_payment_providers is not None
            else None
        )

    @property
    def registry(self) -> Registry[PaymentStrategy]:
        return self._registry

    def resolve_for(
        self, method: PaymentMethod | None = None
    ) -> Lazy[PaymentStrategy, NotFoundError]:
        if method is None:
            return self._registry.get()

        token = self.token_for(method)
        logger.debug("Strategy resolved", method_id=method.id, gateway=method.gateway, token=token)
        return self._registry.get(token, method.method_id)

    def token_for(self, method: PaymentMethod) -> str:
        method_id = method.method_id

        if self._registry.has_factory(method_id):
            return method_id

        if method.type == PaymentMethodType.OFFLINE:
            return StrategyToken.OFFLINE

        if self._is_legacy(method):
            return StrategyToken.LEGACY

        if method.type == PaymentMethodType.HOSTED:
            return StrategyToken.OFFSITE

        return StrategyToken.CREDIT_CARD

    def _is_legacy(self, method: PaymentMethod) -> bool:
        if self._client_side_providers is None or method.gateway in _NEVER_LEGACY_GATEWAYS:
            return False

        return not (
            method.id in self._client_side_providers
            or (method.gateway is not None and method.gateway in self._client_side_providers)
        )


def create_strategy_resolver(
    config: CheckoutConfig,
    factories: Mapping[str, Factory[PaymentStrategy]],
) -> StrategyResolver:
    """
    Build registry and resolver from configuration.

    Example:
        resolver = create_strategy_resolver(
            CheckoutConfig.from_env(),
            {"creditcard": CreditCardStrategy, "offline": OfflineStrategy},
        )
    """
    registry = Registry[PaymentStrategy](
        RegistryOptions(default_token=config.default_strategy_token)
    )
    for token, factory in factories.items():
        registry.register(token, factory)

    return StrategyResolver(registry, config.client_side_payment_providers)


__all__ = ("StrategyResolver", "create_strategy_resolver")
