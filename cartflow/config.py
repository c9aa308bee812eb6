"""
Checkout configuration.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, replace
from datetime import timedelta


@dataclass(frozen=True, slots=True)
class CheckoutConfig:
    """
    Deployment configuration.

    Fluent builder pattern: each method returns a new config.

    Example:
        config = (
            CheckoutConfig()
            .with_client_side_providers("braintree", "squarev2")
            .with_default_strategy("creditcard")
            .with_request_timeout(seconds=30)
        )

    client_side_payment_providers: None means "not configured", which
    disables the legacy bucket entirely. An empty tuple is configured.
    """

    client_side_payment_providers: tuple[str, ...] | None = None
    default_strategy_token: str | None = None
    request_timeout: timedelta | None = None

    def with_client_side_providers(self, *providers: str) -> CheckoutConfig:
        return replace(self, client_side_payment_providers=tuple(providers))

    def with_default_strategy(self, token: str | None) -> CheckoutConfig:
        return replace(self, default_strategy_token=token)

    def with_request_timeout(
        self,
        *,
        seconds: float | None = None,
        delta: timedelta | None = None,
    ) -> CheckoutConfig:
        if delta is None and seconds is not None:
            delta = timedelta(seconds=seconds)
        return replace(self, request_timeout=delta)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> CheckoutConfig:
        """
        Read configuration from environment variables.

            CARTFLOW_CLIENT_SIDE_PROVIDERS  comma-separated ids/gateways
            CARTFLOW_DEFAULT_STRATEGY       default strategy token
            CARTFLOW_REQUEST_TIMEOUT        seconds
        """
        env = os.environ if environ is None else environ
        config = cls()

        providers = env.get("CARTFLOW_CLIENT_SIDE_PROVIDERS")
        if providers is not None:
            config = config.with_client_side_providers(
                *(p.strip() for p in providers.split(",") if p.strip())
            )

        default = env.get("CARTFLOW_DEFAULT_STRATEGY")
        if default:
            config = config.with_default_strategy(default)

        timeout = env.get("CARTFLOW_REQUEST_TIMEOUT")
        if timeout:
            try:
                seconds = float(timeout)
            except ValueError:
                raise ValueError(f"CARTFLOW_REQUEST_TIMEOUT must be a number, got {timeout!r}") from None
            config = config.with_request_timeout(seconds=seconds)

        return config


__all__ = ("CheckoutConfig",)
