from __future__ import annotations

from datetime import timedelta

import pytest

from cartflow import CheckoutConfig, RequestOptions
from cartflow._log import get_log_level
from cartflow.flow import CancellationToken


class TestCheckoutConfig:
    def test_defaults(self):
        config = CheckoutConfig()

        assert config.client_side_payment_providers is None
        assert config.default_strategy_token is None
        assert config.request_timeout is None

    def test_builders_return_new_config(self):
        base = CheckoutConfig()

        config = (
            base.with_client_side_providers("braintree", "squarev2")
            .with_default_strategy("creditcard")
            .with_request_timeout(seconds=30)
        )

        assert base == CheckoutConfig()
        assert config.client_side_payment_providers == ("braintree", "squarev2")
        assert config.default_strategy_token == "creditcard"
        assert config.request_timeout == timedelta(seconds=30)

    def test_timeout_from_delta(self):
        config = CheckoutConfig().with_request_timeout(delta=timedelta(minutes=1))

        assert config.request_timeout == timedelta(minutes=1)

    def test_from_env(self):
        config = CheckoutConfig.from_env({
            "CARTFLOW_CLIENT_SIDE_PROVIDERS": "braintree, squarev2,,",
            "CARTFLOW_DEFAULT_STRATEGY": "creditcard",
            "CARTFLOW_REQUEST_TIMEOUT": "2.5",
        })

        assert config.client_side_payment_providers == ("braintree", "squarev2")
        assert config.default_strategy_token == "creditcard"
        assert config.request_timeout == timedelta(seconds=2.5)

    def test_from_env_empty_provider_list_is_configured(self):
        config = CheckoutConfig.from_env({"CARTFLOW_CLIENT_SIDE_PROVIDERS": ""})

        assert config.client_side_payment_providers == ()

    def test_from_env_nothing_set(self):
        assert CheckoutConfig.from_env({}) == CheckoutConfig()

    def test_from_env_invalid_timeout(self):
        with pytest.raises(ValueError, match="CARTFLOW_REQUEST_TIMEOUT"):
            CheckoutConfig.from_env({"CARTFLOW_REQUEST_TIMEOUT": "soon"})


class TestRequestOptions:
    def test_from_config(self):
        token = CancellationToken()
        config = CheckoutConfig().with_request_timeout(seconds=5)

        options = RequestOptions.from_config(config, token)

        assert options.timeout == timedelta(seconds=5)
        assert options.cancellation is token


class TestLogLevel:
    def test_explicit_level_wins(self):
        assert get_log_level({"LOG_LEVEL": "error", "ENVIRONMENT": "development"}) == "ERROR"

    @pytest.mark.parametrize(
        ("environment", "level"),
        [("production", "INFO"), ("development", "DEBUG"), ("test", "WARNING"), ("unknown", "INFO")],
    )
    def test_environment_defaults(self, environment, level):
        assert get_log_level({"ENVIRONMENT": environment}) == level

    def test_no_environment(self):
        assert get_log_level({}) == "DEBUG"
