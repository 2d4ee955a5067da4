"""Testes para config.settings (base e pagamentos)."""

from __future__ import annotations

import pytest

from app.constants.payments import Operation
from config.settings import (
    OPERATION_PATHS,
    PRODUCTION_API_BASE_URL,
    SANDBOX_API_BASE_URL,
    BaseSettings,
    PaymentsSettings,
    get_base_settings,
    get_payments_settings,
)


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_base_settings.cache_clear()
    get_payments_settings.cache_clear()
    yield
    get_base_settings.cache_clear()
    get_payments_settings.cache_clear()


class TestPaymentsSettings:
    def test_every_operation_has_a_path(self) -> None:
        assert set(OPERATION_PATHS) == set(Operation)

    def test_sandbox_endpoint_by_default(self) -> None:
        settings = PaymentsSettings(username="acme", api_key="k")

        assert settings.is_sandbox
        assert settings.get_operation_endpoint("checkout") == (
            f"{SANDBOX_API_BASE_URL}/mobile/checkout/request"
        )

    def test_production_endpoint(self) -> None:
        settings = PaymentsSettings(username="acme", api_key="k", environment="production")

        assert settings.get_operation_endpoint(Operation.BANK_TRANSFER) == (
            f"{PRODUCTION_API_BASE_URL}/bank/transfer"
        )

    def test_sandbox_username_forces_sandbox(self) -> None:
        settings = PaymentsSettings(username="sandbox", api_key="k", environment="production")

        assert settings.api_endpoint == SANDBOX_API_BASE_URL

    def test_base_url_override_strips_trailing_slash(self) -> None:
        settings = PaymentsSettings(api_base_url="http://localhost:8080/")

        assert settings.get_operation_endpoint("validateCardCheckout") == (
            "http://localhost:8080/card/checkout/validate"
        )

    def test_unknown_operation_endpoint_raises(self) -> None:
        with pytest.raises(ValueError):
            PaymentsSettings().get_operation_endpoint("refund")

    def test_validate_reports_missing_credentials(self) -> None:
        errors = PaymentsSettings(request_timeout_seconds=0).validate()

        assert errors == [
            "PAYMENTS_USERNAME não configurado",
            "PAYMENTS_API_KEY não configurado",
            "PAYMENTS_REQUEST_TIMEOUT_SECONDS deve ser > 0",
        ]

    def test_loads_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PAYMENTS_USERNAME", "acme")
        monkeypatch.setenv("PAYMENTS_API_KEY", "secret")
        monkeypatch.setenv("PAYMENTS_ENVIRONMENT", "live")
        monkeypatch.setenv("PAYMENTS_REQUEST_TIMEOUT_SECONDS", "12.5")

        settings = get_payments_settings()

        assert settings.username == "acme"
        assert settings.environment == "production"
        assert settings.request_timeout_seconds == 12.5
        assert settings.validate() == []
        assert get_payments_settings() is settings


class TestBaseSettings:
    def test_defaults_are_valid(self) -> None:
        assert BaseSettings().validate() == []

    def test_invalid_log_level(self) -> None:
        assert BaseSettings(log_level="LOUD").validate() == ["LOG_LEVEL inválido: LOUD"]

    def test_debug_env_lowers_default_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DEBUG", "true")
        monkeypatch.setenv("ENVIRONMENT", "prod")
        monkeypatch.delenv("LOG_LEVEL", raising=False)

        settings = get_base_settings()

        assert settings.debug is True
        assert settings.log_level == "DEBUG"
        assert settings.is_production
