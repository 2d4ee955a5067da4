"""Testes do composition root (app.bootstrap)."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from api.connectors.payments import PaymentsHttpClient
from app.bootstrap import create_payments_service, initialize_app, validate_runtime_settings
from app.use_cases.payments import PaymentsService
from config.logging import CorrelationIdFilter
from config.settings import PaymentsSettings, get_base_settings, get_payments_settings

_PAYMENTS_ENV = ("PAYMENTS_USERNAME", "PAYMENTS_API_KEY", "PAYMENTS_ENVIRONMENT")


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for name in ("ENVIRONMENT", "LOG_LEVEL", "DEBUG", *_PAYMENTS_ENV):
        monkeypatch.delenv(name, raising=False)
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    get_base_settings.cache_clear()
    get_payments_settings.cache_clear()
    yield
    get_base_settings.cache_clear()
    get_payments_settings.cache_clear()
    root.handlers = handlers
    root.setLevel(level)


def test_create_payments_service_wires_concrete_dependencies() -> None:
    settings = PaymentsSettings(username="acme", api_key="key", request_timeout_seconds=5)

    service = create_payments_service(settings)

    assert isinstance(service, PaymentsService)
    assert isinstance(service._client, PaymentsHttpClient)
    assert service._settings is settings


def test_initialize_app_installs_correlation_filter(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "WARNING")

    initialize_app()

    root = logging.getLogger()
    assert root.level == logging.WARNING
    assert any(isinstance(f, CorrelationIdFilter) for f in root.handlers[0].filters)


def test_validate_runtime_settings_only_warns_in_development(
    caplog: pytest.LogCaptureFixture,
) -> None:
    with caplog.at_level(logging.WARNING, logger="app.bootstrap"):
        validate_runtime_settings()

    assert "settings_validation_failed" in caplog.text


def test_validate_runtime_settings_fails_fast_in_production(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("ENVIRONMENT", "production")

    with pytest.raises(RuntimeError, match="PAYMENTS_API_KEY"):
        validate_runtime_settings()


def test_validate_runtime_settings_passes_with_credentials(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("ENVIRONMENT", "production")
    monkeypatch.setenv("PAYMENTS_USERNAME", "acme")
    monkeypatch.setenv("PAYMENTS_API_KEY", "secret")

    validate_runtime_settings()
