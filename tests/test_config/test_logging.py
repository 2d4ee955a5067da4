"""Testes para config.logging.

Cobre: configure_logging, get_logger, log_rejection,
CorrelationIdFilter, create_json_formatter.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from unittest.mock import MagicMock

import pytest

from app.constants.payments import ViolationCode
from app.protocols.models import Violation
from config.logging import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    CorrelationIdFilter,
    configure_logging,
    create_json_formatter,
    get_logger,
    log_rejection,
)
from config.logging.config import VALID_LOG_LEVELS
from config.settings import DEFAULT_SERVICE_NAME


def _record(msg: str = "message", level: int = logging.INFO) -> logging.LogRecord:
    return logging.LogRecord(
        name="test",
        level=level,
        pathname="",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )


@pytest.fixture(autouse=True)
def _restore_root_logger() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


class TestConfigureLogging:
    """Testes para configure_logging."""

    @pytest.mark.parametrize(
        ("level", "expected"),
        [
            ("INFO", logging.INFO),
            ("DEBUG", logging.DEBUG),
            ("warning", logging.WARNING),
            ("CRITICAL", logging.CRITICAL),
        ],
    )
    def test_sets_root_level(self, level: str, expected: int) -> None:
        configure_logging(level=level)
        assert logging.getLogger().level == expected

    def test_invalid_level_raises(self) -> None:
        with pytest.raises(ValueError, match="Nível de log inválido"):
            configure_logging(level="INVALID")

    def test_replaces_handlers_and_adds_filter(self) -> None:
        root = logging.getLogger()
        root.handlers = [logging.NullHandler(), logging.NullHandler()]

        configure_logging(correlation_id_getter=lambda: "custom-corr-id")

        assert len(root.handlers) == 1
        assert any(isinstance(f, CorrelationIdFilter) for f in root.handlers[0].filters)

    def test_constants(self) -> None:
        assert {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"} == VALID_LOG_LEVELS
        assert DEFAULT_SERVICE_NAME == "payments_client"


class TestGetLogger:
    def test_same_name_returns_same_instance(self) -> None:
        logger = get_logger("same.module")
        assert isinstance(logger, logging.Logger)
        assert logger is get_logger("same.module")


class TestLogRejection:
    """log_rejection registra campos e códigos, nunca valores."""

    def test_extra_carries_fields_and_codes(self) -> None:
        logger = MagicMock(spec=logging.Logger)
        violations = [
            Violation(field="amount", code=ViolationCode.TYPE_MISMATCH, message="amount must be a number"),
            Violation(field="narration", code=ViolationCode.MISSING_FIELD, message="narration is required"),
            Violation(field="otp", code=ViolationCode.MISSING_FIELD, message="otp is required"),
        ]

        log_rejection(logger, "bankCheckout", violations)

        logger.warning.assert_called_once()
        assert logger.warning.call_args[0][0] == "payment_params_rejected"
        extra = logger.warning.call_args[1]["extra"]
        assert extra == {
            "operation": "bankCheckout",
            "violation_count": 3,
            "violation_codes": ["MissingField", "TypeMismatch"],
            "violation_fields": ["amount", "narration", "otp"],
        }


class TestCorrelationIdFilter:
    def test_adds_correlation_id_service_and_operation(self) -> None:
        filter_ = CorrelationIdFilter("my_service", lambda: "corr-123")
        record = _record()

        assert filter_.filter(record) is True
        assert record.correlation_id == "corr-123"
        assert record.service == "my_service"
        assert record.operation == ""

    def test_preserves_explicit_values(self) -> None:
        filter_ = CorrelationIdFilter("svc", lambda: "from-getter")
        record = _record()
        record.correlation_id = "explicit-id"
        record.operation = "checkout"

        filter_.filter(record)

        assert record.correlation_id == "explicit-id"
        assert record.operation == "checkout"

    def test_empty_correlation_id_without_getter(self) -> None:
        filter_ = CorrelationIdFilter("service_name")
        record = _record()

        filter_.filter(record)

        assert record.correlation_id == ""


class TestCreateJsonFormatter:
    def test_constants(self) -> None:
        assert "operation" in REQUIRED_LOG_FIELDS
        assert FIELD_RENAME_MAP == {"levelname": "level", "name": "logger"}

    def test_formats_record_as_json_with_renamed_fields(self) -> None:
        formatter = create_json_formatter()
        record = _record("payment_params_rejected", logging.WARNING)
        CorrelationIdFilter("payments_client", lambda: "abc-123").filter(record)
        record.operation = "checkout"

        payload = json.loads(formatter.format(record))

        assert payload["message"] == "payment_params_rejected"
        assert payload["level"] == "WARNING"
        assert payload["logger"] == "test"
        assert payload["correlation_id"] == "abc-123"
        assert payload["service"] == "payments_client"
        assert payload["operation"] == "checkout"
