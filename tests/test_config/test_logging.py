"""Testes de config.logging: handler JSON, filters e log_fallback."""

from __future__ import annotations

import json
import logging
from unittest.mock import MagicMock

import pytest

from config.logging import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    CorrelationIdFilter,
    SensitiveFieldFilter,
    configure_logging,
    create_json_formatter,
    get_logger,
    log_fallback,
)
from config.logging.config import DEFAULT_SERVICE_NAME, NOISY_LOGGERS
from config.logging.filters import REDACTED


def _record(msg: str = "event", **extra: object) -> logging.LogRecord:
    record = logging.LogRecord(
        name="relay.test",
        level=logging.INFO,
        pathname="",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


class TestConfigureLogging:
    @pytest.mark.parametrize("level", ["debug", "INFO", "Warning", "ERROR", "CRITICAL"])
    def test_sets_root_level_case_insensitive(self, level: str) -> None:
        configure_logging(level=level)
        assert logging.getLogger().level == logging.getLevelName(level.upper())

    def test_invalid_level_raises(self) -> None:
        with pytest.raises(ValueError, match="Nível de log inválido"):
            configure_logging(level="VERBOSE")

    def test_installs_single_handler_with_both_filters(self) -> None:
        logging.getLogger().handlers = [logging.NullHandler(), logging.NullHandler()]

        configure_logging(correlation_id_getter=lambda: "corr-1")

        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        filter_types = {type(f) for f in handlers[0].filters}
        assert {CorrelationIdFilter, SensitiveFieldFilter} <= filter_types

    def test_quiets_http_client_loggers(self) -> None:
        configure_logging(level="DEBUG")
        for name in NOISY_LOGGERS:
            assert logging.getLogger(name).level == logging.WARNING

    def test_default_service_name(self) -> None:
        assert DEFAULT_SERVICE_NAME == "conversion_relay"

    def test_get_logger_returns_named_logger(self) -> None:
        assert get_logger("relay.module") is logging.getLogger("relay.module")


class TestLogFallback:
    def test_logs_component_field_and_value(self) -> None:
        logger = MagicMock(spec=logging.Logger)

        log_fallback(logger, "fourthwall_normalizer", "currency", "USD")

        logger.info.assert_called_once()
        args, kwargs = logger.info.call_args
        assert args == ("Fallback applied for %s", "fourthwall_normalizer")
        assert kwargs["extra"] == {
            "fallback_used": True,
            "component": "fourthwall_normalizer",
            "field": "currency",
            "fallback_value": "USD",
        }


class TestCorrelationIdFilter:
    def test_uses_getter_value(self) -> None:
        record = _record()

        assert CorrelationIdFilter("relay", lambda: "corr-123").filter(record) is True
        assert record.correlation_id == "corr-123"
        assert record.service == "relay"

    def test_explicit_extra_wins(self) -> None:
        record = _record(correlation_id="explicit")

        CorrelationIdFilter("relay", lambda: "from-context").filter(record)

        assert record.correlation_id == "explicit"

    def test_empty_without_getter(self) -> None:
        record = _record()

        CorrelationIdFilter("relay").filter(record)

        assert record.correlation_id == ""


class TestSensitiveFieldFilter:
    def test_masks_email_fields(self) -> None:
        record = _record(customer_email="alice@example.com", email="bob@shop.io")

        assert SensitiveFieldFilter().filter(record) is True
        assert record.customer_email == "a***@example.com"
        assert record.email == "b***@shop.io"

    def test_redacts_credentials(self) -> None:
        record = _record(api_key="tap-key", webhook_secret="whsec", signature="abc=")

        SensitiveFieldFilter().filter(record)

        assert record.api_key == REDACTED
        assert record.webhook_secret == REDACTED
        assert record.signature == REDACTED

    def test_leaves_other_fields_untouched(self) -> None:
        record = _record(external_id="ord_1", status_code=201)

        SensitiveFieldFilter().filter(record)

        assert record.external_id == "ord_1"
        assert record.status_code == 201


class TestJsonFormatter:
    def test_required_fields_order_and_rename(self) -> None:
        assert REQUIRED_LOG_FIELDS[0] == "asctime"
        assert set(REQUIRED_LOG_FIELDS) == {
            "asctime",
            "levelname",
            "name",
            "message",
            "correlation_id",
            "service",
        }
        assert FIELD_RENAME_MAP == {"levelname": "level", "name": "logger"}

    def test_formats_record_as_json_with_extra(self) -> None:
        record = _record(
            "conversion_submitted",
            correlation_id="abc-123",
            service="conversion_relay",
            status_code=201,
        )

        line = json.loads(create_json_formatter().format(record))

        assert line["message"] == "conversion_submitted"
        assert line["level"] == "INFO"
        assert line["logger"] == "relay.test"
        assert line["correlation_id"] == "abc-123"
        assert line["service"] == "conversion_relay"
        assert line["status_code"] == 201
