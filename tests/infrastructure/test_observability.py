"""Structured Logging — verifies JSON formatter output and setup_logging."""

import json
import logging

from customer_api.infrastructure.observability import JSONFormatter, setup_logging


def _record(msg="hello", **extra):
    record = logging.LogRecord(
        "customer_api.test", logging.INFO, __file__, 1, msg, None, None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_includes_core_fields():
    payload = json.loads(JSONFormatter().format(_record()))
    assert payload["level"] == "INFO"
    assert payload["logger"] == "customer_api.test"
    assert payload["message"] == "hello"
    assert "timestamp" in payload


def test_json_formatter_surfaces_known_extras_only():
    payload = json.loads(JSONFormatter().format(
        _record(customer_id=5, error_code="STORE_ERROR", unrelated="x"),
    ))
    assert payload["customer_id"] == 5
    assert payload["error_code"] == "STORE_ERROR"
    assert "unrelated" not in payload


def test_setup_logging_replaces_previous_handler():
    first = setup_logging("DEBUG", "json")
    second = setup_logging("WARNING", "text")
    assert first not in logging.root.handlers
    assert second in logging.root.handlers
    assert logging.root.level == logging.WARNING
    assert not isinstance(second.formatter, JSONFormatter)
    logging.root.removeHandler(second)
