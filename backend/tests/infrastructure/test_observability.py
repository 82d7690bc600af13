"""Structured Logging - verifies JSON formatter output and handler setup."""

import json
import logging
import sys

from portfolio.infrastructure.observability import (
    JSONFormatter, TextFormatter, setup_logging,
)


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "portfolio.test", logging.INFO, __file__, 1, "created %s", ("x",), None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_includes_core_fields():
    payload = json.loads(JSONFormatter().format(_record()))
    assert payload["level"] == "INFO"
    assert payload["logger"] == "portfolio.test"
    assert payload["message"] == "created x"
    assert "timestamp" in payload


def test_json_formatter_surfaces_known_extras_only():
    payload = json.loads(JSONFormatter().format(
        _record(entity="project", record_id="abc", unrelated="skip"),
    ))
    assert payload["entity"] == "project"
    assert payload["record_id"] == "abc"
    assert "unrelated" not in payload


def test_setup_logging_does_not_stack_handlers():
    before = list(logging.root.handlers)
    level = logging.root.level
    try:
        setup_logging("DEBUG", "json")
        handler = setup_logging("WARNING", "text")
        ours = [h for h in logging.root.handlers if h.get_name() == handler.get_name()]
        assert ours == [handler]
        assert logging.root.level == logging.WARNING
        assert isinstance(handler.formatter, TextFormatter)
    finally:
        logging.root.setLevel(level)
        for h in list(logging.root.handlers):
            if h not in before:
                logging.root.removeHandler(h)


def test_text_formatter_appends_extras():
    line = TextFormatter().format(_record(entity="service", operation="delete"))
    assert line.endswith("created x entity=service operation=delete")


def test_json_formatter_includes_exception():
    try:
        raise ValueError("boom")
    except ValueError:
        record = _record()
        record.exc_info = sys.exc_info()
    payload = json.loads(JSONFormatter().format(record))
    assert "ValueError: boom" in payload["exception"]
