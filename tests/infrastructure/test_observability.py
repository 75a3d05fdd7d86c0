"""Structured Logging: JSON formatter fields and handler setup."""

import json
import logging

from app.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "app.services.attendee_helpers", logging.INFO, __file__, 1,
        "Attendee registered", None, None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_emits_base_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "INFO"
    assert log["logger"] == "app.services.attendee_helpers"
    assert log["message"] == "Attendee registered"
    assert "timestamp" in log


def test_json_formatter_surfaces_domain_extras():
    log = json.loads(JSONFormatter().format(
        _record(event_id="e1", attendee_id="ana", error_code="UNIQUE_VIOLATION"),
    ))
    assert log["event_id"] == "e1"
    assert log["attendee_id"] == "ana"
    assert log["error_code"] == "UNIQUE_VIOLATION"


def test_json_formatter_omits_missing_extras():
    log = json.loads(JSONFormatter().format(_record()))
    assert "event_id" not in log
    assert "path" not in log


def test_setup_logging_does_not_stack_handlers():
    before = list(logging.root.handlers)
    level = logging.root.level
    try:
        setup_logging("DEBUG", "json")
        setup_logging("WARNING", "text")
        ours = [h for h in logging.root.handlers if h.get_name() == "roster"]
        assert len(ours) == 1
        assert not isinstance(ours[0].formatter, JSONFormatter)
        assert logging.root.level == logging.WARNING
    finally:
        logging.root.handlers = before
        logging.root.setLevel(level)
