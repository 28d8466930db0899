"""Tests for structlog configuration and machine log events."""

import json
import logging

import pytest

from date_range_validation.machine import DateRangeValidationMachine
from date_range_validation.utils.logging import bind_context, configure_logging, get_logger


@pytest.fixture
def debug_logging():
    configure_logging(level=logging.DEBUG, json=True)
    yield
    configure_logging()


@pytest.mark.unit
def test_settled_transition_logged_as_json(debug_logging, caplog):
    caplog.set_level(logging.DEBUG, logger="date_range_validation")
    machine = DateRangeValidationMachine(name="report_range")

    machine.revalidate("aaaaaaa", "2022-01-10")

    events = [json.loads(r.getMessage()) for r in caplog.records]
    settled = [e for e in events if e["event"] == "date_validation.settled"]
    assert settled
    assert settled[-1]["state"] == "failure"
    assert settled[-1]["start_date_invalid"] == "MALFORMED"
    assert settled[-1]["end_date_invalid"] is None
    assert settled[-1]["machine"] == "report_range"
    assert "timestamp" in settled[-1]


@pytest.mark.unit
def test_ignored_event_logged_as_warning(debug_logging, caplog):
    caplog.set_level(logging.DEBUG, logger="date_range_validation")
    machine = DateRangeValidationMachine()

    machine.send("RESET")

    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert warnings
    assert json.loads(warnings[-1].getMessage())["event"] == "date_validation.event_ignored"


@pytest.mark.unit
def test_bind_context(debug_logging, caplog):
    caplog.set_level(logging.INFO, logger="date_range_validation")

    bind_context(widget="booking").info("widget.rendered")

    payload = json.loads(caplog.records[-1].getMessage())
    assert payload["widget"] == "booking"
    assert payload["event"] == "widget.rendered"


@pytest.mark.unit
def test_debug_suppressed_at_info_level(caplog):
    configure_logging(level=logging.INFO, json=True)
    caplog.set_level(logging.DEBUG)

    get_logger("date_range_validation.test").debug("hidden.event")

    assert not [r for r in caplog.records if "hidden.event" in r.getMessage()]
    configure_logging()
