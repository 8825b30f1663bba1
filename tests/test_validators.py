"""Tests for the argument validators."""

from __future__ import annotations

import pytest

from message_events.domain.models import (
    ERROR_INTERNAL_ID,
    ERROR_INVALID_ARGUMENTS,
    ERROR_INVALID_HANDLER,
    ERROR_INVALID_ID_LENGTH,
    INTERNAL_METHOD_IDS,
    MAX_ID_LENGTH,
)
from message_events.domain.validators import (
    argument_is_string,
    no_internal_id,
    valid_handler,
    valid_id,
    valid_id_length,
)


@pytest.fixture()
def reports() -> list:
    return []


@pytest.fixture()
def report(reports):
    return lambda method, text: reports.append((method, text))


def test_argument_is_string(report, reports):
    assert argument_is_string("info", "on", report)
    assert not argument_is_string(None, "on", report)
    assert not argument_is_string(b"info", "on", report)
    assert reports == [("on", ERROR_INVALID_ARGUMENTS)] * 2


def test_valid_id_length(report, reports):
    assert valid_id_length("a", "on", report)
    assert valid_id_length("a" * MAX_ID_LENGTH, "on", report)
    assert reports == []

    assert not valid_id_length("", "format", report)
    assert not valid_id_length("a" * (MAX_ID_LENGTH + 1), "format", report)
    assert reports == [("format", ERROR_INVALID_ID_LENGTH)] * 2


def test_no_internal_id(report, reports):
    assert INTERNAL_METHOD_IDS == {"constructor", "on", "off", "format"}
    for name in sorted(INTERNAL_METHOD_IDS):
        assert not no_internal_id(name, "off", report)
    assert no_internal_id("info", "off", report)
    assert reports == [("off", ERROR_INTERNAL_ID)] * 4


def test_valid_id_stops_at_first_failure(report, reports):
    assert not valid_id(None, "on", report)
    assert not valid_id("", "on", report)
    assert not valid_id("on", "on", report)
    assert valid_id("info", "on", report)
    assert reports == [
        ("on", ERROR_INVALID_ARGUMENTS),
        ("on", ERROR_INVALID_ID_LENGTH),
        ("on", ERROR_INTERNAL_ID),
    ]


def test_valid_handler(report, reports):
    assert valid_handler(print, "on", report)
    assert valid_handler(lambda: None, "on", report)
    assert not valid_handler("print", "on", report)
    assert reports == [("on", ERROR_INVALID_HANDLER)]
