"""Tests for output formatters."""
import json

import pytest

from table_scanner.models import MeasurementPair, ScanOutcome
from table_scanner.query import CSVFormatter, JSONFormatter, TableFormatter, get_formatter


@pytest.fixture
def outcome():
    return ScanOutcome(table=[
        MeasurementPair(value=12.5, name="Alice"),
        MeasurementPair(value=15, name=None),
    ])


def test_json_formatter(outcome):
    assert json.loads(JSONFormatter().format_outcome(outcome)) == {
        "table": [{"value": 12.5, "name": "Alice"}, {"value": 15.0, "name": None}]
    }


def test_json_error():
    assert json.loads(JSONFormatter().format_error("Error fetching the URL")) == {
        "error": "Error fetching the URL"
    }


def test_table_formatter(outcome):
    text = TableFormatter().format_outcome(outcome)

    assert "Alice" in text
    assert "12.5 m" in text
    assert "15 m" in text


def test_table_formatter_missing_value():
    text = TableFormatter().format_outcome(ScanOutcome(table=[MeasurementPair(value=None, name="Bob")]))

    assert "Unknown" in text


def test_table_formatter_not_found():
    assert TableFormatter().format_outcome(ScanOutcome.not_found()) == "no numeric table found"


def test_csv_formatter(outcome):
    lines = CSVFormatter().format_outcome(outcome).splitlines()

    assert lines == ["name,value", "Alice,12.5", ",15.0"]


def test_csv_formatter_not_found():
    assert CSVFormatter().format_outcome(ScanOutcome.not_found()) == ""


def test_get_formatter():
    assert isinstance(get_formatter("csv"), CSVFormatter)
    with pytest.raises(ValueError):
        get_formatter("xml")
