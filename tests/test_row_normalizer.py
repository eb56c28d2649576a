"""Tests for row normalization."""
from table_scanner.models import RawTable
from table_scanner.scrapers.utils import RowNormalizer


def test_zips_headers_with_cells():
    raw = RawTable(headers=["height", "name"], rows=[["12m", "Alice"], ["15m", "Bob"]])

    assert RowNormalizer().normalize(raw) == [
        {"height": "12m", "name": "Alice"},
        {"height": "15m", "name": "Bob"},
    ]


def test_extra_cells_are_dropped():
    raw = RawTable(headers=["height"], rows=[["12m", "Alice", "extra"]])

    assert RowNormalizer().normalize(raw) == [{"height": "12m"}]


def test_missing_cells_leave_labels_absent():
    raw = RawTable(headers=["height", "name", "team"], rows=[["12m"]])
    table = RowNormalizer().normalize(raw)

    assert table == [{"height": "12m"}]
    assert "name" not in table[0]


def test_duplicate_header_keeps_later_cell_in_first_position():
    raw = RawTable(headers=["value", "name", "value"], rows=[["1m", "Alice", "2m"]])
    row = RowNormalizer().normalize(raw)[0]

    assert row == {"value": "2m", "name": "Alice"}
    assert list(row) == ["value", "name"]


def test_no_headers_yields_empty_table():
    raw = RawTable(headers=[], rows=[["12m"], ["15m"]])

    assert RowNormalizer().normalize(raw) == []


def test_row_order_is_preserved():
    raw = RawTable(headers=["n"], rows=[[str(i)] for i in range(5)])

    assert [row["n"] for row in RowNormalizer().normalize(raw)] == ["0", "1", "2", "3", "4"]
