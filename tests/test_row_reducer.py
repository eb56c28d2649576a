"""Tests for reducing rows to measurement pairs."""
from table_scanner.models import MeasurementPair
from table_scanner.scrapers.utils import RowReducer


def test_reduces_height_table(height_table):
    assert RowReducer().reduce(height_table) == [
        MeasurementPair(value=12, name="Alice"),
        MeasurementPair(value=15, name="Bob"),
    ]


def test_label_column_may_come_first():
    pair = RowReducer().reduce_row({"name": "Alice", "height": "1.72 m"})

    assert pair == MeasurementPair(value=1.72, name="Alice")


def test_only_numeric_column_gives_no_name():
    pair = RowReducer().reduce_row({"height": "12m"})

    assert pair.value == 12
    assert pair.name is None


def test_label_is_first_other_value_only():
    pair = RowReducer().reduce_row({"name": "Alice", "height": "12m", "team": "Red"})

    assert pair.name == "Alice"


def test_first_measurement_wins_and_later_ones_are_labels():
    pair = RowReducer().reduce_row({"height": "12m", "width": "7m", "name": "Alice"})

    assert pair.value == 12
    assert pair.name == "7m"


def test_row_without_measurement_has_no_value():
    pair = RowReducer().reduce_row({"name": "Alice", "height": "tall"})

    assert pair.value is None
    assert pair.name == "Alice"


def test_reduce_is_repeatable(height_table):
    reducer = RowReducer()

    assert reducer.reduce(height_table) == reducer.reduce(height_table)


def test_one_pair_per_row_in_order():
    table = [{"h": f"{i}m", "n": f"row{i}"} for i in range(4)]
    pairs = RowReducer().reduce(table)

    assert [pair.name for pair in pairs] == ["row0", "row1", "row2", "row3"]
    assert [pair.value for pair in pairs] == [0, 1, 2, 3]
