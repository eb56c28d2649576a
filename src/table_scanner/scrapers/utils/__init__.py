"""Utilities for turning collected tables into measurement series."""

from .measurement_parser import MeasurementParser, extract_measurement
from .row_normalizer import RowNormalizer
from .column_detector import find_numeric_columns, is_numeric_table
from .table_selector import TableSelector
from .row_reducer import RowReducer

__all__ = [
    "MeasurementParser",
    "extract_measurement",
    "RowNormalizer",
    "find_numeric_columns",
    "is_numeric_table",
    "TableSelector",
    "RowReducer",
]
