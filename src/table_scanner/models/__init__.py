"""Data models and schemas for Table Scanner."""

from .measurement import (
    MeasurementPair,
    RawTable,
    Row,
    ScanOutcome,
    Table,
    NO_NUMERIC_TABLE_MESSAGE,
)

__all__ = ["MeasurementPair", "RawTable", "Row", "ScanOutcome", "Table", "NO_NUMERIC_TABLE_MESSAGE"]
