"""Output formatting for scan results."""

from .formatters import JSONFormatter, TableFormatter, CSVFormatter, get_formatter

__all__ = ["JSONFormatter", "TableFormatter", "CSVFormatter", "get_formatter"]
