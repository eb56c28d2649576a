"""HTML parsing for scanned pages."""

from .html_table_parser import HTMLTableParser, parse_document

__all__ = ["HTMLTableParser", "parse_document"]
