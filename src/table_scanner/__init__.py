"""Table Scanner - find the measurement table on a web page and chart it."""

from .scrapers import TableScanner, create_scanner
from .models import MeasurementPair, RawTable, ScanOutcome

__version__ = "0.1.0"

__all__ = ["TableScanner", "create_scanner", "MeasurementPair", "RawTable", "ScanOutcome"]
