"""Output formatters for scan results."""

import json
from typing import Any, Dict, Optional

import pandas as pd

from ..models import ScanOutcome


class BaseFormatter:
    """Base class for output formatters."""
    
    def format_outcome(self, outcome: ScanOutcome) -> str:
        """Format a scan outcome for output."""
        raise NotImplementedError
    
    def _to_frame(self, outcome: ScanOutcome) -> pd.DataFrame:
        """Series as a two-column frame, label first."""
        return pd.DataFrame({"name": outcome.labels(), "value": outcome.values()})
    
    def _format_value(self, value: Optional[float]) -> str:
        """Format a measurement for display."""
        if value is None or pd.isna(value):
            return "Unknown"
        return f"{value:g} m"


class JSONFormatter(BaseFormatter):
    """Response envelope as JSON."""
    
    def __init__(self, indent: Optional[int] = 2):
        self.indent = indent
    
    def format_outcome(self, outcome: ScanOutcome) -> str:
        return json.dumps(outcome.to_response(), indent=self.indent)
    
    def format_error(self, error: str) -> str:
        return json.dumps(self.error_response(error), indent=self.indent)
    
    @staticmethod
    def error_response(error: str) -> Dict[str, Any]:
        return {"error": error}


class TableFormatter(BaseFormatter):
    """Aligned text table for terminals."""
    
    def format_outcome(self, outcome: ScanOutcome) -> str:
        if not outcome.found:
            return outcome.message
        if not outcome.table:
            return "Selected table has no rows."
        
        frame = self._to_frame(outcome)
        frame["name"] = frame["name"].fillna("")
        frame["value"] = frame["value"].map(self._format_value)
        return frame.to_string(index=False)


class CSVFormatter(BaseFormatter):
    """CSV with a name,value header, for spreadsheets and chart tools."""
    
    def format_outcome(self, outcome: ScanOutcome) -> str:
        if not outcome.found:
            return ""
        return self._to_frame(outcome).to_csv(index=False)


_FORMATTERS = {
    "json": JSONFormatter,
    "table": TableFormatter,
    "csv": CSVFormatter,
}


def get_formatter(name: str) -> BaseFormatter:
    """Look up a formatter by name."""
    try:
        return _FORMATTERS[name]()
    except KeyError:
        raise ValueError(f"Unknown output format: {name}") from None
