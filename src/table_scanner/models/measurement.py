"""Core data models for table scanning."""

from typing import Dict, List, Optional, Any, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


NO_NUMERIC_TABLE_MESSAGE = "no numeric table found"

# A row maps column label -> cell text. Key order is the header order.
Row = Dict[str, str]
Table = List[Row]


class RawTable(BaseModel):
    """Header texts and cell texts of one table element, as found in the page."""
    
    model_config = ConfigDict(frozen=True)
    
    headers: List[str] = Field(default_factory=list, description="All header cell texts, flattened")
    rows: List[List[str]] = Field(default_factory=list, description="Cell texts per row element")


class MeasurementPair(BaseModel):
    """One charted point: a numeric value and its display label."""
    
    value: Optional[Union[int, float]] = Field(None, description="Measurement in metres")
    name: Optional[str] = Field(None, description="Label taken from the first non-numeric column")


class ScanOutcome(BaseModel):
    """Result of scanning a page: either a reduced table or a message."""
    
    table: Optional[List[MeasurementPair]] = None
    message: Optional[str] = None
    
    @model_validator(mode='after')
    def check_exclusive(self):
        """Exactly one of table and message must be set."""
        if (self.table is None) == (self.message is None):
            raise ValueError("ScanOutcome needs exactly one of 'table' or 'message'")
        return self
    
    @classmethod
    def not_found(cls) -> "ScanOutcome":
        return cls(message=NO_NUMERIC_TABLE_MESSAGE)
    
    @property
    def found(self) -> bool:
        """True when a numeric table was selected."""
        return self.table is not None
    
    def labels(self) -> List[Optional[str]]:
        return [pair.name for pair in self.table or []]
    
    def values(self) -> List[Optional[Union[int, float]]]:
        return [pair.value for pair in self.table or []]
    
    def to_response(self) -> Dict[str, Any]:
        """Build the JSON envelope returned to clients."""
        if self.table is not None:
            return {"table": [pair.model_dump() for pair in self.table]}
        return {"message": self.message}
