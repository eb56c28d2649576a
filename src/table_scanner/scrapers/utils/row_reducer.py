"""Reduce selected table rows to (label, value) pairs."""

import logging
from typing import List, Optional

from .measurement_parser import MeasurementParser
from ...models import MeasurementPair, Row, Table


class RowReducer:
    """Reduces each row to one measurement and one label.
    
    The numeric source of a row is its first value, in key order, that holds
    a metre measurement. The label is the first of the remaining values only;
    any further non-numeric columns are discarded rather than joined into the
    label.
    """
    
    def __init__(self):
        self.logger = logging.getLogger(__name__)
        self.measurement_parser = MeasurementParser()
    
    def reduce(self, table: Table) -> List[MeasurementPair]:
        """Reduce every row of a table, keeping row order.
        
        Args:
            table: Selected table
            
        Returns:
            One MeasurementPair per row
        """
        pairs = [self.reduce_row(row) for row in table]
        
        missing = sum(1 for pair in pairs if pair.value is None)
        if missing:
            self.logger.debug(f"{missing} rows had no measurement")
        
        return pairs
    
    def reduce_row(self, row: Row) -> MeasurementPair:
        """Reduce a single row.
        
        Rows without any measurement get value None; rows without any other
        column get name None.
        """
        numeric_text: Optional[str] = None
        other_values = []
        
        for text in row.values():
            if numeric_text is None and text is not None and self.measurement_parser.is_measurement(text):
                numeric_text = text
            else:
                other_values.append(text)
        
        return MeasurementPair(
            value=self.measurement_parser.parse_measurement(numeric_text),
            name=other_values[0] if other_values else None,
        )
