"""Turn raw table rows into label -> text mappings."""

import logging
from typing import List

from ...models import RawTable, Row, Table


class RowNormalizer:
    """Zips header labels with row cells positionally."""
    
    def __init__(self):
        self.logger = logging.getLogger(__name__)
    
    def normalize(self, raw_table: RawTable) -> Table:
        """Build the rows of one table.
        
        Cells past the last header are dropped and a short row leaves the
        trailing labels absent. A repeated header label keeps its first
        position but takes the later cell's text. Rows that end up empty
        (no headers at all) are dropped.
        
        Args:
            raw_table: Header and cell texts of one table element
            
        Returns:
            Ordered list of non-empty rows
        """
        table = []
        for cells in raw_table.rows:
            row = self.normalize_row(raw_table.headers, cells)
            if row:
                table.append(row)
        
        dropped = len(raw_table.rows) - len(table)
        if dropped:
            self.logger.debug(f"Dropped {dropped} empty rows")
        
        return table
    
    @staticmethod
    def normalize_row(headers: List[str], cells: List[str]) -> Row:
        row = {}
        for label, text in zip(headers, cells):
            row[label] = text
        return row
