"""Pick the table to chart."""

import logging
from typing import Iterable, Optional

from .column_detector import find_numeric_columns
from ...models import Table


class TableSelector:
    """Selects the first numeric table in document order."""
    
    def __init__(self):
        self.logger = logging.getLogger(__name__)
    
    def select(self, tables: Iterable[Table]) -> Optional[Table]:
        """Return the first table with a numeric column.
        
        Later tables are not inspected once one qualifies.
        
        Args:
            tables: Normalized tables in document order
            
        Returns:
            The selected table or None if no table qualifies
        """
        for index, table in enumerate(tables):
            numeric_columns = find_numeric_columns(table)
            if numeric_columns:
                self.logger.info(f"Selected table {index} with numeric columns {numeric_columns}")
                return table
            self.logger.debug(f"Table {index} has no numeric column")
        
        self.logger.warning("No table with a numeric column found")
        return None
