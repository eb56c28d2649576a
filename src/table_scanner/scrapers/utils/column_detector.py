"""Detection of measurement columns."""

from typing import List

from .measurement_parser import extract_measurement
from ...models import Table


def find_numeric_columns(table: Table) -> List[str]:
    """Find the columns whose every value is a metre measurement.
    
    Candidate labels come from the first row, in its key order. A row that
    lacks a label fails the test for that label.
    
    Args:
        table: Normalized rows of one table
        
    Returns:
        Labels of the numeric columns, empty if there are none
    
    >>> find_numeric_columns([{'height': '12m', 'width': '7m'}, {'height': '8m', 'width': '10'}])
    ['height']
    """
    if not table:
        return []
    
    return [
        label for label in table[0]
        if all(extract_measurement(row.get(label)) is not None for row in table)
    ]


def is_numeric_table(table: Table) -> bool:
    """Check whether a table has at least one numeric column."""
    return len(find_numeric_columns(table)) > 0
