"""HTML parsing and raw table collection."""

import logging
from typing import Dict, List, Optional, Any, Union

from bs4 import BeautifulSoup, FeatureNotFound
from bs4.element import Tag

from ..base import ParseError, ScannerConfigError
from ...models import RawTable


def parse_document(markup: Union[str, bytes], features: str = 'html.parser') -> BeautifulSoup:
    """Parse markup into a document tree.
    
    Args:
        markup: Raw HTML text, or bytes to be decoded by BeautifulSoup
        features: BeautifulSoup tree builder name
        
    Returns:
        Parsed document
        
    Raises:
        ParseError: If the markup cannot be parsed
        ScannerConfigError: If the tree builder is not installed
    """
    try:
        return BeautifulSoup(markup, features)
    except FeatureNotFound as e:
        raise ScannerConfigError(f"Unknown HTML parser '{features}'") from e
    except Exception as e:
        raise ParseError(f"Failed to parse HTML content: {e}") from e


class HTMLTableParser:
    """Collects header and row texts from every table in a document."""
    
    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """Initialize the table parser.
        
        Args:
            config: Parser configuration; 'table_selector' picks the table elements
        """
        config = config or {}
        self.logger = logging.getLogger(__name__)
        self.table_selector = config.get('table_selector', 'table')
    
    def collect(self, document: BeautifulSoup) -> List[RawTable]:
        """Collect raw tables in document order.
        
        Tables without a single row holding a data cell are skipped.
        
        Args:
            document: Parsed HTML document
            
        Returns:
            One RawTable per qualifying table element
        """
        raw_tables = []
        
        for index, table in enumerate(document.select(self.table_selector)):
            raw_table = self._extract_table(table)
            if not raw_table.rows:
                self.logger.debug(f"Table {index} has no data rows, skipping")
                continue
            
            self.logger.debug(
                f"Table {index}: {len(raw_table.headers)} headers, {len(raw_table.rows)} rows"
            )
            raw_tables.append(raw_table)
        
        self.logger.info(f"Collected {len(raw_tables)} tables")
        return raw_tables
    
    def _extract_table(self, table: Tag) -> RawTable:
        """Extract header and cell texts from one table element.
        
        All header cells are flattened into one list, whichever row holds them.
        """
        headers = [th.get_text().strip() for th in table.find_all('th')]
        
        rows = []
        for row in table.find_all('tr'):
            cells = [td.get_text().strip() for td in row.find_all('td')]
            if cells:
                rows.append(cells)
        
        return RawTable(headers=headers, rows=rows)
