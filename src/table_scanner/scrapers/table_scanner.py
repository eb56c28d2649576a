"""Scan a web page for the table holding metre measurements."""

from typing import Dict, Any, Optional, Union

from bs4 import BeautifulSoup

from .base import BaseScanner, ScannerConfigError
from .parsers.html_table_parser import HTMLTableParser, parse_document
from .utils.row_normalizer import RowNormalizer
from .utils.table_selector import TableSelector
from .utils.row_reducer import RowReducer
from ..config import get_config, get_settings
from ..models import ScanOutcome
from ..utils.http import HTTPClient


class TableScanner(BaseScanner):
    """Fetches a page and reduces its first numeric table to a series.
    
    Pipeline: fetch -> parse -> collect tables -> normalize rows -> select
    the first table with a numeric column -> reduce rows to pairs.
    """
    
    known_fields = {'table_selector', 'html_parser', 'timeout', 'retry_count'}
    
    def __init__(self, config: Optional[Dict[str, Any]] = None,
                 http: Optional[HTTPClient] = None):
        """Initialize the scanner with configuration.
        
        Args:
            config: Configuration dictionary, or None for defaults
            http: HTTP client to fetch pages with (created on first fetch if None)
        """
        super().__init__(name="table_scanner")
        
        self.config = self._resolve_config(config or {})
        self.http = http
        
        self.table_parser = HTMLTableParser(self.config)
        self.row_normalizer = RowNormalizer()
        self.table_selector = TableSelector()
        self.row_reducer = RowReducer()
    
    def _resolve_config(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """Fill missing keys from the YAML config, then from settings."""
        unknown = set(config) - self.known_fields
        if unknown:
            raise ScannerConfigError(f"Configuration has unknown fields: {sorted(unknown)}")
        
        settings = get_settings()
        return {
            'table_selector': config.get(
                'table_selector', get_config('scanner.table_selector', settings.table_selector)
            ),
            'html_parser': config.get(
                'html_parser', get_config('scanner.html_parser', settings.html_parser)
            ),
            'timeout': config.get('timeout', get_config('http.timeout', settings.timeout)),
            'retry_count': config.get('retry_count', get_config('http.retry_count', settings.retry_count)),
        }
    
    def scan(self, url: str) -> ScanOutcome:
        """Fetch a page and scan it.
        
        Args:
            url: Page to scan
            
        Returns:
            Outcome with the reduced table or the not-found message
            
        Raises:
            ScannerConfigError: If no URL is given
            FetchError: If the page cannot be fetched
            ParseError: If the page cannot be parsed
        """
        if not url:
            raise ScannerConfigError("URL is required")
        
        if self.http is None:
            self.http = HTTPClient(
                timeout=self.config['timeout'],
                retry_count=self.config['retry_count'],
            )
        
        self.logger.info(f"Starting table scan of: {url}")
        markup = self.http.fetch(url)
        return self.scan_html(markup)
    
    def scan_html(self, markup: Union[str, bytes]) -> ScanOutcome:
        """Scan already fetched markup.
        
        Bytes are decoded by BeautifulSoup, which honours a declared charset.
        """
        document = parse_document(markup, self.config['html_parser'])
        return self.scan_document(document)
    
    def scan_document(self, document: BeautifulSoup) -> ScanOutcome:
        """Scan a parsed document.
        
        Args:
            document: Parsed HTML document
            
        Returns:
            Outcome with the reduced table or the not-found message
        """
        raw_tables = self.table_parser.collect(document)
        tables = (self.row_normalizer.normalize(raw_table) for raw_table in raw_tables)
        
        selected = self.table_selector.select(tables)
        if selected is None:
            return ScanOutcome.not_found()
        
        pairs = self.row_reducer.reduce(selected)
        self.logger.info(f"Reduced selected table to {len(pairs)} measurements")
        return ScanOutcome(table=pairs)


def scan(url: str) -> ScanOutcome:
    """Scan a page with the default configuration."""
    with TableScanner() as scanner:
        return scanner.scan(url)
