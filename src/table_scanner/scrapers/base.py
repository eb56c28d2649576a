"""Base scanner class and the error taxonomy."""

import logging
from abc import ABC, abstractmethod

from ..models import ScanOutcome


class BaseScanner(ABC):
    """Abstract base class for page scanners."""
    
    def __init__(self, name: str):
        """Initialize the scanner.
        
        Args:
            name: Name of the scanner, used for the logger name
        """
        self.name = name
        self.logger = logging.getLogger(f"scanners.{name}")
    
    @abstractmethod
    def scan(self, url: str) -> ScanOutcome:
        """Scan a page for a numeric table.
        
        Returns:
            Outcome holding the reduced table or a not-found message
        """
        pass
    
    def close(self):
        """Release network resources."""
        if hasattr(self, 'http') and hasattr(self.http, 'close'):
            self.http.close()
    
    def __enter__(self):
        """Context manager entry."""
        return self
    
    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit - cleanup resources."""
        self.close()


class ScannerError(Exception):
    """Base exception for scanner errors."""
    pass


class ScannerConfigError(ScannerError):
    """Invalid configuration or request."""
    pass


class FetchError(ScannerError):
    """The page could not be retrieved."""
    pass


class ParseError(ScannerError):
    """The retrieved markup could not be parsed."""
    pass
