"""Page scanners."""

import json
from pathlib import Path
from typing import Union, Dict, Any

from .base import BaseScanner, ScannerError, ScannerConfigError, FetchError, ParseError
from .table_scanner import TableScanner, scan


def create_scanner(config: Union[str, Path, Dict[str, Any], None] = None) -> TableScanner:
    """Create a scanner from configuration.
    
    Args:
        config: Configuration file path, dictionary, or None for defaults
        
    Returns:
        TableScanner instance
    """
    if isinstance(config, (str, Path)):
        config_path = Path(config)
        if not config_path.exists():
            raise ScannerConfigError(f"Configuration file not found: {config_path}")
        
        with open(config_path, 'r') as f:
            config = json.load(f)
    
    return TableScanner(config)


__all__ = [
    "BaseScanner",
    "TableScanner",
    "create_scanner",
    "scan",
    "ScannerError",
    "ScannerConfigError",
    "FetchError",
    "ParseError",
]
