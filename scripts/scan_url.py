#!/usr/bin/env python3
"""
Scan a web page for its first table of metre measurements.

Usage:
    python scripts/scan_url.py https://example.com/athletes --format table
"""

import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from table_scanner.cli import main


if __name__ == "__main__":
    sys.exit(main())
