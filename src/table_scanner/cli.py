"""Command line entry point for scanning a page."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import get_settings
from .query.formatters import JSONFormatter, get_formatter
from .scrapers import TableScanner, ScannerError

logger = logging.getLogger(__name__)

FETCH_FAILED_MESSAGE = "Error fetching the URL"
URL_REQUIRED_MESSAGE = "URL is required"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Find the first table of metre measurements on a web page"
    )
    parser.add_argument("url", nargs="?", help="Page to scan")
    parser.add_argument(
        "--file",
        type=Path,
        help="Scan a local HTML file instead of fetching a URL"
    )
    parser.add_argument(
        "--format",
        choices=["json", "table", "csv"],
        default="json",
        help="Output format (default: json)"
    )
    parser.add_argument(
        "--output",
        type=Path,
        help="Write the result to this file instead of stdout"
    )
    parser.add_argument(
        "--table-selector",
        help="CSS selector for table elements (default: table)"
    )
    parser.add_argument(
        "--timeout",
        type=float,
        help="Seconds to wait for the page"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the scan tool."""
    args = build_parser().parse_args(argv)
    
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else get_settings().log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    
    if not args.url and not args.file:
        print(JSONFormatter().format_error(URL_REQUIRED_MESSAGE))
        return 2
    
    config = {}
    if args.table_selector:
        config['table_selector'] = args.table_selector
    if args.timeout is not None:
        config['timeout'] = args.timeout
    
    try:
        with TableScanner(config) as scanner:
            if args.file:
                outcome = scanner.scan_html(args.file.read_bytes())
            else:
                outcome = scanner.scan(args.url)
    except (ScannerError, OSError) as e:
        logger.error(f"Scan failed: {e}")
        print(JSONFormatter().format_error(FETCH_FAILED_MESSAGE))
        return 1
    
    output = get_formatter(args.format).format_outcome(outcome)
    
    if args.output:
        args.output.write_text(output, encoding='utf-8')
        logger.info(f"Wrote result to {args.output}")
    else:
        print(output)
    
    return 0


if __name__ == "__main__":
    sys.exit(main())
