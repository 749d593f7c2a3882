"""
Unified CLI argument parsing for examples.
"""
import argparse
import sys
from typing import Optional, List

def build_parser(description: str) -> argparse.ArgumentParser:
    """Build a standard ArgumentParser with common report flags."""
    parser = argparse.ArgumentParser(description=description)

    parser.add_argument(
        "--seed",
        type=int,
        default=0,
        help="Random seed for reproducibility (default: 0)"
    )
    parser.add_argument(
        "--width",
        type=int,
        default=None,
        help="Field width of report columns (default: runtime config)"
    )
    parser.add_argument(
        "--precision",
        type=int,
        default=None,
        help="Digits after the decimal point (default: runtime config)"
    )
    parser.add_argument(
        "--compact",
        action="store_true",
        help="Print one summary line per data set instead of a block"
    )
    parser.add_argument(
        "--json",
        type=str,
        default=None,
        help="Also write the summaries to this JSON file"
    )

    return parser

def parse_args(description: str, argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse arguments for an example script."""
    parser = build_parser(description)
    if argv is None:
        argv = sys.argv[1:]
    return parser.parse_args(argv)
