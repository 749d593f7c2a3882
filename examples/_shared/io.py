"""
Input/Output helpers for examples.
"""
from pathlib import Path
from typing import Any, Dict, List, Union

from simstats.core.utils.serialization import serialize_to_json

def write_json(data: Union[Dict[str, Any], List[Any]], path: Union[str, Path]) -> Path:
    """Write report data to a JSON file."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(serialize_to_json(data, indent=2), encoding="utf-8")
    return p

def print_report(args, summary) -> None:
    """Print a summary and, when present, its histogram using the CLI report flags."""
    from simstats.reporting import format_histogram, format_stats

    print(format_stats(summary, width=args.width, precision=args.precision, verbose=not args.compact))
    if summary.histogram is not None and not args.compact:
        print(format_histogram(summary.histogram, width=args.width, precision=args.precision))
