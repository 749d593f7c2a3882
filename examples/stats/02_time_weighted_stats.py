"""
Example 02: Time-weighted statistics of a piecewise-constant process.

Goal:
    Replay a process observed at increasing timestamps, report the time
    average and the fraction of time spent in each histogram bin, then
    reset and replay to show the report is reproduced exactly.

Usage:
    python examples/stats/02_time_weighted_stats.py --compact
"""
import sys
from pathlib import Path

project_root = Path(__file__).resolve().parents[2]
src_root = project_root / "src"
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))
if str(src_root) not in sys.path:
    sys.path.insert(0, str(src_root))

from examples._shared import cli, io
from simstats import TimeWeightedAccumulator
from simstats.reporting import summarize

VALUES = [88., 12., 63., 34., 77., 95., 12., 2., 99., 6., 88., 45., 76., 46., 3., 12.]
TIMES = [1., 1.5, 3.3, 6., 7.2, 8.5, 9., 11.6, 13.25, 16.1, 41., 59., 66.6, 78., 147., 192.5]

def main(argv=None):
    args = cli.parse_args("Time-weighted statistics demo", argv)

    stats = TimeWeightedAccumulator(0.0, 100.0, 10)
    summaries = []
    for _ in range(2):
        stats.reset()
        for value, timestamp in zip(VALUES, TIMES):
            stats.take_sample(value, timestamp)
        summary = summarize(stats, "A")
        io.print_report(args, summary)
        summaries.append(summary)

    if args.json:
        io.write_json(summaries, args.json)
    return summaries

if __name__ == "__main__":
    main()
