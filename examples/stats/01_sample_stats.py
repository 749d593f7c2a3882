"""
Example 01: Sample statistics with a histogram.

Goal:
    Feed two fixed data sets into one SampleAccumulator, reporting each
    and resetting in between.

Usage:
    python examples/stats/01_sample_stats.py --width 10 --precision 4
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
from simstats import SampleAccumulator
from simstats.reporting import summarize

DATA_A = [88., 12., 0., 34., 77., 95., 12., 2., 99., 6., 88., 45., 76., 46., 3., 12.]
DATA_B = [11., 52., 30., 61., 17., 5., 62., 12., 25., 16., 81., 29., 56., 46., 42., 92.]

def main(argv=None):
    args = cli.parse_args("Sample statistics demo", argv)

    stats = SampleAccumulator(0.0, 100.0, 10)
    summaries = []
    for name, data in (("A", DATA_A), ("B", DATA_B)):
        # reset between the two measurement phases
        stats.reset()
        stats.take_samples(data)
        summary = summarize(stats, name)
        io.print_report(args, summary)
        summaries.append(summary)

    if args.json:
        io.write_json(summaries, args.json)
    return summaries

if __name__ == "__main__":
    main()
