"""
Example 03: Margin of error across simulation replications.

Goal:
    Run many replications of a toy exponential-service experiment, collect
    the per-replication averages in a SampleAccumulator, and report the
    confidence interval of the mean of averages.

Usage:
    python examples/stats/03_replication_margin.py --seed 7
"""
import sys
from pathlib import Path

project_root = Path(__file__).resolve().parents[2]
src_root = project_root / "src"
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))
if str(src_root) not in sys.path:
    sys.path.insert(0, str(src_root))

from examples._shared import cli, io, rng
from simstats import SampleAccumulator, confidence_interval
from simstats.reporting import summarize

REPLICATIONS = 200
SAMPLES_PER_REPLICATION = 500
CONFIDENCE_LEVEL = 0.95

def main(argv=None):
    args = cli.parse_args("Replication margin-of-error demo", argv)
    per_run = SampleAccumulator()
    averages = SampleAccumulator()
    for stream in rng.replication_streams(args.seed, REPLICATIONS):
        per_run.reset()
        per_run.take_samples(stream.exponential(scale=2.0, size=SAMPLES_PER_REPLICATION))
        averages.take_sample(per_run.mean())

    low, high = confidence_interval(averages.mean(), averages.std_dev(), averages.count(), CONFIDENCE_LEVEL)
    summary = summarize(averages, "mean service time")
    io.print_report(args, summary)
    print(f"{CONFIDENCE_LEVEL:.0%} interval: ({low:.4f}, {high:.4f})")

    result = {"summary": summary, "confidence_level": CONFIDENCE_LEVEL, "interval": [low, high]}
    if args.json:
        io.write_json(result, args.json)
    return result

if __name__ == "__main__":
    main()
