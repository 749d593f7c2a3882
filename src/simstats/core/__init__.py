"""Entry point for the core library components."""

from .errors import (
    InsufficientSamplesError,
    InvalidConfidenceLevelError,
    InvalidParametersError,
    NoHistogramError,
    NonIncreasingTimeError,
    NoSamplesError,
    StatsError,
)
from .histogram import Histogram, HistogramSnapshot
from .confidence import Z_TABLE, confidence_interval, confidence_margin, z_score
from .sample_stats import SampleAccumulator
from .time_stats import TimeWeightedAccumulator
from .utils import (
    ParamValidationError,
    RuntimeConfig,
    configure,
    configure_logging,
    get_config,
    get_logger,
)

__all__ = [
    "InsufficientSamplesError",
    "InvalidConfidenceLevelError",
    "InvalidParametersError",
    "NoHistogramError",
    "NonIncreasingTimeError",
    "NoSamplesError",
    "StatsError",
    "Histogram",
    "HistogramSnapshot",
    "Z_TABLE",
    "confidence_interval",
    "confidence_margin",
    "z_score",
    "SampleAccumulator",
    "TimeWeightedAccumulator",
    "ParamValidationError",
    "RuntimeConfig",
    "configure",
    "configure_logging",
    "get_config",
    "get_logger",
]
