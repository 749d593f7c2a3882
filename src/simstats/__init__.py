"""Online univariate statistics for simulations: sample and time-weighted accumulators."""

from __future__ import annotations

from .core import (
    Histogram,
    HistogramSnapshot,
    InsufficientSamplesError,
    InvalidConfidenceLevelError,
    InvalidParametersError,
    NoHistogramError,
    NonIncreasingTimeError,
    NoSamplesError,
    ParamValidationError,
    SampleAccumulator,
    StatsError,
    TimeWeightedAccumulator,
    Z_TABLE,
    confidence_interval,
    confidence_margin,
    configure,
    get_config,
    z_score,
)

__version__ = "0.1.0"

__all__ = [
    "Histogram",
    "HistogramSnapshot",
    "InsufficientSamplesError",
    "InvalidConfidenceLevelError",
    "InvalidParametersError",
    "NoHistogramError",
    "NonIncreasingTimeError",
    "NoSamplesError",
    "ParamValidationError",
    "SampleAccumulator",
    "StatsError",
    "TimeWeightedAccumulator",
    "Z_TABLE",
    "confidence_interval",
    "confidence_margin",
    "configure",
    "get_config",
    "z_score",
]
