"""
Error hierarchy for accumulator and confidence-margin failures.

Responsibilities
  - Define one exception type per failure kind of the statistics core.
  - Keep validation errors compatible with ParamValidationError (a ValueError).

Usage Context
  - Raised by accumulators, histograms and the confidence-margin helpers.
  - Callers decide whether a failure is fatal; nothing is retried internally.

Limitations
  - Exceptions only carry message text and optional context attributes.
"""
# 说明：统计核心的异常体系，每种失败类型对应一个异常类，调用方可按需捕获。
# 职责：
# - StatsError：统计子模块统一基类异常
# - InvalidParametersError / InvalidConfidenceLevelError：参数校验失败，同时继承 ParamValidationError
# - InsufficientSamplesError / NoSamplesError：样本不足时的派生统计量查询失败
# - NonIncreasingTimeError：时间加权累加器收到非递增时间戳
# - NoHistogramError：在未配置直方图的累加器上请求直方图

from __future__ import annotations

from typing import Optional

from .utils.param_validation import ParamValidationError


class StatsError(Exception):
    """
    Base error type for statistics failures.

    - Behavior
      - Serves as the common ancestor for accumulator-specific exceptions.

    - Usage Notes
      - Catch to handle every statistics failure in one place.
    """


class InvalidParametersError(StatsError, ParamValidationError):
    """Raised when histogram bounds are not increasing or the bin count is not positive."""


class InsufficientSamplesError(StatsError):
    """
    Raised when an unweighted accumulator holds too few samples for a query.

    - Configuration
      - required: Minimum number of samples the query needs.
      - available: Number of samples currently held.
    """

    def __init__(self, message: str, *, required: int, available: int) -> None:
        super().__init__(message)
        self.required = required
        self.available = available


class NoSamplesError(StatsError):
    """Raised when a time-weighted accumulator is queried before any sample was accepted."""


class NonIncreasingTimeError(StatsError):
    """
    Raised when a timestamp does not advance past the accumulator's current time.

    - Configuration
      - timestamp: The rejected timestamp.
      - current_time: The accumulator time at rejection.

    - Usage Notes
      - The accumulator is left untouched; the caller may retry with a later time.
    """

    def __init__(self, timestamp: float, current_time: float, message: Optional[str] = None) -> None:
        final_message = message or (
            f"timestamp {timestamp!r} must be strictly greater than current time {current_time!r}"
        )
        super().__init__(final_message)
        self.timestamp = timestamp
        self.current_time = current_time


class NoHistogramError(StatsError):
    """Raised when a histogram is requested from an accumulator constructed without bounds."""


class InvalidConfidenceLevelError(StatsError, ParamValidationError):
    """Raised when a confidence level lies outside the accepted open interval."""
