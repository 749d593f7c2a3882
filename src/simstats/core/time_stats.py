"""
Time-weighted statistics of a piecewise-constant stochastic process.

Responsibilities
  - Integrate value and squared value over time as samples arrive.
  - Provide the time-average, population variance and standard deviation.
  - Optionally accumulate, per histogram bin, the time spent in that bin.

Usage Context
  - Discrete-event simulations tracking queue lengths, utilisation and similar
    processes whose value changes at event times.

Limitations
  - Timestamps must be strictly increasing per instance and start above 0.
  - A sample's value contributes the interval that ends at its own timestamp;
    nothing is integrated past the latest timestamp.
"""
# 说明：对分段常值随机过程进行时间加权统计的累加器。
# 职责：
# - take_sample(x, t)：把 x 视为在 (上一时刻, t] 区间内保持不变，按持续时间加权累加
# - 维护时间积分 sum / sum_of_squares、观测值极值（不加权）以及可选的时长直方图
# - 使用 West 加权递推维护均值与二阶中心矩，方差为总体方差（不做 Bessel 修正）
# - current_time == 0 为“尚无样本”的哨兵；非递增时间戳被拒绝且不修改任何状态

from __future__ import annotations

import math
from typing import Iterable, Optional, Sequence

import numpy as np

from .errors import NoHistogramError, NonIncreasingTimeError, NoSamplesError
from .histogram import Histogram, HistogramSnapshot
from .utils.config import get_config
from .utils.logging import get_logger
from .utils.param_validation import ensure, ensure_number, ensure_sample

logger = get_logger(__name__)


class TimeWeightedAccumulator:
    """
    Online accumulator for a process observed at increasing timestamps.

    - Configuration
      - lower_bound, upper_bound, bin_count: Optional histogram layout; bins
        accumulate durations instead of counts.

    - Behavior
      - Each accepted sample weighs its value by the time elapsed since the
        previous accepted sample (or since time 0 for the first one).
      - mean(), variance() and std_dev() fail with NoSamplesError until a sample
        has been accepted.

    - Usage Notes
      - Divide histogram values by elapsed_time() for the fraction of time spent
        in each bin.
    """

    def __init__(
        self,
        lower_bound: Optional[float] = None,
        upper_bound: Optional[float] = None,
        bin_count: Optional[int] = None,
    ) -> None:
        self._histogram: Optional[Histogram] = None
        if any(arg is not None for arg in (lower_bound, upper_bound, bin_count)):
            self._histogram = Histogram(lower_bound, upper_bound, bin_count, dtype=np.float64)  # type: ignore[arg-type]
        self.reset()
        logger.debug("created %r", self)

    def reset(self) -> None:
        """Return to the no-samples state (time 0)."""
        self._time = 0.0
        self._sum = 0.0
        self._sum_sq = 0.0
        self._min = math.inf
        self._max = -math.inf
        # West 加权递推状态：加权均值与加权二阶中心矩（总权重即 current_time）
        self._weighted_mean = 0.0
        self._weighted_m2 = 0.0
        if self._histogram is not None:
            self._histogram.reset()

    # ------------------------------------------------------------------ sampling
    def _check_time(self, timestamp: float, current_time: float) -> float:
        # NaN 与任何值比较均为 False，需要显式拒绝；无穷时间戳会使时钟无法再前进，同样拒绝
        stamp = ensure_number(timestamp, label="timestamp", allow_nan=True, allow_infinite=False)
        if math.isnan(stamp) or stamp <= current_time:
            raise NonIncreasingTimeError(stamp, current_time)
        return stamp

    def _check_value(self, x: float) -> Optional[float]:
        return ensure_sample(x, strict=get_config().strict_validation)

    def _accept(self, value: float, timestamp: float) -> None:
        duration = timestamp - self._time
        self._time = timestamp
        self._sum += value * duration
        self._sum_sq += value * value * duration
        if value < self._min:
            self._min = value
        if value > self._max:
            self._max = value

        # 总权重等于新的 current_time
        delta = value - self._weighted_mean
        self._weighted_mean += delta * (duration / self._time)
        self._weighted_m2 += duration * delta * (value - self._weighted_mean)

        if self._histogram is not None:
            self._histogram.add(value, duration)

    def take_sample(self, x: float, timestamp: float) -> None:
        """Record that the process took value ``x`` up to ``timestamp``."""
        # 先完成全部校验再修改状态，失败调用不会留下部分更新
        stamp = self._check_time(timestamp, self._time)
        value = self._check_value(x)
        if value is not None:
            self._accept(value, stamp)

    def take_samples(self, values: Iterable[float], timestamps: Iterable[float]) -> None:
        """Record paired values and timestamps; nothing is recorded if any pair is invalid."""
        value_list = _as_list(values)
        time_list = _as_list(timestamps)
        ensure(
            len(value_list) == len(time_list),
            f"values and timestamps must have equal length ({len(value_list)} != {len(time_list)})",
        )
        checked = []
        previous = self._time
        for x, timestamp in zip(value_list, time_list):
            stamp = self._check_time(timestamp, previous)
            checked.append((self._check_value(x), stamp))
            previous = stamp
        for value, stamp in checked:
            if value is not None:
                self._accept(value, stamp)

    # ------------------------------------------------------------------ queries
    def elapsed_time(self) -> float:
        return self._time

    current_time = property(elapsed_time)

    @property
    def sum(self) -> float:
        return self._sum

    @property
    def sum_of_squares(self) -> float:
        return self._sum_sq

    def min(self) -> float:
        return self._min

    def max(self) -> float:
        return self._max

    def _require_samples(self, what: str) -> None:
        if self._time <= 0.0:
            raise NoSamplesError(f"{what} requires at least one time-weighted sample")

    def mean(self) -> float:
        """Time-average of the process over (0, elapsed_time()]."""
        self._require_samples("mean")
        return self._sum / self._time

    def variance(self) -> float:
        """Population variance of the time-weighted distribution."""
        self._require_samples("variance")
        return self._weighted_m2 / self._time

    def std_dev(self) -> float:
        self._require_samples("std_dev")
        return math.sqrt(self.variance())

    # ------------------------------------------------------------------ histogram
    @property
    def has_histogram(self) -> bool:
        return self._histogram is not None

    def histogram_snapshot(self) -> HistogramSnapshot:
        if self._histogram is None:
            raise NoHistogramError("accumulator was constructed without histogram bounds")
        return self._histogram.snapshot()

    def __repr__(self) -> str:
        return f"TimeWeightedAccumulator(elapsed_time={self._time!r}, histogram={self._histogram!r})"


def _as_list(values: Iterable[float]) -> Sequence[float]:
    # numpy 数组展平后转为 Python 标量列表，其余可迭代对象直接物化
    if isinstance(values, np.ndarray):
        return values.ravel().tolist()
    return list(values)
