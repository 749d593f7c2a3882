"""
Online statistics over a sequence of scalar samples.

Responsibilities
  - Track count, sum, sum of squares and extrema in a single pass.
  - Provide mean and unbiased variance / standard deviation on demand.
  - Optionally bin every sample into a fixed-width histogram.

Usage Context
  - Feed one observation per call from a simulation or measurement loop.
  - Call reset() between measurement phases to reuse the accumulator.

Limitations
  - Not thread-safe; serialize access when several producers share an instance.
"""
# 说明：对随机变量样本序列进行单遍（在线）统计的累加器。
# 职责：
# - 维护样本数、总和、平方和以及最小/最大值（空状态下为 +inf / -inf 哨兵）
# - 使用 Welford 递推同步维护均值与二阶中心矩，保证无偏方差的数值稳定性
# - 可选地把每个样本计入等宽直方图（计数为整数）
# - 所有方法先校验后修改：失败调用不会留下部分更新的状态

from __future__ import annotations

import math
from typing import Iterable, Optional

import numpy as np

from .confidence import confidence_margin
from .errors import InsufficientSamplesError, NoHistogramError
from .histogram import Histogram, HistogramSnapshot
from .utils.config import get_config
from .utils.logging import get_logger
from .utils.param_validation import ensure_sample

logger = get_logger(__name__)


class SampleAccumulator:
    """
    Unweighted online accumulator for a random variable.

    - Configuration
      - lower_bound, upper_bound, bin_count: Optional histogram layout; all three
        must be given together.

    - Behavior
      - take_sample() always updates count, sums, extrema and the histogram.
      - mean() needs one sample, variance() and std_dev() need two.
      - min() / max() return the raw tracked extrema, sentinels while empty.
    """

    def __init__(
        self,
        lower_bound: Optional[float] = None,
        upper_bound: Optional[float] = None,
        bin_count: Optional[int] = None,
    ) -> None:
        self._histogram: Optional[Histogram] = None
        bounds = (lower_bound, upper_bound, bin_count)
        if any(arg is not None for arg in bounds):
            # 直方图参数需成组提供；缺项时交由 Histogram 的校验报出 InvalidParametersError
            self._histogram = Histogram(lower_bound, upper_bound, bin_count, dtype=np.int64)  # type: ignore[arg-type]
        self.reset()
        logger.debug("created %r", self)

    # ------------------------------------------------------------------ state
    def reset(self) -> None:
        """Discard every sample taken so far."""
        self._count = 0
        self._sum = 0.0
        self._sum_sq = 0.0
        self._min = math.inf
        self._max = -math.inf
        # Welford 递推状态：当前均值与累积二阶中心矩
        self._mean = 0.0
        self._m2 = 0.0
        if self._histogram is not None:
            self._histogram.reset()

    def _validate(self, x: float) -> Optional[float]:
        # 非严格模式下 NaN 样本被丢弃（返回 None）；严格模式下直接拒绝
        return ensure_sample(x, strict=get_config().strict_validation)

    def _accept(self, value: float) -> None:
        self._count += 1
        self._sum += value
        self._sum_sq += value * value
        if value < self._min:
            self._min = value
        if value > self._max:
            self._max = value

        delta = value - self._mean
        self._mean += delta / self._count
        self._m2 += delta * (value - self._mean)

        if self._histogram is not None:
            self._histogram.add(value)

    def take_sample(self, x: float) -> None:
        """Record one observation."""
        value = self._validate(x)
        if value is not None:
            self._accept(value)

    def take_samples(self, values: Iterable[float]) -> None:
        """Record a batch of observations in order; nothing is recorded if any value is invalid."""
        # 先整体校验再逐个累加，保证批量调用的原子性
        items = values.ravel().tolist() if isinstance(values, np.ndarray) else list(values)
        validated = [self._validate(x) for x in items]
        for value in validated:
            if value is not None:
                self._accept(value)

    # ------------------------------------------------------------------ queries
    def count(self) -> int:
        return self._count

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

    def mean(self) -> float:
        if self._count < 1:
            raise InsufficientSamplesError("mean requires at least 1 sample", required=1, available=self._count)
        return self._sum / self._count

    def variance(self) -> float:
        """Unbiased sample variance (Bessel-corrected)."""
        if self._count < 2:
            raise InsufficientSamplesError(
                f"variance requires at least 2 samples, have {self._count}", required=2, available=self._count
            )
        return self._m2 / (self._count - 1)

    def std_dev(self) -> float:
        return math.sqrt(self.variance())

    def error_margin(self, confidence_level: float) -> float:
        """Margin of error of the mean at ``confidence_level``, from the current std_dev and count."""
        return confidence_margin(self.std_dev(), self._count, confidence_level)

    # ------------------------------------------------------------------ histogram
    @property
    def has_histogram(self) -> bool:
        return self._histogram is not None

    def histogram_snapshot(self) -> HistogramSnapshot:
        if self._histogram is None:
            raise NoHistogramError("accumulator was constructed without histogram bounds")
        return self._histogram.snapshot()

    def __repr__(self) -> str:
        return f"SampleAccumulator(count={self._count}, histogram={self._histogram!r})"
