"""
Fixed-bin histogram embedded in the online accumulators.

Responsibilities
  - Partition [lower_bound, upper_bound) into equal-width interior bins.
  - Track two unbounded tail bins for values outside the finite range.
  - Accumulate integer counts or real-valued durations per bin.

Usage Context
  - Owned by SampleAccumulator (counts) and TimeWeightedAccumulator (durations).
  - Snapshots are handed to the reporting layer, which derives relative frequencies.

Limitations
  - Bin layout is fixed at construction and never resized.
  - Snapshots report raw bin values; they never divide by the total.
"""
# 说明：累加器内嵌的等宽直方图，负责分箱定位、计数/时长累加以及只读快照导出。
# 职责：
# - 校验 lower_bound < upper_bound 与 bin_count > 0，并一次性分配 bin_count + 2 个计数单元
# - locate(x)：按“下界闭、上界开”的约定计算样本所在分箱下标（0 为下溢箱，最后一个为上溢箱）
# - add(x, weight)：按给定权重累加（样本累加器权重为 1，时间加权累加器权重为持续时间）
# - snapshot()：导出包含边界、箱宽与各箱取值的不可变快照

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, Tuple

import numpy as np

from .errors import InvalidParametersError
from .utils.param_validation import ensure, ensure_number, ensure_positive_int


@dataclass(frozen=True)
class HistogramSnapshot:
    """
    Immutable view of a histogram at the moment it was taken.

    - Configuration
      - lower_bound / upper_bound: Finite partition range.
      - bin_width: Width of each interior bin.
      - values: bin_count + 2 raw bin values (underflow, interior..., overflow).

    - Usage Notes
      - Divide values by the accumulator's count or elapsed time for relative frequencies.
    """

    lower_bound: float
    upper_bound: float
    bin_width: float
    values: Tuple[float, ...]

    @property
    def bin_count(self) -> int:
        # 内部分箱数量（不含两侧无界尾箱）
        return len(self.values) - 2

    @property
    def underflow(self) -> float:
        return self.values[0]

    @property
    def overflow(self) -> float:
        return self.values[-1]

    @property
    def interior(self) -> Tuple[float, ...]:
        return self.values[1:-1]

    @property
    def total(self) -> float:
        # 所有分箱（含尾箱）取值之和；样本直方图等于样本数，时间直方图等于已观测时长
        return sum(self.values)

    def edges(self) -> Tuple[float, ...]:
        """Return the bin_count + 1 interior bin edges from lower_bound to upper_bound."""
        # 按下标乘宽度生成边界，避免逐次累加带来的浮点漂移；最后一个边界精确取 upper_bound
        inner = [self.lower_bound + k * self.bin_width for k in range(self.bin_count)]
        return tuple(inner) + (self.upper_bound,)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "lower_bound": self.lower_bound,
            "upper_bound": self.upper_bound,
            "bin_width": self.bin_width,
            "bin_count": self.bin_count,
            "values": list(self.values),
        }


class Histogram:
    """
    Equal-width histogram over [lower_bound, upper_bound) plus two tail bins.

    - Configuration
      - lower_bound, upper_bound: Finite range, lower_bound < upper_bound.
      - bin_count: Positive number of interior bins.
      - dtype: int64 for sample counts, float64 for accumulated durations.

    - Behavior
      - Values below lower_bound land in bin 0.
      - Values at or above upper_bound land in bin bin_count + 1.
      - Other values land in floor((x - lower_bound) / bin_width) + 1.
    """

    __slots__ = ("lower_bound", "upper_bound", "bin_count", "bin_width", "_bins")

    def __init__(self, lower_bound: float, upper_bound: float, bin_count: int, *, dtype: Any = np.int64) -> None:
        # 构造参数校验失败统一抛出 InvalidParametersError，且在分配任何状态之前完成
        lo = ensure_number(lower_bound, label="lower_bound", allow_infinite=False, error=InvalidParametersError)
        hi = ensure_number(upper_bound, label="upper_bound", allow_infinite=False, error=InvalidParametersError)
        ensure(lo < hi, f"lower_bound ({lo}) must be less than upper_bound ({hi})", error=InvalidParametersError)
        nbin = ensure_positive_int(bin_count, label="bin_count", error=InvalidParametersError)

        self.lower_bound = lo
        self.upper_bound = hi
        self.bin_count = nbin
        self.bin_width = (hi - lo) / nbin
        self._bins = np.zeros(nbin + 2, dtype=dtype)

    def locate(self, x: float) -> int:
        """Return the bin index that ``x`` falls into."""
        if x < self.lower_bound:
            return 0
        if x >= self.upper_bound:
            return self.bin_count + 1
        index = int(math.floor((x - self.lower_bound) / self.bin_width)) + 1
        # 浮点舍入可能把略小于 upper_bound 的值算到 bin_count + 1，这里夹回最后一个内部箱
        index = min(max(index, 1), self.bin_count)
        # 以 lower_bound + k * bin_width 作为分箱边界做一次修正，保证落箱结果与 edges() 一致
        if index > 1 and x < self._edge(index - 1):
            index -= 1
        elif index < self.bin_count and x >= self._edge(index):
            index += 1
        return index

    def _edge(self, k: int) -> float:
        return self.lower_bound + k * self.bin_width

    def add(self, x: float, weight: Any = 1) -> int:
        # 将权重累加到 x 所在分箱并返回该分箱下标，便于调用方记录日志或调试
        index = self.locate(x)
        self._bins[index] += weight
        return index

    def reset(self) -> None:
        # 原地清零，保持数组大小与 dtype 不变
        self._bins.fill(0)

    @property
    def values(self) -> np.ndarray:
        # 返回只读副本，防止外部修改内部缓冲区
        view = self._bins.copy()
        view.setflags(write=False)
        return view

    def snapshot(self) -> HistogramSnapshot:
        values = tuple(v.item() for v in self._bins)
        return HistogramSnapshot(
            lower_bound=self.lower_bound,
            upper_bound=self.upper_bound,
            bin_width=self.bin_width,
            values=values,
        )

    def __len__(self) -> int:
        return len(self._bins)

    def __repr__(self) -> str:
        return (
            f"Histogram(lower_bound={self.lower_bound!r}, upper_bound={self.upper_bound!r}, "
            f"bin_count={self.bin_count!r})"
        )
