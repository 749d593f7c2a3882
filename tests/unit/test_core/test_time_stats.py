"""
Unit tests for TimeWeightedAccumulator.
"""
# 说明：时间加权累加器 TimeWeightedAccumulator 的单元测试。
# 覆盖：
# - 参考过程数据：已观测时长、时间平均、总体方差与时长直方图
# - 每个样本只积分到自身时间戳（最后一个值不再向后延伸）
# - 非递增 / NaN / 无穷时间戳被拒绝且状态保持不变
# - 空状态下 mean / variance / std_dev 抛出 NoSamplesError
# - reset 后重放得到相同结果、批量输入的原子性

import math

import numpy as np
import pytest

from simstats.core.errors import InvalidParametersError, NoHistogramError, NonIncreasingTimeError, NoSamplesError
from simstats.core.time_stats import TimeWeightedAccumulator
from simstats.core.utils import ParamValidationError, configure


def _expected_moments(values, times):
    # 独立计算：每个值在 (上一时刻, 当前时刻] 上保持不变
    v = np.asarray(values, dtype=float)
    d = np.diff(np.concatenate(([0.0], np.asarray(times, dtype=float))))
    total = float(np.sum(d))
    mean = float(np.sum(v * d) / total)
    var = float(np.sum(d * (v - mean) ** 2) / total)
    return total, mean, var


def _feed(stats, values, times):
    for x, t in zip(values, times):
        stats.take_sample(x, t)


def test_reference_process(process_values, process_times) -> None:
    stats = TimeWeightedAccumulator(0.0, 100.0, 10)
    _feed(stats, process_values, process_times)
    total, mean, var = _expected_moments(process_values, process_times)
    assert stats.elapsed_time() == 192.5
    assert total == pytest.approx(192.5)
    assert stats.mean() == pytest.approx(mean)
    assert stats.variance() == pytest.approx(var)
    assert stats.std_dev() == pytest.approx(math.sqrt(var))
    # 与按定义计算的 sum_of_squares / T - mean^2 一致
    assert stats.variance() == pytest.approx(stats.sum_of_squares / stats.elapsed_time() - stats.mean() ** 2)
    assert stats.min() == 2.0
    assert stats.max() == 99.0


def test_reference_time_histogram(process_values, process_times) -> None:
    stats = TimeWeightedAccumulator(0.0, 100.0, 10)
    _feed(stats, process_values, process_times)
    snap = stats.histogram_snapshot()
    assert snap.underflow == 0.0
    assert snap.overflow == 0.0
    # 值 2 / 6 / 3 分别持续 2.6 / 2.85 / 69
    assert snap.values[1] == pytest.approx(74.45)
    # 值 12 出现三次，分别持续 0.5 / 0.5 / 45.5
    assert snap.values[2] == pytest.approx(46.5)
    assert snap.total == pytest.approx(stats.elapsed_time())


def test_last_value_contributes_only_up_to_its_timestamp() -> None:
    stats = TimeWeightedAccumulator()
    stats.take_sample(10.0, 2.0)
    stats.take_sample(1000.0, 3.0)
    # 10 持续 2，1000 持续 1
    assert stats.mean() == pytest.approx((10.0 * 2 + 1000.0 * 1) / 3.0)


def test_non_increasing_time_rejected_and_state_unchanged() -> None:
    stats = TimeWeightedAccumulator(0.0, 10.0, 5)
    stats.take_sample(3.0, 1.0)
    stats.take_sample(4.0, 2.5)
    before = (stats.elapsed_time(), stats.sum, stats.sum_of_squares, stats.min(), stats.max(), stats.histogram_snapshot())
    for bad in (2.5, 2.0, -1.0, math.nan):
        with pytest.raises(NonIncreasingTimeError) as excinfo:
            stats.take_sample(9.0, bad)
        assert excinfo.value.current_time == 2.5
    after = (stats.elapsed_time(), stats.sum, stats.sum_of_squares, stats.min(), stats.max(), stats.histogram_snapshot())
    assert after == before


def test_first_timestamp_must_be_positive() -> None:
    stats = TimeWeightedAccumulator()
    with pytest.raises(NonIncreasingTimeError):
        stats.take_sample(1.0, 0.0)
    with pytest.raises(NoSamplesError):
        stats.mean()


def test_empty_accumulator_failures() -> None:
    stats = TimeWeightedAccumulator()
    assert stats.elapsed_time() == 0.0
    assert stats.current_time == 0.0
    assert stats.min() == math.inf
    assert stats.max() == -math.inf
    for query in (stats.mean, stats.variance, stats.std_dev):
        with pytest.raises(NoSamplesError):
            query()


def test_single_sample_has_zero_variance() -> None:
    stats = TimeWeightedAccumulator()
    stats.take_sample(5.0, 4.0)
    assert stats.mean() == 5.0
    assert stats.variance() == 0.0


def test_reset_and_replay_is_identical(process_values, process_times) -> None:
    stats = TimeWeightedAccumulator(0.0, 100.0, 10)
    _feed(stats, process_values, process_times)
    first = (stats.mean(), stats.std_dev(), stats.min(), stats.max(), stats.histogram_snapshot())
    stats.reset()
    assert stats.elapsed_time() == 0.0
    assert stats.histogram_snapshot().total == 0.0
    _feed(stats, process_values, process_times)
    assert (stats.mean(), stats.std_dev(), stats.min(), stats.max(), stats.histogram_snapshot()) == first


def test_take_samples_matches_single_calls(process_values, process_times) -> None:
    batch = TimeWeightedAccumulator(0.0, 100.0, 10)
    batch.take_samples(np.asarray(process_values), process_times)
    single = TimeWeightedAccumulator(0.0, 100.0, 10)
    _feed(single, process_values, process_times)
    assert batch.mean() == single.mean()
    assert batch.histogram_snapshot() == single.histogram_snapshot()


def test_take_samples_is_atomic() -> None:
    stats = TimeWeightedAccumulator()
    stats.take_sample(1.0, 1.0)
    with pytest.raises(NonIncreasingTimeError):
        stats.take_samples([2.0, 3.0, 4.0], [2.0, 5.0, 5.0])
    with pytest.raises(ParamValidationError):
        stats.take_samples([2.0, 3.0], [2.0])
    with pytest.raises(ParamValidationError):
        stats.take_samples([2.0, math.nan], [2.0, 3.0])
    assert stats.elapsed_time() == 1.0
    assert stats.mean() == 1.0


def test_histogram_errors() -> None:
    with pytest.raises(InvalidParametersError):
        TimeWeightedAccumulator(1.0, 1.0, 3)
    stats = TimeWeightedAccumulator()
    assert stats.has_histogram is False
    with pytest.raises(NoHistogramError):
        stats.histogram_snapshot()


@pytest.mark.parametrize("stamp", [math.inf, -math.inf])
def test_infinite_timestamp_rejected_and_state_unchanged(stamp) -> None:
    stats = TimeWeightedAccumulator(0.0, 10.0, 5)
    stats.take_sample(1.0, 1.0)
    before = (stats.elapsed_time(), stats.mean(), stats.variance(), stats.histogram_snapshot())
    with pytest.raises(ParamValidationError):
        stats.take_sample(0.0, stamp)
    with pytest.raises(ParamValidationError):
        stats.take_samples([2.0, 3.0], [2.0, stamp])
    assert (stats.elapsed_time(), stats.mean(), stats.variance(), stats.histogram_snapshot()) == before
    # 时钟仍可继续前进
    stats.take_sample(3.0, 1e300)
    assert stats.elapsed_time() == 1e300


def test_numpy_nan_value_dropped_without_advancing_clock() -> None:
    configure(strict_validation=False)
    stats = TimeWeightedAccumulator()
    stats.take_sample(4.0, 2.0)
    stats.take_sample(np.float32("nan"), 3.0)
    assert stats.elapsed_time() == 2.0
    assert stats.mean() == 4.0
