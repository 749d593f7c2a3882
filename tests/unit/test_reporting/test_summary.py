"""
Unit tests for statistics summaries and text reports.
"""
# 说明：报告层 summarize / histogram_table / format_stats / format_histogram 的单元测试。
# 覆盖：
# - 样本与时间加权两类累加器的汇总字段
# - 相对频率：样本直方图除以样本数，时间直方图除以已观测时长
# - 区间标签：两侧尾箱使用 -INF / +INF
# - 样本不足或未配置直方图时拒绝输出（抛出累加器自身的异常并记录告警）
# - 文本格式的宽度、精度与详细/紧凑模式，以及 JSON 导出

import json
import logging

import pytest

from simstats.core.errors import InsufficientSamplesError, NoHistogramError, NoSamplesError
from simstats.core.sample_stats import SampleAccumulator
from simstats.core.time_stats import TimeWeightedAccumulator
from simstats.core.utils import ParamValidationError, configure
from simstats.reporting import (
    HistogramRow,
    format_histogram,
    format_row_label,
    format_stats,
    histogram_table,
    summarize,
)


@pytest.fixture
def sample_a(data_a):
    stats = SampleAccumulator(0.0, 100.0, 10)
    stats.take_samples(data_a)
    return stats


@pytest.fixture
def process_a(process_values, process_times):
    stats = TimeWeightedAccumulator(0.0, 100.0, 10)
    stats.take_samples(process_values, process_times)
    return stats


def test_summarize_sample_accumulator(sample_a) -> None:
    summary = summarize(sample_a, "A")
    assert summary.kind == "sample"
    assert summary.count == 16
    assert summary.elapsed_time is None
    assert summary.mean == pytest.approx(43.4375)
    assert summary.std_dev == pytest.approx(sample_a.std_dev())
    assert (summary.min, summary.max) == (0.0, 99.0)
    assert summary.histogram is not None
    assert len(summary.histogram.rows) == 12


def test_summarize_time_weighted_accumulator(process_a) -> None:
    summary = summarize(process_a, "A", include_histogram=False)
    assert summary.kind == "time"
    assert summary.count is None
    assert summary.elapsed_time == 192.5
    assert summary.mean == pytest.approx(process_a.mean())
    assert summary.histogram is None


def test_sample_histogram_fractions(sample_a) -> None:
    table = histogram_table(sample_a, "A")
    assert table.total == 16.0
    assert table.fractions == pytest.approx([0, 0.25, 0.1875, 0, 0.0625, 0.125, 0, 0, 0.125, 0.125, 0.125, 0])
    assert sum(table.fractions) == pytest.approx(1.0)
    assert table.rows[0].lower is None
    assert table.rows[0].upper == 0.0
    assert table.rows[-1].lower == 100.0
    assert table.rows[-1].upper is None


def test_time_histogram_fractions(process_a) -> None:
    table = histogram_table(process_a, "A")
    assert table.kind == "time"
    assert table.total == 192.5
    assert table.rows[1].fraction == pytest.approx(74.45 / 192.5)
    assert sum(table.fractions) == pytest.approx(1.0)


def test_summary_refuses_with_too_few_samples() -> None:
    stats = SampleAccumulator()
    stats.take_sample(1.0)
    with pytest.raises(InsufficientSamplesError):
        summarize(stats, "one")
    with pytest.raises(NoSamplesError):
        summarize(TimeWeightedAccumulator(), "empty")


def test_histogram_table_refusals(caplog) -> None:
    with caplog.at_level(logging.WARNING):
        with pytest.raises(NoHistogramError):
            histogram_table(SampleAccumulator(), "plain")
    assert "no histogram to report" in caplog.text
    with pytest.raises(InsufficientSamplesError):
        histogram_table(SampleAccumulator(0.0, 1.0, 2), "empty")
    with pytest.raises(NoSamplesError):
        histogram_table(TimeWeightedAccumulator(0.0, 1.0, 2), "empty")


def test_unknown_accumulator_type_rejected() -> None:
    with pytest.raises(ParamValidationError):
        summarize(object(), "x")  # type: ignore[arg-type]


def test_format_stats_verbose_block(sample_a) -> None:
    text = format_stats(summarize(sample_a, "A"), width=10, precision=4, verbose=True)
    lines = text.splitlines()
    assert lines[0] == "-" * 40
    assert lines[1] == "Stats: A"
    assert lines[2] == "Sample Count        : " + "16".rjust(10)
    assert lines[3] == "Sample Mean         :    43.4375"
    assert lines[5] == "Sample Min          :     0.0000"
    assert lines[-1] == "-" * 40


def test_format_stats_compact_line_for_time_weighted(process_a) -> None:
    text = format_stats(summarize(process_a, "A"), width=8, precision=1, verbose=False)
    assert text.startswith("A :    192.5 ")
    assert "\n" not in text
    assert len(text.split()) == 2 + 5


def test_format_defaults_come_from_config(sample_a) -> None:
    configure(report_width=6, report_precision=1, verbose_reports=False)
    text = format_stats(summarize(sample_a, "A"))
    assert text == "A :     16   43.4 " + f"{sample_a.std_dev():6.1f}" + "    0.0   99.0"


def test_format_histogram_labels(sample_a) -> None:
    text = format_histogram(histogram_table(sample_a, "A"), width=8, precision=4)
    lines = text.splitlines()
    assert lines[1] == "HISTOGRAM: A"
    assert lines[2] == "(    -INF,  0.0000) :   0.0000"
    assert lines[3] == "[  0.0000, 10.0000) :   0.2500"
    assert lines[-2] == "[100.0000,    +INF) :   0.0000"
    assert len(lines) == 2 + 12 + 1


def test_time_histogram_title(process_a) -> None:
    text = format_histogram(histogram_table(process_a, "Q"), width=8, precision=2)
    assert "Time HISTOGRAM: Q" in text


def test_row_label_without_width() -> None:
    assert format_row_label(HistogramRow(lower=1.0, upper=2.5, value=3, fraction=0.5), precision=1) == "[1.0,2.5)"


def test_summary_json_export(sample_a) -> None:
    data = json.loads(summarize(sample_a, "A").to_json())
    assert data["name"] == "A"
    assert data["count"] == 16
    assert data["histogram"]["rows"][0]["lower"] is None
    assert data["histogram"]["rows"][1]["value"] == 4
