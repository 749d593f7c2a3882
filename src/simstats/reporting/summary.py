"""
Text and JSON reports for accumulator statistics.

Collects the derived values of an accumulator into plain dataclasses, turns
histogram bins into relative frequencies, and renders fixed-point text blocks.

Responsibilities
  - Build StatsSummary / HistogramTable records from either accumulator kind.
  - Convert raw bin counts or durations into fractions of the total.
  - Format verbose or compact statistics blocks and histogram tables.
  - Export summaries to JSON.

Usage Context
  - Called by simulation drivers at the end of (or during) a run.

Limitations
  - Refuses to report when the accumulator cannot produce mean and std_dev;
    the accumulator's own error is raised to the caller.
"""
# 说明：面向累加器统计结果的报告层，汇总派生统计量并生成文本表格或 JSON 输出。
# 职责：
# - summarize(...)：从样本累加器或时间加权累加器构建 StatsSummary（样本数/时长、均值、标准差、极值）
# - histogram_table(...)：把原始分箱计数（或时长）除以样本数（或已观测时长）得到相对频率，并生成区间标签
# - format_stats / format_histogram：按宽度与精度输出定点格式文本，默认值取自 RuntimeConfig
# - StatsSummary.to_json()：借助序列化工具导出 JSON

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from simstats.core.errors import InsufficientSamplesError, NoHistogramError, NoSamplesError
from simstats.core.sample_stats import SampleAccumulator
from simstats.core.time_stats import TimeWeightedAccumulator
from simstats.core.utils.config import get_config
from simstats.core.utils.logging import get_logger
from simstats.core.utils.param_validation import ParamValidationError
from simstats.core.utils.serialization import serialize_to_json

Accumulator = Union[SampleAccumulator, TimeWeightedAccumulator]

SAMPLE_KIND = "sample"
TIME_KIND = "time"
SEPARATOR = "-" * 40

logger = get_logger(__name__)


@dataclass
class HistogramRow:
    # 单个分箱：lower 为 None 表示 -INF，upper 为 None 表示 +INF
    lower: Optional[float]
    upper: Optional[float]
    value: float        # 原始计数或累计时长
    fraction: float     # 相对频率（占样本数或已观测时长的比例）

    def to_dict(self) -> Dict[str, Any]:
        return {"lower": self.lower, "upper": self.upper, "value": self.value, "fraction": self.fraction}


@dataclass
class HistogramTable:
    name: str
    kind: str
    total: float
    rows: List[HistogramRow] = field(default_factory=list)

    @property
    def fractions(self) -> List[float]:
        return [row.fraction for row in self.rows]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "kind": self.kind,
            "total": self.total,
            "rows": [row.to_dict() for row in self.rows],
        }


@dataclass
class StatsSummary:
    name: str
    kind: str
    mean: float
    std_dev: float
    min: float
    max: float
    count: Optional[int] = None
    elapsed_time: Optional[float] = None
    histogram: Optional[HistogramTable] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "kind": self.kind,
            "count": self.count,
            "elapsed_time": self.elapsed_time,
            "mean": self.mean,
            "std_dev": self.std_dev,
            "min": self.min,
            "max": self.max,
            "histogram": None if self.histogram is None else self.histogram.to_dict(),
        }

    def to_json(self, *, indent: Optional[int] = None) -> str:
        return serialize_to_json(self, indent=indent)


def _kind_of(accumulator: Accumulator) -> str:
    if isinstance(accumulator, SampleAccumulator):
        return SAMPLE_KIND
    if isinstance(accumulator, TimeWeightedAccumulator):
        return TIME_KIND
    raise ParamValidationError(
        f"accumulator must be SampleAccumulator or TimeWeightedAccumulator, got {type(accumulator).__name__}"
    )


def histogram_table(accumulator: Accumulator, name: str = "") -> HistogramTable:
    """Relative-frequency table of an accumulator's histogram."""
    kind = _kind_of(accumulator)
    if not accumulator.has_histogram:
        # 未配置直方图时记录告警并把错误交给调用方处理
        logger.warning("no histogram to report for %r", name or accumulator)
        raise NoHistogramError(f"accumulator {name!r} has no histogram")

    if kind == SAMPLE_KIND:
        total: float = accumulator.count()
        if total < 1:
            raise InsufficientSamplesError("histogram report requires at least 1 sample", required=1, available=0)
    else:
        total = accumulator.elapsed_time()
        if total <= 0.0:
            raise NoSamplesError("histogram report requires at least one time-weighted sample")

    snapshot = accumulator.histogram_snapshot()
    edges = snapshot.edges()
    # 两侧尾箱用 None 表示开区间端点，内部分箱使用相邻边界
    bounds = [(None, snapshot.lower_bound)]
    bounds.extend(zip(edges[:-1], edges[1:]))
    bounds.append((snapshot.upper_bound, None))
    rows = [
        HistogramRow(lower=lo, upper=hi, value=value, fraction=value / total)
        for (lo, hi), value in zip(bounds, snapshot.values)
    ]
    return HistogramTable(name=name, kind=kind, total=float(total), rows=rows)


def summarize(accumulator: Accumulator, name: str = "", *, include_histogram: bool = True) -> StatsSummary:
    """Collect the derived statistics of ``accumulator`` into a StatsSummary."""
    kind = _kind_of(accumulator)
    # std_dev() 在样本不足时抛出累加器自身的异常（样本累加器至少需要 2 个样本）
    std_dev = accumulator.std_dev()
    mean = accumulator.mean()
    table = None
    if include_histogram and accumulator.has_histogram:
        table = histogram_table(accumulator, name)
    return StatsSummary(
        name=name,
        kind=kind,
        mean=mean,
        std_dev=std_dev,
        min=accumulator.min(),
        max=accumulator.max(),
        count=accumulator.count() if kind == SAMPLE_KIND else None,
        elapsed_time=accumulator.elapsed_time() if kind == TIME_KIND else None,
        histogram=table,
    )


def _fixed(value: float, width: int, precision: int) -> str:
    return f"{value:.{precision}f}".rjust(width)


def format_stats(
    summary: StatsSummary,
    *,
    width: Optional[int] = None,
    precision: Optional[int] = None,
    verbose: Optional[bool] = None,
) -> str:
    """Render a summary as a verbose block or a single compact line."""
    config = get_config()
    width = config.report_width if width is None else width
    precision = config.report_precision if precision is None else precision
    verbose = config.verbose_reports if verbose is None else verbose

    if summary.kind == SAMPLE_KIND:
        lead = str(summary.count).rjust(width)
        labels = ("Sample Count", "Sample Mean", "Sample Standard Dev", "Sample Min", "Sample Max")
        title = f"Stats: {summary.name}"
    else:
        lead = _fixed(summary.elapsed_time or 0.0, width, precision)
        labels = ("Elapsed Time", "Average", "Standard Dev", "Min", "Max")
        title = f"TStats: {summary.name}"
    cells = [lead] + [_fixed(v, width, precision) for v in (summary.mean, summary.std_dev, summary.min, summary.max)]

    if not verbose:
        return f"{summary.name} : " + " ".join(cells)

    pad = max(len(label) for label in labels)
    lines = [SEPARATOR, title]
    lines.extend(f"{label:<{pad}} : {cell}" for label, cell in zip(labels, cells))
    lines.append(SEPARATOR)
    return "\n".join(lines)


def _edge_label(value: Optional[float], sign: str, width: int, precision: int) -> str:
    if value is None:
        return (sign + "INF").rjust(width)
    return _fixed(value, width, precision)


def format_row_label(row: HistogramRow, *, width: int = 0, precision: int = 4) -> str:
    # 下溢箱用开区间 "(-INF, lo)"，其余分箱为左闭右开 "[a, b)"
    opening = "(" if row.lower is None else "["
    left = _edge_label(row.lower, "-", width, precision)
    right = _edge_label(row.upper, "+", width, precision)
    return f"{opening}{left},{right})"


def format_histogram(table: HistogramTable, *, width: Optional[int] = None, precision: Optional[int] = None) -> str:
    """Render a histogram table with one relative-frequency line per bin."""
    config = get_config()
    width = config.report_width if width is None else width
    precision = config.report_precision if precision is None else precision

    title = "HISTOGRAM" if table.kind == SAMPLE_KIND else "Time HISTOGRAM"
    lines = [SEPARATOR, f"{title}: {table.name}"]
    for row in table.rows:
        label = format_row_label(row, width=width, precision=precision)
        lines.append(f"{label} : {_fixed(row.fraction, width, precision)}")
    lines.append(SEPARATOR)
    return "\n".join(lines)
