"""
Histogram rendering helpers.

Responsibilities
  - Render a relative-frequency histogram table as a PNG bar chart.

Usage Context
  - Use alongside format_histogram when a visual report is preferred.

Limitations
  - Rendering relies on matplotlib (``plot`` extra) for PNG output.
"""
# 说明：把 HistogramTable 渲染为柱状图 PNG，便于报表或可视化展示。
# 职责：
# - 延迟导入 matplotlib，并在无显示环境下切换到 Agg 后端
# - 复用文本报表的区间标签（含 -INF / +INF 尾箱）作为 x 轴刻度

from __future__ import annotations

from pathlib import Path
from typing import Optional, Tuple, Union

from simstats.core.utils.param_validation import ParamValidationError, ensure_type

from .summary import SAMPLE_KIND, HistogramTable, format_row_label


def _load_pyplot():
    """Load matplotlib pyplot with a non-interactive backend when needed."""
    # 延迟导入 pyplot 并确保非交互后端以适配无显示环境
    import sys
    import matplotlib

    if "matplotlib.pyplot" not in sys.modules:
        matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    return plt


def render_histogram_png(
    table: HistogramTable,
    path: Union[str, Path],
    *,
    title: Optional[str] = None,
    color: str = "#4C78A8",
    dpi: int = 150,
    figsize: Tuple[float, float] = (8.0, 4.0),
    rotation: int = 45,
    fontsize: int = 7,
    precision: int = 2,
    ylabel: Optional[str] = None,
) -> Path:
    """Render histogram fractions with bin labels and save to a PNG file."""
    ensure_type(table, (HistogramTable,), label="table")
    if not table.rows:
        raise ParamValidationError("histogram table has no rows to render")

    labels = [format_row_label(row, precision=precision) for row in table.rows]
    x = list(range(len(table.rows)))
    plt = _load_pyplot()
    fig, ax = plt.subplots(figsize=figsize)
    ax.bar(x, table.fractions, color=color)
    ax.set_xticks(x)
    ax.set_xticklabels(labels, rotation=rotation, ha="right", fontsize=fontsize)
    ax.tick_params(axis="y", labelsize=fontsize)
    if ylabel is None:
        ylabel = "fraction of samples" if table.kind == SAMPLE_KIND else "fraction of time"
    ax.set_ylabel(ylabel)
    ax.set_title(title or table.name)
    # 输出路径由调用方控制，确保父目录存在
    fig.tight_layout()
    out_path = Path(path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(out_path, dpi=dpi)
    plt.close(fig)
    return out_path
