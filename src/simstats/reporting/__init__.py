from .summary import (
    HistogramRow,
    HistogramTable,
    StatsSummary,
    format_histogram,
    format_row_label,
    format_stats,
    histogram_table,
    summarize,
)
from .plotting import render_histogram_png

__all__ = [
    "HistogramRow",
    "HistogramTable",
    "StatsSummary",
    "format_histogram",
    "format_row_label",
    "format_stats",
    "histogram_table",
    "summarize",
    "render_histogram_png",
]
