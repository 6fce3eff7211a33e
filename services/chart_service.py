"""Headless matplotlib figures for the analytics view.

Figures are built with ``matplotlib.figure.Figure`` directly (no pyplot),
so they can be embedded in a window or saved with ``savefig``.
"""
from matplotlib.figure import Figure

from services.report_service import ReportService
from utils.constants import BUDGET_BAR_COLOR, CHART_COLORS, SPENT_BAR_COLOR, TREND_MONTHS


def _yen_axis(v, _):
    return f"{v/1000:.0f}k" if abs(v) >= 1000 else f"{v:.0f}"


def _no_data(ax, message: str = "No data"):
    ax.text(0.5, 0.5, message, ha="center", va="center",
            transform=ax.transAxes, color="gray")
    ax.set_axis_off()


class ChartService:
    def __init__(self, report_service: ReportService):
        self._reports = report_service

    def category_pie(self, month: str | None = None) -> Figure:
        fig = Figure(figsize=(4, 4), dpi=80, tight_layout=True)
        ax = fig.add_subplot(111)
        rows = [r for r in self._reports.get_category_breakdown(month) if r["amount"] > 0]
        if not rows:
            _no_data(ax, "No expense data")
            return fig
        ax.pie(
            [r["amount"] for r in rows],
            labels=[r["category"] for r in rows],
            colors=[CHART_COLORS[i % len(CHART_COLORS)] for i in range(len(rows))],
            startangle=90,
        )
        ax.set_aspect("equal")
        return fig

    def budget_vs_actual(self, month: str | None = None) -> Figure:
        fig = Figure(figsize=(6, 3), dpi=80, tight_layout=True)
        ax = fig.add_subplot(111)
        rows = self._reports.get_category_breakdown(month)
        if not rows:
            _no_data(ax)
            return fig
        x = list(range(len(rows)))
        w = 0.35
        ax.bar([i - w / 2 for i in x], [r["amount"] for r in rows], w,
               color=SPENT_BAR_COLOR, label="Spent")
        ax.bar([i + w / 2 for i in x], [r["budget"] for r in rows], w,
               color=BUDGET_BAR_COLOR, label="Budget")
        ax.set_xticks(x)
        ax.set_xticklabels([r["category"] for r in rows])
        ax.yaxis.set_major_formatter(_yen_axis)
        ax.legend()
        return fig

    def monthly_trend(self, months: int = TREND_MONTHS, end_month: str | None = None) -> Figure:
        fig = Figure(figsize=(6, 3), dpi=80, tight_layout=True)
        ax = fig.add_subplot(111)
        data = self._reports.get_monthly_trend(months, end_month)
        if not any(d["amount"] for d in data):
            _no_data(ax)
            return fig
        x = list(range(len(data)))
        ax.bar(x, [d["amount"] for d in data], 0.6, color=SPENT_BAR_COLOR)
        ax.set_xticks(x)
        ax.set_xticklabels([d["month"][5:] for d in data])
        ax.yaxis.set_major_formatter(_yen_axis)
        return fig
