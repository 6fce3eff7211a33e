import pytest

from matplotlib.figure import Figure

from services.chart_service import ChartService
from services.report_service import ReportService


@pytest.fixture
def charts(store):
    return ChartService(ReportService(store))


def _texts(fig):
    return [t.get_text() for t in fig.axes[0].texts]


def test_empty_month_draws_placeholder(charts):
    for fig in (
        charts.category_pie("2024-01"),
        charts.budget_vs_actual("2024-01"),
        charts.monthly_trend(3, "2024-01"),
    ):
        assert isinstance(fig, Figure)
        assert any("No" in t for t in _texts(fig))


def test_category_pie_has_one_wedge_per_category(store, charts):
    store.add_expense(amount=300, category="食費", payment_method="cash", date="2024-01-02")
    store.add_expense(amount=100, category="日用品", payment_method="cash", date="2024-01-03")
    fig = charts.category_pie("2024-01")
    assert len(fig.axes[0].patches) == 2


def test_budget_vs_actual_draws_paired_bars(store, charts):
    store.add_budget(category="食費", amount=500, month="2024-01")
    store.add_expense(amount=300, category="食費", payment_method="cash", date="2024-01-02")
    fig = charts.budget_vs_actual("2024-01")
    heights = sorted(p.get_height() for p in fig.axes[0].patches)
    assert heights == [300, 500]


def test_monthly_trend_bars(store, charts):
    store.add_expense(amount=300, category="食費", payment_method="cash", date="2024-01-02")
    fig = charts.monthly_trend(2, "2024-01")
    assert [p.get_height() for p in fig.axes[0].patches] == [0, 300]
