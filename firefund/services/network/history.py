"""
Performance chart series.

Groups a member's monthly snapshots into (label, value) points for the
chart renderer: by month, quarter, year, or months of the current year.
"""

from collections.abc import Iterable
from datetime import date
from decimal import Decimal
from enum import StrEnum

from firefund.config.business_constants import (
    DEFAULT_CHART_HISTORY_MONTHS,
    DEFAULT_CHART_HISTORY_QUARTERS,
    DEFAULT_CHART_HISTORY_YEARS,
)
from firefund.services.network.models import ChartPoint, SnapshotData
from firefund.utils.datetime_utils import shift_month


class ChartPeriod(StrEnum):
    """Grouping of chart points."""

    MONTHS = "months"
    QUARTERS = "quarters"
    YEARS = "years"
    YTD = "ytd"


class ChartMetric(StrEnum):
    """Snapshot field plotted on the chart."""

    VOLUME = "volume"
    LOANS = "loans"
    COMPENSATION = "compensation"
    FIRE_FUND = "fire_fund"


def default_chart_count(period: ChartPeriod) -> int:
    """Periods shown by default: 12 months, 8 quarters, 5 years."""
    if period == ChartPeriod.QUARTERS:
        return DEFAULT_CHART_HISTORY_QUARTERS
    if period == ChartPeriod.YEARS:
        return DEFAULT_CHART_HISTORY_YEARS
    return DEFAULT_CHART_HISTORY_MONTHS


def history_window_start(
    today: date, period: ChartPeriod, count: int
) -> tuple[int, int]:
    """
    First (year, month) included in a chart window.

    Args:
        today: Reference date
        period: Chart grouping
        count: Number of periods back

    Returns:
        (year, month) the history fetch starts at
    """
    if period == ChartPeriod.QUARTERS:
        return shift_month(today.year, today.month, -count * 3)
    if period == ChartPeriod.YEARS:
        return today.year - count, 1
    if period == ChartPeriod.YTD:
        return today.year, 1
    return shift_month(today.year, today.month, -count)


def metric_value(snapshot: SnapshotData, metric: ChartMetric) -> Decimal:
    """Read one metric from a snapshot."""
    if metric == ChartMetric.LOANS:
        return Decimal(snapshot.monthly_loan_count)
    if metric == ChartMetric.COMPENSATION:
        return snapshot.compensation
    if metric == ChartMetric.FIRE_FUND:
        return snapshot.fire_fund_balance
    return snapshot.monthly_volume


def _group_label(snapshot: SnapshotData, period: ChartPeriod) -> str:
    if period == ChartPeriod.QUARTERS:
        quarter = (snapshot.month - 1) // 3 + 1
        return f"{snapshot.year}-Q{quarter}"
    if period == ChartPeriod.YEARS:
        return str(snapshot.year)
    return f"{snapshot.year}-{snapshot.month:02d}"


def build_chart_series(
    snapshots: Iterable[SnapshotData],
    period: ChartPeriod,
    metric: ChartMetric,
    today: date,
) -> list[ChartPoint]:
    """
    Build chart points from monthly snapshots.

    Quarter and year groups sum their months. YTD keeps the current
    year's months up to and including today's month.

    Args:
        snapshots: Member snapshots (any order)
        period: Chart grouping
        metric: Plotted field
        today: Reference date for YTD

    Returns:
        Points in chronological order
    """
    ordered = sorted(
        (s for s in snapshots if not s.is_empty),
        key=lambda s: (s.year, s.month),
    )

    if period == ChartPeriod.YTD:
        ordered = [
            s for s in ordered
            if s.year == today.year and s.month <= today.month
        ]

    totals: dict[str, Decimal] = {}
    for snapshot in ordered:
        label = _group_label(snapshot, period)
        totals[label] = totals.get(label, Decimal("0")) + metric_value(
            snapshot, metric
        )

    return [ChartPoint(label=label, value=value) for label, value in totals.items()]
