"""Trend direction and period-over-period comparisons for KPI cards."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Dict, Iterable, List, Sequence

import numpy as np
import pandas as pd

from crm_analytics.core.analytics.models import (
    AllPeriodComparisons,
    ComparisonPeriod,
    PeriodComparison,
    PeriodTrend,
    TimeSeriesPoint,
    TrendDirection,
)
from crm_analytics.core.analytics.samples import clamp_finite, finite_array, overflow_safe

logger = logging.getLogger(__name__)

PERIOD_OFFSETS: Dict[ComparisonPeriod, pd.DateOffset] = {
    ComparisonPeriod.WOW: pd.DateOffset(weeks=1),
    ComparisonPeriod.MOM: pd.DateOffset(months=1),
    ComparisonPeriod.YOY: pd.DateOffset(years=1),
}


def _to_utc(value: datetime | pd.Timestamp) -> pd.Timestamp:
    stamp = pd.Timestamp(value)
    if stamp.tzinfo is None:
        return stamp.tz_localize("UTC")
    return stamp.tz_convert("UTC")


class TrendAnalyzer:
    """Classify series direction and compare totals across periods."""

    def __init__(self, stable_threshold_pct: float = 5.0) -> None:
        self.stable_threshold_pct = stable_threshold_pct

    def classify_trend(self, sample: Iterable[float]) -> TrendDirection:
        """Compare the mean of the second half of ``sample`` against the first half."""

        values = finite_array(sample)
        if values.size < 2:
            return TrendDirection.STABLE

        split = values.size // 2
        first_mean = overflow_safe(np.mean, values[:split])
        second_mean = overflow_safe(np.mean, values[split:])
        if first_mean == 0:
            logger.debug("Trend fallback | reason=zero_baseline")
            return TrendDirection.STABLE

        change = (second_mean - first_mean) / abs(first_mean) * 100.0
        if abs(change) < self.stable_threshold_pct:
            return TrendDirection.STABLE
        return TrendDirection.INCREASING if change > 0 else TrendDirection.DECREASING

    def compare_periods(self, current: Iterable[float], previous: Iterable[float]) -> PeriodComparison:
        """Compare the totals of two periods."""

        current_sum = overflow_safe(np.sum, finite_array(current))
        previous_sum = overflow_safe(np.sum, finite_array(previous))
        change = clamp_finite(current_sum - previous_sum)
        change_percent = 0.0 if previous_sum == 0 else clamp_finite(change / previous_sum * 100.0)

        trend = PeriodTrend.STABLE
        if change_percent > self.stable_threshold_pct:
            trend = PeriodTrend.UP
        elif change_percent < -self.stable_threshold_pct:
            trend = PeriodTrend.DOWN

        return PeriodComparison(
            current=current_sum,
            previous=previous_sum,
            change=change,
            change_percent=change_percent,
            trend=trend,
        )

    @staticmethod
    def filter_by_period(
        points: Sequence[TimeSeriesPoint],
        period: ComparisonPeriod,
        reference: datetime | pd.Timestamp,
    ) -> List[TimeSeriesPoint]:
        """Keep points strictly between ``reference - period`` and ``reference``."""

        end = _to_utc(reference)
        start = end - PERIOD_OFFSETS[ComparisonPeriod(period)]
        return [point for point in points if start < _to_utc(point.date) < end]

    def compare_all_periods(
        self,
        points: Sequence[TimeSeriesPoint],
        reference: datetime | pd.Timestamp,
    ) -> AllPeriodComparisons:
        """Week-over-week, month-over-month and year-over-year comparisons."""

        reference_ts = _to_utc(reference)
        results: Dict[str, PeriodComparison] = {}
        for period, offset in PERIOD_OFFSETS.items():
            current = self.filter_by_period(points, period, reference_ts)
            previous = self.filter_by_period(points, period, reference_ts - offset)
            results[period.name.lower()] = self.compare_periods(
                [point.value for point in current],
                [point.value for point in previous],
            )
        return AllPeriodComparisons(**results)


__all__ = ["TrendAnalyzer", "PERIOD_OFFSETS"]
