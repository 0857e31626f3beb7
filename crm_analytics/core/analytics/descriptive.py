"""Descriptive statistics for dashboard samples."""

from __future__ import annotations

import logging
from collections import Counter
from typing import Iterable, Optional

import numpy as np

from crm_analytics.core.analytics.models import Percentiles, Quartiles, StatisticalSummary
from crm_analytics.core.analytics.outliers import OutlierDetector
from crm_analytics.core.analytics.samples import clamp_finite, finite_array, overflow_safe, safe_percentiles

logger = logging.getLogger(__name__)

PERCENTILE_LEVELS = (10, 25, 50, 75, 90, 95, 99)


def mean(values: Iterable[float]) -> float:
    array = finite_array(values)
    if array.size == 0:
        return 0.0
    return overflow_safe(np.mean, array)


def median(values: Iterable[float]) -> float:
    array = finite_array(values)
    if array.size == 0:
        return 0.0
    return overflow_safe(np.median, array)


def mode(values: Iterable[float]) -> Optional[float]:
    """Return the single most frequent value, or None when the maximum is shared."""

    array = finite_array(values)
    if array.size == 0:
        return None
    ranked = Counter(array.tolist()).most_common(2)
    if len(ranked) > 1 and ranked[0][1] == ranked[1][1]:
        return None
    return float(ranked[0][0])


def variance(values: Iterable[float]) -> float:
    """Population variance (divisor N)."""

    array = finite_array(values)
    if array.size == 0:
        return 0.0
    return overflow_safe(np.var, array, power=2)


def standard_deviation(values: Iterable[float]) -> float:
    """Population standard deviation (divisor N)."""

    array = finite_array(values)
    if array.size == 0:
        return 0.0
    return overflow_safe(np.std, array)


def percentile(values: Iterable[float], level: float) -> float:
    """Linear-interpolation percentile.

    The fractional rank ``level / 100 * (n - 1)`` is interpolated between the
    two bracketing order statistics. ``level`` is clamped into [0, 100].
    """

    array = finite_array(values)
    if array.size == 0:
        return 0.0
    level = min(max(float(level), 0.0), 100.0)
    return safe_percentiles(array, [level])[0]


class StatisticsCalculator:
    """Compute the full statistical summary of a numeric sample."""

    def __init__(self, outlier_detector: OutlierDetector | None = None) -> None:
        self.outlier_detector = outlier_detector or OutlierDetector()

    def summarize(self, sample: Iterable[float]) -> StatisticalSummary:
        """Return descriptive statistics for the provided sample.

        Args:
            sample: Numeric observations. Non-finite entries are ignored.

        Returns:
            StatisticalSummary. An empty sample yields zeroed fields, a null
            mode and no outliers. Results that would overflow
            are computed on rescaled values and stay finite.
        """

        array = finite_array(sample)
        if array.size == 0:
            logger.debug("Empty sample summarized | returning defaults")
            return StatisticalSummary()

        values = array.tolist()
        levels = safe_percentiles(array, PERCENTILE_LEVELS)
        by_level = {level: value for level, value in zip(PERCENTILE_LEVELS, levels)}
        lowest = float(np.min(array))
        highest = float(np.max(array))

        return StatisticalSummary(
            mean=overflow_safe(np.mean, array),
            median=overflow_safe(np.median, array),
            mode=mode(values),
            standard_deviation=overflow_safe(np.std, array),
            variance=overflow_safe(np.var, array, power=2),
            min=lowest,
            max=highest,
            range=clamp_finite(highest - lowest),
            quartiles=Quartiles(q1=by_level[25], q2=by_level[50], q3=by_level[75]),
            percentiles=Percentiles(**{f"p{level}": value for level, value in by_level.items()}),
            outliers=self.outlier_detector.detect(values),
        )


__all__ = [
    "PERCENTILE_LEVELS",
    "StatisticsCalculator",
    "mean",
    "median",
    "mode",
    "variance",
    "standard_deviation",
    "percentile",
]
