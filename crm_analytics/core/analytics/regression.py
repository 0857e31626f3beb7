"""Least-squares trend fitting and forecasting."""

from __future__ import annotations

import logging
import math
from typing import Iterable, List, Sequence

import numpy as np

from crm_analytics.core.analytics.models import RegressionResult
from crm_analytics.core.analytics.samples import finite_pairs

logger = logging.getLogger(__name__)


class TrendForecaster:
    """Fit straight lines to paired data and extrapolate them."""

    @staticmethod
    def fit(xs: Sequence[float], ys: Sequence[float]) -> RegressionResult:
        """Fit ``y = slope * x + intercept`` by ordinary least squares.

        Args:
            xs: Independent values.
            ys: Dependent values, paired with ``xs`` by position.

        Returns:
            RegressionResult. Mismatched lengths, empty input, identical x
            values and fits that overflow yield slope, intercept and R² of 0.
            R² is 0 when y is constant and is kept within [0, 1].
        """

        pairs = finite_pairs(xs, ys)
        if pairs is None:
            logger.debug("Regression skipped | reason=length_mismatch")
            return RegressionResult()
        x, y = pairs
        n = x.size
        if n == 0:
            return RegressionResult()
        if np.ptp(x) == 0:
            logger.debug("Regression skipped | reason=constant_x n=%d", n)
            return RegressionResult()

        with np.errstate(over="ignore", invalid="ignore"):
            x_mean = float(np.mean(x))
            y_mean = float(np.mean(y))
            dx = x - x_mean
            dy = y - y_mean
            sxx = float(np.sum(dx * dx))
            sxy = float(np.sum(dx * dy))
            slope = sxy / sxx if sxx else math.nan
            intercept = y_mean - slope * x_mean
            if not (math.isfinite(slope) and math.isfinite(intercept)):
                logger.debug("Regression skipped | reason=non_finite_fit n=%d", n)
                return RegressionResult()

            ss_res = float(np.sum((y - (slope * x + intercept)) ** 2))
            ss_tot = float(np.sum(dy * dy))
        if ss_tot == 0 or not math.isfinite(ss_tot):
            r_squared = 0.0
        else:
            r_squared = 1.0 - ss_res / ss_tot
            r_squared = min(1.0, max(0.0, r_squared)) if math.isfinite(r_squared) else 0.0

        return RegressionResult(slope=slope, intercept=intercept, r_squared=r_squared)

    def forecast(self, series: Iterable[float], periods: int) -> List[float]:
        """Extrapolate ``series`` (indexed 0..N-1) over the next ``periods`` indices.

        Non-finite entries are skipped but keep their slot, so the remaining
        points are fitted at their original positions.
        """

        if periods <= 0:
            return []
        history = np.asarray(list(series), dtype=float)
        positions, values = finite_pairs(np.arange(history.size, dtype=float), history)
        if values.size < 2:
            seed = float(values[0]) if values.size else 0.0
            return [seed] * periods

        regression = self.fit(positions, values)
        start = history.size
        return [regression.predict(float(x)) for x in range(start, start + periods)]


__all__ = ["TrendForecaster"]
