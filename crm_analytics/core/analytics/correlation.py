"""Pairwise Pearson correlation across named metrics."""

from __future__ import annotations

import logging
import math
from typing import Iterable, Mapping, Sequence

import numpy as np

from crm_analytics.core.analytics.models import CorrelationBand, CorrelationMatrix
from crm_analytics.core.analytics.samples import finite_array, normalized

logger = logging.getLogger(__name__)


def _centered_coefficient(x: np.ndarray, y: np.ndarray) -> float | None:
    with np.errstate(over="ignore", invalid="ignore", under="ignore"):
        dx = x - np.mean(x)
        dy = y - np.mean(y)
        denominator = math.sqrt(float(np.sum(dx * dx))) * math.sqrt(float(np.sum(dy * dy)))
        if denominator == 0 or not math.isfinite(denominator):
            return None
        coefficient = float(np.sum(dx * dy)) / denominator
    return coefficient if math.isfinite(coefficient) else None


def pearson(first: Iterable[float], second: Iterable[float]) -> float:
    """Pearson coefficient, or 0.0 for empty, mismatched or flat series.

    Series too large or too small to square directly are rescaled to unit
    magnitude first; the coefficient does not depend on scale.
    """

    x = finite_array(first)
    y = finite_array(second)
    if x.size == 0 or x.size != y.size:
        return 0.0

    coefficient = _centered_coefficient(x, y)
    if coefficient is None:
        coefficient = _centered_coefficient(normalized(x)[0], normalized(y)[0])
    if coefficient is None:
        return 0.0
    return min(1.0, max(-1.0, coefficient))


class CorrelationMatrixBuilder:
    """Build correlation matrices for dashboard correlograms."""

    def correlate(
        self,
        series_by_metric: Mapping[str, Sequence[float]],
        metric_order: Sequence[str],
    ) -> CorrelationMatrix:
        """Correlate every pair of metrics in ``metric_order``.

        Args:
            series_by_metric: Metric name to values, aligned by row index.
            metric_order: Names to lay out along both matrix axes.

        Returns:
            CorrelationMatrix with a unit diagonal. Metrics missing from
            ``series_by_metric`` correlate to 0 with everything else.
        """

        metrics = list(metric_order)
        size = len(metrics)
        values = [[0.0] * size for _ in range(size)]
        for i, first in enumerate(metrics):
            values[i][i] = 1.0
            for j in range(i + 1, size):
                second = metrics[j]
                if first == second:
                    coefficient = 1.0
                elif first not in series_by_metric or second not in series_by_metric:
                    logger.debug("Correlation fallback | reason=unknown_metric pair=%s/%s", first, second)
                    coefficient = 0.0
                else:
                    coefficient = pearson(series_by_metric[first], series_by_metric[second])
                values[i][j] = coefficient
                values[j][i] = coefficient
        return CorrelationMatrix(metrics=metrics, values=values)

    @staticmethod
    def classify(coefficient: float) -> CorrelationBand:
        """Map a coefficient to its qualitative band."""

        if coefficient >= 0.7:
            return CorrelationBand.STRONG_POSITIVE
        if coefficient >= 0.3:
            return CorrelationBand.WEAK_POSITIVE
        if coefficient >= -0.3:
            return CorrelationBand.NEGLIGIBLE
        if coefficient >= -0.7:
            return CorrelationBand.WEAK_NEGATIVE
        return CorrelationBand.STRONG_NEGATIVE


__all__ = ["CorrelationMatrixBuilder", "pearson"]
