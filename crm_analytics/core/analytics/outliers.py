"""Tukey-fence outlier detection."""

from __future__ import annotations

import logging
from typing import Iterable, List, Tuple

from crm_analytics.core.analytics.samples import clamp_finite, finite_array, safe_percentiles

logger = logging.getLogger(__name__)


class OutlierDetector:
    """Flag values beyond ``multiplier`` interquartile ranges from Q1/Q3."""

    def __init__(self, iqr_multiplier: float = 1.5) -> None:
        if iqr_multiplier < 0:
            raise ValueError("iqr_multiplier must be non-negative.")
        self.iqr_multiplier = iqr_multiplier

    def fences(self, sample: Iterable[float]) -> Tuple[float, float]:
        """Return the (lower, upper) fences; (0.0, 0.0) for an empty sample."""

        array = finite_array(sample)
        if array.size == 0:
            return 0.0, 0.0
        q1, q3 = safe_percentiles(array, (25, 75))
        iqr = clamp_finite(q3 - q1)
        spread = clamp_finite(self.iqr_multiplier * iqr)
        return clamp_finite(q1 - spread), clamp_finite(q3 + spread)

    def detect(self, sample: Iterable[float]) -> List[float]:
        """Return the outlying values in their original order."""

        array = finite_array(sample)
        if array.size == 0:
            return []
        lower, upper = self.fences(array)
        flagged = array[(array < lower) | (array > upper)]
        if flagged.size:
            logger.debug("Outliers detected | count=%d lower=%s upper=%s", flagged.size, lower, upper)
        return [float(value) for value in flagged]


__all__ = ["OutlierDetector"]
