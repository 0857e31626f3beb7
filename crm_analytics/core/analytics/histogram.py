"""Equal-width histogram binning."""

from __future__ import annotations

import logging
import math
from typing import Iterable, List

import numpy as np

from crm_analytics.core.analytics.models import HistogramBin
from crm_analytics.core.analytics.samples import finite_array

logger = logging.getLogger(__name__)


class HistogramBinner:
    """Partition a sample into a fixed number of equal-width bins."""

    def __init__(self, bin_count: int = 10) -> None:
        if bin_count < 1:
            raise ValueError("bin_count must be >= 1.")
        self.bin_count = bin_count

    def bin(self, sample: Iterable[float], bin_count: int | None = None) -> List[HistogramBin]:
        """Count sample values per bin.

        Bin ``i`` covers ``[min + i*width, min + (i+1)*width)``; the last bin
        is closed and ends exactly at the sample maximum.

        Args:
            sample: Numeric observations. Non-finite entries are ignored.
            bin_count: Number of bins; defaults to the configured count.

        Returns:
            Ordered bins, or an empty list for an empty sample.
        """

        count = self.bin_count if bin_count is None else bin_count
        if count < 1:
            raise ValueError("bin_count must be >= 1.")

        values = finite_array(sample)
        if values.size == 0:
            return []

        lowest = float(np.min(values))
        highest = float(np.max(values))
        width = (highest - lowest) / count
        if not math.isfinite(width):
            width = highest / count - lowest / count

        bins: List[HistogramBin] = []
        for index in range(count):
            start = lowest + index * width
            last = index == count - 1
            end = highest if last else lowest + (index + 1) * width
            if last:
                members = (values >= start) & (values <= end)
            else:
                members = (values >= start) & (values < end)
            bins.append(
                HistogramBin(
                    range_start=start,
                    range_end=end,
                    count=int(np.count_nonzero(members)),
                    label=f"{start:.1f}-{end:.1f}",
                )
            )

        logger.debug("Histogram computed | bins=%d samples=%d width=%s", count, values.size, width)
        return bins


__all__ = ["HistogramBinner"]
