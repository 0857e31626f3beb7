"""Shared analytics domain models."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class _FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class Quartiles(_FrozenModel):
    """First, second and third quartile of a sample."""

    q1: float = 0.0
    q2: float = 0.0
    q3: float = 0.0


class Percentiles(_FrozenModel):
    """Fixed percentile ladder used by dashboard tooltips and boxplots."""

    p10: float = 0.0
    p25: float = 0.0
    p50: float = 0.0
    p75: float = 0.0
    p90: float = 0.0
    p95: float = 0.0
    p99: float = 0.0


class StatisticalSummary(_FrozenModel):
    """Descriptive statistics for a single numeric sample."""

    mean: float = 0.0
    median: float = 0.0
    mode: Optional[float] = None
    standard_deviation: float = 0.0
    variance: float = 0.0
    min: float = 0.0
    max: float = 0.0
    range: float = 0.0
    quartiles: Quartiles = Field(default_factory=Quartiles)
    percentiles: Percentiles = Field(default_factory=Percentiles)
    outliers: List[float] = Field(default_factory=list)


class RegressionResult(_FrozenModel):
    """Least-squares trend line."""

    slope: float = 0.0
    intercept: float = 0.0
    r_squared: float = 0.0

    def predict(self, x: float) -> float:
        return self.slope * x + self.intercept


class CorrelationBand(str, Enum):
    """Qualitative strength of a correlation coefficient."""

    STRONG_POSITIVE = "strong_positive"
    WEAK_POSITIVE = "weak_positive"
    NEGLIGIBLE = "negligible"
    WEAK_NEGATIVE = "weak_negative"
    STRONG_NEGATIVE = "strong_negative"


class CorrelationMatrix(_FrozenModel):
    """Square Pearson correlation matrix indexed by metric name."""

    metrics: List[str] = Field(default_factory=list)
    values: List[List[float]] = Field(default_factory=list)

    def coefficient(self, first: str, second: str) -> float:
        """Return the coefficient for a pair of metric names."""

        i = self.metrics.index(first)
        j = self.metrics.index(second)
        return self.values[i][j]


class AdaptiveDomain(_FrozenModel):
    """Axis bounds plus display scale metadata for a renderer."""

    min: float = 0.0
    max: float = 100.0
    use_adaptive_scale: bool = False
    scale_factor: float = 1.0
    unit_label: str = ""


class AdaptiveNumber(_FrozenModel):
    """A single value abbreviated for display (e.g. 12.3K)."""

    value: float
    unit: str
    formatted: str
    scale: float


class HistogramBin(_FrozenModel):
    """One equal-width histogram bucket."""

    range_start: float
    range_end: float
    count: int
    label: str


class TrendDirection(str, Enum):
    INCREASING = "increasing"
    DECREASING = "decreasing"
    STABLE = "stable"


class PeriodTrend(str, Enum):
    UP = "up"
    DOWN = "down"
    STABLE = "stable"


class ComparisonPeriod(str, Enum):
    WOW = "WoW"
    MOM = "MoM"
    YOY = "YoY"


class TimeSeriesPoint(_FrozenModel):
    date: datetime
    value: float


class PeriodComparison(_FrozenModel):
    """Totals of two periods and the relative change between them."""

    current: float = 0.0
    previous: float = 0.0
    change: float = 0.0
    change_percent: float = 0.0
    trend: PeriodTrend = PeriodTrend.STABLE


class AllPeriodComparisons(_FrozenModel):
    wow: PeriodComparison
    mom: PeriodComparison
    yoy: PeriodComparison


__all__ = [
    "Quartiles",
    "Percentiles",
    "StatisticalSummary",
    "RegressionResult",
    "CorrelationBand",
    "CorrelationMatrix",
    "AdaptiveDomain",
    "AdaptiveNumber",
    "HistogramBin",
    "TrendDirection",
    "PeriodTrend",
    "ComparisonPeriod",
    "TimeSeriesPoint",
    "PeriodComparison",
    "AllPeriodComparisons",
]
