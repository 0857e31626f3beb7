"""Statistical analysis and adaptive-visualization engine."""

from crm_analytics.core.analytics.adaptive_domain import AdaptiveDomainEngine
from crm_analytics.core.analytics.correlation import CorrelationMatrixBuilder, pearson
from crm_analytics.core.analytics.descriptive import (
    StatisticsCalculator,
    mean,
    median,
    mode,
    percentile,
    standard_deviation,
    variance,
)
from crm_analytics.core.analytics.engine import AnalyticsEngine, build_engine
from crm_analytics.core.analytics.histogram import HistogramBinner
from crm_analytics.core.analytics.outliers import OutlierDetector
from crm_analytics.core.analytics.regression import TrendForecaster
from crm_analytics.core.analytics.trend import TrendAnalyzer
from crm_analytics.core.analytics.models import (
    AdaptiveDomain,
    AdaptiveNumber,
    AllPeriodComparisons,
    ComparisonPeriod,
    CorrelationBand,
    CorrelationMatrix,
    HistogramBin,
    PeriodComparison,
    PeriodTrend,
    Percentiles,
    Quartiles,
    RegressionResult,
    StatisticalSummary,
    TimeSeriesPoint,
    TrendDirection,
)

__all__ = [
    "AdaptiveDomainEngine",
    "AnalyticsEngine",
    "CorrelationMatrixBuilder",
    "HistogramBinner",
    "OutlierDetector",
    "StatisticsCalculator",
    "TrendAnalyzer",
    "TrendForecaster",
    "build_engine",
    "mean",
    "median",
    "mode",
    "pearson",
    "percentile",
    "standard_deviation",
    "variance",
    "AdaptiveDomain",
    "AdaptiveNumber",
    "AllPeriodComparisons",
    "ComparisonPeriod",
    "CorrelationBand",
    "CorrelationMatrix",
    "HistogramBin",
    "PeriodComparison",
    "PeriodTrend",
    "Percentiles",
    "Quartiles",
    "RegressionResult",
    "StatisticalSummary",
    "TimeSeriesPoint",
    "TrendDirection",
]
