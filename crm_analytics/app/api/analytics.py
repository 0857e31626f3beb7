"""Analytics endpoints for the CRM analytics service."""

from datetime import datetime
from typing import Dict, List

from fastapi import APIRouter
from pydantic import BaseModel, Field

from crm_analytics.core.analytics import (
    AdaptiveDomain,
    AdaptiveNumber,
    AllPeriodComparisons,
    CorrelationBand,
    HistogramBin,
    PeriodComparison,
    RegressionResult,
    StatisticalSummary,
    TimeSeriesPoint,
    TrendDirection,
    build_engine,
)
from crm_analytics.core.config_loader import load_engine_config_or_default

router = APIRouter(prefix="/analytics", tags=["analytics"])

_engine = build_engine(load_engine_config_or_default())


class SampleInput(BaseModel):
    values: List[float]


class OutliersResponse(BaseModel):
    outliers: List[float]
    lower_fence: float
    upper_fence: float


class RegressionRequest(BaseModel):
    xs: List[float]
    ys: List[float]


class ForecastRequest(BaseModel):
    series: List[float]
    periods: int = Field(ge=0, le=10_000)


class ForecastResponse(BaseModel):
    forecast: List[float]


class CorrelationRequest(BaseModel):
    series: Dict[str, List[float]]
    metrics: List[str] | None = None


class CorrelationResponse(BaseModel):
    metrics: List[str]
    values: List[List[float]]
    bands: List[List[CorrelationBand]]


class DomainRequest(BaseModel):
    values: List[float]
    padding_percent: float | None = Field(default=None, ge=0.0)


class HistogramRequest(BaseModel):
    values: List[float]
    bin_count: int | None = Field(default=None, ge=1, le=1_000)


class HistogramResponse(BaseModel):
    bins: List[HistogramBin]


class TrendResponse(BaseModel):
    trend: TrendDirection


class PeriodComparisonRequest(BaseModel):
    current: List[float]
    previous: List[float]


class AllPeriodsRequest(BaseModel):
    points: List[TimeSeriesPoint]
    reference: datetime


class FormatRequest(BaseModel):
    value: float


@router.post("/summary", response_model=StatisticalSummary)
def summarize(payload: SampleInput) -> StatisticalSummary:
    """Compute the statistical summary of a sample."""

    return _engine.statistics.summarize(payload.values)


@router.post("/outliers", response_model=OutliersResponse)
def detect_outliers(payload: SampleInput) -> OutliersResponse:
    """Flag values outside the Tukey fences."""

    lower, upper = _engine.outliers.fences(payload.values)
    return OutliersResponse(outliers=_engine.outliers.detect(payload.values), lower_fence=lower, upper_fence=upper)


@router.post("/regression", response_model=RegressionResult)
def fit_regression(payload: RegressionRequest) -> RegressionResult:
    """Fit a least-squares trend line."""

    return _engine.forecaster.fit(payload.xs, payload.ys)


@router.post("/forecast", response_model=ForecastResponse)
def forecast(payload: ForecastRequest) -> ForecastResponse:
    """Extrapolate a series over the requested number of periods."""

    return ForecastResponse(forecast=_engine.forecaster.forecast(payload.series, payload.periods))


@router.post("/correlation", response_model=CorrelationResponse)
def correlate(payload: CorrelationRequest) -> CorrelationResponse:
    """Build the correlation matrix for the given metrics (all series by default)."""

    metrics = payload.metrics if payload.metrics is not None else list(payload.series)
    matrix = _engine.correlations.correlate(payload.series, metrics)
    bands = [[_engine.correlations.classify(value) for value in row] for row in matrix.values]
    return CorrelationResponse(metrics=matrix.metrics, values=matrix.values, bands=bands)


@router.post("/domain", response_model=AdaptiveDomain)
def compute_domain(payload: DomainRequest) -> AdaptiveDomain:
    """Compute the adaptive axis domain for a set of values."""

    return _engine.domains.compute_domain(payload.values, payload.padding_percent)


@router.post("/histogram", response_model=HistogramResponse)
def compute_histogram(payload: HistogramRequest) -> HistogramResponse:
    """Bin a sample into equal-width buckets."""

    return HistogramResponse(bins=_engine.histograms.bin(payload.values, payload.bin_count))


@router.post("/trend", response_model=TrendResponse)
def classify_trend(payload: SampleInput) -> TrendResponse:
    """Classify the direction of a series."""

    return TrendResponse(trend=_engine.trends.classify_trend(payload.values))


@router.post("/period-comparison", response_model=PeriodComparison)
def compare_periods(payload: PeriodComparisonRequest) -> PeriodComparison:
    """Compare the totals of two periods."""

    return _engine.trends.compare_periods(payload.current, payload.previous)


@router.post("/period-comparison/all", response_model=AllPeriodComparisons)
def compare_all_periods(payload: AllPeriodsRequest) -> AllPeriodComparisons:
    """Week, month and year comparisons relative to a reference date."""

    return _engine.trends.compare_all_periods(payload.points, payload.reference)


@router.post("/format", response_model=AdaptiveNumber)
def format_value(payload: FormatRequest) -> AdaptiveNumber:
    """Abbreviate a value with K/M/B units."""

    return _engine.domains.format_adaptive(payload.value)


__all__ = ["router"]
