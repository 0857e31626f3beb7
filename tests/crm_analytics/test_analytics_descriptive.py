import math

import pytest
from pydantic import ValidationError

from crm_analytics.core.analytics.descriptive import (
    StatisticsCalculator,
    mean,
    median,
    mode,
    percentile,
    standard_deviation,
    variance,
)
from crm_analytics.core.analytics.models import StatisticalSummary


def test_summarize_basic_sample() -> None:
    summary = StatisticsCalculator().summarize([1.0, 2.0, 3.0, 4.0])

    assert summary.mean == pytest.approx(2.5)
    assert summary.median == pytest.approx(2.5)
    assert summary.mode is None
    assert summary.variance == pytest.approx(1.25)
    assert summary.standard_deviation == pytest.approx(1.11803, rel=1e-4)
    assert summary.min == 1.0
    assert summary.max == 4.0
    assert summary.range == 3.0
    assert summary.quartiles.q1 == pytest.approx(1.75)
    assert summary.quartiles.q2 == pytest.approx(2.5)
    assert summary.quartiles.q3 == pytest.approx(3.25)
    assert summary.percentiles.p10 == pytest.approx(1.3)
    assert summary.percentiles.p99 == pytest.approx(3.97)
    assert summary.outliers == []


def test_summarize_empty_sample_returns_defaults() -> None:
    summary = StatisticsCalculator().summarize([])

    assert summary == StatisticalSummary()
    assert summary.mean == 0.0
    assert summary.standard_deviation == 0.0
    assert summary.mode is None
    assert summary.quartiles.q3 == 0.0
    assert summary.percentiles.p95 == 0.0
    assert summary.outliers == []


def test_summarize_ignores_non_finite_values() -> None:
    summary = StatisticsCalculator().summarize([1.0, float("nan"), 3.0, float("inf"), -float("inf")])

    assert summary.mean == pytest.approx(2.0)
    assert summary.min == 1.0
    assert summary.max == 3.0
    for value in (summary.mean, summary.variance, summary.standard_deviation, summary.range):
        assert math.isfinite(value)


def test_summarize_is_idempotent_and_frozen() -> None:
    calculator = StatisticsCalculator()
    sample = [5.0, 1.0, 4.0, 4.0, 9.0]

    first = calculator.summarize(sample)
    second = calculator.summarize(sample)

    assert first == second
    assert sample == [5.0, 1.0, 4.0, 4.0, 9.0]
    with pytest.raises(ValidationError):
        first.mean = 0.0


def test_median_even_and_odd() -> None:
    assert median([1, 2, 3, 4]) == 2.5
    assert median([1, 3, 5]) == 3
    assert median([5, 1, 3]) == 3
    assert median([]) == 0.0


def test_mode_requires_unique_maximum() -> None:
    assert mode([1, 2, 2, 3]) == 2.0
    assert mode([1, 1, 2, 2]) is None
    assert mode([1, 2, 3]) is None
    assert mode([7]) == 7.0
    assert mode([]) is None


def test_population_dispersion() -> None:
    sample = [2, 4, 4, 4, 5, 5, 7, 9]

    assert mean(sample) == pytest.approx(5.0)
    assert variance(sample) == pytest.approx(4.0)
    assert standard_deviation(sample) == pytest.approx(2.0)
    assert variance([]) == 0.0
    assert standard_deviation([]) == 0.0


def test_percentile_boundaries_and_interpolation() -> None:
    sample = [15.0, 20.0, 35.0, 40.0, 50.0]

    assert percentile(sample, 0) == min(sample)
    assert percentile(sample, 100) == max(sample)
    assert percentile(sample, 40) == pytest.approx(29.0)
    assert percentile(sample, 150) == max(sample)
    assert percentile(sample, -10) == min(sample)
    assert percentile([], 50) == 0.0


def test_summarize_near_float_limit_stays_finite() -> None:
    summary = StatisticsCalculator().summarize([1e308, 1e308])

    assert summary.mean == pytest.approx(1e308)
    assert summary.median == pytest.approx(1e308)
    assert summary.variance == 0.0
    assert summary.quartiles.q3 == pytest.approx(1e308)

    spread = StatisticsCalculator().summarize([-1e308, 1e308])
    assert math.isfinite(spread.range)
    assert math.isfinite(spread.variance)
    assert spread.standard_deviation == pytest.approx(1e308)
    assert spread.percentiles.p50 == pytest.approx(0.0)
