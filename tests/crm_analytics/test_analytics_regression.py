import math

import pytest

from crm_analytics.core.analytics.regression import TrendForecaster


def test_fit_perfect_line() -> None:
    result = TrendForecaster.fit([0, 1, 2, 3], [1, 3, 5, 7])

    assert result.slope == pytest.approx(2.0)
    assert result.intercept == pytest.approx(1.0)
    assert result.r_squared == pytest.approx(1.0)
    assert result.predict(10) == pytest.approx(21.0)


def test_fit_noisy_line_has_partial_r_squared() -> None:
    result = TrendForecaster.fit([1, 2, 3, 4, 5], [2, 4, 5, 4, 5])

    assert result.slope == pytest.approx(0.6)
    assert result.intercept == pytest.approx(2.2)
    assert result.r_squared == pytest.approx(0.6)


@pytest.mark.parametrize(
    ("xs", "ys"),
    [
        ([], []),
        ([1.0, 2.0], [1.0]),
        ([2.0, 2.0, 2.0], [1.0, 2.0, 3.0]),
    ],
)
def test_degenerate_fits_return_zeros(xs, ys) -> None:
    result = TrendForecaster.fit(xs, ys)

    assert (result.slope, result.intercept, result.r_squared) == (0.0, 0.0, 0.0)


def test_constant_y_has_zero_r_squared() -> None:
    result = TrendForecaster.fit([0, 1, 2], [5, 5, 5])

    assert result.slope == pytest.approx(0.0)
    assert result.intercept == pytest.approx(5.0)
    assert result.r_squared == 0.0


def test_fit_drops_non_finite_pairs() -> None:
    result = TrendForecaster.fit([0, 1, float("nan"), 3], [1, 3, 100, 7])

    assert result.slope == pytest.approx(2.0)
    assert result.intercept == pytest.approx(1.0)


def test_forecast_extends_trend() -> None:
    forecaster = TrendForecaster()

    projected = forecaster.forecast([1, 3, 5, 7], 3)

    assert projected == pytest.approx([9.0, 11.0, 13.0])


def test_forecast_short_series() -> None:
    forecaster = TrendForecaster()

    assert forecaster.forecast([4.0], 3) == [4.0, 4.0, 4.0]
    assert forecaster.forecast([], 2) == [0.0, 0.0]
    assert forecaster.forecast([1.0, 2.0], 0) == []
    assert all(math.isfinite(value) for value in forecaster.forecast([3.0, 3.0, 3.0], 4))


@pytest.mark.parametrize("x_value", [0.7, 1.1])
@pytest.mark.parametrize("n", [3, 5, 7])
def test_identical_fractional_x_values_are_degenerate(x_value: float, n: int) -> None:
    result = TrendForecaster.fit([x_value] * n, list(range(1, n + 1)))

    assert result.slope == 0.0
    assert result.intercept == 0.0
    assert result.r_squared == 0.0


def test_r_squared_stays_within_unit_interval() -> None:
    result = TrendForecaster.fit([1e-3, 2e-3, 3e-3, 4e-3], [5.0, 1.0, 4.0, 2.0])

    assert 0.0 <= result.r_squared <= 1.0


def test_forecast_keeps_positions_of_missing_values() -> None:
    forecaster = TrendForecaster()

    assert forecaster.forecast([1, float("nan"), 5, 7], 1) == pytest.approx([9.0])
    assert forecaster.forecast([float("nan"), 4.0], 2) == [4.0, 4.0]
