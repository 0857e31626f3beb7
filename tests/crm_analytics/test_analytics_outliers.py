import math

import pytest

from crm_analytics.core.analytics.descriptive import StatisticsCalculator
from crm_analytics.core.analytics.outliers import OutlierDetector


def test_tukey_fences_flag_only_extreme_value() -> None:
    sample = [1, 2, 2, 3, 3, 3, 4, 4, 100]
    detector = OutlierDetector()

    lower, upper = detector.fences(sample)

    assert lower == pytest.approx(-1.0)
    assert upper == pytest.approx(7.0)
    assert detector.detect(sample) == [100.0]


def test_summary_reports_quartiles_and_outliers() -> None:
    summary = StatisticsCalculator().summarize([1, 2, 2, 3, 3, 3, 4, 4, 100])

    assert summary.quartiles.q1 == pytest.approx(2.0)
    assert summary.quartiles.q3 == pytest.approx(4.0)
    assert summary.mode == 3.0
    assert summary.outliers == [100.0]


def test_outliers_keep_input_order() -> None:
    sample = [100, 1, 2, 2, 3, 3, 3, 4, 4, -100]

    assert OutlierDetector().detect(sample) == [100.0, -100.0]


def test_multiplier_controls_fence_width() -> None:
    sample = [1, 2, 3, 4, 5]

    assert OutlierDetector(iqr_multiplier=1.5).detect(sample) == []
    assert OutlierDetector(iqr_multiplier=0.0).detect(sample) == [1.0, 5.0]


def test_empty_and_invalid_inputs() -> None:
    detector = OutlierDetector()

    assert detector.detect([]) == []
    assert detector.fences([]) == (0.0, 0.0)
    with pytest.raises(ValueError):
        OutlierDetector(iqr_multiplier=-1.0)


def test_fences_stay_finite_for_extreme_values() -> None:
    lower, upper = OutlierDetector().fences([-1e308, 0.0, 1e308])

    assert math.isfinite(lower)
    assert math.isfinite(upper)
