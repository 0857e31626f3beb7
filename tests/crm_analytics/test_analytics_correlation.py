import pytest

from crm_analytics.core.analytics.correlation import CorrelationMatrixBuilder, pearson
from crm_analytics.core.analytics.models import CorrelationBand


SERIES = {
    "deals": [1.0, 2.0, 3.0, 4.0],
    "revenue": [2.0, 4.0, 6.0, 8.0],
    "churn": [4.0, 3.0, 2.0, 1.0],
    "flat": [5.0, 5.0, 5.0, 5.0],
    "short": [1.0, 2.0, 3.0],
}


def test_correlation_matrix_values() -> None:
    order = list(SERIES)

    matrix = CorrelationMatrixBuilder().correlate(SERIES, order)

    assert matrix.metrics == order
    assert matrix.coefficient("deals", "revenue") == pytest.approx(1.0)
    assert matrix.coefficient("deals", "churn") == pytest.approx(-1.0)
    assert matrix.coefficient("deals", "flat") == 0.0
    assert matrix.coefficient("deals", "short") == 0.0


def test_correlation_matrix_diagonal_and_symmetry() -> None:
    order = list(SERIES)

    matrix = CorrelationMatrixBuilder().correlate(SERIES, order)

    size = len(order)
    for i in range(size):
        assert matrix.values[i][i] == 1.0
        for j in range(size):
            assert matrix.values[i][j] == matrix.values[j][i]


def test_unknown_metric_and_empty_order() -> None:
    builder = CorrelationMatrixBuilder()

    matrix = builder.correlate(SERIES, ["deals", "missing"])
    assert matrix.values == [[1.0, 0.0], [0.0, 1.0]]

    empty = builder.correlate(SERIES, [])
    assert empty.metrics == []
    assert empty.values == []


def test_pearson_fallbacks() -> None:
    assert pearson([], []) == 0.0
    assert pearson([1, 2, 3], [1, 2]) == 0.0
    assert pearson([1, 1, 1], [1, 2, 3]) == 0.0
    assert pearson([1, 2, 3], [1, 2, 4]) == pytest.approx(0.98198, rel=1e-4)


@pytest.mark.parametrize(
    ("value", "band"),
    [
        (1.0, CorrelationBand.STRONG_POSITIVE),
        (0.7, CorrelationBand.STRONG_POSITIVE),
        (0.69, CorrelationBand.WEAK_POSITIVE),
        (0.3, CorrelationBand.WEAK_POSITIVE),
        (0.0, CorrelationBand.NEGLIGIBLE),
        (-0.3, CorrelationBand.NEGLIGIBLE),
        (-0.31, CorrelationBand.WEAK_NEGATIVE),
        (-0.7, CorrelationBand.WEAK_NEGATIVE),
        (-0.71, CorrelationBand.STRONG_NEGATIVE),
    ],
)
def test_classify_bands(value: float, band: CorrelationBand) -> None:
    assert CorrelationMatrixBuilder.classify(value) is band


def test_pearson_handles_extreme_magnitudes() -> None:
    huge = [1e200, 2e200, 3e200]
    tiny = [1e-200, 2e-200, 3e-200]

    assert pearson(huge, huge) == pytest.approx(1.0)
    assert pearson(huge, list(reversed(huge))) == pytest.approx(-1.0)
    assert pearson(tiny, tiny) == pytest.approx(1.0)
    assert pearson([1e308, 1e308], [1.0, 2.0]) == 0.0
