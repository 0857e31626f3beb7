"""Helpers for turning raw numeric input into clean samples."""

from __future__ import annotations

import math
import sys
from typing import Callable, Iterable, Sequence, Tuple

import numpy as np


def finite_array(values: Iterable[float]) -> np.ndarray:
    """Return a float array holding only the finite entries of ``values``."""

    array = np.asarray(list(values), dtype=float)
    if array.size == 0:
        return array
    return array[np.isfinite(array)]


def finite_pairs(xs: Iterable[float], ys: Iterable[float]) -> Tuple[np.ndarray, np.ndarray] | None:
    """Drop pairs where either coordinate is not finite.

    Returns None when the two inputs have different lengths, since no pairing
    can be inferred in that case.
    """

    x_arr = np.asarray(list(xs), dtype=float)
    y_arr = np.asarray(list(ys), dtype=float)
    if x_arr.shape != y_arr.shape:
        return None
    if x_arr.size == 0:
        return x_arr, y_arr
    mask = np.isfinite(x_arr) & np.isfinite(y_arr)
    return x_arr[mask], y_arr[mask]


def clamp_finite(value: float) -> float:
    """Map an overflowed result back into the representable float range; NaN becomes 0."""

    if math.isnan(value):
        return 0.0
    return float(min(max(value, -sys.float_info.max), sys.float_info.max))


def normalized(array: np.ndarray) -> Tuple[np.ndarray, float]:
    """Divide by the largest absolute value so sums and products cannot overflow."""

    if array.size == 0:
        return array, 1.0
    scale = float(np.max(np.abs(array)))
    if scale == 0:
        return array, 1.0
    return array / scale, scale


def overflow_safe(reducer: Callable[[np.ndarray], float], array: np.ndarray, power: int = 1) -> float:
    """Apply ``reducer``, retrying on the normalized array when the direct result overflows.

    ``power`` is the degree of the statistic in the data units (2 for variance).
    """

    with np.errstate(over="ignore", invalid="ignore"):
        result = float(reducer(array))
        if math.isfinite(result):
            return result
        unit, scale = normalized(array)
        result = float(reducer(unit))
        for _ in range(power):
            result *= scale
    return clamp_finite(result)


def safe_percentiles(array: np.ndarray, levels: Sequence[float]) -> list[float]:
    """Linear-interpolation percentiles that stay finite for extreme magnitudes."""

    with np.errstate(over="ignore", invalid="ignore"):
        values = np.percentile(array, levels, method="linear")
        if not np.all(np.isfinite(values)):
            unit, scale = normalized(array)
            values = np.percentile(unit, levels, method="linear") * scale
    return [clamp_finite(float(value)) for value in np.atleast_1d(values)]


__all__ = [
    "finite_array",
    "finite_pairs",
    "clamp_finite",
    "normalized",
    "overflow_safe",
    "safe_percentiles",
]
