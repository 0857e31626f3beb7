"""Axis domain selection for values spanning very different magnitudes."""

from __future__ import annotations

import logging
import math
from typing import Iterable, Tuple

import numpy as np

from crm_analytics.core.analytics.models import AdaptiveDomain, AdaptiveNumber
from crm_analytics.core.analytics.samples import clamp_finite, finite_array

logger = logging.getLogger(__name__)

SCALE_LADDER: Tuple[Tuple[float, str], ...] = (
    (1_000_000_000.0, "B"),
    (1_000_000.0, "M"),
    (1_000.0, "K"),
)

# Quotients are rounded before ceil/floor so that 0.3 / 0.1 is treated as 3.
_QUOTIENT_DIGITS = 9


def magnitude(value: float) -> float:
    """Largest power of ten not exceeding ``abs(value)``; 0.0 for zero."""

    if value == 0:
        return 0.0
    return 10.0 ** math.floor(math.log10(abs(value)))


def scale_for(value: float) -> Tuple[float, str]:
    """Return the (scale factor, unit label) used to abbreviate ``value``."""

    absolute = abs(value)
    for scale, unit in SCALE_LADDER:
        if absolute >= scale:
            return scale, unit
    return 1.0, ""


def format_plain(value: float) -> str:
    text = f"{value:,.3f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


class AdaptiveDomainEngine:
    """Choose nice axis bounds and a display scale for a set of values.

    The engine only describes how labels should be abbreviated; it never
    rescales the values it is given.
    """

    def __init__(
        self,
        padding_percent: float = 0.1,
        adaptive_threshold: float = 1000.0,
        headroom_factor: float = 1.2,
    ) -> None:
        self.padding_percent = padding_percent
        self.adaptive_threshold = adaptive_threshold
        self.headroom_factor = headroom_factor

    def compute_domain(self, values: Iterable[float], padding_percent: float | None = None) -> AdaptiveDomain:
        """Compute the rendering domain for all values sharing one axis.

        Args:
            values: Values from every series drawn on the axis.
            padding_percent: Fraction of the data range added on both sides.
                Defaults to the engine's configured padding.

        Returns:
            AdaptiveDomain. Empty input yields the 0..100 default domain.
        """

        array = finite_array(values)
        if array.size == 0:
            logger.debug("Adaptive domain fallback | reason=empty")
            return AdaptiveDomain()

        padding = self.padding_percent if padding_percent is None else padding_percent
        raw_min = float(np.min(array))
        raw_max = float(np.max(array))
        spread = raw_max - raw_min
        if spread == 0:
            pad = abs(raw_max) * 0.1 if raw_max != 0 else 10.0
        else:
            pad = spread * padding
        if not math.isfinite(pad):
            pad = raw_max * padding - raw_min * padding

        domain_max = self.nice_ceiling(clamp_finite(raw_max + pad), peak=raw_max)
        domain_min = self.nice_floor(clamp_finite(raw_min - pad))
        if raw_min >= 0:
            domain_min = max(0.0, domain_min)

        peak = float(np.max(np.abs(array)))
        use_adaptive = peak >= self.adaptive_threshold
        scale_factor, unit_label = scale_for(peak) if use_adaptive else (1.0, "")

        return AdaptiveDomain(
            min=domain_min,
            max=domain_max,
            use_adaptive_scale=use_adaptive,
            scale_factor=scale_factor,
            unit_label=unit_label,
        )

    def nice_ceiling(self, value: float, peak: float) -> float:
        """Round ``value`` up to a multiple of its magnitude, leaving headroom above ``peak``.

        When the rounded bound is still below ``peak * headroom_factor`` one
        more magnitude step is added. A bound that cannot be rounded without
        leaving the float range is returned unrounded.
        """

        step = magnitude(value)
        if step == 0:
            return 0.0
        rounded = math.ceil(round(value / step, _QUOTIENT_DIGITS)) * step
        if rounded < peak * self.headroom_factor:
            rounded += step
        if not math.isfinite(rounded):
            return float(value)
        return float(rounded)

    @staticmethod
    def nice_floor(value: float) -> float:
        step = magnitude(value)
        if step == 0:
            return 0.0
        rounded = math.floor(round(value / step, _QUOTIENT_DIGITS)) * step
        return float(rounded) if math.isfinite(rounded) else float(value)

    @staticmethod
    def format_adaptive(value: float) -> AdaptiveNumber:
        """Abbreviate a single value with K/M/B units.

        One decimal place is kept unless the value is at least ten units of
        its scale (``12.3K`` but ``123K``).
        """

        if not math.isfinite(value) or value == 0:
            return AdaptiveNumber(value=0.0, unit="", formatted="0", scale=1.0)

        scale, unit = scale_for(value)
        if not unit:
            return AdaptiveNumber(value=value, unit="", formatted=format_plain(value), scale=1.0)

        scaled = value / scale
        decimals = 0 if abs(value) >= 10 * scale else 1
        return AdaptiveNumber(value=scaled, unit=unit, formatted=f"{scaled:.{decimals}f}{unit}", scale=scale)


__all__ = ["AdaptiveDomainEngine", "SCALE_LADDER", "magnitude", "scale_for", "format_plain"]
