from __future__ import annotations

"""Horizontal time scale and vertical value scale for a chart."""


import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Sequence, Tuple, Union

import numpy as np

from ..chart_generator.exceptions import DegenerateDomainError, UnmeasurableLayoutError

logger = logging.getLogger(__name__)

# Shared by every metric so charts line up for comparison.
MIN_DATE = datetime(2000, 2, 1)
MAX_DATE = datetime(2021, 2, 1)

Number = Union[int, float]
DateLike = Union[date, datetime]


class LinearScale:
    """Linear map from a numeric domain to a pixel range, without clamping."""

    def __init__(self, domain: Tuple[Number, Number], range_: Tuple[Number, Number]):
        self.domain = (float(domain[0]), float(domain[1]))
        self.range = (float(range_[0]), float(range_[1]))
        span = self.domain[1] - self.domain[0]
        # Zero-width domains map as if they spanned one unit.
        self._span = span if span != 0 else 1.0

    def __call__(self, value):
        if np.ndim(value) == 0:
            return float(self.map_many(float(value)))
        return self.map_many(value)

    def map_many(self, values) -> np.ndarray:
        arr = np.asarray(values, dtype=float)
        r0, r1 = self.range
        return r0 + (arr - self.domain[0]) / self._span * (r1 - r0)

    def invert(self, pixel: Number) -> float:
        r0, r1 = self.range
        pixel_span = r1 - r0 if r1 != r0 else 1.0
        return self.domain[0] + (float(pixel) - r0) / pixel_span * self._span

    def __repr__(self) -> str:
        return f"LinearScale(domain={self.domain}, range={self.range})"


def _to_datetime(value: DateLike) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    raise TypeError(f"Time scale expects date or datetime values, got {type(value).__name__}")


class TimeScale:
    """Linear map from calendar time to pixels; values outside the domain extrapolate."""

    def __init__(self, domain: Tuple[DateLike, DateLike], range_: Tuple[Number, Number]):
        self.domain = (_to_datetime(domain[0]), _to_datetime(domain[1]))
        span_seconds = (self.domain[1] - self.domain[0]).total_seconds()
        self._linear = LinearScale((0.0, span_seconds), range_)

    @property
    def range(self) -> Tuple[float, float]:
        return self._linear.range

    def _seconds(self, value: DateLike) -> float:
        return (_to_datetime(value) - self.domain[0]).total_seconds()

    def __call__(self, value: DateLike) -> float:
        return self._linear(self._seconds(value))

    def map_many(self, values: Sequence[DateLike]) -> np.ndarray:
        return self._linear.map_many([self._seconds(value) for value in values])

    def __repr__(self) -> str:
        return f"TimeScale(domain=({self.domain[0]:%Y-%m-%d}, {self.domain[1]:%Y-%m-%d}), range={self.range})"


@dataclass(frozen=True)
class ChartScales:
    """Scales for one chart in one render pass."""

    x: TimeScale
    y: LinearScale


class ScaleBuilder:
    """Builds fresh scales per chart per render pass."""

    def __init__(self, *, min_date: datetime = MIN_DATE, max_date: datetime = MAX_DATE):
        self.min_date = min_date
        self.max_date = max_date

    def build(self, chart_width: float, chart_height: float, value_min: float, value_max: float) -> ChartScales:
        """Return the time scale over the fixed date domain and the metric's value scale."""
        if chart_width <= 0 or chart_height <= 0:
            raise UnmeasurableLayoutError(
                f"Cannot build scales for a {chart_width}x{chart_height} plotting area",
            )
        if not (np.isfinite(value_min) and np.isfinite(value_max)):
            raise DegenerateDomainError(
                f"Value domain [{value_min}, {value_max}] is not finite",
                value_min=value_min,
                value_max=value_max,
            )
        if value_max == value_min:
            raise DegenerateDomainError(
                f"Value domain [{value_min}, {value_max}] has zero width",
                value_min=value_min,
                value_max=value_max,
            )
        x_scale = TimeScale((self.min_date, self.max_date), (0.0, chart_width))
        y_scale = LinearScale((value_min, value_max), (chart_height, 0.0))
        logger.debug("Built scales %r %r", x_scale, y_scale)
        return ChartScales(x=x_scale, y=y_scale)


__all__ = ["ChartScales", "LinearScale", "MAX_DATE", "MIN_DATE", "ScaleBuilder", "TimeScale"]
