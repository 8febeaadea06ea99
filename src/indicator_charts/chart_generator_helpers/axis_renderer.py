from __future__ import annotations

"""Tick marks, tick labels and gridlines for both chart axes."""


import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Sequence, Tuple

from ..chart_generator.exceptions import TickCardinalityError
from ..data_models.metric_series import MetricSeries
from .scale_builder import LinearScale, TimeScale

logger = logging.getLogger(__name__)

X_TICK_DATES: Tuple[datetime, ...] = tuple(datetime(year, 2, 1) for year in range(2000, 2021, 4))

# Narrow layouts keep the first, middle and last of five configured ticks.
MOBILE_TICK_INDICES: Tuple[int, ...] = (0, 2, 4)
EXPECTED_TICK_COUNT = 5

DEFAULT_TICK_SIZE = 6.0


def format_number(value: float) -> str:
    """Render a number the way the page shows it: integral values drop the ``.0``."""
    number = float(value)
    if number.is_integer():
        return str(int(number))
    return repr(number)


def format_tick_value(value: float, show_plus_sign: bool) -> str:
    if value <= 0:
        return format_number(value)
    if show_plus_sign:
        return "+" + format_number(value)
    return format_number(value)


def thin_tick_values(tick_values: Sequence[float]) -> Tuple[float, ...]:
    """Reduce five tick values to the first, middle and last."""
    if len(tick_values) != EXPECTED_TICK_COUNT:
        raise TickCardinalityError.for_thinning(tick_values, EXPECTED_TICK_COUNT)
    return tuple(tick_values[index] for index in MOBILE_TICK_INDICES)


@dataclass(frozen=True)
class AxisTick:
    value: Any
    position: float
    label: str


@dataclass(frozen=True)
class AxisSpec:
    """
    One axis or gridline group.

    ``tick_size`` follows the SVG convention: positive ticks point away from the
    plot, negative ones extend across it (gridlines).
    """

    orientation: str
    css_class: str
    ticks: Tuple[AxisTick, ...]
    tick_size: float

    @property
    def positions(self) -> Tuple[float, ...]:
        return tuple(tick.position for tick in self.ticks)

    @property
    def labels(self) -> Tuple[str, ...]:
        return tuple(tick.label for tick in self.ticks)


@dataclass(frozen=True)
class ChartAxes:
    x_axis: AxisSpec
    y_axis: AxisSpec
    x_grid: AxisSpec
    y_grid: AxisSpec


class AxisRenderer:
    """Builds axis and gridline specs for one chart."""

    def __init__(self, *, x_tick_dates: Sequence[datetime] = X_TICK_DATES, tick_size: float = DEFAULT_TICK_SIZE):
        self.x_tick_dates = tuple(x_tick_dates)
        self.tick_size = tick_size

    def y_tick_values(self, series: MetricSeries, is_mobile: bool) -> Tuple[float, ...]:
        if not series.tick_values:
            raise TickCardinalityError(f"Metric {series.key!r} has no tick values", metric=series.key)
        if is_mobile:
            return thin_tick_values(series.tick_values)
        return tuple(series.tick_values)

    def render_axes(
        self,
        x_scale: TimeScale,
        y_scale: LinearScale,
        series: MetricSeries,
        is_mobile: bool,
        *,
        chart_width: float,
        chart_height: float,
    ) -> ChartAxes:
        x_ticks = tuple(AxisTick(value=tick, position=x_scale(tick), label=str(tick.year)) for tick in self.x_tick_dates)
        y_ticks = tuple(
            AxisTick(value=value, position=y_scale(value), label=format_tick_value(value, series.show_plus_sign))
            for value in self.y_tick_values(series, is_mobile)
        )
        logger.debug("Axis ticks for %s: x=%d y=%d (mobile=%s)", series.key, len(x_ticks), len(y_ticks), is_mobile)
        return ChartAxes(
            x_axis=AxisSpec("bottom", "x axis", x_ticks, self.tick_size),
            y_axis=AxisSpec("left", "y axis", y_ticks, self.tick_size),
            x_grid=AxisSpec("bottom", "x grid", _blank(x_ticks), -chart_height),
            y_grid=AxisSpec("left", "y grid", _blank(y_ticks), -chart_width),
        )


def _blank(ticks: Tuple[AxisTick, ...]) -> Tuple[AxisTick, ...]:
    return tuple(AxisTick(value=tick.value, position=tick.position, label="") for tick in ticks)


__all__ = [
    "AxisRenderer",
    "AxisSpec",
    "AxisTick",
    "ChartAxes",
    "EXPECTED_TICK_COUNT",
    "MOBILE_TICK_INDICES",
    "X_TICK_DATES",
    "format_number",
    "format_tick_value",
    "thin_tick_values",
]
