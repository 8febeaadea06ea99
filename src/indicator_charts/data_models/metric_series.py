"""Per-metric time series records."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Mapping, Sequence, Tuple

from ..exceptions import DataError

logger = logging.getLogger(__name__)

REQUIRED_FIELDS: Tuple[str, ...] = (
    "metric",
    "description",
    "source",
    "url",
    "last_updated",
    "frequency",
    "data",
    "min",
    "max",
    "ticks",
    "label",
)


class Frequency(Enum):
    """Sampling frequency of a series; selects the period format."""

    ANNUAL = "Annual"
    MONTHLY = "Monthly"
    DAILY = "Daily"

    @property
    def date_format(self) -> str:
        if self is Frequency.ANNUAL:
            return "%Y"
        if self is Frequency.MONTHLY:
            return "%Y-%m"
        return "%Y-%m-%d"

    @classmethod
    def from_label(cls, label: str) -> Frequency:
        """Map a raw frequency string; anything unrecognised is parsed as daily."""
        for member in cls:
            if member.value == label:
                return member
        logger.debug("Unrecognised frequency %r, using daily period format", label)
        return cls.DAILY

    def parse_period(self, period: str) -> datetime:
        return datetime.strptime(period, self.date_format)


@dataclass(frozen=True)
class SeriesPoint:
    """One observation of a metric."""

    period: str
    date: datetime
    value: float


@dataclass(frozen=True)
class MetricSeries:
    """
    Normalised metric record.

    Created once at load time and never mutated afterwards; every render pass
    reads the same instance. ``points`` is sorted by date ascending.
    """

    key: str
    name: str
    description: str
    source_label: str
    source_url: str
    last_updated: str
    frequency: Frequency
    points: Tuple[SeriesPoint, ...]
    min_value: float
    max_value: float
    tick_values: Tuple[float, ...]
    show_plus_sign: bool
    label: str

    @classmethod
    def from_raw(cls, key: str, raw: Mapping[str, Any]) -> MetricSeries:
        """Build a series from the loader payload for ``key``."""
        if not isinstance(raw, Mapping):
            raise DataError(f"Metric {key!r} must be an object, got {type(raw).__name__}", metric=key)
        missing = [name for name in REQUIRED_FIELDS if name not in raw]
        if missing:
            raise DataError(f"Metric {key!r} is missing fields: {', '.join(missing)}", metric=key, missing=missing)

        frequency = Frequency.from_label(str(raw["frequency"]))
        points = _parse_points(key, frequency, raw["data"])
        return cls(
            key=key,
            name=str(raw["metric"]),
            description=str(raw["description"]),
            source_label=str(raw["source"]),
            source_url=str(raw["url"]),
            last_updated=str(raw["last_updated"]),
            frequency=frequency,
            points=points,
            min_value=_to_float(key, "min", raw["min"]),
            max_value=_to_float(key, "max", raw["max"]),
            tick_values=_parse_ticks(key, raw["ticks"]),
            show_plus_sign=bool(raw.get("show_plus", False)),
            label=str(raw["label"]),
        )

    @property
    def dates(self) -> Tuple[datetime, ...]:
        return tuple(point.date for point in self.points)

    @property
    def values(self) -> Tuple[float, ...]:
        return tuple(point.value for point in self.points)


def _to_float(key: str, field_name: str, value: Any) -> float:
    if isinstance(value, bool):
        raise DataError(f"Metric {key!r} field {field_name!r} must be numeric, got a boolean", metric=key)
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise DataError(f"Metric {key!r} field {field_name!r} must be numeric, got {value!r}", metric=key) from exc
    if not math.isfinite(number):
        raise DataError(f"Metric {key!r} field {field_name!r} must be finite, got {value!r}", metric=key)
    return number


def _parse_ticks(key: str, ticks: Any) -> Tuple[float, ...]:
    if not isinstance(ticks, Sequence) or isinstance(ticks, str):
        raise DataError(f"Metric {key!r} ticks must be a list", metric=key)
    return tuple(_to_float(key, "ticks", tick) for tick in ticks)


def _parse_points(key: str, frequency: Frequency, data: Any) -> Tuple[SeriesPoint, ...]:
    if not isinstance(data, Sequence) or isinstance(data, str):
        raise DataError(f"Metric {key!r} data must be a list", metric=key)

    points = []
    for index, entry in enumerate(data):
        try:
            period = str(entry["period"])
            raw_value = entry["value"]
        except (KeyError, TypeError) as exc:
            raise DataError(f"Metric {key!r} data[{index}] needs 'period' and 'value'", metric=key) from exc
        try:
            date = frequency.parse_period(period)
        except ValueError as exc:
            raise DataError(
                f"Metric {key!r} period {period!r} does not match {frequency.value} format {frequency.date_format}",
                metric=key,
                period=period,
            ) from exc
        points.append(SeriesPoint(period=period, date=date, value=_to_float(key, "value", raw_value)))

    ordered = sorted(points, key=lambda point: point.date)
    if ordered != points:
        logger.debug("Metric %s data was not date ordered; sorted %d points", key, len(points))
    return tuple(ordered)


__all__ = ["Frequency", "MetricSeries", "REQUIRED_FIELDS", "SeriesPoint"]
