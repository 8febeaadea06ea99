"""Dataset of metric series keyed by metric name, plus the display registry."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Mapping, Tuple

from ..exceptions import DataError
from .metric_series import REQUIRED_FIELDS, MetricSeries

logger = logging.getLogger(__name__)

DISPLAY_ORDER: Tuple[str, ...] = (
    "gdp",
    "unemployment",
    "labor",
    "poverty",
    "trade",
    "stocks",
    "wages",
    "budget",
    "debt",
)


@dataclass(frozen=True)
class Dataset:
    """Parsed metrics plus the parse failure for every metric that could not be loaded."""

    series: Mapping[str, MetricSeries]
    errors: Mapping[str, DataError] = field(default_factory=dict)

    def __contains__(self, key: object) -> bool:
        return key in self.series

    def __getitem__(self, key: str) -> MetricSeries:
        return self.series[key]

    def __len__(self) -> int:
        return len(self.series)

    def __iter__(self) -> Iterator[str]:
        return iter(self.series)

    def keys(self):
        return self.series.keys()


def parse_dataset(raw: Mapping[str, Any]) -> Dataset:
    """
    Parse the loader payload metric by metric.

    A malformed metric is recorded in ``Dataset.errors`` instead of aborting the
    whole dataset so the remaining charts can still render.
    """
    if not isinstance(raw, Mapping):
        raise DataError(f"Dataset payload must be an object, got {type(raw).__name__}")

    series: Dict[str, MetricSeries] = {}
    errors: Dict[str, DataError] = {}
    for key, value in raw.items():
        try:
            series[key] = MetricSeries.from_raw(key, value)
        except DataError as exc:
            logger.warning("Metric %s failed to parse: %s", key, exc)
            errors[key] = exc
    logger.info("Parsed %d metrics (%d failed)", len(series), len(errors))
    return Dataset(series=series, errors=errors)


__all__ = ["DISPLAY_ORDER", "Dataset", "REQUIRED_FIELDS", "parse_dataset"]
