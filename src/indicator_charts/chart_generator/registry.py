from __future__ import annotations

"""Ordered registry of the metrics shown on the page."""


from dataclasses import dataclass
from typing import Tuple

from ..data_models.dataset import DISPLAY_ORDER, Dataset
from ..data_models.metric_series import REQUIRED_FIELDS
from .exceptions import MissingMetricError


@dataclass(frozen=True)
class MetricRegistry:
    """Metric keys in display order and the raw fields each one must provide."""

    keys: Tuple[str, ...] = DISPLAY_ORDER
    required_fields: Tuple[str, ...] = REQUIRED_FIELDS

    def missing(self, dataset: Dataset) -> Tuple[str, ...]:
        """Keys absent from the payload entirely (parse failures are tracked separately)."""
        return tuple(key for key in self.keys if key not in dataset.series and key not in dataset.errors)

    def validate(self, dataset: Dataset) -> None:
        missing = self.missing(dataset)
        if missing:
            raise MissingMetricError.for_keys(missing)


__all__ = ["MetricRegistry"]
