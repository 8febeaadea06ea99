"""Data models for indicator series and shading terms."""

from .dataset import DISPLAY_ORDER, Dataset, parse_dataset
from .metric_series import REQUIRED_FIELDS, Frequency, MetricSeries, SeriesPoint
from .term import TERMS, Term

__all__ = [
    "DISPLAY_ORDER",
    "Dataset",
    "Frequency",
    "MetricSeries",
    "REQUIRED_FIELDS",
    "SeriesPoint",
    "TERMS",
    "Term",
    "parse_dataset",
]
