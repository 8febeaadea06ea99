"""Root pytest configuration and shared fixtures."""

from __future__ import annotations

import copy
from typing import Any, Dict

import matplotlib

matplotlib.use("Agg")

import pytest

from indicator_charts.data_models.dataset import DISPLAY_ORDER, Dataset, parse_dataset
from indicator_charts.data_models.metric_series import MetricSeries


def make_raw_metric(**overrides: Any) -> Dict[str, Any]:
    """Raw loader payload for a single metric."""
    raw: Dict[str, Any] = {
        "metric": "GDP growth",
        "description": "Annual change in real GDP.",
        "source": "BEA",
        "url": "https://www.bea.gov/",
        "last_updated": "January 28, 2021",
        "frequency": "Annual",
        "data": [
            {"period": "2001", "value": 1.0},
            {"period": "2005", "value": 3.5},
            {"period": "2009", "value": -2.5},
            {"period": "2014", "value": 2.5},
            {"period": "2019", "value": 2.2},
        ],
        "min": -4,
        "max": 6,
        "ticks": [-4, -1.5, 1, 3.5, 6],
        "show_plus": True,
        "label": "% change",
    }
    raw.update(overrides)
    return raw


def make_raw_payload() -> Dict[str, Dict[str, Any]]:
    payload = {}
    for key in DISPLAY_ORDER:
        payload[key] = make_raw_metric(metric=key.title())
    return payload


@pytest.fixture
def raw_metric() -> Dict[str, Any]:
    return make_raw_metric()


@pytest.fixture
def raw_payload() -> Dict[str, Dict[str, Any]]:
    return copy.deepcopy(make_raw_payload())


@pytest.fixture
def series() -> MetricSeries:
    return MetricSeries.from_raw("gdp", make_raw_metric())


@pytest.fixture
def dataset(raw_payload) -> Dataset:
    return parse_dataset(raw_payload)
