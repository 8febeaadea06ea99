"""Load the indicator dataset from a local JSON document."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping, Union

import orjson

from .data_models.dataset import Dataset, parse_dataset
from .exceptions import DataError

logger = logging.getLogger(__name__)

DEFAULT_DATA_PATH = Path("data") / "metrics.json"


def load_payload(path: Union[str, Path]) -> Mapping[str, Any]:
    """Read and decode the raw metrics document."""
    data_path = Path(path)
    try:
        raw_bytes = data_path.read_bytes()
    except FileNotFoundError as exc:
        raise DataError(f"Metrics file not found: {data_path}", path=str(data_path)) from exc
    except OSError as exc:
        raise DataError(f"Unable to read metrics file {data_path}: {exc}", path=str(data_path)) from exc

    try:
        payload = orjson.loads(raw_bytes)
    except orjson.JSONDecodeError as exc:
        raise DataError(f"Metrics file {data_path} is not valid JSON", path=str(data_path)) from exc

    if not isinstance(payload, dict):
        raise DataError(f"Metrics file {data_path} must contain an object keyed by metric", path=str(data_path))
    logger.info("Loaded %d metric entries from %s", len(payload), data_path)
    return payload


def load_dataset(path: Union[str, Path] = DEFAULT_DATA_PATH) -> Dataset:
    return parse_dataset(load_payload(path))


__all__ = ["DEFAULT_DATA_PATH", "load_dataset", "load_payload"]
