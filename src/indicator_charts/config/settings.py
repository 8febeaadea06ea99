"""Layout settings for the chart engine."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, Optional

from ..config_loader import BaseConfigLoader, load_config
from ..exceptions import ConfigurationError
from .runtime import env_float, env_int

logger = logging.getLogger(__name__)

CHART_CONFIG_FILENAME = "chart_config.json"

_ENV_DEFAULT_WIDTH = "INDICATOR_CHARTS_DEFAULT_WIDTH"
_ENV_MOBILE_BREAKPOINT = "INDICATOR_CHARTS_MOBILE_BREAKPOINT"
_ENV_THROTTLE_MS = "INDICATOR_CHARTS_THROTTLE_MS"
_ENV_DESKTOP_ASPECT = "INDICATOR_CHARTS_DESKTOP_ASPECT_RATIO"


def _as_number(value: Any, section: str, parameter: str) -> float:
    if isinstance(value, bool):
        raise ConfigurationError(f"Chart config {section}.{parameter} must be numeric, got a boolean", parameter=parameter)
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(
            f"Chart config {section}.{parameter} must be numeric, got {value!r}", parameter=parameter
        ) from exc


@dataclass(frozen=True)
class ChartMargins:
    """Pixel margins between the outer SVG box and the plotting area."""

    top: float = 10
    right: float = 20
    bottom: float = 30
    left: float = 50

    @property
    def horizontal(self) -> float:
        return self.left + self.right

    @property
    def vertical(self) -> float:
        return self.top + self.bottom


@dataclass(frozen=True)
class ChartSettings:
    """Layout constants shared by every chart in a render pass."""

    default_width: float = 940
    mobile_breakpoint: float = 600
    desktop_aspect_ratio: float = 5.0
    mobile_aspect_ratio: float = 2.5
    margins: ChartMargins = field(default_factory=ChartMargins)
    resize_throttle_ms: float = 250
    label_offset: float = 9
    bubble_padding: float = 10
    bubble_height: float = 20

    def __post_init__(self) -> None:
        for name in ("default_width", "mobile_breakpoint", "desktop_aspect_ratio", "mobile_aspect_ratio"):
            value = getattr(self, name)
            if value <= 0:
                raise ConfigurationError(f"{name} must be positive (got {value!r})", parameter=name)
        if self.resize_throttle_ms < 0:
            raise ConfigurationError(f"resize_throttle_ms cannot be negative (got {self.resize_throttle_ms!r})")

    @property
    def resize_throttle_seconds(self) -> float:
        return self.resize_throttle_ms / 1000.0

    def aspect_ratio(self, is_mobile: bool) -> float:
        return self.mobile_aspect_ratio if is_mobile else self.desktop_aspect_ratio

    def with_environment_overrides(self) -> ChartSettings:
        """Return a copy with any ``INDICATOR_CHARTS_*`` environment overrides applied."""
        return replace(
            self,
            default_width=env_float(_ENV_DEFAULT_WIDTH, or_value=self.default_width),
            mobile_breakpoint=env_float(_ENV_MOBILE_BREAKPOINT, or_value=self.mobile_breakpoint),
            resize_throttle_ms=env_int(_ENV_THROTTLE_MS, or_value=self.resize_throttle_ms),
            desktop_aspect_ratio=env_float(_ENV_DESKTOP_ASPECT, or_value=self.desktop_aspect_ratio),
        )

    @classmethod
    def from_environment(cls) -> ChartSettings:
        return cls().with_environment_overrides()

    @classmethod
    def from_mapping(cls, payload: Dict[str, Any]) -> ChartSettings:
        """Build settings from the ``layout``/``margins``/``label`` sections of the config file."""
        loader = BaseConfigLoader()

        def number(section: str, parameter: str) -> float:
            return _as_number(loader.get_parameter(payload, section, parameter), section, parameter)

        return cls(
            default_width=number("layout", "default_width"),
            mobile_breakpoint=number("layout", "mobile_breakpoint"),
            desktop_aspect_ratio=number("layout", "desktop_aspect_ratio"),
            mobile_aspect_ratio=number("layout", "mobile_aspect_ratio"),
            resize_throttle_ms=number("layout", "resize_throttle_ms"),
            margins=ChartMargins(
                top=number("margins", "top"),
                right=number("margins", "right"),
                bottom=number("margins", "bottom"),
                left=number("margins", "left"),
            ),
            label_offset=number("label", "offset"),
            bubble_padding=number("label", "bubble_padding"),
            bubble_height=number("label", "bubble_height"),
        )

    @classmethod
    def load(cls, config_dir: Optional[Path] = None, filename: str = CHART_CONFIG_FILENAME) -> ChartSettings:
        """Load settings from ``config/chart_config.json`` and apply environment overrides."""
        payload = load_config(filename, config_dir=config_dir)
        settings = cls.from_mapping(payload).with_environment_overrides()
        logger.info(
            "Loaded chart settings: breakpoint=%spx throttle=%sms",
            settings.mobile_breakpoint,
            settings.resize_throttle_ms,
        )
        return settings


__all__ = ["CHART_CONFIG_FILENAME", "ChartMargins", "ChartSettings"]
