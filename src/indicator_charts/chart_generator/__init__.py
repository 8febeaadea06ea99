from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from .contexts import ChartDimensions, ChartEngineState, RenderReport, ViewportState
from .exceptions import (
    ChartConfigurationError,
    DegenerateDomainError,
    MissingMetricError,
    NegativeBandWidthError,
    RenderOrderError,
    TickCardinalityError,
    UnmeasurableLayoutError,
)

if TYPE_CHECKING:
    from .layout_controller import ResponsiveLayoutController
    from .runtime import ChartGenerator

logger = logging.getLogger(__name__)

__all__ = [
    "ChartConfigurationError",
    "ChartDimensions",
    "ChartEngineState",
    "ChartGenerator",
    "DegenerateDomainError",
    "MissingMetricError",
    "NegativeBandWidthError",
    "RenderOrderError",
    "RenderReport",
    "ResponsiveLayoutController",
    "TickCardinalityError",
    "UnmeasurableLayoutError",
    "ViewportState",
]


def __getattr__(name: str) -> Any:
    """Lazy loading for imports that would cause circular dependencies."""
    if name == "ChartGenerator":
        from .runtime import ChartGenerator

        return ChartGenerator
    if name == "ResponsiveLayoutController":
        from .layout_controller import ResponsiveLayoutController

        return ResponsiveLayoutController
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
