from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from ..config.settings import ChartMargins, ChartSettings
from ..data_models.dataset import Dataset
from .exceptions import UnmeasurableLayoutError


@dataclass(frozen=True)
class ViewportState:
    """Measured container width and its layout classification."""

    width: float
    is_mobile: bool

    @classmethod
    def classify(cls, width: float, breakpoint: float) -> ViewportState:
        return cls(width=width, is_mobile=width <= breakpoint)

    @property
    def layout_name(self) -> str:
        return "mobile" if self.is_mobile else "desktop"


@dataclass(frozen=True)
class ChartDimensions:
    """Outer SVG size and the inner plotting area for one chart."""

    width: float
    height: float
    margins: ChartMargins
    chart_width: float
    chart_height: float
    aspect_ratio: float

    @classmethod
    def for_viewport(cls, viewport: ViewportState, settings: ChartSettings) -> ChartDimensions:
        aspect_ratio = settings.aspect_ratio(viewport.is_mobile)
        margins = settings.margins
        height = viewport.width / aspect_ratio
        chart_width = viewport.width - margins.horizontal
        chart_height = height - margins.vertical
        if chart_width <= 0 or chart_height <= 0:
            raise UnmeasurableLayoutError(
                f"Width {viewport.width}px leaves no plotting area ({chart_width:.1f}x{chart_height:.1f})",
                width=viewport.width,
            )
        return cls(
            width=viewport.width,
            height=height,
            margins=margins,
            chart_width=chart_width,
            chart_height=chart_height,
            aspect_ratio=aspect_ratio,
        )


@dataclass(frozen=True)
class RenderReport:
    """Outcome of one render pass across every registered metric."""

    viewport: Optional[ViewportState]
    rendered: Tuple[str, ...] = ()
    failures: Dict[str, Exception] = field(default_factory=dict)
    skipped: bool = False

    @property
    def succeeded(self) -> bool:
        return not self.skipped and not self.failures


@dataclass
class ChartEngineState:
    """Everything the layout controller owns between render passes."""

    dataset: Dataset
    viewport: Optional[ViewportState] = None
    last_report: Optional[RenderReport] = None
    render_count: int = 0
