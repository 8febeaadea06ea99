from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from ..chart_generator_helpers.axis_renderer import ChartAxes
from ..chart_generator_helpers.monotone_path import LinePath
from ..chart_generator_helpers.scale_builder import ChartScales
from ..chart_generator_helpers.series_renderer import SeriesLabel
from ..chart_generator_helpers.term_overlay import OverlayBand
from .contexts import ChartDimensions


@dataclass(frozen=True)
class ChartScene:
    """Geometry of one rendered chart, in plotting-area pixels."""

    key: str
    dimensions: ChartDimensions
    scales: ChartScales
    bands: Tuple[OverlayBand, ...]
    axes: ChartAxes
    line: LinePath
    label: SeriesLabel
    elements: Tuple[str, ...]


@dataclass(frozen=True)
class RenderedChart:
    """A scene together with its SVG document."""

    scene: ChartScene
    svg: str

    @property
    def height(self) -> float:
        return self.scene.dimensions.height
