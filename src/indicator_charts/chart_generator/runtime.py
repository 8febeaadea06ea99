"""Per-metric chart rendering pipeline."""

from __future__ import annotations

import logging
from typing import Callable, Optional, Sequence

from ..chart_generator_helpers.axis_renderer import AxisRenderer
from ..chart_generator_helpers.chart_canvas import ChartCanvas
from ..chart_generator_helpers.chart_styler import ChartStyler
from ..chart_generator_helpers.scale_builder import ScaleBuilder
from ..chart_generator_helpers.series_renderer import SeriesRenderer
from ..chart_generator_helpers.term_overlay import TermOverlay
from ..config.settings import ChartSettings
from ..data_models.metric_series import MetricSeries
from ..data_models.term import TERMS, Term
from .contexts import ChartDimensions, ViewportState
from .scene import ChartScene, RenderedChart

logger = logging.getLogger(__name__)

CanvasFactory = Callable[[ChartDimensions, ChartStyler], ChartCanvas]


class ChartGenerator:
    """Builds scales, overlay, axes, line and label for one metric and draws them to SVG."""

    def __init__(
        self,
        *,
        settings: Optional[ChartSettings] = None,
        styler: Optional[ChartStyler] = None,
        terms: Sequence[Term] = TERMS,
        scale_builder: Optional[ScaleBuilder] = None,
        term_overlay: Optional[TermOverlay] = None,
        axis_renderer: Optional[AxisRenderer] = None,
        series_renderer: Optional[SeriesRenderer] = None,
        canvas_factory: CanvasFactory = ChartCanvas,
    ):
        self.settings = settings if settings is not None else ChartSettings()
        self.styler = styler if styler is not None else ChartStyler()
        self.terms = tuple(terms)
        self.scale_builder = scale_builder if scale_builder is not None else ScaleBuilder()
        self.term_overlay = term_overlay if term_overlay is not None else TermOverlay()
        self.axis_renderer = axis_renderer if axis_renderer is not None else AxisRenderer()
        if series_renderer is None:
            series_renderer = SeriesRenderer(
                label_offset=self.settings.label_offset,
                bubble_padding=self.settings.bubble_padding,
                bubble_height=self.settings.bubble_height,
            )
        self.series_renderer = series_renderer
        self.canvas_factory = canvas_factory

    def render_chart(self, series: MetricSeries, viewport: ViewportState) -> RenderedChart:
        dimensions = ChartDimensions.for_viewport(viewport, self.settings)
        scales = self.scale_builder.build(dimensions.chart_width, dimensions.chart_height, series.min_value, series.max_value)
        bands = self.term_overlay.render(scales.x, dimensions.chart_height, self.terms)
        axes = self.axis_renderer.render_axes(
            scales.x,
            scales.y,
            series,
            viewport.is_mobile,
            chart_width=dimensions.chart_width,
            chart_height=dimensions.chart_height,
        )
        line = self.series_renderer.render_line(scales.x, scales.y, series.points)

        canvas = self.canvas_factory(dimensions, self.styler)
        try:
            canvas.draw_bands(bands)
            canvas.draw_axes(axes)
            canvas.draw_line(line)
            label = self.series_renderer.render_label(scales.x, scales.y, series.tick_values, series.label, canvas)
            svg = canvas.to_svg()
            elements = tuple(canvas.elements)
        finally:
            canvas.close()

        logger.debug(
            "Rendered %s at %.0fx%.0f (%s)", series.key, dimensions.width, dimensions.height, viewport.layout_name
        )
        scene = ChartScene(
            key=series.key,
            dimensions=dimensions,
            scales=scales,
            bands=tuple(bands),
            axes=axes,
            line=line,
            label=label,
            elements=elements,
        )
        return RenderedChart(scene=scene, svg=svg)


__all__ = ["ChartGenerator"]
