from __future__ import annotations

"""matplotlib drawing surface for a single chart, serialised to SVG."""


import logging
from typing import TYPE_CHECKING, List

from ..chart_generator.dependencies import io, mpatches, mpath, plt
from ..chart_generator.exceptions import RenderOrderError
from .monotone_path import CURVETO, LINETO, MOVETO, LinePath
from .series_renderer import LabelBubble, LabelText

if TYPE_CHECKING:
    from matplotlib.text import Text

    from ..chart_generator.contexts import ChartDimensions
    from .axis_renderer import AxisSpec, ChartAxes
    from .chart_styler import ChartStyler
    from .term_overlay import OverlayBand

logger = logging.getLogger(__name__)

_PATH_CODES = {
    MOVETO: [mpath.Path.MOVETO],
    LINETO: [mpath.Path.LINETO],
    CURVETO: [mpath.Path.CURVE4] * 3,
}

# Draw order, back to front.
_Z_BANDS = 1
_Z_GRID = 2
_Z_LINE = 4
_Z_BUBBLE = 5
_Z_LABEL = 6


class AttachedLabel:
    """A label artist that lives inside the canvas figure."""

    def __init__(self, artist: Text, canvas: ChartCanvas):
        self._artist = artist
        self._canvas = canvas

    @property
    def is_attached(self) -> bool:
        return not self._canvas.closed and self._artist.axes is not None

    def measure_width(self) -> float:
        if not self.is_attached:
            raise RenderOrderError("Cannot measure label text that is not attached to an open canvas")
        renderer = self._canvas.figure.canvas.get_renderer()
        return float(self._artist.get_window_extent(renderer=renderer).width)


class ChartCanvas:
    """
    Owns one matplotlib figure laid out in pixel coordinates.

    The axes span the plotting area with y growing downward, so every geometry
    value computed by the scales can be drawn without conversion. Margins are
    the figure area outside the axes.
    """

    def __init__(self, dimensions: ChartDimensions, styler: ChartStyler):
        self.dimensions = dimensions
        self.styler = styler
        self.closed = False
        self.elements: List[str] = []

        width, height = dimensions.width, dimensions.height
        margins = dimensions.margins
        self.figure = plt.figure(
            figsize=(width / styler.dpi, height / styler.dpi),
            dpi=styler.dpi,
            facecolor=styler.background_color,
        )
        self.ax = self.figure.add_axes(
            (
                margins.left / width,
                margins.bottom / height,
                dimensions.chart_width / width,
                dimensions.chart_height / height,
            )
        )
        self.ax.set_xlim(0, dimensions.chart_width)
        self.ax.set_ylim(dimensions.chart_height, 0)
        self.ax.set_facecolor("none")
        for spine in self.ax.spines.values():
            spine.set_visible(False)

    def draw_bands(self, bands: List[OverlayBand]) -> None:
        for band in bands:
            self.ax.add_patch(
                mpatches.Rectangle(
                    (band.x, band.y),
                    band.width,
                    band.height,
                    facecolor=self.styler.term_color(band.slug),
                    edgecolor="none",
                    zorder=_Z_BANDS,
                    gid=band.css_class.replace(" ", "-"),
                )
            )
            self.elements.append(band.css_class)

    def draw_axes(self, axes: ChartAxes) -> None:
        self._apply_ticks(axes.x_axis, self.ax.xaxis)
        self._apply_ticks(axes.y_axis, self.ax.yaxis)
        self.ax.tick_params(
            axis="both",
            colors=self.styler.axis_text_color,
            labelsize=self.styler.font_size,
            direction="out",
        )
        self.ax.tick_params(axis="x", length=axes.x_axis.tick_size)
        self.ax.tick_params(axis="y", length=axes.y_axis.tick_size)

        if axes.x_grid.ticks:
            self.ax.vlines(
                axes.x_grid.positions, 0, abs(axes.x_grid.tick_size), colors=self.styler.grid_color, linewidth=1, zorder=_Z_GRID
            )
        if axes.y_grid.ticks:
            self.ax.hlines(
                axes.y_grid.positions, 0, abs(axes.y_grid.tick_size), colors=self.styler.grid_color, linewidth=1, zorder=_Z_GRID
            )
        self.elements.extend(spec.css_class for spec in (axes.x_axis, axes.y_axis, axes.x_grid, axes.y_grid))

    @staticmethod
    def _apply_ticks(spec: AxisSpec, axis) -> None:
        axis.set_ticks(list(spec.positions))
        axis.set_ticklabels(list(spec.labels))

    def draw_line(self, path: LinePath) -> None:
        if path.is_empty:
            logger.debug("Skipping empty line path")
            return
        vertices = []
        codes = []
        for command in path.commands:
            vertices.extend(command.points)
            codes.extend(_PATH_CODES[command.op])
        self.ax.add_patch(
            mpatches.PathPatch(
                mpath.Path(vertices, codes),
                fill=False,
                edgecolor=self.styler.line_color,
                linewidth=self.styler.line_width,
                zorder=_Z_LINE,
                gid="lines",
            )
        )
        self.elements.append("lines")

    def attach_text(self, text: LabelText) -> AttachedLabel:
        if self.closed:
            raise RenderOrderError("Cannot attach text to a closed canvas")
        artist = self.ax.text(
            text.x,
            text.y,
            text.text,
            color=self.styler.label_color,
            fontsize=self.styler.font_size,
            ha="left",
            va="center",
            zorder=_Z_LABEL,
            clip_on=False,
            gid=text.css_class,
        )
        self.elements.append(text.css_class)
        return AttachedLabel(artist, self)

    def attach_bubble(self, bubble: LabelBubble) -> None:
        self.ax.add_patch(
            mpatches.Rectangle(
                (bubble.x, bubble.y),
                bubble.width,
                bubble.height,
                facecolor=self.styler.bubble_color,
                edgecolor="none",
                zorder=_Z_BUBBLE,
                clip_on=False,
                gid=bubble.css_class,
            )
        )
        self.elements.append(bubble.css_class)

    def to_svg(self) -> str:
        buffer = io.StringIO()
        self.figure.savefig(
            buffer,
            format="svg",
            facecolor=self.styler.background_color,
            metadata={"Date": None},
        )
        return buffer.getvalue()

    def close(self) -> None:
        """Release matplotlib figure resources"""
        if self.closed:
            return
        self.closed = True
        try:
            plt.close(self.figure)
        except (RuntimeError, ValueError, TypeError) as cleanup_error:
            logger.warning("Error during matplotlib figure cleanup: %s", cleanup_error)

    def __enter__(self) -> ChartCanvas:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


__all__ = ["AttachedLabel", "ChartCanvas"]
