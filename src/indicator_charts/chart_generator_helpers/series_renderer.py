from __future__ import annotations

"""Line path and label bubble for a metric series."""


import logging
from dataclasses import dataclass
from typing import Protocol, Sequence

from ..chart_generator.exceptions import RenderOrderError, TickCardinalityError
from ..data_models.metric_series import SeriesPoint
from .monotone_path import LinePath, build_monotone_path
from .scale_builder import MIN_DATE, LinearScale, TimeScale

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LabelText:
    x: float
    y: float
    text: str
    dy_em: float = 0.32
    css_class: str = "label"


@dataclass(frozen=True)
class LabelBubble:
    x: float
    y: float
    width: float
    height: float
    css_class: str = "label-bubble"


@dataclass(frozen=True)
class SeriesLabel:
    bubble: LabelBubble
    text: LabelText
    text_width: float


class AttachedText(Protocol):
    """Handle to a text element that is part of a render tree."""

    @property
    def is_attached(self) -> bool: ...

    def measure_width(self) -> float: ...


class TextSurface(Protocol):
    """Drawing surface that can host label text and its bubble."""

    def attach_text(self, text: LabelText) -> AttachedText: ...

    def attach_bubble(self, bubble: LabelBubble) -> None: ...


class SeriesRenderer:
    """Draws the interpolated line and the fixed annotation label."""

    def __init__(
        self,
        *,
        label_offset: float = 9,
        bubble_padding: float = 10,
        bubble_height: float = 20,
    ):
        self.label_offset = label_offset
        self.bubble_padding = bubble_padding
        self.bubble_height = bubble_height

    def render_line(self, x_scale: TimeScale, y_scale: LinearScale, points: Sequence[SeriesPoint]) -> LinePath:
        xs = x_scale.map_many([point.date for point in points])
        ys = y_scale.map_many([point.value for point in points])
        return build_monotone_path(xs, ys)

    def render_label(
        self,
        x_scale: TimeScale,
        y_scale: LinearScale,
        tick_values: Sequence[float],
        label_text: str,
        surface: TextSurface,
    ) -> SeriesLabel:
        """
        Place the label at the left edge, level with the last tick value.

        Text width is only known once the text is part of the render tree, so this
        runs in three steps: attach the text, measure it, then size the bubble.
        """
        if not tick_values:
            raise TickCardinalityError("Label placement needs at least one tick value")

        text = LabelText(x=x_scale(MIN_DATE) - self.label_offset, y=y_scale(tick_values[-1]), text=label_text)
        handle = surface.attach_text(text)
        if not handle.is_attached:
            raise RenderOrderError(f"Label {label_text!r} must be attached before it is measured")
        text_width = handle.measure_width()

        bubble = LabelBubble(
            x=text.x,
            y=text.y - self.bubble_height / 2,
            width=text_width + self.bubble_padding,
            height=self.bubble_height,
        )
        surface.attach_bubble(bubble)
        logger.debug("Label %r measured %.1fpx", label_text, text_width)
        return SeriesLabel(bubble=bubble, text=text, text_width=text_width)


__all__ = [
    "AttachedText",
    "LabelBubble",
    "LabelText",
    "SeriesLabel",
    "SeriesRenderer",
    "TextSurface",
]
