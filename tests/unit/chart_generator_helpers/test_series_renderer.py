"""Tests for chart_generator_helpers.series_renderer module."""

from datetime import datetime

import pytest

from indicator_charts.chart_generator.exceptions import RenderOrderError, TickCardinalityError
from indicator_charts.chart_generator_helpers.scale_builder import MIN_DATE, ScaleBuilder
from indicator_charts.chart_generator_helpers.series_renderer import SeriesRenderer
from indicator_charts.data_models.metric_series import Frequency, MetricSeries


class FakeHandle:
    def __init__(self, width: float, attached: bool = True):
        self.width = width
        self.attached = attached
        self.measured = 0

    @property
    def is_attached(self) -> bool:
        return self.attached

    def measure_width(self) -> float:
        self.measured += 1
        return self.width


class FakeSurface:
    """Records the order in which label pieces are attached."""

    def __init__(self, width: float = 42.0, attached: bool = True):
        self.calls = []
        self.handle = FakeHandle(width, attached)

    def attach_text(self, text):
        self.calls.append(("text", text))
        return self.handle

    def attach_bubble(self, bubble):
        assert self.handle.measured == 1, "bubble attached before text was measured"
        self.calls.append(("bubble", bubble))


@pytest.fixture
def scales():
    return ScaleBuilder().build(870, 148, -4, 6)


class TestRenderLine:
    """Tests for SeriesRenderer.render_line."""

    def test_annual_periods_round_trip(self, scales, raw_metric) -> None:
        """Test annual periods parse to January 1 and x increases along the path."""
        raw_metric["data"] = [{"period": "2009", "value": -4.2}, {"period": "2010", "value": 2.1}]
        series = MetricSeries.from_raw("gdp", raw_metric)

        path = SeriesRenderer().render_line(scales.x, scales.y, series.points)

        assert series.frequency is Frequency.ANNUAL
        assert [point.date for point in series.points] == [datetime(2009, 1, 1), datetime(2010, 1, 1)]
        xs = [x for x, _ in path.anchors]
        assert xs[0] < xs[1]
        assert xs[0] == pytest.approx(scales.x(datetime(2009, 1, 1)))
        assert path.anchors[0][1] > path.anchors[1][1]

    def test_path_has_an_anchor_per_point(self, scales, series) -> None:
        """Test every sample is on the path."""
        path = SeriesRenderer().render_line(scales.x, scales.y, series.points)

        assert len(path.anchors) == len(series.points)

    def test_no_points_gives_empty_path(self, scales) -> None:
        """Test an empty series draws nothing."""
        assert SeriesRenderer().render_line(scales.x, scales.y, ()).is_empty


class TestRenderLabel:
    """Tests for SeriesRenderer.render_label."""

    def test_attach_measure_then_size(self, scales) -> None:
        """Test text is attached and measured before the bubble is sized."""
        surface = FakeSurface(width=42.0)

        label = SeriesRenderer().render_label(scales.x, scales.y, (-4, -1.5, 1, 3.5, 6), "% change", surface)

        assert [kind for kind, _ in surface.calls] == ["text", "bubble"]
        assert label.text_width == 42.0
        assert label.bubble.width == 52.0
        assert label.bubble.height == 20

    def test_anchored_at_left_edge_and_last_tick(self, scales) -> None:
        """Test the label sits 9px left of the first date, level with the last tick."""
        label = SeriesRenderer().render_label(scales.x, scales.y, (-4, -1.5, 1, 3.5, 6), "% change", FakeSurface())

        assert label.text.x == pytest.approx(scales.x(MIN_DATE) - 9)
        assert label.text.y == pytest.approx(scales.y(6))
        assert label.bubble.x == label.text.x
        assert label.bubble.y == pytest.approx(label.text.y - 10)

    def test_detached_text_cannot_be_measured(self, scales) -> None:
        """Test measuring a detached handle is an ordering error."""
        with pytest.raises(RenderOrderError):
            SeriesRenderer().render_label(scales.x, scales.y, (0, 6), "x", FakeSurface(attached=False))

    def test_requires_tick_values(self, scales) -> None:
        """Test placement needs a last tick value."""
        with pytest.raises(TickCardinalityError):
            SeriesRenderer().render_label(scales.x, scales.y, (), "x", FakeSurface())

    def test_custom_padding(self, scales) -> None:
        """Test bubble padding and height come from the renderer settings."""
        renderer = SeriesRenderer(label_offset=4, bubble_padding=6, bubble_height=16)

        label = renderer.render_label(scales.x, scales.y, (0, 6), "x", FakeSurface(width=10))

        assert label.bubble.width == 16
        assert label.bubble.height == 16
        assert label.text.x == pytest.approx(-4)
