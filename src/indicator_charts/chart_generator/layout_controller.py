"""Responsive layout controller: measures, classifies, re-renders, notifies."""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional

from ..chart_generator_helpers.resize_throttle import ResizeThrottle
from ..config.settings import ChartSettings
from ..data_models.dataset import Dataset
from ..data_models.metric_series import MetricSeries
from ..exceptions import DataError
from .containers import ContainerRegistry
from .contexts import ChartDimensions, ChartEngineState, RenderReport, ViewportState
from .exceptions import ChartConfigurationError, MissingMetricError, UnmeasurableLayoutError
from .host_frame import HostFrameNotifier
from .registry import MetricRegistry
from .runtime import ChartGenerator

logger = logging.getLogger(__name__)

# Called as schedule(delay_seconds, callback); the host runs callback once the delay has elapsed.
FlushScheduler = Callable[[float, Callable[[], None]], None]


class ResponsiveLayoutController:
    """
    Owns the engine state and drives full re-renders.

    Every pass clears and rebuilds each registered chart from the immutable
    dataset and a fresh viewport snapshot, so repeating a pass at the same
    width yields the same output. Configuration and data errors in one metric
    are logged and reported without stopping the others. Any other exception
    aborts the pass and propagates after the host has been notified.
    """

    def __init__(
        self,
        dataset: Dataset,
        *,
        measure_width: Callable[[], float],
        containers: Optional[ContainerRegistry] = None,
        notifier: Optional[HostFrameNotifier] = None,
        settings: Optional[ChartSettings] = None,
        generator: Optional[ChartGenerator] = None,
        registry: Optional[MetricRegistry] = None,
        throttle: Optional[ResizeThrottle] = None,
        schedule: Optional[FlushScheduler] = None,
    ):
        self.settings = settings if settings is not None else ChartSettings()
        self.registry = registry if registry is not None else MetricRegistry()
        self.state = ChartEngineState(dataset=dataset)
        self.containers = containers if containers is not None else ContainerRegistry(self.registry.keys)
        self.notifier = notifier if notifier is not None else HostFrameNotifier()
        self.generator = generator if generator is not None else ChartGenerator(settings=self.settings)
        self.throttle = throttle if throttle is not None else ResizeThrottle(self.settings.resize_throttle_seconds)
        self._measure_width = measure_width
        self._schedule = schedule
        self._flush_scheduled = False

        missing = self.registry.missing(dataset)
        if missing:
            logger.warning("Dataset is missing registered metrics: %s", ", ".join(missing))

    @property
    def viewport(self) -> Optional[ViewportState]:
        return self.state.viewport

    def _skip(self, reason: str, width: float) -> RenderReport:
        logger.warning("Skipping render pass: %s (width=%s)", reason, width)
        report = RenderReport(viewport=None, skipped=True)
        self.state.last_report = report
        return report

    def _series_for(self, key: str) -> MetricSeries:
        dataset = self.state.dataset
        if key in dataset.series:
            return dataset.series[key]
        if key in dataset.errors:
            raise dataset.errors[key]
        raise MissingMetricError.for_keys([key])

    def render(self) -> RenderReport:
        """Measure the container, rebuild every chart, then tell the host the height changed."""
        width = float(self._measure_width())
        if width <= 0:
            return self._skip("container is not measurable", width)

        viewport = ViewportState.classify(width, self.settings.mobile_breakpoint)
        try:
            ChartDimensions.for_viewport(viewport, self.settings)
        except UnmeasurableLayoutError as exc:
            return self._skip(str(exc), width)

        previous = self.state.viewport
        if previous is not None and previous.is_mobile != viewport.is_mobile:
            logger.info("Layout changed from %s to %s at %.0fpx", previous.layout_name, viewport.layout_name, width)
        self.state.viewport = viewport

        rendered: List[str] = []
        failures: Dict[str, Exception] = {}
        try:
            for key in self.registry.keys:
                container = self.containers.get(key)
                container.clear()
                try:
                    chart = self.generator.render_chart(self._series_for(key), viewport)
                except (ChartConfigurationError, DataError) as exc:
                    logger.exception("Chart %s failed to render", key)
                    failures[key] = exc
                    continue
                container.replace(chart)
                rendered.append(key)
        finally:
            # Earlier containers may already hold new charts.
            self.notifier.resize()
        self.state.render_count += 1
        report = RenderReport(viewport=viewport, rendered=tuple(rendered), failures=failures)
        self.state.last_report = report
        logger.info(
            "Render pass %d at %.0fpx (%s): %d rendered, %d failed",
            self.state.render_count,
            width,
            viewport.layout_name,
            len(rendered),
            len(failures),
        )
        return report

    def on_resize(self) -> Optional[RenderReport]:
        """
        Throttled resize handler; events inside the interval are coalesced.

        A coalesced event is owed one trailing render. With a ``schedule``
        callable the controller books that render itself; without one the
        caller must call ``flush_pending`` once ``throttle.seconds_until_ready()``
        reaches zero.
        """
        if self.throttle.request():
            return self.render()
        logger.debug("Resize coalesced (%d dropped so far)", self.throttle.dropped_count)
        if self._schedule is not None and not self._flush_scheduled:
            self._flush_scheduled = True
            self._schedule(self.throttle.seconds_until_ready(), self._run_scheduled_flush)
        return None

    def _run_scheduled_flush(self) -> None:
        self._flush_scheduled = False
        self.flush_pending()

    def flush_pending(self) -> Optional[RenderReport]:
        """Run the trailing render owed to coalesced resize events, if its interval has passed."""
        if self.throttle.take_pending():
            return self.render()
        return None


__all__ = ["FlushScheduler", "ResponsiveLayoutController"]
