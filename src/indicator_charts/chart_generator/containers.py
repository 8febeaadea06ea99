from __future__ import annotations

"""Per-metric chart containers addressed by ``#<key> .chart`` selectors."""


import logging
from typing import Dict, Iterable, Iterator, Optional, Tuple

from .scene import RenderedChart

logger = logging.getLogger(__name__)


def selector_for(key: str) -> str:
    return f"#{key} .chart"


class ChartContainer:
    """Slot holding the current chart for one metric; every write replaces the old content."""

    def __init__(self, key: str):
        self.key = key
        self.selector = selector_for(key)
        self._content: Optional[RenderedChart] = None
        self.replace_count = 0

    @property
    def content(self) -> Optional[RenderedChart]:
        return self._content

    @property
    def children(self) -> Tuple[RenderedChart, ...]:
        return (self._content,) if self._content is not None else ()

    @property
    def height(self) -> float:
        return self._content.height if self._content is not None else 0.0

    def clear(self) -> None:
        self._content = None

    def replace(self, rendered: RenderedChart) -> None:
        self.clear()
        self._content = rendered
        self.replace_count += 1


class ContainerRegistry:
    """Lookup of chart containers by metric key or selector."""

    def __init__(self, keys: Iterable[str]):
        self._containers: Dict[str, ChartContainer] = {key: ChartContainer(key) for key in keys}

    def get(self, key: str) -> ChartContainer:
        try:
            return self._containers[key]
        except KeyError:
            container = ChartContainer(key)
            self._containers[key] = container
            logger.debug("Created container %s on demand", container.selector)
            return container

    def select(self, selector: str) -> ChartContainer:
        for container in self._containers.values():
            if container.selector == selector:
                return container
        raise KeyError(f"No chart container matches {selector!r}")

    def __iter__(self) -> Iterator[ChartContainer]:
        return iter(self._containers.values())

    def __len__(self) -> int:
        return len(self._containers)

    @property
    def total_height(self) -> float:
        return sum(container.height for container in self._containers.values())


__all__ = ["ChartContainer", "ContainerRegistry", "selector_for"]
