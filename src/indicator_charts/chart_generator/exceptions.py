from __future__ import annotations

from typing import Iterable, Sequence

from ..exceptions import ApplicationError, ConfigurationError


class ChartConfigurationError(ConfigurationError):
    """Raised when chart inputs would produce incorrect geometry."""


class MissingMetricError(ChartConfigurationError):
    """Raised when a registered metric is absent from the dataset."""

    @classmethod
    def for_keys(cls, keys: Iterable[str]) -> MissingMetricError:
        missing = list(keys)
        return cls(f"Dataset is missing metrics: {', '.join(missing)}", missing=missing)


class TickCardinalityError(ChartConfigurationError):
    """Raised when a metric's tick values cannot satisfy the axis layout."""

    @classmethod
    def for_thinning(cls, tick_values: Sequence[float], expected: int) -> TickCardinalityError:
        return cls(
            f"Narrow-layout tick thinning needs exactly {expected} tick values, got {len(tick_values)}",
            tick_values=tuple(tick_values),
        )


class DegenerateDomainError(ChartConfigurationError):
    """Raised when a value domain has zero width."""


class NegativeBandWidthError(ChartConfigurationError):
    """Raised when a shading band ends before it starts."""


class UnmeasurableLayoutError(ApplicationError):
    """Raised when the container has no usable size for a render pass."""


class RenderOrderError(RuntimeError):
    """Raised when label text is measured before it is attached to a surface."""


__all__ = [
    "ChartConfigurationError",
    "DegenerateDomainError",
    "MissingMetricError",
    "NegativeBandWidthError",
    "RenderOrderError",
    "TickCardinalityError",
    "UnmeasurableLayoutError",
]
