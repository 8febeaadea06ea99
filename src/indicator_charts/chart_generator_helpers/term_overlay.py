from __future__ import annotations

"""Shaded bands marking each presidential term behind a chart."""


import logging
import re
from dataclasses import dataclass
from typing import List, Sequence

from ..chart_generator.exceptions import NegativeBandWidthError
from ..data_models.term import Term
from .scale_builder import TimeScale

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")
_UNSAFE = re.compile(r"[^\w\-]+")
_REPEATED_DASH = re.compile(r"-{2,}")


def classify(text: str) -> str:
    """Convert a label into a lowercase, dash separated CSS class name."""
    slug = _WHITESPACE.sub("-", str(text).lower())
    slug = _UNSAFE.sub("", slug)
    slug = _REPEATED_DASH.sub("-", slug)
    return slug.strip("-")


@dataclass(frozen=True)
class OverlayBand:
    """A shaded rectangle in plotting-area pixels."""

    slug: str
    x: float
    y: float
    width: float
    height: float

    @property
    def css_class(self) -> str:
        return f"president {self.slug}"


class TermOverlay:
    """Maps the term table onto the horizontal scale."""

    def render(self, x_scale: TimeScale, chart_height: float, terms: Sequence[Term]) -> List[OverlayBand]:
        """Return one band per term in table order; later bands draw over earlier ones."""
        bands = []
        for term in terms:
            x_start = x_scale(term.start)
            x_end = x_scale(term.end)
            width = x_end - x_start
            if width < 0:
                raise NegativeBandWidthError(
                    f"Term {term.label!r} ends ({term.end:%Y-%m-%d}) before it starts ({term.start:%Y-%m-%d})",
                    term=term,
                )
            bands.append(OverlayBand(slug=classify(term.label), x=x_start, y=0.0, width=width, height=chart_height))
        logger.debug("Built %d term bands", len(bands))
        return bands


__all__ = ["OverlayBand", "TermOverlay", "classify"]
