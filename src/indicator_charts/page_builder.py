"""HTML scaffolding around the rendered charts."""

from __future__ import annotations

import html
import logging
from typing import List, Sequence

from .chart_generator.containers import ContainerRegistry
from .data_models.dataset import DISPLAY_ORDER, Dataset

logger = logging.getLogger(__name__)

_PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>{title}</title>
</head>
<body>
<div id="interactive-content">
<div id="charts">
{charts}
</div>
</div>
</body>
</html>
"""


def inline_svg(svg: str) -> str:
    """Strip the XML prolog so the document can sit inside HTML."""
    start = svg.find("<svg")
    return svg[start:] if start >= 0 else svg


def source_line(url: str, source: str, last_updated: str) -> str:
    return (
        f'Data: <a href="{html.escape(url, quote=True)}">{html.escape(source)}</a>.'
        f"&nbsp;&nbsp;&nbsp;Last updated: {html.escape(last_updated)}"
    )


def build_chart_wrapper(key: str, dataset: Dataset, containers: ContainerRegistry) -> str:
    """
    One wrapper per metric: heading, description, chart slot and source line.

    Descriptions are authored markup and are inserted as-is.
    """
    series = dataset[key]
    container = containers.get(key)
    chart_markup = inline_svg(container.content.svg) if container.content is not None else ""
    lines = [
        f'<div id="{html.escape(key, quote=True)}" class="chart-wrapper">',
        f"<h2>{html.escape(series.name)}</h2>",
        f"<p>{series.description}</p>",
        f'<div class="graphic-wrapper chart">{chart_markup}</div>',
        f'<div class="source">{source_line(series.source_url, series.source_label, series.last_updated)}</div>',
        "</div>",
    ]
    return "\n".join(lines)


def build_page(
    dataset: Dataset,
    containers: ContainerRegistry,
    *,
    keys: Sequence[str] = DISPLAY_ORDER,
    title: str = "Economic indicators",
) -> str:
    wrappers: List[str] = []
    for key in keys:
        if key not in dataset:
            logger.warning("Leaving %s out of the page: no parsed series", key)
            continue
        wrappers.append(build_chart_wrapper(key, dataset, containers))
    return _PAGE_TEMPLATE.format(title=html.escape(title), charts="\n".join(wrappers))


__all__ = ["build_chart_wrapper", "build_page", "inline_svg", "source_line"]
