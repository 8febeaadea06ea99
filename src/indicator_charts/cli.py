"""Command line entry point: render every indicator chart to SVG plus an HTML page."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .chart_generator.layout_controller import ResponsiveLayoutController
from .config.settings import ChartSettings
from .data_loader import DEFAULT_DATA_PATH, load_dataset
from .exceptions import ApplicationError
from .logging_config import setup_logging
from .page_builder import build_page

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_PARTIAL = 1
EXIT_FAILED = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render economic indicator charts")
    parser.add_argument("--data", type=Path, default=DEFAULT_DATA_PATH, help="metrics JSON file")
    parser.add_argument("--width", type=float, default=None, help="container width in pixels")
    parser.add_argument("--output", type=Path, default=Path("build"), help="directory for SVG files and index.html")
    parser.add_argument("--config-dir", type=Path, default=None, help="directory containing chart_config.json")
    parser.add_argument("--verbose", "-v", action="store_true", help="log debug output")
    return parser


def _load_settings(config_dir: Optional[Path]) -> ChartSettings:
    try:
        return ChartSettings.load(config_dir=config_dir)
    except FileNotFoundError:
        if config_dir is not None:
            raise
        logger.info("No chart config file found, using built-in layout defaults")
        return ChartSettings.from_environment()


def write_outputs(controller: ResponsiveLayoutController, output_dir: Path) -> List[Path]:
    output_dir.mkdir(parents=True, exist_ok=True)
    written = []
    for container in controller.containers:
        path = output_dir / f"{container.key}.svg"
        if container.content is None:
            if path.exists():
                logger.info("Removing stale chart %s", path)
                path.unlink()
            continue
        path.write_text(container.content.svg, encoding="utf-8")
        written.append(path)
    page_path = output_dir / "index.html"
    page_path.write_text(build_page(controller.state.dataset, controller.containers), encoding="utf-8")
    written.append(page_path)
    return written


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(level=logging.DEBUG if args.verbose else logging.INFO)

    try:
        settings = _load_settings(args.config_dir)
        dataset = load_dataset(args.data)
    except (ApplicationError, FileNotFoundError) as exc:
        logger.error("Unable to start: %s", exc)
        return EXIT_FAILED

    width = args.width if args.width is not None else settings.default_width
    controller = ResponsiveLayoutController(dataset, measure_width=lambda: width, settings=settings)
    report = controller.render()
    if report.skipped:
        logger.error("Nothing rendered at width %spx", width)
        return EXIT_FAILED

    written = write_outputs(controller, args.output)
    logger.info("Wrote %d files to %s", len(written), args.output)
    for key, error in report.failures.items():
        logger.warning("%s not rendered: %s", key, error)
    return EXIT_OK if report.succeeded else EXIT_PARTIAL


if __name__ == "__main__":
    sys.exit(main())
