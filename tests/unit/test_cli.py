"""Tests for cli module."""

import json
from pathlib import Path

import orjson
import pytest

from indicator_charts import cli
from indicator_charts.data_models.dataset import DISPLAY_ORDER

SHIPPED_CONFIG = Path(__file__).resolve().parents[2] / "config"


@pytest.fixture(autouse=True)
def _no_logging_setup(monkeypatch):
    monkeypatch.setattr(cli, "setup_logging", lambda **kwargs: None)


@pytest.fixture
def data_file(tmp_path, raw_payload):
    path = tmp_path / "metrics.json"
    path.write_bytes(orjson.dumps(raw_payload))
    return path


class TestBuildParser:
    """Tests for build_parser."""

    def test_defaults(self) -> None:
        """Test default arguments."""
        args = cli.build_parser().parse_args([])

        assert args.width is None
        assert args.output == Path("build")
        assert args.config_dir is None
        assert not args.verbose


class TestMain:
    """Tests for main."""

    def test_writes_every_chart_and_page(self, tmp_path, data_file) -> None:
        """Test a clean run writes one SVG per metric plus the page."""
        output = tmp_path / "out"

        code = cli.main(
            ["--data", str(data_file), "--width", "940", "--output", str(output), "--config-dir", str(SHIPPED_CONFIG)]
        )

        assert code == cli.EXIT_OK
        assert sorted(path.stem for path in output.glob("*.svg")) == sorted(DISPLAY_ORDER)
        page = (output / "index.html").read_text(encoding="utf-8")
        assert page.count('class="chart-wrapper"') == len(DISPLAY_ORDER)
        assert "<svg" in page

    def test_partial_failure(self, tmp_path, raw_payload) -> None:
        """Test a failing metric gives the partial exit code and no SVG for it."""
        raw_payload["stocks"]["ticks"] = [1, 2, 3, 4]
        data_file = tmp_path / "metrics.json"
        data_file.write_bytes(orjson.dumps(raw_payload))
        output = tmp_path / "out"

        code = cli.main(["--data", str(data_file), "--width", "400", "--output", str(output)])

        assert code == cli.EXIT_PARTIAL
        assert not (output / "stocks.svg").exists()
        assert (output / "gdp.svg").exists()

    def test_failed_metric_removes_previous_svg(self, tmp_path, raw_payload) -> None:
        """Test a chart that fails on a rerun does not leave its old SVG behind."""
        raw_payload["stocks"]["ticks"] = [1, 2, 3, 4]
        data_file = tmp_path / "metrics.json"
        data_file.write_bytes(orjson.dumps(raw_payload))
        output = tmp_path / "out"

        assert cli.main(["--data", str(data_file), "--width", "940", "--output", str(output)]) == cli.EXIT_OK
        assert (output / "stocks.svg").exists()

        code = cli.main(["--data", str(data_file), "--width", "400", "--output", str(output)])

        assert code == cli.EXIT_PARTIAL
        assert not (output / "stocks.svg").exists()
        assert (output / "gdp.svg").exists()

    def test_too_narrow_width_fails(self, tmp_path, data_file) -> None:
        """Test a width with no plotting area renders nothing."""
        output = tmp_path / "out"

        code = cli.main(["--data", str(data_file), "--width", "50", "--output", str(output)])

        assert code == cli.EXIT_FAILED
        assert not output.exists()

    def test_missing_data_file(self, tmp_path) -> None:
        """Test an unreadable dataset stops before rendering."""
        assert cli.main(["--data", str(tmp_path / "absent.json")]) == cli.EXIT_FAILED

    def test_bad_config_dir(self, tmp_path, data_file) -> None:
        """Test an explicit config directory without the file is fatal."""
        code = cli.main(["--data", str(data_file), "--config-dir", str(tmp_path)])

        assert code == cli.EXIT_FAILED

    def test_invalid_config(self, tmp_path, data_file) -> None:
        """Test a malformed config file is fatal."""
        config_dir = tmp_path / "config"
        config_dir.mkdir()
        (config_dir / "chart_config.json").write_text(json.dumps({"layout": {}}), encoding="utf-8")

        assert cli.main(["--data", str(data_file), "--config-dir", str(config_dir)]) == cli.EXIT_FAILED
