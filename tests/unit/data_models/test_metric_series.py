"""Tests for data_models.metric_series module."""

from datetime import datetime

import pytest

from indicator_charts.data_models.metric_series import Frequency, MetricSeries
from indicator_charts.exceptions import DataError


class TestFrequency:
    """Tests for Frequency."""

    @pytest.mark.parametrize(
        "label,period,expected",
        [
            ("Annual", "2009", datetime(2009, 1, 1)),
            ("Monthly", "2016-11", datetime(2016, 11, 1)),
            ("Daily", "2020-03-16", datetime(2020, 3, 16)),
        ],
    )
    def test_parse_period(self, label, period, expected) -> None:
        """Test each frequency parses its own period format."""
        assert Frequency.from_label(label).parse_period(period) == expected

    def test_unknown_label_uses_daily_format(self) -> None:
        """Test unrecognised frequencies parse as daily periods."""
        assert Frequency.from_label("Weekly") is Frequency.DAILY

    def test_mismatched_period_raises(self) -> None:
        """Test a period in the wrong format is rejected."""
        with pytest.raises(ValueError):
            Frequency.ANNUAL.parse_period("2009-01")


class TestMetricSeriesFromRaw:
    """Tests for MetricSeries.from_raw."""

    def test_maps_raw_fields(self, raw_metric) -> None:
        """Test raw fields land on the normalised record."""
        series = MetricSeries.from_raw("gdp", raw_metric)

        assert series.key == "gdp"
        assert series.name == "GDP growth"
        assert series.source_label == "BEA"
        assert series.source_url == "https://www.bea.gov/"
        assert series.frequency is Frequency.ANNUAL
        assert series.min_value == -4.0
        assert series.max_value == 6.0
        assert series.tick_values == (-4.0, -1.5, 1.0, 3.5, 6.0)
        assert series.show_plus_sign is True
        assert series.label == "% change"

    def test_annual_period_is_january_first(self, raw_metric) -> None:
        """Test annual periods map to January 1 of that year."""
        raw_metric["data"] = [{"period": "2009", "value": -4.2}]

        series = MetricSeries.from_raw("gdp", raw_metric)

        assert series.points[0].date == datetime(2009, 1, 1)
        assert series.points[0].value == -4.2
        assert series.points[0].period == "2009"

    def test_points_sorted_by_date(self, raw_metric) -> None:
        """Test out-of-order data is sorted ascending."""
        raw_metric["data"] = [
            {"period": "2012", "value": 2},
            {"period": "2003", "value": 1},
            {"period": "2007", "value": 3},
        ]

        series = MetricSeries.from_raw("gdp", raw_metric)

        assert [date.year for date in series.dates] == [2003, 2007, 2012]
        assert series.values == (1.0, 3.0, 2.0)

    def test_show_plus_defaults_to_false(self, raw_metric) -> None:
        """Test the plus-sign flag is optional."""
        del raw_metric["show_plus"]

        assert MetricSeries.from_raw("gdp", raw_metric).show_plus_sign is False

    def test_missing_fields_raise(self, raw_metric) -> None:
        """Test every required field must be present."""
        del raw_metric["ticks"]
        del raw_metric["label"]

        with pytest.raises(DataError) as exc_info:
            MetricSeries.from_raw("gdp", raw_metric)

        assert exc_info.value.missing == ["ticks", "label"]
        assert exc_info.value.metric == "gdp"

    def test_bad_period_raises(self, raw_metric) -> None:
        """Test a period that does not match the frequency is a data error."""
        raw_metric["frequency"] = "Monthly"

        with pytest.raises(DataError, match="does not match Monthly"):
            MetricSeries.from_raw("gdp", raw_metric)

    def test_non_numeric_value_raises(self, raw_metric) -> None:
        """Test values must be numeric."""
        raw_metric["data"] = [{"period": "2009", "value": "n/a"}]

        with pytest.raises(DataError, match="must be numeric"):
            MetricSeries.from_raw("gdp", raw_metric)

    @pytest.mark.parametrize(
        "field_name,raw_value",
        [("max", "inf"), ("min", "nan"), ("max", float("-inf"))],
    )
    def test_non_finite_bound_raises(self, raw_metric, field_name, raw_value) -> None:
        """Test infinite or NaN bounds are rejected."""
        raw_metric[field_name] = raw_value

        with pytest.raises(DataError, match="must be finite"):
            MetricSeries.from_raw("gdp", raw_metric)

    def test_non_finite_point_value_raises(self, raw_metric) -> None:
        """Test a NaN observation is rejected."""
        raw_metric["data"][1]["value"] = "nan"

        with pytest.raises(DataError, match="must be finite"):
            MetricSeries.from_raw("gdp", raw_metric)

    def test_boolean_bound_raises(self, raw_metric) -> None:
        """Test booleans are not accepted as numbers."""
        raw_metric["min"] = True

        with pytest.raises(DataError):
            MetricSeries.from_raw("gdp", raw_metric)

    def test_entry_without_value_raises(self, raw_metric) -> None:
        """Test data entries need both period and value."""
        raw_metric["data"] = [{"period": "2009"}]

        with pytest.raises(DataError, match="needs 'period' and 'value'"):
            MetricSeries.from_raw("gdp", raw_metric)

    def test_ticks_must_be_a_list(self, raw_metric) -> None:
        """Test a string is not a tick list."""
        raw_metric["ticks"] = "1,2,3"

        with pytest.raises(DataError, match="ticks must be a list"):
            MetricSeries.from_raw("gdp", raw_metric)

    def test_non_mapping_raises(self) -> None:
        """Test a metric must be an object."""
        with pytest.raises(DataError, match="must be an object"):
            MetricSeries.from_raw("gdp", ["not", "a", "dict"])
