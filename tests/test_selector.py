"""
Tests for the restricted raw query language.
"""

import pytest

from meteoquery.core.errors import QueryError
from meteoquery.services.selector import Filter, Index, Key, Slice, Wildcard, parse_path, run_query


class TestParsePath:
    def test_steps(self):
        steps = parse_path("data.properties.timeseries[0:2][*].time")

        assert steps == [Key("properties"), Key("timeseries"), Slice(0, 2), Wildcard(), Key("time")]

    def test_index_and_open_slice(self):
        assert parse_path("properties.timeseries[-1]")[-1] == Index(-1)
        assert parse_path("properties.timeseries[:3]")[-1] == Slice(None, 3)
        assert parse_path("properties.timeseries[2:]")[-1] == Slice(2, None)

    def test_filter(self):
        step = parse_path("properties.timeseries[?data.next_1_hours.summary.symbol_code == 'rain']")[-1]

        assert step == Filter(("data", "next_1_hours", "summary", "symbol_code"), "==", "rain")

    @pytest.mark.parametrize(
        "text",
        [
            "__import__('os').system('ls')",
            "properties.timeseries.map(t => t.time)",
            "properties.timeseries[0](",
            "properties..timeseries",
            "properties.timeseries[?time]",
            "1 + 1",
            "data",
        ],
    )
    def test_rejects_anything_else(self, text):
        with pytest.raises(QueryError):
            parse_path(text)


class TestRunQuery:
    def test_projection_label(self, feature):
        assert run_query("precipitation", feature) == [{"time": "2024-06-01T13:00:00Z", "precipitation": 1.2}]

    def test_single_value(self, feature):
        assert run_query("data.properties.timeseries[0].data.instant.details.air_temperature", feature) == 13.2

    def test_root_without_prefix(self, feature):
        assert run_query("geometry.coordinates", feature) == [24.1052, 56.9496, 9.0]
        assert run_query("properties.meta.units.wind_speed", feature) == "m/s"

    def test_wildcard_maps_remaining_steps(self, feature):
        assert run_query("properties.timeseries[*].data.instant.details.relative_humidity", feature) == [
            82.0,
            78.0,
            70.0,
            70.0,
        ]

    def test_missing_keys_skipped_after_fan_out(self, feature):
        symbols = run_query("properties.timeseries[*].data.next_1_hours.summary.symbol_code", feature)

        assert symbols == ["partlycloudy_day", "cloudy", "rain"]

    def test_slice(self, feature):
        assert run_query("properties.timeseries[1:3].time", feature) == [
            "2024-06-01T12:00:00Z",
            "2024-06-01T13:00:00Z",
        ]

    def test_numeric_filter(self, feature):
        assert run_query(
            "properties.timeseries[?data.next_1_hours.details.precipitation_amount > 0].time",
            feature,
        ) == ["2024-06-01T13:00:00Z"]

    def test_string_filter(self, feature):
        assert run_query(
            'properties.timeseries[?data.next_1_hours.summary.symbol_code != "rain"].time',
            feature,
        ) == ["2024-06-01T11:00:00Z", "2024-06-01T12:00:00Z"]

    def test_list_query(self, feature):
        result = run_query("[slice:1, properties.timeseries[0].time, humidity]", feature)

        assert len(result) == 3
        assert result[1] == "2024-06-01T11:00:00Z"
        assert result[2][0]["humidity"] == 82.0

    def test_list_query_keeps_commas_inside_filter_literals(self, feature):
        result = run_query(
            "[properties.timeseries[?data.next_1_hours.summary.symbol_code == 'a,b'].time, temperature]",
            feature,
        )

        assert len(result) == 2
        assert result[0] == []
        assert result[1][0]["temperature"] == 13.2

    def test_unknown_field(self, feature):
        with pytest.raises(QueryError, match="Unknown field"):
            run_query("properties.forecast", feature)

    def test_index_out_of_range(self, feature):
        with pytest.raises(QueryError, match="out of range"):
            run_query("properties.timeseries[10]", feature)

    def test_index_on_object(self, feature):
        with pytest.raises(QueryError):
            run_query("properties[0]", feature)

    @pytest.mark.parametrize("text", ["   ", "[]", "[temperature, ]"])
    def test_empty_queries(self, feature, text):
        with pytest.raises(QueryError):
            run_query(text, feature)
