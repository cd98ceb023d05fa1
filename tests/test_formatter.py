"""
Tests for the bilingual response formatter.
"""

import pytest

from meteoquery.services.formatter import describe, describe_in
from meteoquery.services.interpreter import interpret
from meteoquery.services.projections import evaluate


class TestRainTemplate:
    def test_zero_precipitation_means_no_rain(self):
        result = [{"time": "2024-06-01T13:00:00Z", "precipitation": 0}]
        text = describe("Will it rain?", result)

        assert text.en == "No rain expected in the next period"
        assert text.lv == "Nākamajā periodā lietus nav paredzams"
        assert "0mm" not in text.en
        assert "0mm" not in text.lv

    def test_empty_result_means_no_rain(self):
        text = describe("Kad būs lietus?", [])

        assert text.en.startswith("No rain expected")
        assert "lietus nav paredzams" in text.lv

    def test_rain_expected(self):
        result = [{"time": "2024-06-01T13:00:00Z", "precipitation": 1.2}]
        text = describe("When will it rain?", result)

        assert text.en == "Rain is expected. It starts at 13:00 with 1.2mm of precipitation"
        assert text.lv == "Lietus ir paredzams. Tas sāksies plkst. 13:00 ar 1.2mm nokrišņiem"


class TestTopicTemplates:
    def test_temperature_one_decimal(self):
        text = describe("temperature", [{"time": "2024-06-01T12:00:00Z", "temperature": 14}])

        assert text.en == "The temperature will be 14.0°C at 12:00"
        assert text.lv == "Temperatūra būs 14.0°C plkst. 12:00"

    def test_humidity(self):
        text = describe("humidity", [{"time": "2024-06-01T12:00:00Z", "humidity": 78.0}])

        assert text.en == "The humidity will be 78% at 12:00"
        assert text.lv == "Mitrums būs 78% plkst. 12:00"

    def test_wind(self):
        text = describe("vējš", [{"time": "2024-06-01T12:00:00Z", "windSpeed": 3.5, "windDirection": 210.0}])

        assert text.en == "The wind speed will be 3.5 m/s from 210° at 12:00"
        assert text.lv == "Vēja ātrums būs 3.5 m/s no 210° virziena plkst. 12:00"

    def test_cloud_and_pressure(self):
        cloud = describe("clouds", [{"time": "2024-06-01T12:00:00Z", "cloudCover": 40.0}])
        pressure = describe("spiediens", [{"time": "2024-06-01T12:00:00Z", "pressure": 1012.5}])

        assert cloud.en == "The cloud cover will be 40% at 12:00"
        assert pressure.lv == "Spiediens būs 1012.5 hPa plkst. 12:00"

    def test_values_keep_full_precision(self):
        text = describe("pressure", [{"time": "2024-06-01T12:00:00Z", "pressure": 1013.4567}])

        assert text.en == "The pressure will be 1013.4567 hPa at 12:00"

    def test_current_from_raw_entry(self, feature):
        entry = evaluate(interpret("now"), feature)
        text = describe("now", entry)

        assert text.en == (
            "Current weather conditions: Temperature 13.2°C, Humidity 82%, "
            "Wind 3.5 m/s from 210°, Sky: partlycloudy_day"
        )
        assert text.lv.startswith("Pašreizējie laika apstākļi: Temperatūra 13.2°C")

    def test_current_without_symbol(self, make_entry):
        entry = make_entry("2024-06-01T12:00:00Z", next_hour=False)

        text = describe("now", entry)

        assert text.en.endswith("Sky: data not available")
        assert text.lv.endswith("Debesis: dati nav pieejami")

    def test_missing_value_reports_unavailable(self):
        text = describe("temperature", [{"time": "2024-06-01T12:00:00Z"}])

        assert text.en == "Temperature data not available"
        assert text.lv == "Temperatūras dati nav pieejami"

    def test_non_sequence_result(self):
        text = describe("humidity", None)

        assert text.en == "Humidity data not available"
        assert text.lv == "Mitruma dati nav pieejami"


class TestComposite:
    def test_composite_uses_first_part(self, feature):
        query = "What's the current temperature?"
        text = describe(query, evaluate(interpret(query), feature))

        assert text.en == "The temperature will be 13.2°C at 11:00"

    def test_hours_only_query_describes_current(self, feature):
        query = "next 2 hours"
        text = describe(query, evaluate(interpret(query), feature))

        assert text.en.startswith("Current weather conditions: Temperature 13.2°C")


@pytest.mark.parametrize("language", ["en", "lv"])
def test_describe_in_matches_describe(language):
    result = [{"time": "2024-06-01T12:00:00Z", "temperature": 9.25}]

    assert describe_in("temp", result, language) == getattr(describe("temp", result), language)
