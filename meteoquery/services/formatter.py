"""Bilingual (English / Latvian) sentences describing a query result."""

from __future__ import annotations

from typing import Any, Literal, Optional

from meteoquery.models.views import HumanReadable
from meteoquery.models.weather import parse_timestamp
from meteoquery.services.interpreter import primary_topic

Language = Literal["en", "lv"]
LANGUAGES: tuple[Language, ...] = ("en", "lv")

NOT_AVAILABLE = {"en": "data not available", "lv": "dati nav pieejami"}

# Flat result keys and where the same value lives in a raw time-series entry.
_INSTANT_KEYS = {
    "temperature": "air_temperature",
    "humidity": "relative_humidity",
    "windSpeed": "wind_speed",
    "windDirection": "wind_from_direction",
    "cloudCover": "cloud_area_fraction",
    "pressure": "air_pressure_at_sea_level",
}

_REQUIRED = {
    "temperature": ("temperature",),
    "humidity": ("humidity",),
    "wind": ("windSpeed", "windDirection"),
    "cloud": ("cloudCover",),
    "pressure": ("pressure",),
    "current": ("temperature", "humidity", "windSpeed", "windDirection"),
}

_TEMPLATES = {
    "temperature": {
        "en": "The temperature will be {temperature} at {time}",
        "lv": "Temperatūra būs {temperature} plkst. {time}",
    },
    "humidity": {
        "en": "The humidity will be {humidity}% at {time}",
        "lv": "Mitrums būs {humidity}% plkst. {time}",
    },
    "wind": {
        "en": "The wind speed will be {windSpeed} m/s from {windDirection}° at {time}",
        "lv": "Vēja ātrums būs {windSpeed} m/s no {windDirection}° virziena plkst. {time}",
    },
    "rain": {
        "en": "Rain is expected. It starts at {time} with {precipitation}mm of precipitation",
        "lv": "Lietus ir paredzams. Tas sāksies plkst. {time} ar {precipitation}mm nokrišņiem",
    },
    "cloud": {
        "en": "The cloud cover will be {cloudCover}% at {time}",
        "lv": "Mākoņainība būs {cloudCover}% plkst. {time}",
    },
    "pressure": {
        "en": "The pressure will be {pressure} hPa at {time}",
        "lv": "Spiediens būs {pressure} hPa plkst. {time}",
    },
    "current": {
        "en": (
            "Current weather conditions: Temperature {temperature}, Humidity {humidity}%, "
            "Wind {windSpeed} m/s from {windDirection}°, Sky: {symbol}"
        ),
        "lv": (
            "Pašreizējie laika apstākļi: Temperatūra {temperature}, Mitrums {humidity}%, "
            "Vējš {windSpeed} m/s no {windDirection}° virziena, Debesis: {symbol}"
        ),
    },
}

_NO_RAIN = {
    "en": "No rain expected in the next period",
    "lv": "Nākamajā periodā lietus nav paredzams",
}

_UNAVAILABLE = {
    "temperature": {"en": "Temperature data not available", "lv": "Temperatūras dati nav pieejami"},
    "humidity": {"en": "Humidity data not available", "lv": "Mitruma dati nav pieejami"},
    "wind": {"en": "Wind data not available", "lv": "Vēja dati nav pieejami"},
    "rain": {"en": "Rain data not available", "lv": "Lietus dati nav pieejami"},
    "cloud": {"en": "Cloud data not available", "lv": "Mākoņu dati nav pieejami"},
    "pressure": {"en": "Pressure data not available", "lv": "Spiediena dati nav pieejami"},
    "current": {
        "en": "Current weather data not available",
        "lv": "Pašreizējie laika apstākļu dati nav pieejami",
    },
}


def _dig(value: Any, *keys: str) -> Any:
    for key in keys:
        if not isinstance(value, dict):
            return None
        value = value.get(key)
    return value


def _rows(result: Any) -> list[dict[str, Any]]:
    """Rows of the first result; composite results descend into their first part."""

    value = result
    while isinstance(value, list) and value and isinstance(value[0], list):
        value = value[0]
    if isinstance(value, list):
        return [row for row in value if isinstance(row, dict)]
    if isinstance(value, dict):
        return [value]
    return []


def _field(row: dict[str, Any], key: str) -> Any:
    if key in row:
        return row[key]
    if key in _INSTANT_KEYS:
        return _dig(row, "data", "instant", "details", _INSTANT_KEYS[key])
    if key == "precipitation":
        return _dig(row, "data", "next_1_hours", "details", "precipitation_amount")
    if key == "symbol":
        return _dig(row, "data", "next_1_hours", "summary", "symbol_code")
    return None


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _number(value: float) -> str:
    text = repr(float(value))
    return text[:-2] if text.endswith(".0") else text


def _time(value: Any) -> Optional[str]:
    if not isinstance(value, str):
        return None
    try:
        return parse_timestamp(value).strftime("%H:%M")
    except ValueError:
        return value


def _render(topic: str, row: Optional[dict[str, Any]], language: Language) -> str:
    if topic == "rain":
        amount = _field(row, "precipitation") if row else None
        if not amount:
            return _NO_RAIN[language]
        required: tuple[str, ...] = ("precipitation",)
    else:
        required = _REQUIRED[topic]

    if row is None:
        return _UNAVAILABLE[topic][language]
    values = {key: _field(row, key) for key in required}
    time = _time(row.get("time"))
    if time is None or not all(_is_number(value) for value in values.values()):
        return _UNAVAILABLE[topic][language]

    fields = {key: _number(value) for key, value in values.items()}
    if "temperature" in fields:
        fields["temperature"] = f"{values['temperature']:.1f}°C"
    symbol = _field(row, "symbol")
    fields["symbol"] = symbol if isinstance(symbol, str) and symbol else NOT_AVAILABLE[language]
    fields["time"] = time
    return _TEMPLATES[topic][language].format(**fields)


def describe_in(query: str, result: Any, language: Language) -> str:
    """Describe ``result`` in one language, by the query's primary topic."""

    topic = primary_topic(query)
    rows = _rows(result)
    return _render(topic, rows[0] if rows else None, language)


def describe(query: str, result: Any) -> HumanReadable:
    return HumanReadable(**{language: describe_in(query, result, language) for language in LANGUAGES})


__all__ = ["LANGUAGES", "NOT_AVAILABLE", "describe", "describe_in"]
