"""A small declarative selector language for raw forecast queries.

Queries never execute code. A query is one of:

* a projection label, e.g. ``temperature`` or ``slice:6``;
* a field path over the forecast document, optionally rooted at ``data``::

      properties.timeseries[0].data.instant.details.air_temperature
      properties.timeseries[*].time
      properties.timeseries[0:3]
      properties.timeseries[?data.next_1_hours.details.precipitation_amount > 0].time

* a bracketed, comma separated list of the above, evaluated in order.

After a fan-out step (``[*]``, a slice or a filter) the remaining steps are
applied to every selected element. Elements lacking a key are dropped.
"""

from __future__ import annotations

import logging
import operator
import re
from dataclasses import dataclass
from typing import Any, Callable, Union

from meteoquery.core.errors import QueryError
from meteoquery.models.weather import WeatherFeature
from meteoquery.services.projections import is_projection_label, parse_projection

logger = logging.getLogger(__name__)

_IDENT = r"[A-Za-z_][A-Za-z0-9_]*"
_ROOT = re.compile(rf"\s*(?P<key>{_IDENT})")
_STEP = re.compile(
    rf"""
      \.(?P<key>{_IDENT})
    | \[\s*(?P<index>-?\d+)\s*\]
    | \[\s*(?P<start>-?\d+)?\s*:\s*(?P<stop>-?\d+)?\s*\]
    | \[\s*(?P<wildcard>\*)\s*\]
    | \[\?\s*(?P<filter>[^\[\]]+?)\s*\]
    """,
    re.VERBOSE,
)
_FILTER = re.compile(
    rf"""^(?P<path>{_IDENT}(?:\.{_IDENT})*)\s*
         (?P<op>==|!=|>=|<=|>|<)\s*
         (?P<value>-?\d+(?:\.\d+)?|'[^']*'|"[^"]*")$""",
    re.VERBOSE,
)

_OPERATORS: dict[str, Callable[[Any, Any], bool]] = {
    "==": operator.eq,
    "!=": operator.ne,
    ">": operator.gt,
    ">=": operator.ge,
    "<": operator.lt,
    "<=": operator.le,
}


@dataclass(frozen=True)
class Key:
    name: str


@dataclass(frozen=True)
class Index:
    position: int


@dataclass(frozen=True)
class Slice:
    start: int | None
    stop: int | None


@dataclass(frozen=True)
class Wildcard:
    pass


@dataclass(frozen=True)
class Filter:
    path: tuple[str, ...]
    op: str
    value: Union[float, str]

    def accepts(self, element: Any) -> bool:
        actual: Any = element
        for key in self.path:
            if not isinstance(actual, dict) or key not in actual:
                return False
            actual = actual[key]
        if isinstance(self.value, str):
            if not isinstance(actual, str):
                return False
        elif isinstance(actual, bool) or not isinstance(actual, (int, float)):
            return False
        return _OPERATORS[self.op](actual, self.value)


Step = Union[Key, Index, Slice, Wildcard, Filter]


def _parse_filter(text: str, position: int) -> Filter:
    match = _FILTER.match(text.strip())
    if not match:
        raise QueryError(f"Malformed filter at position {position}: {text!r}")
    raw = match.group("value")
    value: Union[float, str] = raw[1:-1] if raw[0] in "'\"" else float(raw)
    return Filter(tuple(match.group("path").split(".")), match.group("op"), value)


def parse_path(text: str) -> list[Step]:
    """Parse a field path into steps, rejecting anything outside the grammar."""

    root = _ROOT.match(text)
    if not root:
        raise QueryError(f"Expected a field name at position 0: {text!r}")
    steps: list[Step] = []
    if root.group("key") != "data":
        steps.append(Key(root.group("key")))
    position = root.end()
    end = len(text.rstrip())

    while position < end:
        match = _STEP.match(text, position)
        if not match:
            raise QueryError(f"Unexpected input at position {position}: {text[position:]!r}")
        if match.group("key") is not None:
            steps.append(Key(match.group("key")))
        elif match.group("index") is not None:
            steps.append(Index(int(match.group("index"))))
        elif match.group("wildcard") is not None:
            steps.append(Wildcard())
        elif match.group("filter") is not None:
            steps.append(_parse_filter(match.group("filter"), position))
        else:
            start, stop = match.group("start"), match.group("stop")
            steps.append(
                Slice(int(start) if start is not None else None, int(stop) if stop is not None else None)
            )
        position = match.end()

    if not steps:
        raise QueryError("Query selects the whole document; name a field")
    return steps


def _step_one(value: Any, step: Step) -> Any:
    if isinstance(step, Key):
        if not isinstance(value, dict) or step.name not in value:
            raise QueryError(f"Unknown field: {step.name!r}")
        return value[step.name]
    if not isinstance(value, list):
        raise QueryError("Index, slice and filter steps require a list")
    if isinstance(step, Index):
        try:
            return value[step.position]
        except IndexError as exc:
            raise QueryError(f"Index {step.position} out of range") from exc
    if isinstance(step, Slice):
        return value[step.start : step.stop]
    if isinstance(step, Filter):
        return [element for element in value if step.accepts(element)]
    return list(value)


def select(document: Any, steps: list[Step]) -> Any:
    """Apply ``steps`` to a JSON document."""

    value: Any = document
    fanned_out = False
    for step in steps:
        if not fanned_out:
            value = _step_one(value, step)
            fanned_out = isinstance(step, (Slice, Wildcard, Filter))
            continue
        if isinstance(step, Key):
            value = [
                element[step.name]
                for element in value
                if isinstance(element, dict) and step.name in element
            ]
        elif isinstance(step, Index):
            value = [
                element[step.position]
                for element in value
                if isinstance(element, list) and -len(element) <= step.position < len(element)
            ]
        else:
            value = [
                item
                for element in value
                if isinstance(element, list)
                for item in _step_one(element, step)
            ]
    return value


def _split_items(text: str) -> list[str]:
    """Split a bracketed list on commas outside nested brackets and quotes."""

    inner = text.strip()[1:-1]
    items: list[str] = []
    depth = 0
    quote = ""
    start = 0
    for position, char in enumerate(inner):
        if quote:
            if char == quote:
                quote = ""
        elif char in "'\"":
            quote = char
        elif char == "[":
            depth += 1
        elif char == "]":
            depth -= 1
        elif char == "," and depth == 0:
            items.append(inner[start:position].strip())
            start = position + 1
    items.append(inner[start:].strip())
    if not inner.strip() or any(not item for item in items):
        raise QueryError("Empty item in query list")
    return items


def _run_item(text: str, feature: WeatherFeature, document: dict[str, Any]) -> Any:
    if is_projection_label(text):
        return parse_projection(text).apply(feature)
    return select(document, parse_path(text))


def run_query(text: str, feature: WeatherFeature) -> Any:
    """Evaluate a raw query against a validated forecast."""

    stripped = text.strip()
    if not stripped:
        raise QueryError("Query is empty")
    document = feature.to_json()
    if stripped.startswith("[") and stripped.endswith("]"):
        items = _split_items(stripped)
        logger.debug("Running query list with %d items", len(items))
        return [_run_item(item, feature, document) for item in items]
    return _run_item(stripped, feature, document)


__all__ = ["parse_path", "run_query", "select"]
