"""Keyword-driven interpretation of free-text weather questions.

Queries in English or Latvian are matched against an ordered list of topic
rules. Every rule is tried; the matches, in rule order, decide the projection:

* no match       -> ``current``
* one match      -> that projection
* several        -> a :class:`CompositeProjection` in rule order

Rule order is also the priority order used to pick the topic of the
human-readable answer (see :mod:`meteoquery.services.formatter`).
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Optional

from meteoquery.services.projections import CompositeProjection, Projection, ProjectionSpec

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TopicRule:
    topic: str
    projection: str
    pattern: re.Pattern[str]

    def match(self, query: str) -> Optional[Projection]:
        return Projection(self.projection) if self.pattern.search(query) else None


@dataclass(frozen=True)
class HoursRule:
    topic: str
    pattern: re.Pattern[str]

    def match(self, query: str) -> Optional[Projection]:
        found = self.pattern.search(query)
        if not found:
            return None
        hours = next(group for group in found.groups() if group is not None)
        return Projection.slice(int(hours))


def _rule(topic: str, projection: str, pattern: str) -> TopicRule:
    return TopicRule(topic, projection, re.compile(pattern, re.IGNORECASE))


# English alternatives first, then Latvian (with and without diacritics).
TOPIC_RULES: tuple[TopicRule, ...] = (
    _rule("temperature", "temperature", r"\btemp|temperat[uū]r"),
    _rule("humidity", "humidity", r"humid|mitrum"),
    _rule("wind", "wind", r"\bwind|\bv[eē]j"),
    _rule("rain", "precipitation", r"\brain|precipitation|\blietu|nokri[sš][nņ]"),
    _rule("cloud", "cloudCover", r"cloud|m[aā]ko[nņ]"),
    _rule("pressure", "pressure", r"pressure|spiedien"),
    _rule("current", "current", r"\bcurrent|\bnow\b|pa[sš]reiz|\btagad|[sš]obr[iī]d"),
)

HOURS_RULE = HoursRule(
    "hours",
    re.compile(
        r"\bnext\s+(\d+)\s+hours?\b|n[aā]kam[aā]?s?\s+(\d+)\s+stund",
        re.IGNORECASE,
    ),
)

DEFAULT_PROJECTION = Projection("current")


def interpret(query: str) -> ProjectionSpec:
    """Map free text onto a projection or an ordered composite of them."""

    matches: list[Projection] = []
    for rule in (*TOPIC_RULES, HOURS_RULE):
        projection = rule.match(query)
        if projection is not None:
            matches.append(projection)

    if not matches:
        spec: ProjectionSpec = DEFAULT_PROJECTION
    elif len(matches) == 1:
        spec = matches[0]
    else:
        spec = CompositeProjection(tuple(matches))

    logger.debug("Interpreted %r as %s", query, spec.label)
    return spec


def primary_topic(query: str) -> str:
    """First topic whose rule matches, by rule order; ``current`` otherwise."""

    for rule in TOPIC_RULES:
        if rule.pattern.search(query):
            return rule.topic
    return "current"


EXAMPLE_QUERIES: dict[str, list[str]] = {
    "en": [
        "What's the current temperature?",
        "Show me the humidity for the next 3 hours",
        "When will it rain?",
        "What's the wind speed and direction?",
        "How cloudy is it?",
        "What's the air pressure?",
    ],
    "lv": [
        "Kāda ir pašreizējā temperatūra?",
        "Rādi mitrumu nākamās 3 stundas",
        "Kad būs lietus?",
        "Kāds ir vēja ātrums un virziens?",
        "Cik daudz mākoņu?",
        "Kāds ir gaisa spiediens?",
    ],
}


__all__ = [
    "DEFAULT_PROJECTION",
    "EXAMPLE_QUERIES",
    "HOURS_RULE",
    "TOPIC_RULES",
    "interpret",
    "primary_topic",
]
