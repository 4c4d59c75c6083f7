"""
Shape cascade: the name parsing engine.

A name string is matched against an ordered table of shapes. Each shape is a
full-string regex plus an optional transform. Terminal shapes yield the name
fields directly; peeling shapes (honorifics, suffixes, alternative names)
capture a ``repeat`` remainder which is parsed again with the fields gathered
so far. The first shape that matches decides the outcome at its level.

Order matters: an honorific or a parenthesized nickname has to be peeled off
before the plain "First Last" shapes get a chance to swallow it.
"""
from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass

from nameguess.patterns import (
    ALTERNATIVE_CLOSE,
    ALTERNATIVE_OPEN,
    DOCTOR_SALUTATION,
    FEMALE_HONORIFIC,
    GENERATIONAL_SUFFIX,
    INITIAL,
    LAST_NAME,
    MALE_HONORIFIC,
    NAME,
)
from nameguess.paths import logger
from nameguess.types import NameCandidate, ParseResult

Transform = Callable[[dict[str, str]], dict[str, str] | None]


@dataclass(frozen=True)
class Shape:
    """One structural form a name can take."""

    name: str
    pattern: re.Pattern[str]
    transform: Transform | None = None

    def match(self, text: str) -> dict[str, str] | None:
        """Captures of a full-string match, or None. A rejecting transform counts as no match."""
        match = self.pattern.fullmatch(text)
        if match is None:
            return None
        tokens = {key: value for key, value in match.groupdict().items() if value is not None}
        if self.transform is not None:
            return self.transform(tokens)
        return tokens


def _with(**constants) -> Transform:
    def transform(params: dict[str, str]) -> dict[str, str]:
        return {**params, **constants}

    return transform


def _middle_as_preferred(params: dict[str, str]) -> dict[str, str]:
    return {**params, "preferred_name": params["middle_names"], "hide_preferred": True}


def build_shapes(alternative_service) -> tuple[Shape, ...]:
    """Build the ordered shape table."""

    def alternative(params: dict[str, str]) -> dict[str, str] | None:
        return alternative_service.resolve(
            {
                "alternative": params["alternative"],
                "repeat": f"{params['first']} {params['rest']}",
            },
        )

    return (
        # Michael (Mike) Jackson
        Shape(
            "first_alternative_rest",
            re.compile(rf"(?P<first>{NAME}){ALTERNATIVE_OPEN}(?P<alternative>{NAME}){ALTERNATIVE_CLOSE}(?P<rest>.+)"),
            alternative,
        ),
        # Mike (Michael) Jackson
        Shape(
            "alternative_first_rest",
            re.compile(rf"(?P<alternative>{NAME}){ALTERNATIVE_OPEN}(?P<first>{NAME}){ALTERNATIVE_CLOSE}(?P<rest>.+)"),
            alternative,
        ),
        # Mr. Michael Jackson
        Shape("male_honorific", re.compile(rf"{MALE_HONORIFIC}\s(?P<repeat>.+)"), _with(gender="m")),
        # Ms. Michael Jackson
        Shape("female_honorific", re.compile(rf"{FEMALE_HONORIFIC}\s(?P<repeat>.+)"), _with(gender="f")),
        # Dr. Michael Jackson
        Shape("doctor_prefix", re.compile(rf"{DOCTOR_SALUTATION}\s(?P<repeat>.+)"), _with(salutation="Dr.")),
        # Michael Jackson, Dr.
        Shape("doctor_suffix", re.compile(rf"(?P<repeat>.*[^\s,])[\s,]+{DOCTOR_SALUTATION}"), _with(salutation="Dr.")),
        # Michael Jackson
        Shape("first_last", re.compile(rf"(?P<first_name>{NAME})\s{LAST_NAME}")),
        # Michael J. Jackson
        Shape("first_initial_last", re.compile(rf"(?P<first_name>{NAME})\s(?P<middle_names>{INITIAL})\s{LAST_NAME}")),
        # Jackson, Michael
        Shape("last_comma_first", re.compile(rf"{LAST_NAME},\s?(?P<first_name>{NAME})")),
        # Jackson, Michael J.
        Shape(
            "last_comma_first_initial",
            re.compile(rf"{LAST_NAME},\s(?P<first_name>{NAME})\s(?P<middle_names>{INITIAL})"),
        ),
        # Michael Jackson Jr.
        Shape(
            "generational_suffix",
            re.compile(rf"(?P<repeat>.+)[,\s]\s?(?P<gen_suffix>{GENERATIONAL_SUFFIX})"),
        ),
        # J. Michael Jackson
        Shape(
            "initial_middle_last",
            re.compile(rf"(?P<first_name>{INITIAL})\s(?P<middle_names>{NAME})\s{LAST_NAME}"),
            _middle_as_preferred,
        ),
        # Jackson, J. Michael
        Shape(
            "last_comma_initial_middle",
            re.compile(rf"{LAST_NAME},\s?(?P<first_name>{INITIAL})\s(?P<middle_names>{NAME})"),
            _middle_as_preferred,
        ),
        # Michael Joseph Jackson
        Shape("first_middle_last", re.compile(rf"(?P<first_name>{NAME})\s(?P<middle_names>{NAME})\s{LAST_NAME}")),
        # Jackson, Michael Joseph
        Shape(
            "last_comma_first_middle",
            re.compile(rf"{LAST_NAME},\s?(?P<first_name>{NAME})\s(?P<middle_names>{NAME})"),
        ),
    )


class ShapeCascadeService:
    """Runs the shape cascade over a name string."""

    def __init__(self, normalizer, formatter, shapes: tuple[Shape, ...]):
        self._normalizer = normalizer
        self._formatter = formatter
        self._shapes = shapes

    @property
    def shapes(self) -> tuple[Shape, ...]:
        return self._shapes

    def guess(self, text, params=None) -> ParseResult | None:
        """
        Parse ``text`` on top of already accumulated ``params``.

        ``params`` may be None, a NameCandidate or a mapping of candidate
        fields. Returns None for non-string text, an invalid accumulator, or
        a name that matches no shape.
        """
        if params is None:
            accumulated = NameCandidate()
        elif isinstance(params, NameCandidate):
            accumulated = params
        else:
            accumulated = NameCandidate.from_mapping(params)
            if accumulated is None:
                return None

        name = self._normalizer.preprocess(text)
        # Each peel re-enters the cascade on a strictly shorter remainder
        while name is not None:
            peeled = None
            for shape in self._shapes:
                tokens = shape.match(name)
                if tokens is None:
                    continue

                candidate = NameCandidate.from_mapping(tokens)
                if candidate is None:
                    logger.debug(f"Shape {shape.name} produced unknown fields {sorted(tokens)}")
                    continue

                repeat = candidate.repeat
                if repeat is None:
                    logger.debug(f"Terminal shape {shape.name} matched {name!r}")
                    return self._formatter.postprocess(accumulated.merge(candidate))

                if len(repeat) >= len(name):
                    continue

                logger.debug(f"Shape {shape.name} peeled {name!r} down to {repeat!r}")
                accumulated = accumulated.merge(candidate.without_repeat())
                peeled = repeat
                break

            if peeled is None:
                logger.debug(f"No shape matched {name!r}")
                return None
            name = self._normalizer.preprocess(peeled)

        return None
