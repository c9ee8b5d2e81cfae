"""Small parsing helpers shared by the position, range and notation parsers.

Every step takes ``(text, offset)`` and returns ``(value, new_offset)``,
raising ``ParseError`` when the input at ``offset`` does not match.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
import re
from typing import TypeVar

from pydantic import ValidationError

from ..errors import ParseError

T = TypeVar("T")
S = TypeVar("S")

Step = Callable[[str, int], tuple[T, int]]


def match_pattern(
    pattern: re.Pattern[str], text: str, offset: int, expected: str
) -> tuple[str, int]:
    """Match ``pattern`` anchored at ``offset`` and return the matched text."""
    found = pattern.match(text, offset)
    if found is None:
        raise ParseError.at(text, offset, expected)
    return found.group(0), found.end()


def expect_char(char: str, text: str, offset: int) -> int:
    """Consume one literal character."""
    if not text.startswith(char, offset):
        raise ParseError.at(text, offset, repr(char))
    return offset + 1


def refine(build: Callable[[S], T], raw: S, text: str, offset: int, expected: str) -> T:
    """Run a validating constructor, reporting failures as parse errors."""
    try:
        return build(raw)
    except ValidationError as exc:
        raise ParseError.at(text, offset, expected) from exc


def first_of(
    text: str, offset: int, alternatives: Sequence[Step[T]], *, expected: str
) -> tuple[T, int]:
    """Try alternatives in order and return the first success.

    When every alternative fails at ``offset`` itself the error names
    ``expected``; otherwise the failure that got furthest is raised.
    """
    furthest: ParseError | None = None
    for alternative in alternatives:
        try:
            return alternative(text, offset)
        except ParseError as exc:
            if furthest is None or exc.detail.offset > furthest.detail.offset:
                furthest = exc
    if furthest is None or furthest.detail.offset == offset:
        raise ParseError.at(text, offset, expected)
    raise furthest


def complete(step: Step[T]) -> Step[T]:
    """Wrap ``step`` so that it must consume the rest of the input."""

    def run(text: str, offset: int) -> tuple[T, int]:
        value, end = step(text, offset)
        if end != len(text):
            raise ParseError.at(text, end, "end of input")
        return value, end

    return run


def parse_all(step: Step[T], text: str) -> T:
    """Run ``step`` over the whole of ``text``."""
    value, _ = complete(step)(text, 0)
    return value
