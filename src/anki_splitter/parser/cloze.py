"""Cloze deletion parser.

Pattern: ``{{c<number>::<content>[::<hint>]}}``, e.g. ``{{c1::answer}}`` or
``{{c2::answer::hint}}``. Content and hint run up to the first ``::`` or
``}}``, so a single ``}`` is fine but a hint holding ``}}`` ends the match
early. That is a limitation of the card format, not something the parser
tries to repair.
"""

import re
from collections import Counter

from ..models import ClozeSpan, ClozeStats

CLOZE_PATTERN = re.compile(r"\{\{c(\d+)::(.*?)(?:::(.*?))?\}\}", re.DOTALL)


def _span_from_match(match: re.Match[str]) -> ClozeSpan:
    return ClozeSpan(
        number=int(match.group(1)),
        content=match.group(2),
        hint=match.group(3) or None,
        raw=match.group(0),
        start_index=match.start(),
        end_index=match.end(),
    )


def parse_clozes(text: str) -> list[ClozeSpan]:
    """Extract every cloze deletion from ``text`` in document order."""
    return [_span_from_match(m) for m in CLOZE_PATTERN.finditer(text)]


def get_max_cloze_number(text: str) -> int:
    """Highest cloze number used, or 0 when the text has no cloze."""
    return max((span.number for span in parse_clozes(text)), default=0)


def get_used_cloze_numbers(text: str) -> list[int]:
    """Distinct cloze numbers in ascending order."""
    return sorted({span.number for span in parse_clozes(text)})


def create_cloze(number: int, content: str, hint: str | None = None) -> str:
    """Build ``{{c<number>::<content>[::<hint>]}}``.

    An empty hint is treated as no hint, so ``{{c2::x::}}`` rebuilt through
    this function loses its trailing ``::``.
    """
    if hint:
        return f"{{{{c{number}::{content}::{hint}}}}}"
    return f"{{{{c{number}::{content}}}}}"


def reset_clozes_to_c1(text: str) -> str:
    """Rewrite every cloze as ``c1``, keeping content and hint.

    Split cards hold a single concept each, so all of their deletions are
    revealed together as card 1.
    """
    return CLOZE_PATTERN.sub(
        lambda m: create_cloze(1, m.group(2), m.group(3)), text
    )


def renumber_clozes(text: str) -> str:
    """Renumber clozes densely from 1 in order of first appearance.

    ``c5 .. c2 .. c5 .. c9`` becomes ``c1 .. c2 .. c1 .. c3``. The rewrite is a
    single left-to-right substitution, so no offsets have to be tracked.
    """
    mapping: dict[int, int] = {}

    def _replace(match: re.Match[str]) -> str:
        number = int(match.group(1))
        if number not in mapping:
            mapping[number] = len(mapping) + 1
        return create_cloze(mapping[number], match.group(2), match.group(3))

    return CLOZE_PATTERN.sub(_replace, text)


def get_cloze_stats(text: str) -> ClozeStats:
    counts = Counter(span.number for span in parse_clozes(text))
    return ClozeStats(
        total_clozes=sum(counts.values()),
        unique_numbers=len(counts),
        number_counts=dict(counts),
    )


def has_no_cloze(text: str) -> bool:
    return CLOZE_PATTERN.search(text) is None


def has_cloze(text: str) -> bool:
    """True when ``text`` holds at least one cloze with non-empty content."""
    return any(span.content for span in parse_clozes(text))


def extract_cloze_contents(text: str) -> str:
    """Drop cloze markup (number and hint), keeping only the hidden content."""
    return CLOZE_PATTERN.sub(r"\2", text)
