"""Split eligibility analysis.

A card can be split structurally when it has at least two ``####`` header
lines. ``---`` dividers are recorded for callers that want to display them,
but they are not treated as section boundaries.
"""

import re

from ..models import HardSplitPoint, SplitAnalysis, SplitPointKind
from ..parser.cloze import parse_clozes
from ..parser.container import is_todo_container, parse_containers
from ..utils.formatters import break_tags_to_newlines

HEADER_PREFIX = "####"
HEADER_PATTERN = re.compile(r"^####\s+(.+)$")
DIVIDER_PATTERN = re.compile(r"^---+$")

MIN_HEADERS_FOR_SPLIT = 2


def analyze_for_split(text: str) -> SplitAnalysis:
    """Report whether ``text`` can be split on its header lines.

    Args:
        text: Card body (HTML with ``<br>`` breaks or plain text)

    Returns:
        SplitAnalysis with detected split points (0-based line indices),
        todo-block presence and cloze count
    """
    lines = break_tags_to_newlines(text).split("\n")

    points: list[HardSplitPoint] = []
    for index, line in enumerate(lines):
        stripped = line.strip()
        if HEADER_PATTERN.match(stripped):
            points.append(HardSplitPoint(SplitPointKind.HEADER, index, stripped))
        elif DIVIDER_PATTERN.match(stripped):
            points.append(HardSplitPoint(SplitPointKind.DIVIDER, index, stripped))

    has_todo_block = any(is_todo_container(b) for b in parse_containers(text))
    header_count = sum(1 for p in points if p.kind is SplitPointKind.HEADER)

    return SplitAnalysis(
        can_hard_split=header_count >= MIN_HEADERS_FOR_SPLIT,
        hard_split_points=points,
        has_todo_block=has_todo_block,
        cloze_count=len(parse_clozes(text)),
        estimated_cards=max(1, header_count),
    )
