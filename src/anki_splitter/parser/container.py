"""``:::`` container block parser (line-based state machine).

Supported containers:
- Callouts: ``::: tip``, ``::: warning``, ``::: error``, ``::: note``, ``::: link``
- Toggles: ``::: toggle [subtype] [title]`` where subtype is one of
  tip, warning, error, note or todo

Blocks may nest. Each ``:::`` line closes the innermost open block; a
``:::`` with nothing open is ignored, and blocks still open at the end of the
text are dropped without being reported.
"""

import re
from dataclasses import dataclass, field
from typing import Optional

from ..models import ContainerBlock, ContainerExtraction, ContainerType, ToggleSubtype
from ..utils.formatters import break_tags_to_newlines

CONTAINER_START_PATTERN = re.compile(
    r"^:::\s*(tip|warning|error|note|link|toggle)(?:\s+(.*))?$"
)
CONTAINER_END_PATTERN = re.compile(r"^:::$")

_TOGGLE_SUBTYPES = {subtype.value: subtype for subtype in ToggleSubtype}


@dataclass
class _OpenBlock:
    """A block whose end marker has not been seen yet."""

    type: ContainerType
    start_line: int
    title: Optional[str] = None
    toggle_subtype: Optional[ToggleSubtype] = None
    lines: list[str] = field(default_factory=list)

    def header(self) -> str:
        parts = [f"::: {self.type.value}"]
        if self.toggle_subtype is not None:
            parts.append(self.toggle_subtype.value)
        if self.title:
            parts.append(self.title)
        return " ".join(parts)

    def close(self, end_line: int) -> ContainerBlock:
        content = "\n".join(self.lines)
        return ContainerBlock(
            type=self.type,
            content=content,
            start_line=self.start_line,
            end_line=end_line,
            raw=f"{self.header()}\n{content}\n:::",
            title=self.title,
            toggle_subtype=self.toggle_subtype,
        )


def _open_block(type_name: str, rest: Optional[str], line_number: int) -> _OpenBlock:
    block = _OpenBlock(type=ContainerType(type_name), start_line=line_number)
    rest = (rest or "").strip()
    if not rest:
        return block

    if block.type is ContainerType.TOGGLE:
        first, *remainder = rest.split()
        subtype = _TOGGLE_SUBTYPES.get(first)
        if subtype is not None:
            block.toggle_subtype = subtype
            block.title = " ".join(remainder) or None
            return block

    block.title = rest
    return block


def parse_containers(text: str) -> list[ContainerBlock]:
    """Parse all closed container blocks in ``text``.

    Blocks are returned in the order they close, so a nested block comes
    before the block enclosing it. Lines belonging to a nested block are
    collected only by that block.

    Args:
        text: Card body; ``<br>`` tags are treated as line breaks

    Returns:
        Closed container blocks
    """
    lines = break_tags_to_newlines(text).split("\n")

    stack: list[_OpenBlock] = []
    blocks: list[ContainerBlock] = []

    for line_number, line in enumerate(lines, start=1):
        stripped = line.strip()

        start = CONTAINER_START_PATTERN.match(stripped)
        if start:
            stack.append(_open_block(start.group(1), start.group(2), line_number))
            continue

        if CONTAINER_END_PATTERN.match(stripped) and stack:
            blocks.append(stack.pop().close(line_number))
            continue

        if stack:
            stack[-1].lines.append(line)

    return blocks


def is_todo_container(block: ContainerBlock) -> bool:
    return (
        block.type is ContainerType.TOGGLE
        and block.toggle_subtype is ToggleSubtype.TODO
    )


def is_link_container(block: ContainerBlock) -> bool:
    return block.type is ContainerType.LINK


def extract_containers_from_html(html: str) -> ContainerExtraction:
    """Parse containers and return the text that remains outside them.

    Each block's reconstructed ``raw`` text is removed from ``html`` once, by
    plain string replacement. Blocks written with ``<br>`` breaks or with
    extra spacing in their header line are therefore not removed.
    """
    containers = parse_containers(html)

    plain_text = html
    for block in containers:
        plain_text = plain_text.replace(block.raw, "", 1)

    return ContainerExtraction(containers=containers, plain_text=plain_text)
