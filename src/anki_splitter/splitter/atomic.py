"""Structural ("hard") splitting of a card into atomic cards.

Each ``####`` header starts a new section; every section that has enough
text becomes one card. Cards carry a single concept, so their clozes are
all renumbered to ``c1``. Every card except the first links back to the
card it was split from.

Cards without header structure cannot be split here; splitting them is
left to an external, content-aware service.
"""

import re

from ..models import Fragment, TodoExtraction
from ..parser.cloze import reset_clozes_to_c1
from ..parser.container import is_todo_container, parse_containers
from ..parser.nid_link import create_back_link, parse_nid_links
from ..utils.formatters import (
    break_tags_to_newlines,
    extract_image_paths,
    strip_tags,
)
from ..utils.logging import get_logger
from .analysis import HEADER_PATTERN, analyze_for_split

logger = get_logger(__name__)

MIN_FRAGMENT_TEXT_LENGTH = 20
MAX_EXTRACTED_TITLE_LENGTH = 50

SOURCE_CARD_TITLE = "Original card"
BACK_LINK_BLOCK_TITLE = "Related cards"
DEFAULT_FRAGMENT_TITLE = "Split card"

_SUBHEADING_PATTERN = re.compile(r"###?\s*([^<\n]+)")
_BOLD_PATTERN = re.compile(r"<b>([^<]+)</b>")


def has_meaningful_content(section: str) -> bool:
    """True when the tag-stripped text of ``section`` is long enough for a card."""
    return len(strip_tags(section).strip()) >= MIN_FRAGMENT_TEXT_LENGTH


def extract_title(section: str) -> str:
    """Title for a section without a ``####`` header.

    Uses the first ``##``/``###`` heading, then the first bold run, then a
    generic placeholder.
    """
    for pattern in (_SUBHEADING_PATTERN, _BOLD_PATTERN):
        match = pattern.search(section)
        if match:
            return match.group(1).strip()[:MAX_EXTRACTED_TITLE_LENGTH]
    return DEFAULT_FRAGMENT_TITLE


def build_back_link_block(source_id: str | int, source_title: str = SOURCE_CARD_TITLE) -> str:
    """``::: link`` block pointing at the source card, in ``<br>`` form."""
    back_link = create_back_link(source_title, source_id)
    return f"::: link {BACK_LINK_BLOCK_TITLE}<br>{back_link}<br>:::"


def _create_fragment(
    section: str,
    title: str,
    is_main_card: bool,
    source_id: str | int,
    source_title: str,
) -> Fragment:
    content = reset_clozes_to_c1(section)
    if not is_main_card:
        content = f"{content}<br><br>{build_back_link_block(source_id, source_title)}"

    return Fragment(
        title=title or extract_title(section),
        content=content,
        images=extract_image_paths(section),
        nid_links=[link.nid for link in parse_nid_links(section)],
        is_main_card=is_main_card,
    )


def perform_hard_split(
    text: str,
    source_id: str | int,
    source_title: str = SOURCE_CARD_TITLE,
) -> list[Fragment] | None:
    """Split ``text`` into atomic cards on its ``####`` header lines.

    Args:
        text: Card body (HTML with ``<br>`` breaks or plain text)
        source_id: Note id of the card being split; used for back-links
        source_title: Label shown in the back-link to the source card

    Returns:
        Cards in document order, the first one flagged as main card, or
        None when the card has fewer than two headers or the split yields
        fewer than two cards
    """
    if not analyze_for_split(text).can_hard_split:
        logger.debug("hard_split_not_eligible", source_id=str(source_id))
        return None

    sections: list[tuple[str, list[str]]] = []
    current_title = ""
    current_lines: list[str] = []

    for line in break_tags_to_newlines(text).split("\n"):
        header = HEADER_PATTERN.match(line.strip())
        if header:
            if current_lines:
                sections.append((current_title, current_lines))
            current_title = header.group(1).strip()
            current_lines = [line]
        else:
            current_lines.append(line)

    if current_lines:
        sections.append((current_title, current_lines))

    fragments: list[Fragment] = []
    for title, lines in sections:
        section = "<br>".join(lines)
        if not has_meaningful_content(section):
            logger.debug("hard_split_section_skipped", source_id=str(source_id), title=title)
            continue
        fragments.append(
            _create_fragment(section, title, not fragments, source_id, source_title)
        )

    if len(fragments) < 2:
        logger.debug(
            "hard_split_insufficient_fragments",
            source_id=str(source_id),
            fragments=len(fragments),
        )
        return None

    logger.debug("hard_split_completed", source_id=str(source_id), fragments=len(fragments))
    return fragments


def extract_todo_blocks(text: str) -> TodoExtraction:
    """Collect todo toggles so callers can keep them out of any split.

    The blocks are reported, not removed: ``main_content`` is ``text``
    unchanged.
    """
    todo_blocks = [b.raw for b in parse_containers(text) if is_todo_container(b)]
    return TodoExtraction(main_content=text, todo_blocks=todo_blocks)
