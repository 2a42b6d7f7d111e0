"""Parser for ``[title|nid<13 digits>]`` note cross-references."""

import re
from collections import Counter

from ..models import NidLink, NidLinkStats

NID_LINK_PATTERN = re.compile(r"\[([^\]|]+)\|nid(\d{13})\]")

BACK_LINK_PREFIX = "Source: "


def parse_nid_links(text: str) -> list[NidLink]:
    """Extract every nid link from ``text`` in document order."""
    return [
        NidLink(
            title=m.group(1),
            nid=m.group(2),
            raw=m.group(0),
            start_index=m.start(),
            end_index=m.end(),
        )
        for m in NID_LINK_PATTERN.finditer(text)
    ]


def has_nid_link(text: str, nid: str | int) -> bool:
    nid = str(nid)
    return any(link.nid == nid for link in parse_nid_links(text))


def extract_unique_nids(text: str) -> list[str]:
    """Distinct nids in order of first appearance."""
    return list(dict.fromkeys(link.nid for link in parse_nid_links(text)))


def create_nid_link(title: str, nid: str | int) -> str:
    return f"[{title}|nid{nid}]"


def create_back_link(source_title: str, source_nid: str | int) -> str:
    """Link from a split card back to the card it was split from."""
    return create_nid_link(f"{BACK_LINK_PREFIX}{source_title}", source_nid)


def replace_nid(text: str, old_nid: str | int, new_nid: str | int) -> str:
    """Point every link targeting ``old_nid`` at ``new_nid``; titles are kept."""
    pattern = re.compile(rf"\|nid{re.escape(str(old_nid))}\]")
    return pattern.sub(f"|nid{new_nid}]", text)


def is_self_reference(text: str, note_id: str | int) -> bool:
    """True if ``text`` links to ``note_id`` (a card pointing at itself)."""
    return has_nid_link(text, note_id)


def get_nid_link_stats(text: str) -> NidLinkStats:
    counts = Counter(link.nid for link in parse_nid_links(text))
    return NidLinkStats(
        total_links=sum(counts.values()),
        unique_nids=len(counts),
        nid_counts=dict(counts),
    )
