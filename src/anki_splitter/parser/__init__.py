"""Parsers for the card markup dialect: clozes, nid links and ``:::`` containers."""

from anki_splitter.parser.cloze import (
    create_cloze,
    extract_cloze_contents,
    get_cloze_stats,
    get_max_cloze_number,
    get_used_cloze_numbers,
    has_cloze,
    has_no_cloze,
    parse_clozes,
    renumber_clozes,
    reset_clozes_to_c1,
)
from anki_splitter.parser.container import (
    extract_containers_from_html,
    is_link_container,
    is_todo_container,
    parse_containers,
)
from anki_splitter.parser.nid_link import (
    create_back_link,
    create_nid_link,
    extract_unique_nids,
    get_nid_link_stats,
    has_nid_link,
    is_self_reference,
    parse_nid_links,
    replace_nid,
)

__all__ = [
    "create_back_link",
    "create_cloze",
    "create_nid_link",
    "extract_cloze_contents",
    "extract_containers_from_html",
    "extract_unique_nids",
    "get_cloze_stats",
    "get_max_cloze_number",
    "get_nid_link_stats",
    "get_used_cloze_numbers",
    "has_cloze",
    "has_nid_link",
    "has_no_cloze",
    "is_link_container",
    "is_self_reference",
    "is_todo_container",
    "parse_clozes",
    "parse_containers",
    "parse_nid_links",
    "renumber_clozes",
    "replace_nid",
    "reset_clozes_to_c1",
]
