"""Formatting helpers for Anki card HTML.

Cards store their text as HTML fragments: line breaks are ``<br>`` tags,
images are ``<img src="...">`` tags and emphasis is inline markup. These
helpers convert between that storage form and the line-oriented form the
parsers scan, and check that a rewritten card kept the original styling.
"""

import re
from dataclasses import dataclass, field

BREAK_TAG_PATTERN = re.compile(r"<br\s*/?>", re.IGNORECASE)
TAG_PATTERN = re.compile(r"<[^>]+>")
IMAGE_SRC_PATTERN = re.compile(r'<img\s+src="([^"]+)"', re.IGNORECASE)

_EXCESS_BREAKS_PATTERN = re.compile(r"(<br>\s*){3,}", re.IGNORECASE)
_LEADING_BREAK_PATTERN = re.compile(r"^\s*<br>", re.IGNORECASE)
_TRAILING_BREAK_PATTERN = re.compile(r"<br>\s*$", re.IGNORECASE)

MAX_TITLE_LENGTH = 100

VALID_IMAGE_EXTENSIONS = (".png", ".jpg", ".jpeg", ".gif", ".webp", ".svg")

# Inline styling that must survive any rewrite of a card
PRESERVED_STYLE_PATTERNS = [
    re.compile(r'<span\s+style="[^"]*color[^"]*">', re.IGNORECASE),
    re.compile(r'<font\s+color="[^"]*">', re.IGNORECASE),
    re.compile(r"<b>", re.IGNORECASE),
    re.compile(r"</b>", re.IGNORECASE),
    re.compile(r"<u>", re.IGNORECASE),
    re.compile(r"</u>", re.IGNORECASE),
    re.compile(r"<sup>", re.IGNORECASE),
    re.compile(r"</sup>", re.IGNORECASE),
    re.compile(r'<img\s+src="[^"]*"[^>]*>', re.IGNORECASE),
]

_HTML_ENTITIES = {
    "&nbsp;": " ",
    "&lt;": "<",
    "&gt;": ">",
    "&amp;": "&",
    "&quot;": '"',
    "&#39;": "'",
}


@dataclass
class StyleCheckResult:
    """Outcome of comparing inline styling before and after a rewrite."""

    is_valid: bool
    missing_styles: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


def break_tags_to_newlines(html: str) -> str:
    """Replace every ``<br>`` variant with a plain newline."""
    return BREAK_TAG_PATTERN.sub("\n", html)


def normalize_line_breaks(html: str) -> str:
    """Unify line breaks as ``<br>`` (break tag variants and raw newlines)."""
    return BREAK_TAG_PATTERN.sub("<br>", html).replace("\n", "<br>")


def cleanup_empty_lines(html: str) -> str:
    """Collapse runs of three or more breaks and trim leading/trailing breaks."""
    html = _EXCESS_BREAKS_PATTERN.sub("<br><br>", html)
    html = _LEADING_BREAK_PATTERN.sub("", html, count=1)
    return _TRAILING_BREAK_PATTERN.sub("", html, count=1)


def strip_tags(html: str) -> str:
    """Remove HTML tags, keeping their text content."""
    return TAG_PATTERN.sub("", html)


def decode_html_entities(text: str) -> str:
    """Decode the entities Anki's editor emits."""
    for entity, char in _HTML_ENTITIES.items():
        text = text.replace(entity, char)
    return text


def encode_html_entities(text: str) -> str:
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&#39;")
    )


def normalize_card_title(title: str) -> str:
    """Strip markup and heading hashes from a title, collapse whitespace and cap length."""
    title = strip_tags(title)
    title = re.sub(r"^#+\s*", "", title)
    title = re.sub(r"\s+", " ", title)
    return title.strip()[:MAX_TITLE_LENGTH]


def extract_image_paths(html: str) -> list[str]:
    """Return the ``src`` of every ``<img>`` tag, in document order."""
    return IMAGE_SRC_PATTERN.findall(html)


def is_valid_image_path(path: str) -> bool:
    return path.lower().endswith(VALID_IMAGE_EXTENSIONS)


def extract_styles(html: str) -> dict[str, int]:
    """Count occurrences of each preserved inline style tag."""
    styles: dict[str, int] = {}
    for pattern in PRESERVED_STYLE_PATTERNS:
        for match in pattern.findall(html):
            styles[match] = styles.get(match, 0) + 1
    return styles


def validate_style_preservation(original: str, processed: str) -> StyleCheckResult:
    """Check that ``processed`` keeps every inline style present in ``original``.

    Styles that disappear (or occur fewer times) are reported in
    ``missing_styles`` and make the result invalid. Styles that only appear
    in ``processed`` are reported as warnings.

    Args:
        original: Card HTML before the rewrite
        processed: Card HTML after the rewrite

    Returns:
        StyleCheckResult describing missing and newly introduced styles
    """
    original_styles = extract_styles(original)
    processed_styles = extract_styles(processed)
    missing: list[str] = []
    warnings: list[str] = []

    for style, count in original_styles.items():
        processed_count = processed_styles.get(style, 0)
        if processed_count < count:
            missing.append(f"{style} (original: {count}, result: {processed_count})")

    for style, count in processed_styles.items():
        if style not in original_styles:
            warnings.append(f"new style introduced: {style} ({count}x)")

    return StyleCheckResult(
        is_valid=not missing, missing_styles=missing, warnings=warnings
    )
