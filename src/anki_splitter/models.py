"""Data models shared by the parsers, the splitter and the difficulty scorer."""

from dataclasses import dataclass, field
from enum import Enum
from typing import NamedTuple, Optional


class ContainerType(str, Enum):
    """Kinds of ``::: type ... :::`` container blocks."""

    TIP = "tip"
    WARNING = "warning"
    ERROR = "error"
    NOTE = "note"
    LINK = "link"
    TOGGLE = "toggle"


class ToggleSubtype(str, Enum):
    """Optional leading token of a ``::: toggle`` header."""

    TIP = "tip"
    WARNING = "warning"
    ERROR = "error"
    NOTE = "note"
    TODO = "todo"


class SplitPointKind(str, Enum):
    """Structural markers recorded by the split analyzer."""

    HEADER = "header"
    DIVIDER = "divider"


@dataclass(frozen=True)
class ClozeSpan:
    """A single ``{{cN::content::hint}}`` deletion found in card text."""

    number: int
    content: str
    hint: Optional[str]
    raw: str
    start_index: int
    end_index: int


@dataclass(frozen=True)
class ClozeStats:
    """Cloze usage summary for a card body."""

    total_clozes: int
    unique_numbers: int
    number_counts: dict[int, int] = field(default_factory=dict)


@dataclass(frozen=True)
class NidLink:
    """A ``[title|nid1234567890123]`` cross-reference."""

    title: str
    nid: str
    raw: str
    start_index: int
    end_index: int


@dataclass(frozen=True)
class NidLinkStats:
    """Cross-reference usage summary for a card body."""

    total_links: int
    unique_nids: int
    nid_counts: dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True)
class ContainerBlock:
    """A closed container block emitted by the container parser.

    ``start_line`` and ``end_line`` are 1-based line numbers of the header
    and end markers after line-break normalisation.
    """

    type: ContainerType
    content: str
    start_line: int
    end_line: int
    raw: str
    title: Optional[str] = None
    toggle_subtype: Optional[ToggleSubtype] = None


class ContainerExtraction(NamedTuple):
    """Containers found in a card body and the text left once they are removed."""

    containers: list[ContainerBlock]
    plain_text: str


@dataclass(frozen=True)
class HardSplitPoint:
    """A header or divider line detected in card text (``line`` is 0-based)."""

    kind: SplitPointKind
    line: int
    content: str


@dataclass(frozen=True)
class SplitAnalysis:
    """Eligibility report produced before a structural split."""

    can_hard_split: bool
    hard_split_points: list[HardSplitPoint]
    has_todo_block: bool
    cloze_count: int
    estimated_cards: int

    @property
    def header_count(self) -> int:
        return sum(1 for p in self.hard_split_points if p.kind is SplitPointKind.HEADER)


@dataclass
class Fragment:
    """One atomic card produced by a structural split."""

    title: str
    content: str
    images: list[str] = field(default_factory=list)
    nid_links: list[str] = field(default_factory=list)
    is_main_card: bool = False


class TodoExtraction(NamedTuple):
    """Todo toggles found in a card body; ``main_content`` is left untouched."""

    main_content: str
    todo_blocks: list[str]


@dataclass(frozen=True)
class DifficultyThresholds:
    """Cut-offs used to decide which cards count as difficult."""

    min_lapses: int = 3
    max_ease_factor: int = 2100
    min_reps: int = 5


@dataclass(frozen=True)
class DifficultyResult:
    """Composite difficulty score (0-100) and the reasons behind it."""

    score: int
    reasons: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class CardStats:
    """Scheduling statistics of a single card, as fetched from the card store."""

    card_id: int
    note_id: int
    interval: int
    factor: int
    reps: int
    lapses: int
    text: str = ""
    tags: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class DifficultCard:
    """A note selected as a split candidate, represented by its worst card."""

    note_id: int
    card_id: int
    text: str
    tags: list[str]
    lapses: int
    ease_factor: int
    interval: int
    reps: int
    difficulty: DifficultyResult

    @property
    def difficulty_score(self) -> int:
        return self.difficulty.score

    @property
    def difficulty_reasons(self) -> list[str]:
        return self.difficulty.reasons
