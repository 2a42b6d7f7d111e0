"""Split eligibility analysis and structural card splitting."""

from anki_splitter.splitter.analysis import analyze_for_split
from anki_splitter.splitter.atomic import extract_todo_blocks, perform_hard_split

__all__ = ["analyze_for_split", "extract_todo_blocks", "perform_hard_split"]
