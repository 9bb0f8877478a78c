"""Line-level diff computation for atlas.diff.

Two whole-file texts are normalized, reduced to one token per distinct line,
diffed with diff-match-patch's Myers implementation, cleaned up for
readability and mapped back to line text. The resulting operations are then
expanded into numbered side-by-side rows in a single pass that also counts
insertions and deletions.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from diff_match_patch import diff_match_patch

TAB_WIDTH = 4
DEFAULT_TIMEOUT = 1.0


class DiffType(Enum):
    """Enumeration of operation and row types."""

    UNCHANGED = "equal"
    ADDED = "insert"
    DELETED = "delete"


_DMP_TYPES = {
    diff_match_patch.DIFF_EQUAL: DiffType.UNCHANGED,
    diff_match_patch.DIFF_INSERT: DiffType.ADDED,
    diff_match_patch.DIFF_DELETE: DiffType.DELETED,
}


@dataclass(frozen=True)
class Operation:
    """A block of consecutive lines that the diff classified identically.

    ``text`` keeps the line terminators of the normalized input, so joining
    the texts of all operations of one side rebuilds that side exactly.
    """

    diff_type: DiffType
    text: str

    @property
    def lines(self) -> list[str]:
        """The block split into lines, without a phantom row for the final newline."""
        text = self.text[:-1] if self.text.endswith("\n") else self.text
        return text.split("\n")


@dataclass
class DiffRow:
    """Represents a single row in a side-by-side comparison."""

    diff_type: DiffType
    left_line_num: Optional[int]
    right_line_num: Optional[int]
    left_content: str
    right_content: str


@dataclass
class DiffStats:
    """Insertion and deletion counts of one diff pass."""

    added: int = 0
    deleted: int = 0

    @property
    def has_changes(self) -> bool:
        return self.added > 0 or self.deleted > 0


@dataclass
class DiffResult:
    """Everything one computation pass produces."""

    operations: list[Operation] = field(default_factory=list)
    rows: list[DiffRow] = field(default_factory=list)
    stats: DiffStats = field(default_factory=DiffStats)


def normalize_text(text: str, tab_width: int = TAB_WIDTH) -> str:
    """Expand tabs to ``tab_width`` spaces and drop carriage returns."""
    return text.replace("\t", " " * tab_width).replace("\r", "")


def compute_operations(
    old_text: str, new_text: str, *, tab_width: int = TAB_WIDTH, timeout: float = DEFAULT_TIMEOUT
) -> list[Operation]:
    """Diff two texts line by line.

    Args:
        old_text: Left side text
        new_text: Right side text
        tab_width: Spaces substituted for each tab before diffing
        timeout: Seconds the Myers search may run before settling for a
            non-minimal script; 0 means no limit

    Returns:
        Ordered operations covering both normalized texts
    """
    old_norm = normalize_text(old_text, tab_width)
    new_norm = normalize_text(new_text, tab_width)

    dmp = diff_match_patch()
    dmp.Diff_Timeout = timeout

    # One character per distinct line: the diff and the cleanup below work on
    # whole lines, so no operation ever starts or ends mid-line.
    old_tokens, new_tokens, line_table = dmp.diff_linesToChars(old_norm, new_norm)
    diffs = dmp.diff_main(old_tokens, new_tokens, False)
    dmp.diff_cleanupSemantic(diffs)
    dmp.diff_charsToLines(diffs, line_table)

    return [Operation(_DMP_TYPES[op], text) for op, text in diffs if text]


def expand_rows(operations: list[Operation]) -> tuple[list[DiffRow], DiffStats]:
    """Expand operations into one row per source line - orchestrator for row building.

    Line counters start at 1 and run across the whole sequence; the same
    pass tallies the insertion and deletion counts.
    """
    state = _initialize_row_state()

    for operation in operations:
        _process_operation(operation, state)

    return state["rows"], state["stats"]


def compute_diff(
    old_text: str, new_text: str, *, tab_width: int = TAB_WIDTH, timeout: float = DEFAULT_TIMEOUT
) -> DiffResult:
    """Compute operations, rows and statistics for two texts."""
    operations = compute_operations(old_text, new_text, tab_width=tab_width, timeout=timeout)
    rows, stats = expand_rows(operations)
    return DiffResult(operations=operations, rows=rows, stats=stats)


def _initialize_row_state() -> dict:
    """Initialize state threaded through row expansion."""
    return {
        "rows": [],
        "stats": DiffStats(),
        "old_idx": 1,
        "new_idx": 1,
    }


def _process_operation(operation: Operation, state: dict):
    """Dispatch a single operation to the matching handler."""
    if operation.diff_type == DiffType.UNCHANGED:
        _handle_equal_lines(operation.lines, state)
    elif operation.diff_type == DiffType.DELETED:
        _handle_delete_lines(operation.lines, state)
    elif operation.diff_type == DiffType.ADDED:
        _handle_insert_lines(operation.lines, state)


def _handle_equal_lines(lines: list[str], state: dict):
    """Lines present on both sides."""
    for line in lines:
        state["rows"].append(
            DiffRow(
                diff_type=DiffType.UNCHANGED,
                left_line_num=state["old_idx"],
                right_line_num=state["new_idx"],
                left_content=line,
                right_content=line,
            )
        )
        state["old_idx"] += 1
        state["new_idx"] += 1


def _handle_delete_lines(lines: list[str], state: dict):
    """Lines only in the left text."""
    for line in lines:
        state["rows"].append(
            DiffRow(
                diff_type=DiffType.DELETED,
                left_line_num=state["old_idx"],
                right_line_num=None,
                left_content=line,
                right_content="",
            )
        )
        state["old_idx"] += 1
        state["stats"].deleted += 1


def _handle_insert_lines(lines: list[str], state: dict):
    """Lines only in the right text."""
    for line in lines:
        state["rows"].append(
            DiffRow(
                diff_type=DiffType.ADDED,
                left_line_num=None,
                right_line_num=state["new_idx"],
                left_content="",
                right_content=line,
            )
        )
        state["new_idx"] += 1
        state["stats"].added += 1
