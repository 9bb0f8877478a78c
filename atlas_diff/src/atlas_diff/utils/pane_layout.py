"""Side-by-side pane layout for diff rows.

Lays numbered rows out into two fixed-width panes separated by a divider.
Every text cell goes through :func:`fit_cell`, so each cell occupies exactly
the pane width in terminal cells and the divider stays in one column.

Row layout (``P`` = pane width)::

    [gutter:5] ' ' [cell:P] ' ' [divider:1] ' ' [gutter:5] ' ' [cell:P]
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from rich.cells import cell_len, set_cell_size
from rich.style import Style
from rich.text import Text

from .diff_engine import DiffResult, DiffRow, DiffStats, DiffType

GUTTER_WIDTH = 5
OUTER_MARGIN = 2
CHROME_WIDTH = 15
MIN_LAYOUT_WIDTH = 30

ELLIPSIS = "…"
ABSENT_MARKER = "~"
DIVIDER = "┃"
NO_CHANGES_NOTICE = "✔ No changes detected between files."

# Foreground palette
GOLD = "#FFD700"
SILVER = "#CCCCCC"
GREY = "#555555"
RED = "#FF5F5F"
GREEN = "#5FFF5F"
DIM = "#333333"

EQUAL_STYLE = Style(color=SILVER)
ADDED_STYLE = Style(color=GREEN)
DELETED_STYLE = Style(color=RED)
ABSENT_STYLE = Style(color=DIM)
NUMBER_STYLE = Style(color=GREY)
DIVIDER_STYLE = Style(color=GOLD, bold=True)
NOTICE_STYLE = Style(color=GREEN)


@dataclass(frozen=True)
class RenderedBlock:
    """The printable result of one layout pass."""

    lines: tuple[Text, ...]
    stats: DiffStats
    pane_width: Optional[int] = None

    @property
    def is_no_changes(self) -> bool:
        return self.pane_width is None

    @property
    def plain(self) -> str:
        """Unstyled rendering, one newline-terminated line per row."""
        return "".join(f"{line.plain}\n" for line in self.lines)

    def to_text(self) -> Text:
        """All lines joined into a single styled text for the viewport."""
        return Text("\n", no_wrap=True).join(self.lines)


def compute_pane_width(terminal_width: int, min_width: int = MIN_LAYOUT_WIDTH) -> int:
    """Width of each text pane for a terminal ``terminal_width`` columns wide."""
    working = max(terminal_width - OUTER_MARGIN, min_width)
    return (working - CHROME_WIDTH) // 2


def format_gutter(line_num: Optional[int]) -> str:
    """Right-justify a line number in the gutter.

    Numbers longer than the gutter keep only their leading digits.
    """
    if line_num is None:
        return " " * GUTTER_WIDTH
    return str(line_num)[:GUTTER_WIDTH].rjust(GUTTER_WIDTH)


def fit_cell(text: str, width: int) -> str:
    """Pad or truncate ``text`` to exactly ``width`` terminal cells.

    Text that does not fit is cut to ``width - 1`` cells and ends with an
    ellipsis.
    """
    if width <= 0:
        return ""
    used = cell_len(text)
    if used <= width:
        return text + " " * (width - used)
    return set_cell_size(text, width - 1) + ELLIPSIS


def render_rows(
    rows: list[DiffRow], stats: DiffStats, terminal_width: int, *, min_width: int = MIN_LAYOUT_WIDTH
) -> RenderedBlock:
    """Lay rows out into two panes for the given terminal width.

    Returns the "no changes" notice instead of panes when ``stats`` records
    neither insertions nor deletions.
    """
    if not stats.has_changes:
        return _no_changes_block(stats)

    pane_width = compute_pane_width(terminal_width, min_width)
    lines = tuple(_render_row(row, pane_width) for row in rows)
    return RenderedBlock(lines=lines, stats=stats, pane_width=pane_width)


def render_diff(result: DiffResult, terminal_width: int, *, min_width: int = MIN_LAYOUT_WIDTH) -> RenderedBlock:
    """Lay out a complete :class:`DiffResult`."""
    return render_rows(result.rows, result.stats, terminal_width, min_width=min_width)


def _no_changes_block(stats: DiffStats) -> RenderedBlock:
    notice = Text("  ")
    notice.append(NO_CHANGES_NOTICE, style=NOTICE_STYLE)
    return RenderedBlock(lines=(Text(""), notice), stats=stats, pane_width=None)


def _side_styles(diff_type: DiffType) -> tuple[Style, Style]:
    """Content styles for the (left, right) cells of a row type."""
    if diff_type == DiffType.DELETED:
        return DELETED_STYLE, ABSENT_STYLE
    if diff_type == DiffType.ADDED:
        return ABSENT_STYLE, ADDED_STYLE
    return EQUAL_STYLE, EQUAL_STYLE


def _render_cell(line_num: Optional[int], content: str, style: Style, pane_width: int) -> Text:
    # A side without a line number has no corresponding line
    if line_num is None:
        return Text(fit_cell(ABSENT_MARKER, pane_width), style=ABSENT_STYLE)
    return Text(fit_cell(content, pane_width), style=style)


def _render_side(line_num: Optional[int], content: str, style: Style, pane_width: int) -> Text:
    side = Text(no_wrap=True)
    side.append(format_gutter(line_num), style=NUMBER_STYLE)
    side.append(" ")
    side.append_text(_render_cell(line_num, content, style, pane_width))
    return side


def _render_row(row: DiffRow, pane_width: int) -> Text:
    left_style, right_style = _side_styles(row.diff_type)
    line = Text(no_wrap=True)
    line.append_text(_render_side(row.left_line_num, row.left_content, left_style, pane_width))
    line.append(" ")
    line.append(DIVIDER, style=DIVIDER_STYLE)
    line.append(" ")
    line.append_text(_render_side(row.right_line_num, row.right_content, right_style, pane_width))
    return line
