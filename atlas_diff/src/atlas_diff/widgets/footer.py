from rich.markup import escape
from rich.text import Text
from textual.widgets import Static

from atlas_diff.utils.diff_engine import DiffStats
from atlas_diff.utils.pane_layout import GOLD, GREEN, GREY, RED


def format_status(scroll_percent: float, stats: DiffStats, quit_key: str = "q") -> str:
    """Markup for the status line: scroll position, change counts and the quit hint."""
    return (
        f"[{GREY}] {scroll_percent:3.0f}% |[/{GREY}]"
        f" [{GREEN}]+{stats.added}[/{GREEN}] [{RED}]-{stats.deleted}[/{RED}] "
        f"[{GREY}]|[/{GREY}] [{GOLD}]\\[{escape(quit_key)}][/{GOLD}][{GREY}] Quit[/{GREY}]"
    )


class Footer(Static):
    """A single-line footer for contextual status text."""

    DEFAULT_CSS = """
    Footer {
        dock: bottom;
        height: 1;
        background: $panel;
    }
    """

    def __init__(self, text: str | None = None, classes: str = "footer") -> None:
        content = text if text is not None else ""
        self.status_text = Text.from_markup(content)
        super().__init__(self.status_text, classes=classes)

    def set_markup(self, text: str) -> None:
        """Replace the footer contents with rendered markup."""
        self.status_text = Text.from_markup(text)
        self.update(self.status_text)
