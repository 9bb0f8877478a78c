"""Base screen class shared by atlas.diff screens.

Standardizes the composition pattern Header + main content + Footer so a
screen only has to describe its content and its footer text.
"""

from textual.app import ComposeResult
from textual.screen import Screen

from atlas_diff.utils.error_handling import log_ui_error
from atlas_diff.widgets.footer import Footer
from atlas_diff.widgets.header import Header

APP_TITLE = "ATLAS.DIFF"


class BaseScreen(Screen):
    """Base class for all atlas.diff screens.

    The standard structure is:
    - Header with the title and a screen-specific subtitle
    - Main content area (defined by subclass)
    - Footer with contextual text
    """

    def __init__(self, sub_title: str = ""):
        """Initialize base screen.

        Args:
            sub_title: Text shown next to the title in the header
        """
        super().__init__()
        self.title = APP_TITLE
        self.sub_title = sub_title

    def compose(self) -> ComposeResult:
        """Standard composition: header + main content + footer.

        Subclasses override compose_main_content() rather than this method.
        """
        yield Header()
        yield from self.compose_main_content()
        yield Footer(text=self.get_footer_text())

    def compose_main_content(self) -> ComposeResult:
        """Define the main content area for this screen."""
        raise NotImplementedError("Subclasses must implement compose_main_content()")

    def get_footer_text(self) -> str:
        """Get footer markup for this screen."""
        raise NotImplementedError("Subclasses must implement get_footer_text()")

    def update_footer(self) -> None:
        """Re-render the footer from get_footer_text()."""
        try:
            self.query_one(Footer).set_markup(self.get_footer_text())
        except Exception as e:
            log_ui_error("footer", "updating", e)

    def safe_set_focus(self, widget) -> None:
        """Set focus on widget with error handling."""
        try:
            self.set_focus(widget)
        except (AttributeError, RuntimeError) as e:
            log_ui_error("screen", "setting focus", e)
