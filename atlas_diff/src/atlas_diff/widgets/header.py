from textual.widgets import Header as TextualHeader


class Header(TextualHeader):
    """Application header showing the screen title and the compared file names."""

    DEFAULT_CSS = """
    Header {
        dock: top;
        background: $panel;
        color: $primary;
        border-bottom: heavy $primary;
        padding: 0 1;
        text-style: bold;
        content-align: center middle;
        height: 2;
        min-height: 1;
    }
    """

    def __init__(self, show_clock: bool = False):
        super().__init__(show_clock=show_clock)
