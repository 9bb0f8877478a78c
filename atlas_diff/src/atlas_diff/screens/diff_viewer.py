"""Side-by-side diff screen.

Shows the left file against the right file in two numbered panes inside a
single scrollable viewport. The diff and the layout are recomputed from the
loaded texts on mount and on every terminal resize, and the footer tracks the
scroll position together with the insertion/deletion counts.

Keys: ``q``/``ctrl+c`` quit, ``j``/``k`` scroll a line, ``g g`` top, ``G``
bottom; arrows, page keys and home/end scroll the viewport directly.
"""

from __future__ import annotations

from textual import events
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import VerticalScroll
from textual.widgets import Static

from atlas_diff.utils.base_screen import BaseScreen
from atlas_diff.utils.config import get_config
from atlas_diff.utils.diff_engine import DiffResult, DiffStats, compute_diff
from atlas_diff.utils.error_handling import log_ui_error
from atlas_diff.utils.logger import log
from atlas_diff.utils.pane_layout import RenderedBlock, render_diff
from atlas_diff.widgets.footer import format_status


class DiffViewerScreen(BaseScreen):
    """Scrollable side-by-side diff of two already loaded texts."""

    BINDINGS = [
        Binding("q", "quit_viewer", "Quit"),
        Binding("ctrl+c", "quit_viewer", "Quit", priority=True, show=False),
    ]

    DEFAULT_CSS = """
    #diff-scroll {
        width: 100%;
        height: 1fr;
        padding: 1 0 0 0;
        scrollbar-size-vertical: 1;
    }
    #diff-body {
        width: auto;
    }
    """

    def __init__(self, left_path: str, right_path: str, left_text: str, right_text: str) -> None:
        super().__init__(sub_title=f"{left_path} <-> {right_path}")
        self.left_path = left_path
        self.right_path = right_path
        self._left_text = left_text
        self._right_text = right_text
        self.result: DiffResult | None = None
        self.rendered_block: RenderedBlock | None = None
        self._scroll: VerticalScroll | None = None
        self._body: Static | None = None
        self._last_g = False

    @property
    def stats(self) -> DiffStats:
        return self.result.stats if self.result else DiffStats()

    def compose_main_content(self) -> ComposeResult:
        self._body = Static("", id="diff-body")
        self._scroll = VerticalScroll(self._body, id="diff-scroll")
        yield self._scroll

    def get_footer_text(self) -> str:
        return format_status(self.scroll_percent(), self.stats)

    async def on_mount(self):
        """Build the initial view and start tracking the scroll position."""
        self.refresh_diff(self.app.size.width)
        if self._scroll is not None:
            self.watch(self._scroll, "scroll_y", self._on_scroll_changed, init=False)
            self.safe_set_focus(self._scroll)

    def on_resize(self, event: events.Resize) -> None:
        """Lay the diff out again for the new terminal width."""
        self.refresh_diff(event.size.width)

    def refresh_diff(self, terminal_width: int) -> None:
        """Recompute the diff and the pane layout, then repaint body and footer."""
        config = get_config()
        self.result = compute_diff(
            self._left_text,
            self._right_text,
            tab_width=config.tab_width,
            timeout=config.diff_timeout,
        )
        self.rendered_block = render_diff(self.result, terminal_width, min_width=config.min_width)
        log.debug(
            f"[DIFF] width={terminal_width} pane={self.rendered_block.pane_width} "
            f"rows={len(self.result.rows)} +{self.stats.added} -{self.stats.deleted}"
        )

        if self._body is not None:
            try:
                self._body.update(self.rendered_block.to_text())
            except Exception as e:
                log_ui_error("diff body", "updating", e)
        self.update_footer()

    def scroll_percent(self) -> float:
        """Scroll position as a percentage; 100 when everything fits."""
        scroll = self._scroll
        if scroll is None:
            return 100.0
        try:
            max_y = scroll.max_scroll_y
        except (AttributeError, RuntimeError):
            return 100.0
        if max_y <= 0:
            return 100.0
        return max(0.0, min(100.0, scroll.scroll_y / max_y * 100.0))

    def _on_scroll_changed(self, _old=None, _new=None) -> None:
        self.update_footer()

    def on_key(self, event):
        """Handle vim-like scrolling keys.

        - j/k scroll one line
        - g then g goes to top (like ``gg``)
        - G goes to the end
        """
        key = getattr(event, 'key', None)
        if key is None:
            return

        if key == 'j':
            self._scroll_and_stop(event, 'scroll_down')
        elif key == 'k':
            self._scroll_and_stop(event, 'scroll_up')
        elif key == 'G':
            self._scroll_and_stop(event, 'scroll_end')
        elif key == 'g':
            event.stop()
            if self._last_g:
                self._apply_to_viewport('scroll_home')
                self._last_g = False
            else:
                self._last_g = True
        else:
            self._last_g = False

    def _scroll_and_stop(self, event, method_name: str):
        self._apply_to_viewport(method_name)
        self._last_g = False
        event.stop()

    def _apply_to_viewport(self, method_name: str):
        """Call a scrolling method on the viewport without animation."""
        scroll = self._scroll
        if scroll is None:
            return
        try:
            getattr(scroll, method_name)(animate=False)
        except (AttributeError, RuntimeError) as e:
            log_ui_error("diff viewport", method_name, e)

    def action_quit_viewer(self) -> None:
        """Leave the session; the terminal is restored on exit."""
        self.app.exit()
