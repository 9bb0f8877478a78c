import argparse
import sys

from textual.app import App

from atlas_diff import VERSION_STRING
from atlas_diff.screens.diff_viewer import DiffViewerScreen
from atlas_diff.themes import DEFAULT_THEME, FALLBACK_THEME, register_all_themes
from atlas_diff.utils.config import ConfigError, DiffPaths, get_config
from atlas_diff.utils.error_handling import log_generic_error
from atlas_diff.utils.io import safe_read_file
from atlas_diff.utils.logger import log

USAGE = "Usage: atlas.diff <file1> <file2>"


class AtlasDiffApp(App):
    BINDINGS = []
    DEFAULT_CSS = """
    Screen {
        background: $background;
        width: 100%;
        height: 100%;
    }
    """

    def __init__(self, paths: DiffPaths, left_text: str, right_text: str):
        """Initialize the viewer application.

        Args:
            paths: The two compared paths, shown in the header
            left_text: Contents of the first file
            right_text: Contents of the second file
        """
        super().__init__()
        self.paths = paths
        self.left_text = left_text
        self.right_text = right_text
        self._register_themes_safely()

    def _register_themes_safely(self):
        """Register bundled themes and select the default one."""
        try:
            register_all_themes(self)
            self.theme = DEFAULT_THEME
        except Exception as e:
            log_generic_error("theme registration", f"selecting {DEFAULT_THEME}", e, prefix="THEME")
            self.theme = FALLBACK_THEME

    def on_mount(self):
        """Push the diff screen; console logging pauses while the TUI owns the terminal."""
        log.set_console(False)
        self.push_screen(
            DiffViewerScreen(self.paths.left_path, self.paths.right_path, self.left_text, self.right_text)
        )

    def on_unmount(self):
        log.set_console(True)


def _create_argument_parser():
    """Create and configure the command-line argument parser."""
    parser = argparse.ArgumentParser(
        prog="atlas.diff",
        description="atlas.diff: side-by-side terminal diff viewer",
        usage="%(prog)s <file1> <file2>",
    )
    parser.add_argument('files', nargs='*', metavar='FILE', help='The two files to compare')
    parser.add_argument('-v', '--version', action='store_true', help='Print the version and exit')
    return parser


def _load_texts(paths: DiffPaths):
    """Read both files, reporting the first failure on stderr.

    Returns (left_text, right_text), or None if either file cannot be read.
    The error line written here is the only console output; log records of
    the failure still reach the debug file.
    """
    texts = []
    for path in (paths.left_path, paths.right_path):
        console = log.console_enabled
        log.set_console(False)
        try:
            result = safe_read_file(path)
        finally:
            log.set_console(console)
        if not result.success:
            sys.stderr.write(f"Error reading {path}: {result.error_message}\n")
            return None
        texts.append(result.content)
    return texts[0], texts[1]


def _run_session(paths: DiffPaths, left_text: str, right_text: str) -> int:
    """Run the full-screen session until the user quits."""
    app = AtlasDiffApp(paths, left_text, right_text)
    try:
        app.run()
    except Exception as e:
        log.set_console(True)
        log_generic_error("terminal session", "running", e, prefix="APP")
        sys.stderr.write(f"Error: {e}\n")
        return 1
    # Textual reports its own tracebacks and sets a non-zero code on failure
    return app.return_code or 0


def main(argv=None) -> int:
    """Main entry point for atlas.diff. Returns the process exit status."""
    parser = _create_argument_parser()
    args = parser.parse_args(argv)

    if args.version:
        print(VERSION_STRING)
        return 0

    if len(args.files) < 2:
        print(USAGE)
        return 0

    if len(args.files) > 2:
        log.warning(f"Ignoring extra arguments: {' '.join(args.files[2:])}")

    try:
        get_config()
    except ConfigError as e:
        sys.stderr.write(f"Error: {e}\n")
        return 1

    paths = DiffPaths.from_args(args)
    texts = _load_texts(paths)
    if texts is None:
        return 1

    return _run_session(paths, *texts)


if __name__ == "__main__":
    sys.exit(main())
