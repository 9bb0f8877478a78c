"""atlas.diff: a side-by-side terminal diff viewer.

The diff and layout core lives in ``atlas_diff.utils.diff_engine`` and
``atlas_diff.utils.pane_layout``; the Textual session is started from
``atlas_diff.entry_points``.
"""

__version__ = "0.1.0"
VERSION_STRING = f"atlas.diff v{__version__}"
