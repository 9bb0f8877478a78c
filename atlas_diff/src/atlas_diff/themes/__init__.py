"""Theme plugins for the app.

Drop Python files in this package that expose either:
- THEMES: list[textual.theme.Theme]
- get_themes() -> list[textual.theme.Theme] | textual.theme.Theme

They are discovered, validated and registered on startup.
"""

from __future__ import annotations

import importlib
import pkgutil
from typing import Any

from atlas_diff.utils.error_handling import log_generic_error
from atlas_diff.utils.logger import log

DEFAULT_THEME = "atlas"
FALLBACK_THEME = "textual-dark"


class ThemeValidator:
    """Validates theme objects before registration."""

    REQUIRED_COLORS = ("primary", "secondary", "accent")

    def validate_theme(self, theme_obj: Any) -> bool:
        """Return True if ``theme_obj`` has a name and non-empty required colors."""
        if theme_obj is None or not getattr(theme_obj, "name", None):
            return False

        for attr in self.REQUIRED_COLORS:
            color_value = getattr(theme_obj, attr, None)
            if not color_value or (isinstance(color_value, str) and not color_value.strip()):
                log.debug(f"Theme {theme_obj.name} has empty {attr} color")
                return False
        return True


theme_validator = ThemeValidator()


def _coerce_to_list(obj: Any) -> list[Any]:
    if obj is None:
        return []
    if isinstance(obj, (list, tuple)):
        return list(obj)
    return [obj]


def discover_themes() -> list[Any]:
    """Collect theme objects exported by the modules of this package."""
    themes: list[Any] = []
    for modinfo in pkgutil.iter_modules(__path__, prefix=__name__ + "."):
        try:
            mod = importlib.import_module(modinfo.name)
        except ImportError as e:
            log_generic_error("theme discovery", f"importing {modinfo.name}", e, prefix="THEME")
            continue
        if hasattr(mod, "THEMES"):
            themes.extend(_coerce_to_list(mod.THEMES))
        elif hasattr(mod, "get_themes"):
            themes.extend(_coerce_to_list(mod.get_themes()))
    return themes


def register_all_themes(app: Any) -> int:
    """Register all discovered, valid themes on a Textual App.

    Returns the number of themes registered.
    """
    count = 0
    for theme in discover_themes():
        if not theme_validator.validate_theme(theme):
            log.warning(f"Skipping invalid theme: {getattr(theme, 'name', 'unknown')}")
            continue
        try:
            app.register_theme(theme)
            count += 1
            log.debug(f"Registered theme: {theme.name}")
        except (RuntimeError, ValueError, TypeError) as e:
            log_generic_error("theme registration", f"registering {theme.name}", e, prefix="THEME")
    return count
