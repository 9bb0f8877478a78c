"""Input validation for the files handed to atlas.diff.

Validation runs before any file is read so that a bad argument stops the
program with a readable cause instead of a half-started session.
"""

from __future__ import annotations

import os
from pathlib import Path

from .config import get_config


class ValidationError(Exception):
    """Raised when input validation fails."""

    pass


def validate_file_path(path: str, name: str = "File", max_bytes: int | None = None) -> str:
    """Validate that a path names a readable regular file of acceptable size.

    Args:
        path: The file path to validate
        name: Human-readable name for error messages
        max_bytes: Size limit in bytes; defaults to the configured ``max_file_bytes``

    Returns:
        Normalized absolute path

    Raises:
        ValidationError: If validation fails
    """
    if not path or not path.strip():
        raise ValidationError(f"{name} path cannot be empty")

    if '\x00' in path:
        raise ValidationError(f"{name} path contains invalid characters")

    try:
        resolved_path = Path(path).expanduser().resolve()
        abs_path = str(resolved_path)
    except (OSError, ValueError, RuntimeError) as e:
        raise ValidationError(f"{name} path is not valid: {e}") from e

    if not resolved_path.exists():
        raise ValidationError("no such file or directory")

    if resolved_path.is_dir():
        raise ValidationError("is a directory")

    if not resolved_path.is_file():
        raise ValidationError("is not a regular file")

    if not os.access(abs_path, os.R_OK):
        raise ValidationError("permission denied")

    limit = get_config().max_file_bytes if max_bytes is None else max_bytes
    try:
        size = resolved_path.stat().st_size
    except OSError as e:
        raise ValidationError(f"cannot stat file: {e}") from e
    if size > limit:
        raise ValidationError(f"file is too large ({size} bytes, limit {limit})")

    return abs_path
