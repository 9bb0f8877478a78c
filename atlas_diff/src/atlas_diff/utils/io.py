from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .error_handling import log_file_error
from .logger import log
from .validation import ValidationError, validate_file_path


@dataclass
class FileReadResult:
    """Result of reading one side of the comparison."""
    success: bool
    path: str = ""
    content: str = ""
    encoding: str = ""
    error_message: str = ""


DEFAULT_ENCODINGS: tuple[str, ...] = (
    "utf-8",
    "utf-8-sig",
    "cp1252",
    "latin-1",
)


def read_text(path: str, encodings: Iterable[str] = DEFAULT_ENCODINGS) -> tuple[str, str]:
    """
    Read a text file trying multiple encodings in order.

    Returns (text, used_encoding). Line endings are left untouched
    (``newline=""``) so carriage returns reach the diff normalizer.
    If every encoding fails, the last one is retried with errors="replace".
    OSError propagates to the caller.
    """
    last_enc = None
    for enc in encodings:
        last_enc = enc
        try:
            with open(path, encoding=enc, newline="") as f:
                return f.read(), enc
        except UnicodeDecodeError:
            log.debug(f"[IO] {path} is not valid {enc}, trying next encoding")
            continue
    if last_enc is None:
        raise ValueError("no encodings given")
    with open(path, encoding=last_enc, errors="replace", newline="") as f:
        log.warning(f"[IO] Decoded with replacement characters: {path} ({last_enc})")
        return f.read(), f"{last_enc}+replace"


def safe_read_file(file_path: str, max_bytes: int | None = None) -> FileReadResult:
    """Validate and read a file without raising.

    Args:
        file_path: Path to the file to read
        max_bytes: Optional size limit overriding the configured one

    Returns:
        FileReadResult with success status, content, and error details
    """
    try:
        validate_file_path(file_path, max_bytes=max_bytes)
    except ValidationError as e:
        log_file_error(file_path, "validating", e)
        return FileReadResult(success=False, path=file_path, error_message=str(e))

    try:
        content, encoding = read_text(file_path)
    except (OSError, UnicodeDecodeError, ValueError) as e:
        log_file_error(file_path, "reading", e)
        cause = e.strerror if isinstance(e, OSError) and e.strerror else str(e)
        return FileReadResult(success=False, path=file_path, error_message=cause)

    log.debug(f"[IO] Read {file_path}: {len(content)} characters ({encoding})")
    return FileReadResult(success=True, path=file_path, content=content, encoding=encoding)
