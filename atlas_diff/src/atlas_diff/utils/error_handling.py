"""Standardized error logging helpers for atlas.diff.

Every module reports failures through these helpers so log lines share
one shape: ``[PREFIX] Failed <operation> <subject>: <ErrorType>: <message>``.
"""

from typing import Optional

from .logger import log


def log_file_error(file_path: str, operation: str, exception: Exception) -> None:
    """Log file operation errors with consistent formatting.

    Args:
        file_path: Path to the file that caused the error
        operation: Description of the operation (e.g., "reading", "validating")
        exception: The exception that was raised
    """
    error_type = type(exception).__name__
    log.error(f"[IO] Failed {operation} {file_path}: {error_type}: {exception}")


def log_ui_error(component: str, action: str, exception: Exception) -> None:
    """Log UI component errors with consistent formatting.

    Args:
        component: Name of the UI component (e.g., "diff body", "footer")
        action: The action being performed (e.g., "updating", "scrolling")
        exception: The exception that was raised
    """
    error_type = type(exception).__name__
    log.error(f"[UI] Failed {action} on {component}: {error_type}: {exception}")


def log_generic_error(context: str, operation: str, exception: Exception, prefix: Optional[str] = None) -> None:
    """Log errors that don't fit the other categories.

    Args:
        context: Context where the error occurred (e.g., "theme registration")
        operation: The operation being performed
        exception: The exception that was raised
        prefix: Optional log prefix for categorization
    """
    error_type = type(exception).__name__
    prefix_str = f"[{prefix}] " if prefix else ""
    log.error(f"{prefix_str}Error in {context} during {operation}: {error_type}: {exception}")
