import os
import sys
from typing import Callable, Iterator
from unittest.mock import Mock

import pytest
from textual.events import Key

# Ensure local src path is importable
_here = os.path.dirname(os.path.dirname(__file__))  # atlas_diff folder
_src = os.path.join(_here, "src")
if os.path.isdir(_src) and _src not in sys.path:
    sys.path.insert(0, _src)

from atlas_diff.utils.logger import log  # noqa: E402

LEFT_TEXT = "alpha\nbeta\ngamma\ndelta\n"
RIGHT_TEXT = "alpha\nBETA\ngamma\ndelta\nepsilon\n"


@pytest.fixture(autouse=True)
def _quiet_console_logging() -> Iterator[None]:
    """Keep log output away from the test terminal."""
    log.set_console(False)
    yield
    log.set_console(True)


@pytest.fixture
def write_file(tmp_path) -> Callable[..., str]:
    """Return a helper that writes text (newlines untouched) and returns the path."""

    def _write(name: str, content: str, encoding: str = "utf-8") -> str:
        path = tmp_path / name
        with open(path, "w", encoding=encoding, newline="") as f:
            f.write(content)
        return str(path)

    return _write


@pytest.fixture
def file_pair(write_file) -> tuple[str, str]:
    """Two small files that differ by one changed and one added line."""
    return write_file("left.txt", LEFT_TEXT), write_file("right.txt", RIGHT_TEXT)


def create_mock_key_event(key: str, **kwargs) -> Mock:
    """Create a mock keyboard event for testing.

    Args:
        key: The key string (e.g., "j", "k", "g")
        **kwargs: Additional attributes for the mock event

    Returns:
        Mock Key event object
    """
    mock_event = Mock(spec=Key)
    mock_event.key = key
    mock_event.character = key if len(key) == 1 else None
    mock_event.is_printable = len(key) == 1 and key.isprintable()

    for attr_name, attr_value in kwargs.items():
        setattr(mock_event, attr_name, attr_value)

    return mock_event


@pytest.fixture
def sample_texts() -> tuple[str, str]:
    """The texts written by ``file_pair``: one changed and one added line."""
    return LEFT_TEXT, RIGHT_TEXT


@pytest.fixture
def key_event() -> Callable[..., Mock]:
    """Factory fixture for mock key events."""
    return create_mock_key_event
