"""Leveled logger for atlas.diff.

Records go to stderr and, when ``ATLAS_DEBUG=1`` is set, to
``atlas_diff_debug.log`` in the temp directory. Console output is suspended
while the full-screen session owns the terminal; the debug file keeps
receiving records.

    from atlas_diff.utils.logger import log
    log.debug("[DIFF] rows", extra={"rows": 12})
    log.error("read failed", exc_info=sys.exc_info())
"""

from __future__ import annotations

import os
import sys
import tempfile
import traceback
from datetime import datetime
from enum import IntEnum
from pathlib import Path
from typing import Any, TextIO

DEBUG_ENV = "ATLAS_DEBUG"
LEVEL_ENV = "LOG_LEVEL"
DEBUG_LOG_NAME = "atlas_diff_debug.log"

RECORD_FORMAT = "{timestamp} [{level:8}] {message}"

_RESET = "\033[0m"
_LEVEL_COLORS = {
    10: "\033[90m",
    20: _RESET,
    30: "\033[93m",
    40: "\033[91m",
    50: "\033[95m",
}


class LogLevel(IntEnum):
    DEBUG = 10
    INFO = 20
    WARN = 30
    WARNING = 30
    ERROR = 40
    CRITICAL = 50


def default_debug_log_path() -> Path:
    return Path(tempfile.gettempdir()) / DEBUG_LOG_NAME


def _level_from_env() -> LogLevel | None:
    name = os.environ.get(LEVEL_ENV, "").strip().upper()
    return LogLevel.__members__.get(name) if name else None


class Logger:
    """Writes formatted records at or above the current level."""

    def __init__(self):
        self._level = LogLevel.WARN
        self._console_enabled = True
        self._sink: TextIO | None = None
        self._sink_path: Path | None = None

        if os.environ.get(DEBUG_ENV) == "1":
            self._level = LogLevel.DEBUG
            self.set_file_output(default_debug_log_path())

        env_level = _level_from_env()
        if env_level is not None:
            self._level = env_level

    @property
    def level(self) -> LogLevel:
        return self._level

    @property
    def console_enabled(self) -> bool:
        return self._console_enabled

    @property
    def file_path(self) -> Path | None:
        return self._sink_path

    def set_level(self, level: LogLevel) -> None:
        self._level = level

    def set_console(self, enabled: bool) -> None:
        """Turn stderr output on or off; file output is unaffected."""
        self._console_enabled = enabled

    def set_file_output(self, path: Path, append: bool = True) -> None:
        """Send records to ``path`` as well; a file that cannot be opened disables file output."""
        self.close()
        try:
            self._sink = open(path, "a" if append else "w", encoding="utf-8")
        except OSError:
            return
        self._sink_path = Path(path)

    def close(self) -> None:
        sink, self._sink, self._sink_path = self._sink, None, None
        if sink is not None:
            try:
                sink.close()
            except OSError:
                pass

    def _render(self, level: LogLevel, message: str, extra: dict | None, exc_info: tuple | None) -> str:
        record = RECORD_FORMAT.format(
            timestamp=datetime.now().strftime("%Y-%m-%d %H:%M:%S.%f")[:-3],
            level=level.name,
            message=message,
        )
        if extra:
            record = f"{record} | {extra}"
        if exc_info and exc_info[0] is not None:
            record = record + "\n" + "".join(traceback.format_exception(*exc_info))
        return record

    def _to_file(self, record: str) -> None:
        if self._sink is None:
            return
        try:
            self._sink.write(record + "\n")
            self._sink.flush()
        except OSError:
            pass

    def _to_console(self, level: LogLevel, record: str) -> None:
        stream = sys.stderr
        try:
            if stream.isatty():
                record = f"{_LEVEL_COLORS.get(int(level), _RESET)}{record}{_RESET}"
            stream.write(record + "\n")
            stream.flush()
        except (OSError, ValueError, AttributeError):
            pass

    def log(self, level: LogLevel, *args: Any, sep: str = " ", extra: dict | None = None,
            exc_info: tuple | None = None) -> None:
        if level < self._level:
            return
        record = self._render(level, sep.join(str(a) for a in args), extra, exc_info)
        self._to_file(record)
        if self._console_enabled:
            self._to_console(level, record)

    def debug(self, *args: Any, **kwargs) -> None:
        self.log(LogLevel.DEBUG, *args, **kwargs)

    def info(self, *args: Any, **kwargs) -> None:
        self.log(LogLevel.INFO, *args, **kwargs)

    def warning(self, *args: Any, **kwargs) -> None:
        self.log(LogLevel.WARN, *args, **kwargs)

    warn = warning

    def error(self, *args: Any, **kwargs) -> None:
        self.log(LogLevel.ERROR, *args, **kwargs)

    def critical(self, *args: Any, **kwargs) -> None:
        self.log(LogLevel.CRITICAL, *args, **kwargs)

    def __call__(self, *args: Any, sep: str = " ") -> None:
        """Log at INFO level."""
        self.info(*args, sep=sep)


log = Logger()
