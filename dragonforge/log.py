"""Logging to a CSV-like file and, optionally, a coloured console."""

from __future__ import annotations

import enum
import inspect
import sys
from typing import TextIO

from .filesystem import FileSystem

LOG_PATH = "binaries/log.csv"
LOG_HEADER = "Type;;Function;;Line;;Message\n"

_RESET = "\x1b[0m"
_FAINT = "\x1b[2m"


class LogType(enum.Enum):
    RAW = "[  RAW  ]"
    MESSAGE = "[MESSAGE]"
    WARNING = "[WARNING]"
    ERROR = "[ ERROR ]"


_COLORS = {
    LogType.RAW: (255, 255, 255),
    LogType.MESSAGE: (255, 255, 255),
    LogType.WARNING: (255, 255, 0),
    LogType.ERROR: (255, 0, 0),
}


def format_file_entry(kind: LogType, function: str, line: int, message: str) -> str:
    """Format a log line as written to the log file."""
    return f"{kind.value};;{function};;{line};;{message}\n"


def format_console_entry(kind: LogType, function: str, line: int, message: str) -> str:
    """Format a log line as printed to the console, without colour."""
    if kind is LogType.RAW:
        return f"{kind.value} {message}\n"
    return f"{kind.value} {function} Line {line} - {message}\n"


def _style(kind: LogType, text: str) -> str:
    r, g, b = _COLORS[kind]
    return f"{_FAINT}\x1b[38;2;{r:03d};{g:03d};{b:03d}m{text}{_RESET}"


class Log:
    """Writes entries to the log file and, when a console is given, to it too."""

    def __init__(self, filesystem: FileSystem, console: TextIO | None = None) -> None:
        self.filesystem = filesystem
        self.console = console

    def print(self, kind: LogType, function: str, line: int, message: str) -> None:
        self.print_file(kind, function, line, message)
        if self.console is not None:
            self.print_console(kind, function, line, message)

    def print_file(self, kind: LogType, function: str, line: int, message: str) -> bool:
        entry = format_file_entry(kind, function, line, message)
        return self.filesystem.write(LOG_PATH, entry, append=True)

    def print_console(self, kind: LogType, function: str, line: int, message: str) -> str:
        entry = format_console_entry(kind, function, line, message)
        stream = self.console if self.console is not None else sys.stdout
        stream.write(_style(kind, entry))
        return entry

    def _log_from_caller(self, kind: LogType, message: str) -> None:
        frame = inspect.currentframe()
        caller = frame.f_back.f_back if frame and frame.f_back else None
        if caller is None:
            self.print(kind, "<unknown>", 0, message)
        else:
            self.print(kind, caller.f_code.co_name, caller.f_lineno, message)

    def raw(self, message: str) -> None:
        self._log_from_caller(LogType.RAW, message)

    def message(self, message: str) -> None:
        self._log_from_caller(LogType.MESSAGE, message)

    def warning(self, message: str) -> None:
        self._log_from_caller(LogType.WARNING, message)

    def error(self, message: str) -> None:
        self._log_from_caller(LogType.ERROR, message)