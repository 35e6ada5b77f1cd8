"""Shared helpers: tolerances, errors, logging, string splitting and file-system checks."""

from __future__ import annotations

import contextlib
import os
import sys
import time
from enum import Enum, IntEnum
from typing import Iterable, Sequence

ZERO = 1e-6
EPSILON = 1e-5
INFINITY_DOUBLE = sys.float_info.max
INFINITY_INT = 2**31 - 1


def is_zero(value: float) -> bool:
    """Return True when ``value`` lies strictly within ``ZERO`` of zero."""
    return abs(value) < ZERO


def format_vector(values: Sequence) -> str:
    """Render a sequence as ``Print vector, of size = N : {a, b, ...};``."""
    body = ", ".join(str(v) for v in values)
    return f"Print vector, of size = {len(values)} : {{{body}}};"


def format_matrix(values: Sequence, dim: int) -> str:
    """Render a flat row-major matrix with ``dim`` columns, one row per line."""
    parts = [f"Print vector, of size = {len(values)} :\n"]
    for position, value in enumerate(values, start=1):
        parts.append(f"{value}, ")
        if position % dim == 0 and position != 1:
            parts.append("| \n")
    parts.append("| ;\n")
    return "".join(parts)


class ExceptionType(Enum):
    """How severe an :class:`MKCError` is."""

    STOP_EXECUTION = "stop_execution"
    DO_NOTHING = "do_nothing"
    VERTEX_ZERO_OR_NEGATIVE = "vertex_zero_or_negative"


class MKCError(Exception):
    """Error raised by the max-k-cut package, tagged with its severity."""

    def __init__(self, message: str, kind: ExceptionType = ExceptionType.DO_NOTHING) -> None:
        super().__init__(message)
        self.message = message
        self.kind = kind

    def __str__(self) -> str:
        if self.kind is ExceptionType.VERTEX_ZERO_OR_NEGATIVE:
            return (
                f"{self.message}\nERROR: Non valid vertices.\n"
                " Value of vertices must be btw 1 and graph's dimension"
            )
        return self.message


class LogLevel(IntEnum):
    """Log levels; a message is shown when its level is at most the current one."""

    FATAL = 0
    ERROR = 1
    WARNING = 2
    INFO = 3
    DEBUG = 4

    @property
    def label(self) -> str:
        return self.name.capitalize()


_current_level = LogLevel.ERROR


def set_log_level(level: LogLevel | int) -> None:
    """Set the most verbose level that is still printed."""
    global _current_level
    _current_level = LogLevel(level)


def current_date_time() -> str:
    """Return the local time formatted as ``YYYY-MM-DD.HH:MM:SS``."""
    return time.strftime("%Y-%m-%d.%X", time.localtime())


def log(level: LogLevel | int, message: str) -> bool:
    """Print ``message`` at ``level`` if enabled; return whether it was printed."""
    level = LogLevel(level)
    if level > _current_level:
        return False
    print(f"{current_date_time()} <{level.label}>:{message}")
    return True


def warn(message: str) -> bool:
    return log(LogLevel.WARNING, message)


def info(message: str) -> bool:
    return log(LogLevel.INFO, message)


def debug(message: str) -> bool:
    return log(LogLevel.DEBUG, message)


def fatal(message: str) -> bool:
    return log(LogLevel.FATAL, message)


def error(message: str) -> None:
    """Log ``message`` as an error and raise a stopping :class:`MKCError`."""
    log(LogLevel.ERROR, message)
    raise MKCError(message, ExceptionType.STOP_EXECUTION)


def split_string(text: str, delimiter: str) -> list[str]:
    """Split ``text`` on ``delimiter``, dropping empty tokens."""
    if not delimiter:
        raise ValueError("delimiter must not be empty")
    return [token for token in text.split(delimiter) if token]


def dir_exists(path: str | os.PathLike) -> bool:
    """Return True when ``path`` names an existing directory."""
    return os.path.isdir(path)


def make_dir(path: str | os.PathLike) -> None:
    """Create directory ``path``; failures such as an existing directory are ignored."""
    with contextlib.suppress(OSError):
        os.mkdir(path, 0o777)


def _join(values: Iterable[str]) -> str:
    return ", ".join(values)