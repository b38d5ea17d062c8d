"""Coloured console messages built on top of the milolog logger."""

from __future__ import annotations

import inspect
from enum import Enum

from .logger import MessageType, MLog, logger

END_COLOR = "\033[0m"


class Color(Enum):
    """Terminal colours available for coloured messages."""

    RED = "\033[1;31m"
    GREEN = "\033[1;32m"
    BLUE = "\033[1;34m"
    CYAN = "\033[1;36m"


def color_begin(color: Color | str) -> str:
    """Return the escape sequence that switches the terminal to ``color``."""
    return Color(color).value


def color_end() -> str:
    """Return the escape sequence that resets the terminal colour."""
    return END_COLOR


def colorize(color: Color | str, message: str) -> str:
    """Wrap ``message`` in the escape sequences for ``color``."""
    return f"{color_begin(color)}{message}{color_end()}"


class ColorLog:
    """Collects message parts and emits them as one coloured message on exit.

    Use as a context manager::

        with ColorLog(Color.RED, MessageType.INFO) as out:
            out.write("Red!", 123)
    """

    def __init__(
        self,
        color: Color | str,
        level: MessageType | str = MessageType.DEBUG,
        category: str | None = None,
        log: MLog | None = None,
    ) -> None:
        self.color = Color(color)
        self.level = MessageType(level)
        self.category = category
        self.log = log
        self._parts: list[str] = []
        frame = inspect.currentframe()
        caller = frame.f_back if frame is not None else None
        self.function = caller.f_code.co_name if caller is not None else None

    def __enter__(self) -> ColorLog:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is not None:
            return None
        target = self.log if self.log is not None else logger()
        target.handle(
            self.level,
            colorize(self.color, " ".join(self._parts)),
            self.category,
            self.function,
        )
        return None

    def write(self, *args: object) -> ColorLog:
        """Append ``args`` to the message; parts are separated by spaces."""
        self._parts.extend(str(arg) for arg in args)
        return self