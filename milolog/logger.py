"""Logger writing to the console and, optionally, to rotated log files."""

from __future__ import annotations

import logging
import os
import re
import sys
import threading
from datetime import datetime
from enum import Enum, IntEnum
from pathlib import Path
from typing import IO, ClassVar

CORE_CATEGORY = "core.logger"
DATE_TIME_FORMAT = "%Y-%m-%d_%H-%M-%S"
FILE_EXT = ".log"
_DATE_TIME_PATTERN = r"\d\d\d\d-\d\d-\d\d_\d\d-\d\d-\d\d"


class LogLevel(IntEnum):
    """How much is logged; every level includes the ones below it."""

    NO_LOG = 0
    FATAL = 1
    CRITICAL = 2
    WARNING = 3
    INFO = 4
    DEBUG = 5


class MessageType(Enum):
    """Kind of a single message."""

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    CRITICAL = "critical"
    FATAL = "fatal"


class RotationType(Enum):
    """How old log files are kept."""

    CONSEQUENT = "consequent"  # current -> previous -> previous-1 ...
    DATE_TIME = "date_time"  # <app_name>-<datetime>.log


_REQUIRED_LEVEL = {
    MessageType.DEBUG: LogLevel.DEBUG,
    MessageType.INFO: LogLevel.INFO,
    MessageType.WARNING: LogLevel.WARNING,
    MessageType.CRITICAL: LogLevel.CRITICAL,
    MessageType.FATAL: LogLevel.FATAL,
}


def _default_directory() -> Path:
    return Path.home() / "Documents"


def _message_type_for(levelno: int) -> MessageType:
    if levelno >= logging.CRITICAL:
        return MessageType.FATAL
    if levelno >= logging.ERROR:
        return MessageType.CRITICAL
    if levelno >= logging.WARNING:
        return MessageType.WARNING
    if levelno >= logging.INFO:
        return MessageType.INFO
    return MessageType.DEBUG


class MLog:
    """Writes messages to the console and, when enabled, to a log file."""

    _instance: ClassVar[MLog | None] = None
    _instance_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self, stream: IO[str] | None = None) -> None:
        self._stream = stream
        self._log_to_file = False
        self._log_to_console = True
        self._file: IO[str] | None = None
        self._previous_log_path: str | None = None
        self._current_log_path: str | None = None
        self._lock = threading.Lock()
        self._log_level = LogLevel.DEBUG
        self._rotation_type = RotationType.CONSEQUENT
        self._max_logs = 2

    @classmethod
    def instance(cls) -> MLog:
        """Return the shared logger, creating and installing it on first use."""
        with cls._instance_lock:
            if cls._instance is None:
                cls._instance = cls()
                install(cls._instance)
            return cls._instance

    @property
    def _console(self) -> IO[str]:
        return self._stream if self._stream is not None else sys.stderr

    def enable_log_to_file(
        self, app_name: str, directory: str | os.PathLike[str] | None = None
    ) -> None:
        """Start writing messages to ``<directory>/<app_name>-...log``.

        Earlier log files are rotated first. The directory is created when
        missing. Raises ``OSError`` when the directory or file cannot be made.
        """
        logs_dir = Path(directory) if directory is not None else _default_directory()
        if not logs_dir.is_dir():
            self.handle(MessageType.DEBUG, "Creating logs directory",
                        CORE_CATEGORY, "enable_log_to_file")
            try:
                logs_dir.mkdir(parents=True, exist_ok=True)
            except OSError:
                self.handle(MessageType.CRITICAL, "Could not create logs directory!",
                            CORE_CATEGORY, "enable_log_to_file")
                raise
            self.handle(MessageType.DEBUG, "Directory was created successfully",
                        CORE_CATEGORY, "enable_log_to_file")

        self.disable_log_to_file()

        previous = self._find_previous_log_path(logs_dir, app_name)
        if self._rotation_type is RotationType.CONSEQUENT:
            current = logs_dir / f"{app_name}-current{FILE_EXT}"
        else:
            stamp = datetime.now().strftime(DATE_TIME_FORMAT)
            current = logs_dir / f"{app_name}-{stamp}{FILE_EXT}"
        self._previous_log_path = str(previous) if previous is not None else None
        self._current_log_path = str(current)

        self._rotate_log_files(app_name, logs_dir)

        try:
            handle = open(current, "w", encoding="utf-8")
        except OSError:
            self.handle(MessageType.CRITICAL, "Could not open log file for writing!",
                        CORE_CATEGORY, "enable_log_to_file")
            raise
        with self._lock:
            self._file = handle
        self._log_to_file = True

    def disable_log_to_file(self) -> None:
        """Stop writing to the log file; console output continues."""
        with self._lock:
            if self._file is not None:
                self._file.close()
                self._file = None
        self._log_to_file = False

    def set_log_rotation(self, rotation_type: RotationType, max_logs: int) -> None:
        """Choose the rotation scheme and how many log files may be kept."""
        self._rotation_type = RotationType(rotation_type)
        self._max_logs = max_logs

    def enable_log_to_console(self) -> None:
        self._log_to_console = True

    def disable_log_to_console(self) -> None:
        self._log_to_console = False

    @property
    def previous_log_path(self) -> str | None:
        """Path of the previous log file; ``None`` before logging to a file."""
        return self._previous_log_path

    @property
    def current_log_path(self) -> str | None:
        """Path of the current log file; ``None`` before logging to a file."""
        return self._current_log_path

    @property
    def log_level(self) -> LogLevel:
        """Messages above this level are dropped. Defaults to ``DEBUG``."""
        return self._log_level

    @log_level.setter
    def log_level(self, level: LogLevel) -> None:
        self._log_level = LogLevel(level)

    def is_message_allowed(self, message_type: MessageType) -> bool:
        """Return True if messages of ``message_type`` pass the log level."""
        if self._log_level is LogLevel.NO_LOG:
            return False
        return self._log_level >= _REQUIRED_LEVEL[MessageType(message_type)]

    def format_message(
        self,
        message_type: MessageType,
        message: str,
        category: str | None = None,
        function: str | None = None,
    ) -> str:
        """Format as ``time|type[|category]|function: message``."""
        parts = [datetime.now().isoformat(timespec="seconds"), MessageType(message_type).value]
        if category:
            parts.append(category)
        parts.append(f"{function or ''}: {message}")
        return "|".join(parts)

    def handle(
        self,
        message_type: MessageType,
        message: str,
        category: str | None = None,
        function: str | None = None,
    ) -> str | None:
        """Log one message; return the formatted line, or None if filtered out."""
        if not self.is_message_allowed(message_type):
            return None
        formatted = self.format_message(message_type, message, category, function)
        if self._log_to_file:
            self._write(formatted + "\n")
        if self._log_to_console:
            console = self._console
            console.write(formatted + "\n")
            console.flush()
        return formatted

    def write_raw(self, message_type: MessageType, message: str) -> None:
        """Write ``message`` unformatted; no newline is appended."""
        if self._log_to_file:
            self._write(message)
        if self.is_message_allowed(message_type):
            console = self._console
            console.write(message)
            console.flush()

    def _write(self, message: str) -> None:
        with self._lock:
            if self._file is not None and not self._file.closed:
                self._file.write(message)
                self._file.flush()

    @staticmethod
    def _log_files(logs_dir: Path, app_name: str) -> list[str]:
        prefix = f"{app_name}-"
        names = (
            entry.name
            for entry in logs_dir.iterdir()
            if entry.is_file()
            and entry.name.startswith(prefix)
            and entry.name.endswith(FILE_EXT)
        )
        return sorted(names, reverse=True)

    @staticmethod
    def _numbered_pattern(app_name: str) -> re.Pattern[str]:
        return re.compile(
            rf"({re.escape(app_name)}-previous-)([1-9][0-9]*){re.escape(FILE_EXT)}"
        )

    @staticmethod
    def _dated_pattern(app_name: str) -> re.Pattern[str]:
        return re.compile(
            rf"({re.escape(app_name)}-)({_DATE_TIME_PATTERN}){re.escape(FILE_EXT)}"
        )

    def _rotate_log_files(self, app_name: str, logs_dir: Path) -> None:
        files = self._log_files(logs_dir, app_name)

        if self._rotation_type is RotationType.CONSEQUENT:
            pattern = self._numbered_pattern(app_name)
            numbered = sorted(
                ((int(match.group(2)), name)
                 for name in files
                 if (match := pattern.fullmatch(name))),
                reverse=True,
            )
            for index, name in numbered:
                os.replace(logs_dir / name,
                           logs_dir / f"{app_name}-previous-{index + 1}{FILE_EXT}")
            if self._previous_log_path and Path(self._previous_log_path).is_file():
                os.replace(self._previous_log_path,
                           logs_dir / f"{app_name}-previous-1{FILE_EXT}")

        if len(files) + 1 > self._max_logs:
            self._remove_last_log(app_name, logs_dir)

        if (
            self._current_log_path
            and self._previous_log_path
            and Path(self._current_log_path).is_file()
        ):
            os.replace(self._current_log_path, self._previous_log_path)

    def _find_previous_log_path(self, logs_dir: Path, app_name: str) -> Path | None:
        if self._rotation_type is RotationType.CONSEQUENT:
            return logs_dir / f"{app_name}-previous{FILE_EXT}"
        pattern = self._dated_pattern(app_name)
        newest = next(
            (name for name in self._log_files(logs_dir, app_name) if pattern.fullmatch(name)),
            None,
        )
        return logs_dir / newest if newest is not None else None

    def _remove_last_log(self, app_name: str, logs_dir: Path) -> None:
        files = self._log_files(logs_dir, app_name)
        last: str | None = None

        if self._rotation_type is RotationType.CONSEQUENT:
            pattern = self._numbered_pattern(app_name)
            candidates = [
                (int(match.group(2)), name)
                for name in files
                if (match := pattern.fullmatch(name))
            ]
            if candidates:
                last = max(candidates)[1]
        else:
            pattern = self._dated_pattern(app_name)
            oldest = datetime.now()
            for name in files:
                match = pattern.fullmatch(name)
                if not match:
                    continue
                try:
                    stamp = datetime.strptime(match.group(2), DATE_TIME_FORMAT)
                except ValueError:
                    continue
                if stamp < oldest:
                    oldest, last = stamp, name

        if last is not None:
            (logs_dir / last).unlink(missing_ok=True)


class MLogHandler(logging.Handler):
    """Routes records from the ``logging`` module into an :class:`MLog`."""

    def __init__(self, log: MLog | None = None) -> None:
        super().__init__(logging.NOTSET)
        self.log = log

    def emit(self, record: logging.LogRecord) -> None:
        try:
            target = self.log if self.log is not None else logger()
            category = None if record.name == "root" else record.name
            target.handle(
                _message_type_for(record.levelno),
                record.getMessage(),
                category,
                record.funcName,
            )
        except Exception:
            self.handleError(record)


def logger() -> MLog:
    """Return the shared :class:`MLog` instance."""
    return MLog.instance()


def install(log: MLog | None = None) -> MLogHandler:
    """Route all ``logging`` output through ``log``, replacing earlier installs."""
    root = logging.getLogger()
    for handler in [h for h in root.handlers if isinstance(h, MLogHandler)]:
        root.removeHandler(handler)
    handler = MLogHandler(log)
    root.addHandler(handler)
    root.setLevel(logging.DEBUG)
    return handler