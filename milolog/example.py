"""Example application showing how the milolog logger is used."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

from .colors import Color, ColorLog
from .logger import LogLevel, MessageType, install, logger

APP_NAME = "Basic example logger app"
MAIN_CATEGORY = "core.main"

_main_log = logging.getLogger(MAIN_CATEGORY)


class ExampleClass:
    """Logs through the standard ``logging`` module without touching milolog."""

    def log_something(self) -> None:
        root = logging.getLogger()
        root.info("This is a simple test! %s", 15)
        root.info("No need to import milolog!")


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="milolog-example",
        description="Write a few sample messages to the console and a log file.",
    )
    parser.add_argument(
        "--directory",
        default=None,
        help="directory for log files (defaults to ~/Documents)",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the example: log sample messages to the console and a file."""
    args = _parse_args(argv)

    log = logger()
    install(log)

    # Only info messages and more severe ones get through.
    log.log_level = LogLevel.INFO
    log.enable_log_to_file(APP_NAME, args.directory)

    try:
        _main_log.info(
            "Logger successfully created.\n\tApplication name is: %s"
            "\n\tPrevious log path: %s\n\tCurrent log path: %s",
            APP_NAME,
            log.previous_log_path,
            log.current_log_path,
        )
        _main_log.warning("This is a warning!")
        _main_log.error("This is a critical message!")
        _main_log.debug(
            "This is a debug message, it won't be printed because "
            "log level is set to LogLevel.INFO"
        )

        standard_string = "Hello, std lib!"
        _main_log.info("%s", standard_string)

        with ColorLog(Color.RED, MessageType.INFO, log=log) as out:
            out.write("Red!", 123)
        with ColorLog(Color.CYAN, MessageType.INFO, log=log) as out:
            out.write("Cyan!" + str(123))
        with ColorLog(Color.GREEN, MessageType.INFO, log=log) as out:
            out.write("Green!", 123, standard_string)
        with ColorLog(Color.BLUE, MessageType.INFO, log=log) as out:
            out.write("Blue!", 123)

        _main_log.info("This should use default color again")

        with ColorLog(Color.RED, MessageType.INFO, MAIN_CATEGORY, log) as out:
            out.write("Red category!", 123)
        with ColorLog(Color.CYAN, MessageType.INFO, MAIN_CATEGORY, log) as out:
            out.write("Cyan category!" + str(123))
        with ColorLog(Color.GREEN, MessageType.INFO, MAIN_CATEGORY, log) as out:
            out.write("Green category!", 123, standard_string)
        with ColorLog(Color.BLUE, MessageType.INFO, MAIN_CATEGORY, log) as out:
            out.write("Blue category!", 123)

        _main_log.info("This should use default color again")

        ExampleClass().log_something()
    finally:
        log.disable_log_to_file()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())