# milolog

A small logger that prints messages to the console (standard error by
default) and, when asked, also writes them to a log file. Log files from
earlier runs are kept and rotated, so the output of several runs can be
compared side by side.

## Installation

```
pip install .
```

No third-party libraries are needed.

## Getting started

`milolog.logger.MLog` is a process-wide logger. Get the shared instance with
`MLog.instance()` or the shorter `logger()`. The first call creates it and
routes the standard `logging` module into it.

```python
import logging

from milolog.logger import logger

log = logger()
log.enable_log_to_file("myapp", "logs")

logging.getLogger("core.main").info("Application started")

print("Current log:", log.current_log_path)
print("Previous log:", log.previous_log_path)
```

`install(log)` attaches an `MLogHandler` to the root `logging` logger (removing
any earlier `MLogHandler`) and sets the root level to `DEBUG`, so ordinary
`logging` calls anywhere in a program go through `MLog`. Other modules do not
need to import `milolog`. Standard levels map as follows: `DEBUG` → debug,
`INFO` → info, `WARNING` → warning, `ERROR` → critical, `CRITICAL` → fatal.
The logger name becomes the category (none for the root logger).

An `MLog` can also be made on its own, `MLog(stream)`, writing its console
output to `stream` instead of standard error.

## Message format

Each line has the form

```
<time>|<type>|<category>|<function>: <message>
```

where `<time>` is the local time in ISO format to the second, `<type>` is the
`MessageType` value (`debug`, `info`, `warning`, `critical`, `fatal`), and the
category part is left out when a message has none.

- `format_message(message_type, message, category=None, function=None)`
  returns the formatted line.
- `handle(message_type, message, category=None, function=None)` logs a message
  and returns the formatted line, or `None` if the level filtered it out.
- `write_raw(message_type, message)` writes text exactly as given, with no
  formatting and no newline. It always goes to the log file when one is
  open; it goes to the console only if the level allows it.

## Console and file output

- `enable_log_to_file(app_name, directory=None)` opens a new log file in
  `directory` (by default `~/Documents`), creating the directory if needed
  and rotating earlier logs first. It raises `OSError` when the directory or
  file cannot be created.
- `disable_log_to_file()` closes the file; console output goes on.
- `enable_log_to_console()` / `disable_log_to_console()` switch console output
  on and off; file output is unaffected.
- `current_log_path` and `previous_log_path` are properties; both are `None`
  until a file has been enabled.

## Log levels

The `log_level` property (default `LogLevel.DEBUG`) decides which messages get
through. The levels are, from quietest to most verbose: `NO_LOG`, `FATAL`,
`CRITICAL`, `WARNING`, `INFO`, `DEBUG`. A message is dropped, from both the
console and the file, when its type is more verbose than the level;
`NO_LOG` drops everything. `is_message_allowed(message_type)` tells whether a
given `MessageType` would be logged.

```python
from milolog.logger import LogLevel, logger

logger().log_level = LogLevel.WARNING
```

## Log rotation

Choose a `RotationType` and the number of logs to keep with
`set_log_rotation(rotation_type, max_logs)`. By default rotation is
`CONSEQUENT` and two logs are kept.

- `RotationType.CONSEQUENT` writes to `<app>-current.log`. On the next
  `enable_log_to_file`, numbered files `<app>-previous-N.log` are shifted to
  `N+1`, `<app>-previous.log` becomes `<app>-previous-1.log`, and the old
  current file becomes `<app>-previous.log`.
- `RotationType.DATE_TIME` names each file after the moment it was opened:
  `<app>-YYYY-MM-DD_HH-MM-SS.log`. The previous log is the newest such file.

When the number of `<app>-*.log` files in the directory plus the new one is
more than `max_logs`, one old log is removed: the highest-numbered
`previous-N` file, or the oldest dated file.

## Colored output

`milolog.colors` wraps text in ANSI color codes.

- `Color` has `RED`, `GREEN`, `BLUE` and `CYAN`.
- `colorize(color, message)` returns the colored string; `color_begin(color)`
  and `color_end()` give the raw escape sequences.
- `ColorLog(color, level=MessageType.DEBUG, category=None, log=None)` is a
  context manager. Its `write(*args)` collects parts, and when the block ends
  without an exception they are joined with spaces, colored, and logged
  through `log` (or the shared logger), with the calling function's name.

```python
from milolog.colors import Color, ColorLog
from milolog.logger import MessageType

with ColorLog(Color.RED, MessageType.INFO, "core.main") as out:
    out.write("Red!", 123)
```

## Example

A small demonstration program is included:

```
milolog-example [--directory DIR]
```

It sets the level to `INFO`, writes a log file named
`Basic example logger app-current.log` to `DIR` (by default `~/Documents`),
prints a few plain and colored messages, and closes the file.

## Limitations

Fatal messages are only logged; the logger never stops the program. Output goes
only to a text stream and plain files; there is no system log or other
platform-specific destination.