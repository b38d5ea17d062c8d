"""Console and file logger with log levels, log file rotation and colored output."""

__version__ = "0.0.1"