from pathlib import Path

import pytest

from milolog.example import APP_NAME, ExampleClass, main
from milolog.logger import LogLevel, install, logger


@pytest.fixture(autouse=True)
def _reset_logger():
    log = logger()
    install(log)
    log.log_level = LogLevel.DEBUG
    log.enable_log_to_console()
    yield log
    log.disable_log_to_file()
    log.log_level = LogLevel.DEBUG
    log.enable_log_to_console()


def _run(tmp_path: Path) -> str:
    assert main(["--directory", str(tmp_path)]) == 0
    return (tmp_path / f"{APP_NAME}-current.log").read_text(encoding="utf-8")


def test_main_writes_current_log_file(tmp_path):
    assert main(["--directory", str(tmp_path)]) == 0
    current = Path(logger().current_log_path)
    assert current == tmp_path / f"{APP_NAME}-current.log"
    assert current.is_file()


def test_main_logs_info_and_more_severe(tmp_path):
    text = _run(tmp_path)
    assert "Logger successfully created." in text
    assert "This is a warning!" in text
    assert "This is a critical message!" in text
    assert "Hello, std lib!" in text


def test_main_filters_debug_messages(tmp_path):
    text = _run(tmp_path)
    assert "This is a debug message" not in text
    assert logger().log_level is LogLevel.INFO


def test_main_uses_category(tmp_path):
    text = _run(tmp_path)
    warning_lines = [line for line in text.splitlines() if "This is a warning!" in line]
    assert len(warning_lines) == 1
    assert "|warning|core.main|main: This is a warning!" in warning_lines[0]


def test_main_writes_colored_messages(tmp_path):
    text = _run(tmp_path)
    assert "\033[1;31mRed! 123\033[0m" in text
    assert "\033[1;36mCyan!123\033[0m" in text
    assert "\033[1;32mGreen! 123 Hello, std lib!\033[0m" in text
    assert "\033[1;34mBlue! 123\033[0m" in text


def test_main_includes_example_class_output(tmp_path):
    text = _run(tmp_path)
    assert "This is a simple test! 15" in text
    assert "No need to import milolog!" in text


def test_second_run_rotates_previous_log(tmp_path):
    _run(tmp_path)
    _run(tmp_path)
    previous = tmp_path / f"{APP_NAME}-previous.log"
    assert Path(logger().previous_log_path) == previous
    assert previous.is_file()
    assert "Logger successfully created." in previous.read_text(encoding="utf-8")


def test_main_closes_log_file(tmp_path):
    _run(tmp_path)
    current = tmp_path / f"{APP_NAME}-current.log"
    size = current.stat().st_size
    logger().handle("info", "after main")
    assert current.stat().st_size == size


def test_log_something_reaches_console(capsys):
    ExampleClass().log_something()
    err = capsys.readouterr().err
    assert "This is a simple test! 15" in err
    assert "No need to import milolog!" in err


def test_log_something_respects_log_level(capsys):
    logger().log_level = LogLevel.WARNING
    ExampleClass().log_something()
    err = capsys.readouterr().err
    assert "This is a simple test!" not in err