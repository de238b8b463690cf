"""Tests for SDK logging helpers."""

import logging
from pathlib import Path

from claude_cli_sdk.utils.log import SDKLogger, StructuredFormatter


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="claude_cli_sdk",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="[transport] Connected",
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_formatter_appends_extras_as_json() -> None:
    formatter = StructuredFormatter("%(levelname)s: %(message)s")
    line = formatter.format(_record(pid=123, cli_path="/usr/bin/claude"))
    assert line == 'INFO: [transport] Connected | {"cli_path": "/usr/bin/claude", "pid": 123}'


def test_formatter_without_extras() -> None:
    formatter = StructuredFormatter("%(message)s")
    assert formatter.format(_record()) == "[transport] Connected"


def test_formatter_iso_timestamp() -> None:
    formatter = StructuredFormatter("%(asctime)s %(message)s")
    line = formatter.format(_record())
    timestamp = line.split(" ", 1)[0]
    assert timestamp.endswith("Z")
    assert "T" in timestamp


def test_level_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("CLAUDE_SDK_LOG_LEVEL", "debug")
    sdk_logger = SDKLogger(name="claude_cli_sdk.test_level")
    try:
        [handler] = sdk_logger.logger.handlers
        assert handler.level == logging.DEBUG
    finally:
        for handler in list(sdk_logger.logger.handlers):
            sdk_logger.logger.removeHandler(handler)


def test_file_handler_receives_debug(tmp_path: Path) -> None:
    log_file = tmp_path / "nested" / "sdk.log"
    sdk_logger = SDKLogger(name="claude_cli_sdk.test_file", log_file=log_file)
    try:
        sdk_logger.debug("[transport] Parsed message", extra={"message_type": "result"})
        assert sdk_logger.attach_file_handler(log_file) == log_file
        contents = log_file.read_text()
        assert "[DEBUG] [transport] Parsed message" in contents
        assert '"message_type": "result"' in contents
    finally:
        for handler in list(sdk_logger.logger.handlers):
            sdk_logger.logger.removeHandler(handler)
            handler.close()
