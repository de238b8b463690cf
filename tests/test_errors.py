"""Tests for the SDK error hierarchy."""

import json

import pytest

from claude_cli_sdk import (
    ClaudeSDKError,
    CLIConnectionError,
    CLIJSONDecodeError,
    CLINotConnectedError,
    CLINotFoundError,
    MessageParseError,
    ProcessError,
)


class TestErrorHierarchy:
    @pytest.mark.parametrize(
        "error_cls",
        [CLIConnectionError, CLINotFoundError, CLINotConnectedError, ProcessError],
    )
    def test_everything_is_an_sdk_error(self, error_cls: type) -> None:
        assert issubclass(error_cls, ClaudeSDKError)

    def test_connection_family(self) -> None:
        assert issubclass(CLINotFoundError, CLIConnectionError)
        assert issubclass(CLINotConnectedError, CLIConnectionError)
        assert not issubclass(ProcessError, CLIConnectionError)

    def test_decode_and_parse_errors(self) -> None:
        assert issubclass(CLIJSONDecodeError, ClaudeSDKError)
        assert issubclass(MessageParseError, ClaudeSDKError)


class TestErrorMessages:
    def test_base_error(self) -> None:
        assert str(ClaudeSDKError("Something went wrong")) == "Something went wrong"

    def test_not_found_default_message(self) -> None:
        error = CLINotFoundError()
        assert str(error) == "Claude Code not found"
        assert error.cli_path is None

    def test_not_found_includes_path(self) -> None:
        error = CLINotFoundError("Claude Code not found", cli_path="/opt/claude")
        assert str(error) == "Claude Code not found: /opt/claude"
        assert error.cli_path == "/opt/claude"

    def test_not_connected(self) -> None:
        assert str(CLINotConnectedError()) == "Not connected"

    def test_process_error_with_exit_code_and_stderr(self) -> None:
        error = ProcessError("Command failed", exit_code=1, stderr="Command not found")
        assert error.exit_code == 1
        assert error.stderr == "Command not found"
        assert "Command failed" in str(error)
        assert "exit code: 1" in str(error)
        assert "Error output: Command not found" in str(error)

    def test_process_error_without_details(self) -> None:
        error = ProcessError("Command failed")
        assert str(error) == "Command failed"
        assert error.exit_code is None
        assert error.stderr is None

    def test_json_decode_error_truncates_line(self) -> None:
        line = "{" + "x" * 500
        with pytest.raises(json.JSONDecodeError) as decode_info:
            json.loads(line)
        original = decode_info.value

        error = CLIJSONDecodeError(line, original)

        assert error.line == line
        assert error.original_error is original
        assert str(error).startswith("Failed to decode JSON: " + line[:100] + "...")
        assert line[:101] not in str(error)

    def test_message_parse_error_keeps_data(self) -> None:
        data = {"type": "result"}
        error = MessageParseError("Missing required field in result message: 'subtype'", data)
        assert error.data is data
        assert str(error) == "Missing required field in result message: 'subtype'"
