"""Error types for the Claude CLI SDK.

Everything raised by the transport derives from ``ClaudeSDKError`` so callers
can catch the whole family at once.
"""

from typing import Any


class ClaudeSDKError(Exception):
    """Base exception for all SDK errors."""

    def __str__(self) -> str:
        return self.args[0] if self.args else "An error occurred in the Claude SDK"


class CLIConnectionError(ClaudeSDKError):
    """Raised when unable to connect to Claude Code."""


class CLINotFoundError(CLIConnectionError):
    """Raised when Claude Code is not found or not installed."""

    def __init__(self, message: str = "Claude Code not found", cli_path: str | None = None):
        self.cli_path = cli_path
        if cli_path:
            message = f"{message}: {cli_path}"
        super().__init__(message)


class CLINotConnectedError(CLIConnectionError):
    """Raised when reading from a transport that was never connected."""

    def __init__(self, message: str = "Not connected"):
        super().__init__(message)


class ProcessError(ClaudeSDKError):
    """Raised when the CLI process exits with a failure status."""

    def __init__(
        self,
        message: str,
        exit_code: int | None = None,
        stderr: str | None = None,
    ):
        self.exit_code = exit_code
        self.stderr = stderr

        if exit_code is not None:
            message = f"{message} (exit code: {exit_code})"
        if stderr:
            message = f"{message}\nError output: {stderr}"

        super().__init__(message)


class CLIJSONDecodeError(ClaudeSDKError):
    """Raised when unable to decode JSON from CLI output.

    ``line`` keeps the full offending text; the message only shows the first
    100 characters of it.
    """

    def __init__(self, line: str, original_error: Exception):
        self.line = line
        self.original_error = original_error
        super().__init__(f"Failed to decode JSON: {line[:100]}... ({original_error})")


class MessageParseError(ClaudeSDKError):
    """Raised when unable to parse a message from CLI output."""

    def __init__(self, message: str, data: Any = None):
        super().__init__(message)
        self.data = data


__all__ = [
    "ClaudeSDKError",
    "CLIConnectionError",
    "CLINotFoundError",
    "CLINotConnectedError",
    "ProcessError",
    "CLIJSONDecodeError",
    "MessageParseError",
]
