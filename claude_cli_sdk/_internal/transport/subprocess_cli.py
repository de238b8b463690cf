"""Subprocess transport implementation using anyio for clean async I/O.

This module starts the Claude Code CLI in print mode and turns its stdout
stream-json output back into JSON values.
"""

from __future__ import annotations

import os
import shutil
import signal
import subprocess
import sys
import tempfile
from collections.abc import AsyncIterator
from pathlib import Path as PathLib
from typing import Any

import anyio
from anyio.abc import Process
from anyio.streams.text import TextReceiveStream

from claude_cli_sdk._errors import (
    CLIConnectionError,
    CLIJSONDecodeError,
    CLINotConnectedError,
    CLINotFoundError,
    ProcessError,
)
from claude_cli_sdk._internal.command import build_command
from claude_cli_sdk._internal.json_stream import JSONStreamBuffer
from claude_cli_sdk._internal.transport import Transport
from claude_cli_sdk.types import ClaudeCodeOptions
from claude_cli_sdk.utils.log import get_logger

logger = get_logger()

ENTRYPOINT_ENV_VAR = "CLAUDE_CODE_ENTRYPOINT"
ENTRYPOINT = "sdk-py"

# Seconds to wait after SIGINT before escalating to SIGKILL.
TERMINATE_GRACE_PERIOD = 5.0


def _common_locations() -> list[PathLib]:
    home = PathLib.home()
    return [
        home / ".npm-global" / "bin" / "claude",
        PathLib("/usr/local") / "bin" / "claude",
        home / ".local" / "bin" / "claude",
        home / "node_modules" / ".bin" / "claude",
        home / ".yarn" / "bin" / "claude",
    ]


def find_cli() -> str:
    """Find the Claude Code CLI binary.

    Returns:
        Path to the CLI executable.

    Raises:
        CLINotFoundError: If the CLI cannot be found.
    """
    if cli := shutil.which("claude"):
        return cli

    for path in _common_locations():
        if path.exists() and path.is_file():
            return str(path)

    if not shutil.which("node"):
        raise CLINotFoundError(
            "Claude Code requires Node.js, which is not installed.\n\n"
            "Install Node.js from: https://nodejs.org/\n"
            "\nAfter installing Node.js, install Claude Code:\n"
            "  npm install -g @anthropic-ai/claude-code"
        )

    raise CLINotFoundError(
        "Claude Code not found. Install with:\n"
        "  npm install -g @anthropic-ai/claude-code\n"
        "\nIf already installed locally, try:\n"
        '  export PATH="$HOME/node_modules/.bin:$PATH"\n'
        "\nOr provide the path via ClaudeCodeOptions:\n"
        "  ClaudeCodeOptions(cli_path='/path/to/claude')"
    )


class SubprocessCLITransport(Transport):
    """Runs one print-mode Claude Code query in a subprocess.

    The prompt and options are passed on the command line, so stdin is closed
    right after the process starts. stdout is parsed as stream-json. stderr
    is spooled to an anonymous temporary file rather than a pipe, so a CLI
    that writes a lot of diagnostics can never block on a full stderr pipe
    while we are still reading stdout.

    A transport runs a single query. Build a new one for the next query.
    """

    def __init__(
        self,
        prompt: str,
        options: ClaudeCodeOptions,
        cli_path: str | PathLib | None = None,
    ):
        """Initialize the subprocess transport.

        Args:
            prompt: Prompt passed to ``--print``.
            options: Configuration options for the CLI.
            cli_path: Explicit CLI path. Falls back to ``options.cli_path``
                and then to a search of PATH and common install locations.

        Raises:
            CLINotFoundError: If no CLI path was given and none can be found.
        """
        self._prompt = prompt
        self._options = options

        if cli_path is None:
            cli_path = options.cli_path
        self._cli_path = str(cli_path) if cli_path is not None else find_cli()

        self._cwd = str(options.cwd) if options.cwd else None

        self._process: Process | None = None
        self._stdout_stream: TextReceiveStream | None = None
        self._stderr_file: anyio.AsyncFile[bytes] | None = None

    @property
    def cli_path(self) -> str:
        return self._cli_path

    @property
    def pid(self) -> int | None:
        return self._process.pid if self._process else None

    def _build_command(self) -> list[str]:
        return build_command(self._cli_path, self._prompt, self._options)

    def _build_env(self) -> dict[str, str]:
        return {
            **os.environ,
            **self._options.env,
            ENTRYPOINT_ENV_VAR: ENTRYPOINT,
        }

    async def connect(self) -> None:
        """Start the CLI subprocess.

        Raises:
            CLIConnectionError: If the working directory is missing or the
                process fails to start.
            CLINotFoundError: If the CLI executable does not exist.
        """
        if self._process:
            return  # Already connected

        if self._cwd and not PathLib(self._cwd).is_dir():
            raise CLIConnectionError(f"Working directory does not exist: {self._cwd}")

        cmd = self._build_command()
        logger.debug(
            "[transport] Starting Claude Code",
            extra={"cli_path": self._cli_path, "cwd": self._cwd, "arg_count": len(cmd)},
        )

        stderr_file = tempfile.TemporaryFile()
        try:
            process = await anyio.open_process(
                cmd,
                stdin=subprocess.PIPE,
                stdout=subprocess.PIPE,
                stderr=stderr_file,
                cwd=self._cwd,
                env=self._build_env(),
            )
        except FileNotFoundError as e:
            stderr_file.close()
            # Check if error is from the CLI or the working directory
            if self._cwd and not PathLib(self._cwd).exists():
                raise CLIConnectionError(
                    f"Working directory does not exist: {self._cwd}"
                ) from e
            raise CLINotFoundError("Claude Code not found", cli_path=self._cli_path) from e
        except Exception as e:
            stderr_file.close()
            raise CLIConnectionError(f"Failed to start Claude Code: {e}") from e

        self._process = process
        self._stderr_file = anyio.wrap_file(stderr_file)

        # No interactive input is ever sent.
        if process.stdin:
            await process.stdin.aclose()

        if process.stdout:
            self._stdout_stream = TextReceiveStream(process.stdout)

        logger.info(
            "[transport] Connected to Claude Code",
            extra={"pid": process.pid, "cli_path": self._cli_path},
        )

    def receive_messages(self) -> AsyncIterator[dict[str, Any]]:
        """Read and parse JSON values from stdout.

        Yields:
            Each JSON value as soon as it has been fully received.

        Raises:
            CLINotConnectedError: If ``connect()`` has not been called.
            CLIJSONDecodeError: If a value outgrows the 1MB buffer limit or
                stdout is not valid UTF-8.
            ProcessError: If the CLI exits with a non-zero status. Values
                yielded before the failure stay valid.
        """
        return self._receive_messages_impl()

    async def _receive_messages_impl(self) -> AsyncIterator[dict[str, Any]]:
        if not self._process or not self._stdout_stream:
            raise CLINotConnectedError()

        process = self._process
        json_buffer = JSONStreamBuffer()

        try:
            async for chunk in self._stdout_stream:
                for data in json_buffer.feed(chunk):
                    logger.debug(
                        "[transport] Parsed message",
                        extra={"message_type": data.get("type") if isinstance(data, dict) else None},
                    )
                    yield data
        except (anyio.ClosedResourceError, anyio.BrokenResourceError):
            pass  # Stream closed by disconnect()
        except UnicodeDecodeError as e:
            raise CLIJSONDecodeError(line=json_buffer.buffered, original_error=e) from e

        exit_code = await process.wait()
        stderr_output = await self._drain_stderr()
        logger.debug(
            "[transport] Process completed",
            extra={"pid": process.pid, "exit_code": exit_code},
        )

        if exit_code != 0:
            raise ProcessError(
                "Claude Code exited with an error",
                exit_code=exit_code,
                stderr=stderr_output,
            )
        if stderr_output:
            logger.debug("[transport] Process stderr", extra={"stderr": stderr_output})

    async def _drain_stderr(self) -> str:
        """Collect everything the process wrote to stderr."""
        if not self._stderr_file:
            return ""

        try:
            await self._stderr_file.seek(0)
            raw = await self._stderr_file.read()
        except (OSError, ValueError):
            # File already closed by disconnect()
            return ""

        lines: list[str] = []
        for line in raw.decode("utf-8", errors="replace").splitlines():
            line = line.strip()
            if not line:
                continue
            lines.append(line)
            if self._options.stderr:
                self._options.stderr(line)

        return "\n".join(lines)

    async def disconnect(self) -> None:
        """Stop the process and release every resource.

        Sends SIGINT, waits up to ``TERMINATE_GRACE_PERIOD`` seconds, then
        kills the process. Never raises.
        """
        if not self._process:
            return

        process = self._process
        # Teardown must finish even when the caller is being cancelled.
        with anyio.CancelScope(shield=True):
            try:
                if process.returncode is None:
                    await self._terminate(process)
            except Exception as e:
                logger.warning(
                    "[transport] Error while stopping Claude Code: %s: %s",
                    type(e).__name__,
                    e,
                    extra={"pid": process.pid},
                )
            finally:
                await self._close_streams()
                self._process = None

        logger.debug("[transport] Disconnected", extra={"pid": process.pid})

    async def _terminate(self, process: Process) -> None:
        try:
            if sys.platform == "win32":
                process.terminate()
            else:
                process.send_signal(signal.SIGINT)
        except ProcessLookupError:
            return  # Process already gone

        with anyio.move_on_after(TERMINATE_GRACE_PERIOD):
            await process.wait()

        if process.returncode is None:
            logger.warning(
                "[transport] Claude Code ignored SIGINT, killing it",
                extra={"pid": process.pid, "grace_period": TERMINATE_GRACE_PERIOD},
            )
            try:
                process.kill()
            except ProcessLookupError:
                return
            await process.wait()

    async def _close_streams(self) -> None:
        streams: list[Any] = [self._stdout_stream, self._stderr_file]
        if self._process:
            streams.append(self._process.stdin)

        for stream in streams:
            if stream is None:
                continue
            try:
                await stream.aclose()
            except (OSError, anyio.ClosedResourceError, anyio.BrokenResourceError):
                pass  # Already closed

        self._stdout_stream = None
        self._stderr_file = None

    def is_connected(self) -> bool:
        """Check whether the CLI process is still running.

        Returns:
            True if a process was started and still exists.
        """
        if not self._process:
            return False
        if self._process.returncode is not None:
            return False
        if sys.platform == "win32":
            return True

        try:
            os.kill(self._process.pid, 0)
        except (ProcessLookupError, PermissionError):
            return False
        return True


__all__ = ["SubprocessCLITransport", "find_cli"]
