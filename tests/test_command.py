"""Tests for building the Claude Code command line."""

import json

from claude_cli_sdk._internal.command import build_command
from claude_cli_sdk.types import (
    ClaudeCodeOptions,
    McpHttpServerConfig,
    McpStdioServerConfig,
    PermissionMode,
)

CLI_PATH = "/usr/bin/claude"


def _value_after(cmd: list[str], flag: str) -> str:
    return cmd[cmd.index(flag) + 1]


class TestBuildCommand:
    def test_basic_command(self) -> None:
        cmd = build_command(CLI_PATH, "Hello", ClaudeCodeOptions())
        assert cmd == [
            CLI_PATH,
            "--output-format",
            "stream-json",
            "--verbose",
            "--print",
            "Hello",
        ]

    def test_prompt_is_always_last(self) -> None:
        options = ClaudeCodeOptions(model="sonnet", max_turns=3, continue_conversation=True)
        cmd = build_command(CLI_PATH, "--not-a-flag", options)
        assert cmd[-2:] == ["--print", "--not-a-flag"]

    def test_tools_turns_and_permission_mode(self) -> None:
        """Each flag is immediately followed by its value."""
        options = ClaudeCodeOptions(
            allowed_tools=["Read", "Write"],
            permission_mode=PermissionMode.ACCEPT_EDITS,
            max_turns=5,
        )
        cmd = build_command(CLI_PATH, "test", options)

        assert _value_after(cmd, "--allowedTools") == "Read,Write"
        assert _value_after(cmd, "--permission-mode") == "acceptEdits"
        assert _value_after(cmd, "--max-turns") == "5"

    def test_all_optional_flags(self) -> None:
        options = ClaudeCodeOptions(
            system_prompt="Be helpful",
            append_system_prompt="Be concise",
            disallowed_tools=["Bash", "WebFetch"],
            model="claude-sonnet-4-5",
            permission_prompt_tool_name="mcp__auth__prompt",
            permission_mode="bypass_permissions",
            resume="session-123",
            settings="/tmp/settings.json",
        )
        cmd = build_command(CLI_PATH, "test", options)

        assert _value_after(cmd, "--system-prompt") == "Be helpful"
        assert _value_after(cmd, "--append-system-prompt") == "Be concise"
        assert _value_after(cmd, "--disallowedTools") == "Bash,WebFetch"
        assert _value_after(cmd, "--model") == "claude-sonnet-4-5"
        assert _value_after(cmd, "--permission-prompt-tool") == "mcp__auth__prompt"
        assert _value_after(cmd, "--permission-mode") == "bypassPermissions"
        assert _value_after(cmd, "--resume") == "session-123"
        assert _value_after(cmd, "--settings") == "/tmp/settings.json"
        assert "--continue" not in cmd

    def test_continue_conversation_flag(self) -> None:
        cmd = build_command(CLI_PATH, "more", ClaudeCodeOptions(continue_conversation=True))
        assert "--continue" in cmd

    def test_empty_optional_fields_are_omitted(self) -> None:
        options = ClaudeCodeOptions(
            allowed_tools=[],
            disallowed_tools=[],
            system_prompt="",
            mcp_servers={},
        )
        cmd = build_command(CLI_PATH, "test", options)
        for flag in ("--allowedTools", "--disallowedTools", "--system-prompt", "--mcp-config"):
            assert flag not in cmd

    def test_zero_max_turns_is_passed(self) -> None:
        cmd = build_command(CLI_PATH, "test", ClaudeCodeOptions(max_turns=0))
        assert _value_after(cmd, "--max-turns") == "0"

    def test_mcp_servers_serialized_inline(self) -> None:
        options = ClaudeCodeOptions(
            mcp_servers={
                "files": McpStdioServerConfig(command="npx", args=["-y", "server-fs"]),
                "remote": McpHttpServerConfig(
                    url="https://mcp.example.com",
                    headers={"Authorization": "Bearer x"},
                ),
                "raw": {"type": "sse", "url": "https://sse.example.com"},
            }
        )
        cmd = build_command(CLI_PATH, "test", options)

        config = json.loads(_value_after(cmd, "--mcp-config"))
        assert config == {
            "mcpServers": {
                "files": {"command": "npx", "args": ["-y", "server-fs"]},
                "remote": {
                    "type": "http",
                    "url": "https://mcp.example.com",
                    "headers": {"Authorization": "Bearer x"},
                },
                "raw": {"type": "sse", "url": "https://sse.example.com"},
            }
        }

    def test_build_is_pure(self) -> None:
        options = ClaudeCodeOptions(allowed_tools=["Read"])
        first = build_command(CLI_PATH, "p", options)
        second = build_command(CLI_PATH, "p", options)
        assert first == second
        assert options.allowed_tools == ["Read"]
