"""Command line construction for the Claude Code CLI."""

from __future__ import annotations

import json

from claude_cli_sdk.types import ClaudeCodeOptions, PermissionMode


def build_command(cli_path: str, prompt: str, options: ClaudeCodeOptions) -> list[str]:
    """Build the CLI argument vector for a single print-mode query.

    The vector always starts with the executable and the stream-json output
    flags and always ends with ``--print <prompt>``. Unset options are left
    out entirely.
    """
    cmd = [cli_path, "--output-format", "stream-json", "--verbose"]

    if options.system_prompt:
        cmd.extend(["--system-prompt", options.system_prompt])

    if options.append_system_prompt:
        cmd.extend(["--append-system-prompt", options.append_system_prompt])

    if options.allowed_tools:
        cmd.extend(["--allowedTools", ",".join(options.allowed_tools)])

    if options.max_turns is not None:
        cmd.extend(["--max-turns", str(options.max_turns)])

    if options.disallowed_tools:
        cmd.extend(["--disallowedTools", ",".join(options.disallowed_tools)])

    if options.model:
        cmd.extend(["--model", options.model])

    if options.permission_prompt_tool_name:
        cmd.extend(["--permission-prompt-tool", options.permission_prompt_tool_name])

    if options.permission_mode is not None:
        mode = PermissionMode.coerce(options.permission_mode)
        cmd.extend(["--permission-mode", mode.cli_value])

    if options.continue_conversation:
        cmd.append("--continue")

    if options.resume:
        cmd.extend(["--resume", options.resume])

    if options.settings:
        cmd.extend(["--settings", options.settings])

    if options.mcp_servers:
        mcp_config = {"mcpServers": options.serialize_mcp_servers()}
        cmd.extend(["--mcp-config", json.dumps(mcp_config)])

    cmd.extend(["--print", prompt])
    return cmd


__all__ = ["build_command"]
