"""Command line entry point for the Claude CLI SDK.

Runs a single prompt through Claude Code and renders the conversation.
"""

from __future__ import annotations

import dataclasses
import json
from contextlib import nullcontext
from pathlib import Path
from typing import Any, Optional

import anyio
import click
from rich.console import Console
from rich.markdown import Markdown
from rich.markup import escape
from rich.panel import Panel

from claude_cli_sdk import __version__
from claude_cli_sdk._errors import ClaudeSDKError, CLINotFoundError, ProcessError
from claude_cli_sdk.client import query
from claude_cli_sdk.types import (
    AssistantMessage,
    ClaudeCodeOptions,
    Message,
    PermissionMode,
    ResultMessage,
    SystemMessage,
    TextBlock,
    ThinkingBlock,
    ToolResultBlock,
    ToolUseBlock,
)
from claude_cli_sdk.utils.log import enable_file_logging, get_logger

console = Console()
logger = get_logger()


def _split_tools(value: Optional[str]) -> list[str]:
    if not value:
        return []
    return [tool.strip() for tool in value.split(",") if tool.strip()]


def message_to_dict(message: Message) -> dict[str, Any]:
    """Serialize a message for ``--json`` output."""
    kind = type(message).__name__.removesuffix("Message").lower()
    return {"message_type": kind, **dataclasses.asdict(message)}


def render_message(message: Message, verbose: bool = False) -> None:
    if isinstance(message, AssistantMessage):
        for block in message.content:
            if isinstance(block, TextBlock):
                console.print(
                    Panel(
                        Markdown(block.text),
                        title="Claude",
                        border_style="cyan",
                        padding=(0, 1),
                    )
                )
            elif isinstance(block, ToolUseBlock):
                console.print(f"[dim]→ {escape(block.name)}[/dim]")
            elif isinstance(block, ThinkingBlock) and verbose:
                console.print(f"[dim italic]{escape(block.thinking)}[/dim italic]")
            elif isinstance(block, ToolResultBlock) and verbose:
                console.print(f"[dim]← {escape(str(block.content))}[/dim]")

    elif isinstance(message, SystemMessage):
        if verbose:
            console.print(f"[dim]system: {escape(message.subtype)}[/dim]")

    elif isinstance(message, ResultMessage):
        cost = f"${message.total_cost_usd:.4f}" if message.total_cost_usd is not None else "n/a"
        style = "red" if message.is_error else "green"
        console.print(
            f"[{style}]Done[/{style}] "
            f"[dim]turns={message.num_turns} duration={message.duration_ms}ms cost={cost}[/dim]"
        )


async def run_query(
    prompt: str,
    options: ClaudeCodeOptions,
    json_output: bool = False,
    verbose: bool = False,
    timeout: Optional[float] = None,
) -> int:
    """Run a single query and print the response. Returns the exit status."""
    logger.info(
        "[cli] Running prompt",
        extra={"prompt_length": len(prompt), "timeout": timeout},
    )

    try:
        with anyio.fail_after(timeout) if timeout else nullcontext():
            async for message in query(prompt, options):
                if json_output:
                    click.echo(json.dumps(message_to_dict(message), default=str))
                else:
                    render_message(message, verbose=verbose)
    except TimeoutError:
        console.print(f"[yellow]Timed out after {timeout}s[/yellow]")
        return 124
    except CLINotFoundError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        return 127
    except ProcessError as e:
        console.print(f"[red]Claude Code failed with exit code {e.exit_code}[/red]")
        if e.stderr:
            console.print(escape(e.stderr), markup=False)
        return 1
    except ClaudeSDKError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        logger.warning(
            "[cli] Query failed: %s: %s",
            type(e).__name__,
            e,
        )
        return 1

    return 0


@click.command(name="claude-cli-sdk")
@click.version_option(version=__version__)
@click.argument("prompt")
@click.option("--model", type=str, default=None, help="Model to use.")
@click.option("--system-prompt", type=str, default=None, help="Replace the system prompt.")
@click.option(
    "--append-system-prompt",
    type=str,
    default=None,
    help="Text appended to the system prompt.",
)
@click.option("--allowed-tools", type=str, default=None, help="Comma-separated allowed tools.")
@click.option(
    "--disallowed-tools",
    type=str,
    default=None,
    help="Comma-separated disallowed tools.",
)
@click.option("--max-turns", type=int, default=None, help="Maximum number of conversation turns.")
@click.option(
    "--permission-mode",
    type=click.Choice([mode.value for mode in PermissionMode]),
    default=None,
    help="Permission mode for tool usage.",
)
@click.option(
    "--cwd",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Working directory for Claude Code.",
)
@click.option("--cli-path", type=str, default=None, help="Path to the claude executable.")
@click.option("--resume", type=str, default=None, help="Resume a session by id.")
@click.option(
    "--continue",
    "continue_conversation",
    is_flag=True,
    help="Continue the most recent conversation.",
)
@click.option("--json", "json_output", is_flag=True, help="Print messages as JSON lines.")
@click.option("--verbose", is_flag=True, help="Also show thinking, tool results and system messages.")
@click.option("--timeout", type=float, default=None, help="Abort the query after N seconds.")
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write debug logs to this file.",
)
def main(
    prompt: str,
    model: Optional[str],
    system_prompt: Optional[str],
    append_system_prompt: Optional[str],
    allowed_tools: Optional[str],
    disallowed_tools: Optional[str],
    max_turns: Optional[int],
    permission_mode: Optional[str],
    cwd: Optional[Path],
    cli_path: Optional[str],
    resume: Optional[str],
    continue_conversation: bool,
    json_output: bool,
    verbose: bool,
    timeout: Optional[float],
    log_file: Optional[Path],
) -> None:
    """Send PROMPT to Claude Code and print the conversation."""
    if log_file:
        enable_file_logging(log_file)

    options = ClaudeCodeOptions(
        model=model,
        system_prompt=system_prompt,
        append_system_prompt=append_system_prompt,
        allowed_tools=_split_tools(allowed_tools),
        disallowed_tools=_split_tools(disallowed_tools),
        max_turns=max_turns,
        permission_mode=permission_mode,
        cwd=cwd,
        cli_path=cli_path,
        resume=resume,
        continue_conversation=continue_conversation,
    )

    exit_code = anyio.run(run_query, prompt, options, json_output, verbose, timeout)
    raise SystemExit(exit_code)


__all__ = ["main", "run_query", "render_message", "message_to_dict"]
