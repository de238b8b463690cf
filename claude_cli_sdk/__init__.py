"""Python SDK for driving the Claude Code CLI as a subprocess.

Quick Start:
    import anyio
    from claude_cli_sdk import query

    async def main():
        async for message in query("What is 2 + 2?"):
            print(message)

    anyio.run(main)
"""

__version__ = "0.1.0"

from claude_cli_sdk._errors import (
    ClaudeSDKError,
    CLIConnectionError,
    CLIJSONDecodeError,
    CLINotConnectedError,
    CLINotFoundError,
    MessageParseError,
    ProcessError,
)
from claude_cli_sdk._internal.transport import Transport
from claude_cli_sdk._internal.transport.subprocess_cli import SubprocessCLITransport
from claude_cli_sdk.client import InternalClient, query
from claude_cli_sdk.types import (
    AssistantMessage,
    ClaudeCodeOptions,
    ContentBlock,
    McpHttpServerConfig,
    McpSSEServerConfig,
    McpStdioServerConfig,
    Message,
    PermissionMode,
    ResultMessage,
    SystemMessage,
    TextBlock,
    ThinkingBlock,
    ToolResultBlock,
    ToolUseBlock,
    UserMessage,
)

__all__ = [
    "__version__",
    "query",
    "InternalClient",
    "Transport",
    "SubprocessCLITransport",
    "ClaudeCodeOptions",
    "PermissionMode",
    "McpStdioServerConfig",
    "McpSSEServerConfig",
    "McpHttpServerConfig",
    "Message",
    "UserMessage",
    "AssistantMessage",
    "SystemMessage",
    "ResultMessage",
    "ContentBlock",
    "TextBlock",
    "ThinkingBlock",
    "ToolUseBlock",
    "ToolResultBlock",
    "ClaudeSDKError",
    "CLIConnectionError",
    "CLINotFoundError",
    "CLINotConnectedError",
    "CLIJSONDecodeError",
    "ProcessError",
    "MessageParseError",
]
