"""Type definitions for the Claude CLI SDK.

Messages and content blocks are plain dataclasses produced by the message
parser. MCP server configurations are pydantic models so they are validated
before being serialized onto the command line.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

# =============================================================================
# ContentBlock Types
# =============================================================================


@dataclass
class TextBlock:
    """Text content block."""

    text: str


@dataclass
class ThinkingBlock:
    """Thinking/reasoning content block.

    Contains extended thinking output from models with reasoning capabilities.
    """

    thinking: str
    signature: str


@dataclass
class ToolUseBlock:
    """Tool use content block.

    Represents a tool invocation with its parameters.
    """

    id: str
    name: str
    input: dict[str, Any]


@dataclass
class ToolResultBlock:
    """Tool result content block."""

    tool_use_id: str
    content: str | list[dict[str, Any]] | None = None
    is_error: bool | None = None


ContentBlock = TextBlock | ThinkingBlock | ToolUseBlock | ToolResultBlock


# =============================================================================
# Message Types
# =============================================================================


@dataclass
class UserMessage:
    """User message, either plain text or a list of content blocks."""

    content: str | list[ContentBlock]
    uuid: str | None = None
    parent_tool_use_id: str | None = None


@dataclass
class AssistantMessage:
    """Assistant message with content blocks.

    Represents a response from the model, containing text, thinking,
    and/or tool use blocks.
    """

    content: list[ContentBlock]
    model: str = ""
    parent_tool_use_id: str | None = None


@dataclass
class SystemMessage:
    """System message with metadata.

    ``data`` holds the whole raw message as emitted by the CLI.
    """

    subtype: str
    data: dict[str, Any]


@dataclass
class ResultMessage:
    """Result message with cost and usage information.

    Indicates the completion of a request with timing, cost, and usage statistics.
    """

    subtype: str
    duration_ms: int
    duration_api_ms: int
    is_error: bool
    num_turns: int
    session_id: str
    total_cost_usd: float | None = None
    usage: dict[str, Any] | None = None
    result: str | None = None


Message = UserMessage | AssistantMessage | SystemMessage | ResultMessage


# =============================================================================
# Permission Modes
# =============================================================================


def _to_camel_case(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


class PermissionMode(str, Enum):
    """Permission modes understood by Claude Code."""

    DEFAULT = "default"
    ACCEPT_EDITS = "accept_edits"
    BYPASS_PERMISSIONS = "bypass_permissions"
    PLAN = "plan"

    @property
    def cli_value(self) -> str:
        """Token passed to ``--permission-mode`` (``accept_edits`` -> ``acceptEdits``)."""
        return _to_camel_case(self.value)

    @classmethod
    def coerce(cls, value: PermissionMode | str) -> PermissionMode:
        """Accept an enum member, its value, or its CLI token."""
        if isinstance(value, cls):
            return value
        for mode in cls:
            if value in (mode.value, mode.cli_value):
                return mode
        raise ValueError(f"Invalid permission mode: {value}")


# =============================================================================
# MCP Server Types
# =============================================================================


class McpStdioServerConfig(BaseModel):
    """MCP stdio server configuration."""

    model_config = ConfigDict(extra="forbid")

    type: Literal["stdio"] = "stdio"
    command: str
    args: list[str] = Field(default_factory=list)
    env: dict[str, str] = Field(default_factory=dict)

    def to_cli_dict(self) -> dict[str, Any]:
        # "type" is optional for stdio servers and omitted on the wire.
        return self.model_dump(exclude_defaults=True)


class McpSSEServerConfig(BaseModel):
    """MCP SSE server configuration."""

    model_config = ConfigDict(extra="forbid")

    type: Literal["sse"] = "sse"
    url: str
    headers: dict[str, str] = Field(default_factory=dict)

    def to_cli_dict(self) -> dict[str, Any]:
        return {"type": self.type, **self.model_dump(exclude_defaults=True)}


class McpHttpServerConfig(BaseModel):
    """MCP HTTP server configuration."""

    model_config = ConfigDict(extra="forbid")

    type: Literal["http"] = "http"
    url: str
    headers: dict[str, str] = Field(default_factory=dict)

    def to_cli_dict(self) -> dict[str, Any]:
        return {"type": self.type, **self.model_dump(exclude_defaults=True)}


McpServerConfig = Union[
    McpStdioServerConfig,
    McpSSEServerConfig,
    McpHttpServerConfig,
    dict[str, Any],
]


# =============================================================================
# Options
# =============================================================================


@dataclass
class ClaudeCodeOptions:
    """Options for a single Claude Code invocation."""

    allowed_tools: list[str] = field(default_factory=list)
    disallowed_tools: list[str] = field(default_factory=list)
    system_prompt: str | None = None
    append_system_prompt: str | None = None
    max_turns: int | None = None
    model: str | None = None
    permission_prompt_tool_name: str | None = None
    permission_mode: PermissionMode | str | None = None
    continue_conversation: bool = False
    resume: str | None = None
    settings: str | None = None
    mcp_servers: dict[str, McpServerConfig] = field(default_factory=dict)
    cwd: str | Path | None = None
    cli_path: str | Path | None = None
    env: dict[str, str] = field(default_factory=dict)
    stderr: Callable[[str], None] | None = None

    def __post_init__(self) -> None:
        if self.permission_mode is not None:
            self.permission_mode = PermissionMode.coerce(self.permission_mode)

    def serialize_mcp_servers(self) -> dict[str, dict[str, Any]]:
        """Return MCP server configs as plain dicts keyed by server name."""
        serialized: dict[str, dict[str, Any]] = {}
        for name, server in self.mcp_servers.items():
            if isinstance(server, BaseModel):
                serialized[name] = server.to_cli_dict()  # type: ignore[attr-defined]
            else:
                serialized[name] = dict(server)
        return serialized


__all__ = [
    "TextBlock",
    "ThinkingBlock",
    "ToolUseBlock",
    "ToolResultBlock",
    "ContentBlock",
    "UserMessage",
    "AssistantMessage",
    "SystemMessage",
    "ResultMessage",
    "Message",
    "PermissionMode",
    "McpStdioServerConfig",
    "McpSSEServerConfig",
    "McpHttpServerConfig",
    "McpServerConfig",
    "ClaudeCodeOptions",
]
