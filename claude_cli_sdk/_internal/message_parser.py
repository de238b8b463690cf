"""Message parser for Claude Code stream-json output.

This module turns raw JSON values read by the transport into typed Message
objects.
"""

from typing import Any

from claude_cli_sdk._errors import MessageParseError
from claude_cli_sdk.types import (
    AssistantMessage,
    ContentBlock,
    Message,
    ResultMessage,
    SystemMessage,
    TextBlock,
    ThinkingBlock,
    ToolResultBlock,
    ToolUseBlock,
    UserMessage,
)
from claude_cli_sdk.utils.log import get_logger

logger = get_logger()


def parse_content_blocks(blocks: list[dict[str, Any]]) -> list[ContentBlock]:
    """Convert raw content blocks, skipping block types we don't know."""
    content_blocks: list[ContentBlock] = []
    for block in blocks:
        block_type = block.get("type")
        match block_type:
            case "text":
                content_blocks.append(TextBlock(text=block.get("text", "")))
            case "thinking":
                content_blocks.append(
                    ThinkingBlock(
                        thinking=block.get("thinking", ""),
                        signature=block.get("signature", ""),
                    )
                )
            case "tool_use":
                content_blocks.append(
                    ToolUseBlock(
                        id=block.get("id", ""),
                        name=block.get("name", ""),
                        input=block.get("input", {}) or {},
                    )
                )
            case "tool_result":
                content_blocks.append(
                    ToolResultBlock(
                        tool_use_id=block.get("tool_use_id", ""),
                        content=block.get("content"),
                        is_error=block.get("is_error"),
                    )
                )
            case _:
                logger.warning(
                    "[parser] Unknown content block type",
                    extra={"block_type": block_type},
                )
    return content_blocks


def parse_message(data: dict[str, Any]) -> Message | None:
    """Parse a raw CLI message into a typed Message object.

    Args:
        data: Raw message dictionary from CLI output

    Returns:
        Parsed Message object, or None for an unknown message type (logged
        and skipped by the caller).

    Raises:
        MessageParseError: If the data is not a dict, has no type, or a
            result message lacks a required field
    """
    if not isinstance(data, dict):
        raise MessageParseError(
            f"Invalid message data type (expected dict, got {type(data).__name__})",
            data,
        )

    message_type = data.get("type")
    if not message_type:
        raise MessageParseError("Message missing 'type' field", data)

    match message_type:
        case "user":
            content = (data.get("message") or {}).get("content", "")
            if isinstance(content, list):
                content = parse_content_blocks(content)
            return UserMessage(
                content=content,
                uuid=data.get("uuid"),
                parent_tool_use_id=data.get("parent_tool_use_id"),
            )

        case "assistant":
            message = data.get("message") or {}
            return AssistantMessage(
                content=parse_content_blocks(message.get("content") or []),
                model=message.get("model", ""),
                parent_tool_use_id=data.get("parent_tool_use_id"),
            )

        case "system":
            return SystemMessage(
                subtype=data.get("subtype", ""),
                data=data,
            )

        case "result":
            try:
                return ResultMessage(
                    subtype=data["subtype"],
                    duration_ms=data["duration_ms"],
                    duration_api_ms=data["duration_api_ms"],
                    is_error=data["is_error"],
                    num_turns=data["num_turns"],
                    session_id=data["session_id"],
                    total_cost_usd=data.get("total_cost_usd"),
                    usage=data.get("usage"),
                    result=data.get("result"),
                )
            except KeyError as e:
                raise MessageParseError(
                    f"Missing required field in result message: {e}", data
                ) from e

        case _:
            logger.warning(
                "[parser] Skipping unknown message type",
                extra={"message_type": message_type},
            )
            return None


__all__ = ["parse_message", "parse_content_blocks"]
