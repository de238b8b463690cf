"""Passing MCP server configurations to Claude Code."""

import anyio

from claude_cli_sdk import (
    AssistantMessage,
    ClaudeCodeOptions,
    McpHttpServerConfig,
    McpStdioServerConfig,
    TextBlock,
    ToolUseBlock,
    query,
)


async def main() -> None:
    options = ClaudeCodeOptions(
        mcp_servers={
            "filesystem": McpStdioServerConfig(
                command="npx",
                args=["-y", "@modelcontextprotocol/server-filesystem", "/tmp"],
            ),
            "docs": McpHttpServerConfig(
                url="https://mcp.example.com/mcp",
                headers={"Authorization": "Bearer your-token"},
            ),
            # Plain dicts are passed to the CLI unchanged.
            "git": {
                "command": "npx",
                "args": ["-y", "@modelcontextprotocol/server-git", "--repository", "."],
            },
        },
        allowed_tools=["mcp__filesystem__read_file", "mcp__git__git_status"],
    )

    async for message in query("Read /tmp/README.md and summarize it", options=options):
        if isinstance(message, AssistantMessage):
            for block in message.content:
                if isinstance(block, ToolUseBlock) and block.name.startswith("mcp__"):
                    print(f"MCP tool: {block.name} {block.input}")
                elif isinstance(block, TextBlock):
                    print(block.text)


if __name__ == "__main__":
    anyio.run(main)
