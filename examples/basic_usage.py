"""Basic usage of the Claude CLI SDK.

Run with: python examples/basic_usage.py
"""

import anyio

from claude_cli_sdk import (
    AssistantMessage,
    ClaudeCodeOptions,
    ResultMessage,
    TextBlock,
    query,
)


async def simple_query() -> None:
    async for message in query("What is 2 + 2?"):
        if isinstance(message, AssistantMessage):
            for block in message.content:
                if isinstance(block, TextBlock):
                    print(f"Claude: {block.text}")


async def query_with_options() -> None:
    options = ClaudeCodeOptions(
        system_prompt="You are a concise assistant. Answer in one sentence.",
        allowed_tools=["Read"],
        permission_mode="accept_edits",
        max_turns=1,
    )

    async for message in query("Explain what a subprocess is.", options=options):
        if isinstance(message, AssistantMessage):
            for block in message.content:
                if isinstance(block, TextBlock):
                    print(f"Claude: {block.text}")
        elif isinstance(message, ResultMessage):
            cost = message.total_cost_usd or 0.0
            print(f"Done in {message.duration_ms}ms over {message.num_turns} turn(s), ${cost:.4f}")


async def main() -> None:
    await simple_query()
    await query_with_options()


if __name__ == "__main__":
    anyio.run(main)
