"""Query entry point for the Claude CLI SDK.

`query` runs one prompt through a fresh Claude Code subprocess and yields
typed messages as the CLI produces them.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Callable

from claude_cli_sdk._internal.message_parser import parse_message
from claude_cli_sdk._internal.transport import Transport
from claude_cli_sdk._internal.transport.subprocess_cli import SubprocessCLITransport
from claude_cli_sdk.types import ClaudeCodeOptions, Message
from claude_cli_sdk.utils.log import get_logger

TransportFactory = Callable[[str, ClaudeCodeOptions], Transport]

logger = get_logger()


def _subprocess_transport(prompt: str, options: ClaudeCodeOptions) -> Transport:
    return SubprocessCLITransport(prompt=prompt, options=options)


class InternalClient:
    """Runs queries through a transport and parses what comes back."""

    def __init__(self, transport_factory: TransportFactory | None = None) -> None:
        self._transport_factory = transport_factory or _subprocess_transport

    async def process_query(
        self,
        prompt: str,
        options: ClaudeCodeOptions,
    ) -> AsyncIterator[Message]:
        """Yield parsed messages for a single prompt.

        The transport is always disconnected when iteration ends, whether the
        stream finished, failed, or the caller stopped early.
        """
        transport = self._transport_factory(prompt, options)
        message_count = 0

        try:
            await transport.connect()
            async for data in transport.receive_messages():
                message = parse_message(data)
                if message is None:
                    continue
                message_count += 1
                yield message
        finally:
            await transport.disconnect()
            logger.debug(
                "[client] Query finished",
                extra={"message_count": message_count},
            )


async def query(
    prompt: str,
    options: ClaudeCodeOptions | None = None,
    transport_factory: TransportFactory | None = None,
) -> AsyncIterator[Message]:
    """One-shot helper: run a prompt in a fresh Claude Code process.

    Example:
        async for message in query("What is 2 + 2?"):
            print(message)
    """
    client = InternalClient(transport_factory=transport_factory)
    async for message in client.process_query(prompt, options or ClaudeCodeOptions()):
        yield message


__all__ = ["InternalClient", "TransportFactory", "query"]
