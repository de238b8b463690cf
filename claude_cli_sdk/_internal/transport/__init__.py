"""Transport implementations for the Claude CLI SDK.

The transport is the low-level layer that starts Claude Code and hands raw
JSON values back to the client. Only a subprocess transport exists today;
other transports implement the same interface.
"""

import abc
from collections.abc import AsyncIterator
from typing import Any


class Transport(abc.ABC):
    """Abstract transport for Claude Code communication."""

    @abc.abstractmethod
    async def connect(self) -> None:
        """Start the underlying process or connection.

        Calling this on an already connected transport does nothing.
        """

    @abc.abstractmethod
    async def disconnect(self) -> None:
        """Tear down the connection and release every resource.

        Must never raise; calling it on an unconnected transport does nothing.
        """

    @abc.abstractmethod
    def receive_messages(self) -> AsyncIterator[dict[str, Any]]:
        """Yield raw JSON values until the stream and the process complete."""

    @abc.abstractmethod
    def is_connected(self) -> bool:
        """Check whether the transport is connected and still alive."""


__all__ = ["Transport"]
