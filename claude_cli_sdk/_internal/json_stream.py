"""Incremental reassembly of JSON values from CLI stdout.

The CLI writes one JSON value per line, but reads from the pipe are not
aligned to lines: a read may end in the middle of a value or carry several
values at once. ``JSONStreamBuffer`` accumulates text until the buffer parses
as a complete JSON value.
"""

from __future__ import annotations

import json
from collections.abc import Iterator
from typing import Any

from claude_cli_sdk._errors import CLIJSONDecodeError

MAX_BUFFER_SIZE = 1024 * 1024  # 1MB


class JSONStreamBuffer:
    """Accumulates stdout chunks and yields each complete JSON value.

    The buffer only ever holds the unparsed prefix of the next value; it is
    empty right after a value has been yielded.
    """

    def __init__(self, max_buffer_size: int = MAX_BUFFER_SIZE) -> None:
        self._buffer = ""
        self._max_buffer_size = max_buffer_size

    @property
    def buffered(self) -> str:
        return self._buffer

    @property
    def max_buffer_size(self) -> int:
        return self._max_buffer_size

    def feed(self, chunk: str) -> Iterator[Any]:
        """Consume a chunk of text, yielding every value it completes.

        The returned iterator must be exhausted for the whole chunk to be
        consumed. Values are yielded as soon as they parse, so a later
        overflow in the same chunk does not retract them.

        Raises:
            CLIJSONDecodeError: If the pending value grows past the maximum
                buffer size before it parses.
        """
        for piece in chunk.split("\n"):
            # Blank lines between values are separators. Inside a pending
            # value they may still be part of a string, so keep them there.
            if not self._buffer and not piece.strip():
                continue

            self._buffer += piece

            if len(self._buffer) > self._max_buffer_size:
                overflowed = self._buffer
                self._buffer = ""
                raise CLIJSONDecodeError(
                    line=overflowed,
                    original_error=ValueError(
                        f"JSON message exceeded buffer size "
                        f"({len(overflowed)} > {self._max_buffer_size})"
                    ),
                )

            try:
                value = json.loads(self._buffer)
            except json.JSONDecodeError:
                # Incomplete value, wait for more input.
                continue

            self._buffer = ""
            yield value


__all__ = ["JSONStreamBuffer", "MAX_BUFFER_SIZE"]
