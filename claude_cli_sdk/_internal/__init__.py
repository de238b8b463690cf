"""Internal components for the Claude CLI SDK subprocess architecture."""

from .command import build_command
from .json_stream import JSONStreamBuffer
from .message_parser import parse_message
from .transport import Transport
from .transport.subprocess_cli import SubprocessCLITransport

__all__ = [
    "build_command",
    "JSONStreamBuffer",
    "parse_message",
    "Transport",
    "SubprocessCLITransport",
]
