"""Pytest configuration and fixtures for all tests."""

import stat
import sys
import textwrap
from pathlib import Path
from typing import Callable

import pytest

_PRELUDE = """\
import json
import os
import signal
import sys
import time


def emit(text):
    sys.stdout.write(text)
    sys.stdout.flush()
"""


@pytest.fixture
def fake_cli(tmp_path: Path) -> Callable[[str], Path]:
    """Write an executable Python script that stands in for the claude CLI.

    The returned factory takes the script body. ``emit(text)`` writes raw
    text to stdout and flushes it, so tests control exactly how output is
    chunked.
    """
    counter = 0

    def _make(body: str) -> Path:
        nonlocal counter
        counter += 1
        script = tmp_path / f"fake_claude_{counter}"
        script.write_text(
            f"#!{sys.executable}\n" + _PRELUDE + "\n" + textwrap.dedent(body),
            encoding="utf-8",
        )
        script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return script

    return _make
