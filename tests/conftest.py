"""Shared pytest fixtures for the uber-scaffold test suite.

Provides reusable fixtures for:
- Small hand-built template tables
- Console capture for reporter output
- Reading a generated tree back into a ``{relative_path: bytes}`` mapping
"""

from __future__ import annotations

import io
from pathlib import Path

import pytest
from rich.console import Console

from uber_scaffold.models import TemplateTable
from uber_scaffold.reporter import ConsoleReporter


# ---------------------------------------------------------------------------
# Template tables
# ---------------------------------------------------------------------------

@pytest.fixture
def small_table() -> TemplateTable:
    """Three files across two nesting levels, including non-ASCII content."""
    return TemplateTable.from_mapping(
        "small",
        {
            "package.json": '{\n  "name": "demo"\n}',
            "src/index.js": "console.log('hi');\n",
            "src/components/Card.jsx": "<p>{pickup} → {dropoff}</p>",
        },
    )


# ---------------------------------------------------------------------------
# Console capture
# ---------------------------------------------------------------------------

@pytest.fixture
def capture_console() -> Console:
    """A Rich console writing plain text into an in-memory buffer."""
    return Console(file=io.StringIO(), width=500, color_system=None)


@pytest.fixture
def reporter(capture_console: Console) -> ConsoleReporter:
    return ConsoleReporter(console=capture_console)


def _console_lines(console: Console) -> list[str]:
    return [line for line in console.file.getvalue().splitlines() if line.strip()]


@pytest.fixture
def console_lines():
    """Callable returning the non-empty lines captured by a console."""
    return _console_lines


# ---------------------------------------------------------------------------
# Tree helpers
# ---------------------------------------------------------------------------

def _read_tree(root: Path) -> dict[str, bytes]:
    return {
        p.relative_to(root).as_posix(): p.read_bytes()
        for p in sorted(root.rglob("*"))
        if p.is_file()
    }


@pytest.fixture
def read_tree():
    """Callable mapping every file under a root to its bytes, keyed by POSIX relative path."""
    return _read_tree
