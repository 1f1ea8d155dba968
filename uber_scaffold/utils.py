"""Shared helpers: the Rich console and path checks."""

from __future__ import annotations

from pathlib import Path

from rich.console import Console

console = Console()


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_success(message: str, *, target: Console | None = None) -> None:
    """Print a green success message."""
    (target or console).print(f"[bold green]{message}[/bold green]", soft_wrap=True)


def print_error(message: str, *, target: Console | None = None) -> None:
    """Print a red error message."""
    (target or console).print(f"[bold red]{message}[/bold red]", soft_wrap=True)


# ---------------------------------------------------------------------------
# Path helpers
# ---------------------------------------------------------------------------


def is_within(path: str | Path, base: str | Path) -> bool:
    """Return ``True`` if *path* resolves to *base* or somewhere beneath it.

    Both paths are resolved first, so ``..`` segments and symlinks are
    taken into account.  Neither path needs to exist.
    """
    resolved = Path(path).resolve()
    root = Path(base).resolve()
    return resolved == root or root in resolved.parents
