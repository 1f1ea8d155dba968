"""Exception hierarchy for the scaffold generators.

Every failure raised by this package derives from :class:`ScaffoldError`, so
entry points can catch one type.  I/O failures are never retried or cleaned
up: the original ``OSError`` is chained as ``__cause__`` and the exception is
allowed to propagate.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import MaterializeReport


class ScaffoldError(Exception):
    """Base class for all scaffold generation failures."""


class TemplatePathError(ScaffoldError):
    """A template path would resolve outside the base directory."""

    def __init__(self, relative_path: str, base_dir: Path) -> None:
        self.relative_path = relative_path
        self.base_dir = base_dir
        super().__init__(
            f"Template path {relative_path!r} escapes base directory {base_dir}"
        )


class MaterializeError(ScaffoldError):
    """Writing the output tree failed partway through.

    Attributes:
        path: The file or directory that could not be created.
        report: Files successfully written before the failure, in order.
    """

    def __init__(self, path: Path, report: MaterializeReport, reason: str) -> None:
        self.path = path
        self.report = report
        super().__init__(
            f"Failed to write {path} after {report.file_count} file(s): {reason}"
        )


class ArchiveError(ScaffoldError):
    """Packaging the output tree into a zip archive failed."""

    def __init__(self, archive_path: Path, reason: str) -> None:
        self.archive_path = archive_path
        super().__init__(f"Failed to create archive {archive_path}: {reason}")
