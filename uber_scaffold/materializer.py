"""Tree materialization: turn a template table into files on disk.

Directories are created lazily from each file's own path, so tables stay
flat and no directory schema needs to be declared.  Writes happen one at a
time on a worker thread; each file is closed before the next is opened.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Iterable
from pathlib import Path

from .errors import MaterializeError, TemplatePathError
from .models import FileResult, MaterializeReport, TemplateEntry
from .utils import is_within

FileCallback = Callable[[FileResult], None]


class TreeMaterializer:
    """Writes template entries beneath a base directory.

    Existing files are truncated and overwritten.  The operation is not
    transactional: on failure, files already written stay on disk and are
    listed in the :class:`MaterializeError` report.
    """

    def __init__(
        self,
        base_dir: str | Path,
        on_file_written: FileCallback | None = None,
    ) -> None:
        self.base_dir = Path(base_dir)
        self.on_file_written = on_file_written

    async def materialize(self, entries: Iterable[TemplateEntry]) -> MaterializeReport:
        """Write every entry in order and return the per-file report.

        Raises:
            TemplatePathError: An entry resolves outside the base directory.
                Raised before that entry is written.
            MaterializeError: Creating a directory or writing a file failed.
                Remaining entries are not attempted.
        """
        report = MaterializeReport(base_dir=self.base_dir)

        try:
            await asyncio.to_thread(self.base_dir.mkdir, parents=True, exist_ok=True)
        except OSError as exc:
            raise MaterializeError(self.base_dir, report, str(exc)) from exc

        for entry in entries:
            target = self.resolve(entry)
            try:
                result = await asyncio.to_thread(_write_entry, target, entry)
            except OSError as exc:
                raise MaterializeError(target, report, str(exc)) from exc

            report.files.append(result)
            if self.on_file_written is not None:
                self.on_file_written(result)

        return report

    def resolve(self, entry: TemplateEntry) -> Path:
        """Join *entry*'s path onto the base directory, enforcing containment."""
        target = self.base_dir.joinpath(*entry.parts)
        if not is_within(target, self.base_dir):
            raise TemplatePathError(entry.path, self.base_dir)
        return target


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _write_entry(path: Path, entry: TemplateEntry) -> FileResult:
    """Synchronous helper: create parent dirs and write content verbatim."""
    path.parent.mkdir(parents=True, exist_ok=True)
    overwritten = path.is_file()
    data = entry.content.encode("utf-8")
    path.write_bytes(data)
    return FileResult(
        relative_path=entry.path,
        path=path,
        bytes_written=len(data),
        overwritten=overwritten,
    )
