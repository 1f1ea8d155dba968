"""Zip packaging of a materialized project tree."""

from __future__ import annotations

import asyncio
import os
import zipfile
from pathlib import Path

from .config import MAX_COMPRESSION_LEVEL
from .errors import ArchiveError
from .models import ArchiveResult
from .utils import is_within


class ArchivePackager:
    """Compresses a directory into a single zip file.

    Entry names are relative to the source directory, so the archive has no
    top-level folder prefix.  Directories are stored as explicit entries so
    empty ones survive extraction.
    """

    def __init__(self, compression_level: int = MAX_COMPRESSION_LEVEL) -> None:
        if not 0 <= compression_level <= 9:
            raise ValueError(f"compression_level must be 0-9, got {compression_level}")
        self.compression_level = compression_level

    async def package(self, source_dir: str | Path, archive_path: str | Path) -> ArchiveResult:
        """Zip everything under *source_dir* into *archive_path*.

        Must only be awaited after every write into *source_dir* has
        completed.  An existing archive at *archive_path* is replaced.

        Raises:
            ArchiveError: The source is missing, the archive would be written
                inside the source tree, or an I/O error occurred.
        """
        source = Path(source_dir)
        out = Path(archive_path)

        if not source.is_dir():
            raise ArchiveError(out, f"source directory does not exist: {source}")
        if is_within(out, source):
            raise ArchiveError(out, f"archive must not be placed inside {source}")

        try:
            entry_count = await asyncio.to_thread(self._write_zip, source, out)
            size = (await asyncio.to_thread(out.stat)).st_size
        except OSError as exc:
            raise ArchiveError(out, str(exc)) from exc

        return ArchiveResult(
            archive_path=out,
            source_dir=source,
            entry_count=entry_count,
            size_bytes=size,
        )

    def _write_zip(self, source: Path, out: Path) -> int:
        """Synchronous helper: write the archive, return the file entry count.

        The zip is built in a sibling ``.part`` file and moved onto *out* only
        once complete, so a failure leaves any previous archive untouched.
        """
        out.parent.mkdir(parents=True, exist_ok=True)
        partial = out.with_name(out.name + ".part")
        files = 0
        try:
            with zipfile.ZipFile(
                partial,
                "w",
                compression=zipfile.ZIP_DEFLATED,
                compresslevel=self.compression_level,
            ) as zf:
                for path in sorted(source.rglob("*")):
                    arcname = path.relative_to(source).as_posix()
                    zf.write(path, arcname)
                    if path.is_file():
                        files += 1
            os.replace(partial, out)
        except BaseException:
            partial.unlink(missing_ok=True)
            raise
        return files
