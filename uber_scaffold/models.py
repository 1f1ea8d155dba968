"""Pydantic v2 models for template tables and generation results.

Template entries and tables are immutable data declared at import time.
The result models describe what a run actually wrote, so that partial
output stays observable when a run fails.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path, PurePosixPath
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


# ---------------------------------------------------------------------------
# Template data
# ---------------------------------------------------------------------------

class TemplateEntry(BaseModel):
    """One file to emit: a relative POSIX path and its literal content."""

    model_config = ConfigDict(frozen=True)

    path: str = Field(..., description="Output path relative to the base directory")
    content: str = Field(..., description="Literal file contents, written verbatim")

    @field_validator("path")
    @classmethod
    def check_relative(cls, value: str) -> str:
        if "\\" in value:
            raise ValueError(f"template path must use '/' separators: {value!r}")
        pure = PurePosixPath(value)
        if pure.is_absolute():
            raise ValueError(f"template path must be relative: {value!r}")
        if not pure.parts or pure.parts == (".",):
            raise ValueError("template path must not be empty")
        if ".." in pure.parts:
            raise ValueError(f"template path must not contain '..': {value!r}")
        return value

    @property
    def parts(self) -> tuple[str, ...]:
        """Path segments, suitable for joining onto a ``Path``."""
        return PurePosixPath(self.path).parts


class TemplateTable(BaseModel):
    """A named, ordered collection of template entries.

    Iteration order is declaration order; it is the order in which files
    are written and reported.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    entries: tuple[TemplateEntry, ...] = ()

    @model_validator(mode="after")
    def check_unique_paths(self) -> "TemplateTable":
        seen: set[str] = set()
        for entry in self.entries:
            key = str(PurePosixPath(entry.path))
            if key in seen:
                raise ValueError(f"duplicate template path in {self.name!r}: {entry.path}")
            seen.add(key)
        return self

    @classmethod
    def from_mapping(cls, name: str, files: Mapping[str, str]) -> "TemplateTable":
        """Build a table from an ordered ``{path: content}`` mapping."""
        return cls(
            name=name,
            entries=tuple(TemplateEntry(path=p, content=c) for p, c in files.items()),
        )

    def __len__(self) -> int:
        return len(self.entries)

    def paths(self) -> list[str]:
        return [entry.path for entry in self.entries]

    def get(self, path: str) -> Optional[TemplateEntry]:
        for entry in self.entries:
            if entry.path == path:
                return entry
        return None


# ---------------------------------------------------------------------------
# Run results
# ---------------------------------------------------------------------------

class FileResult(BaseModel):
    """Outcome of writing a single template entry."""

    relative_path: str
    path: Path = Field(..., description="Absolute path that was written")
    bytes_written: int = Field(..., ge=0)
    overwritten: bool = Field(default=False, description="A prior file was replaced")


class MaterializeReport(BaseModel):
    """Ordered record of every file written by one materialization."""

    base_dir: Path
    files: list[FileResult] = Field(default_factory=list)

    @property
    def file_count(self) -> int:
        return len(self.files)

    def written_paths(self) -> list[str]:
        """Relative paths in write order."""
        return [f.relative_path for f in self.files]


class ArchiveResult(BaseModel):
    """Outcome of packaging a directory into a zip archive."""

    archive_path: Path
    source_dir: Path
    entry_count: int = Field(..., ge=0, description="Number of file entries")
    size_bytes: int = Field(..., ge=0, description="Final archive size on disk")


class GenerationResult(BaseModel):
    """Everything one generator run produced."""

    report: MaterializeReport
    archive: Optional[ArchiveResult] = None
