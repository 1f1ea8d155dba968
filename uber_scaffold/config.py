"""Generator configuration.

Typed settings for a single generator run.  Both console scripts build one
of the presets below from the current working directory; nothing is read
from the command line or the environment.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator


DEFAULT_PROJECT_FOLDER = "uber-clone"
DEFAULT_ARCHIVE_NAME = "uber-clone.zip"
MAX_COMPRESSION_LEVEL = 9


class ArchiveConfig(BaseModel):
    """Settings for the zip produced after materialization."""

    name: str = Field(default=DEFAULT_ARCHIVE_NAME, description="Archive file name")
    compression_level: int = Field(
        default=MAX_COMPRESSION_LEVEL, ge=0, le=9, description="Deflate level"
    )

    @field_validator("name")
    @classmethod
    def check_archive_name(cls, value: str) -> str:
        if not value or Path(value).name != value:
            raise ValueError(f"archive name must be a bare file name: {value!r}")
        return value


class Config(BaseModel):
    """Settings for one scaffold generator run.

    ``project_folder`` selects a subfolder of ``base_dir`` to receive the
    tree; when empty the tree is written directly into ``base_dir``.  The
    archive, when configured, is written next to that folder.
    """

    base_dir: Path = Field(default=Path("."))
    project_folder: str = Field(default="")
    archive: Optional[ArchiveConfig] = Field(default=None)
    report_files: bool = Field(
        default=True, description="Print a 'Created: <path>' line per file"
    )
    completion_message: str = Field(default="Scaffold complete!")

    @field_validator("project_folder")
    @classmethod
    def check_project_folder(cls, value: str) -> str:
        if value and (Path(value).name != value or value in (".", "..")):
            raise ValueError(f"project folder must be a single directory name: {value!r}")
        return value

    @model_validator(mode="after")
    def check_archive_outside_tree(self) -> "Config":
        if self.archive is not None and not self.project_folder:
            raise ValueError("archiving requires a project_folder; the archive would land inside the tree")
        return self

    # ------------------------------------------------------------------
    # Derived paths
    # ------------------------------------------------------------------

    @property
    def project_path(self) -> Path:
        """Directory that receives the generated tree."""
        if self.project_folder:
            return self.base_dir / self.project_folder
        return self.base_dir

    @property
    def archive_path(self) -> Optional[Path]:
        """Destination of the zip archive, or ``None`` when not archiving."""
        if self.archive is None:
            return None
        return self.base_dir / self.archive.name

    # ------------------------------------------------------------------
    # Presets
    # ------------------------------------------------------------------

    @classmethod
    def for_uber_clone(cls, base_dir: Path = Path(".")) -> "Config":
        """React + Mapbox demo: ``./uber-clone/`` plus ``./uber-clone.zip``, silent per file."""
        return cls(
            base_dir=base_dir,
            project_folder=DEFAULT_PROJECT_FOLDER,
            archive=ArchiveConfig(),
            report_files=False,
        )

    @classmethod
    def for_uber_frontend(cls, base_dir: Path = Path(".")) -> "Config":
        """Next.js frontend written straight into *base_dir*, one line per file."""
        return cls(
            base_dir=base_dir,
            report_files=True,
            completion_message="Uber Clone frontend scaffold complete!",
        )
