"""uber-scaffold -- writes the Uber-clone demo projects to disk.

Quick usage::

    from pathlib import Path
    from uber_scaffold import Config, ScaffoldGenerator, UBER_CLONE_APP

    generator = ScaffoldGenerator(UBER_CLONE_APP, Config.for_uber_clone(Path("/tmp/out")))
    result = await generator.generate()
    print(result.archive.size_bytes)
"""

from uber_scaffold.archive import ArchivePackager
from uber_scaffold.config import ArchiveConfig, Config
from uber_scaffold.errors import (
    ArchiveError,
    MaterializeError,
    ScaffoldError,
    TemplatePathError,
)
from uber_scaffold.generator import ScaffoldGenerator
from uber_scaffold.materializer import TreeMaterializer
from uber_scaffold.models import (
    ArchiveResult,
    FileResult,
    GenerationResult,
    MaterializeReport,
    TemplateEntry,
    TemplateTable,
)
from uber_scaffold.reporter import ConsoleReporter
from uber_scaffold.templates import TEMPLATE_TABLES, UBER_CLONE_APP, UBER_FRONTEND

__all__ = [
    "ArchiveConfig",
    "ArchiveError",
    "ArchivePackager",
    "ArchiveResult",
    "Config",
    "ConsoleReporter",
    "FileResult",
    "GenerationResult",
    "MaterializeError",
    "MaterializeReport",
    "ScaffoldError",
    "ScaffoldGenerator",
    "TEMPLATE_TABLES",
    "TemplateEntry",
    "TemplateTable",
    "TemplatePathError",
    "TreeMaterializer",
    "UBER_CLONE_APP",
    "UBER_FRONTEND",
]
