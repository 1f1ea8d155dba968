"""Scaffold orchestration.

Takes a ``TemplateTable`` and a ``Config`` and produces the project tree,
then (optionally) the zip archive.  Archiving is awaited only after every
file write has finished.

Quick usage::

    from uber_scaffold import Config, ScaffoldGenerator, UBER_FRONTEND

    generator = ScaffoldGenerator(UBER_FRONTEND, Config.for_uber_frontend(Path("/tmp/out")))
    result = await generator.generate()
"""

from __future__ import annotations

from .archive import ArchivePackager
from .config import Config
from .materializer import TreeMaterializer
from .models import GenerationResult, TemplateTable
from .reporter import ConsoleReporter


class ScaffoldGenerator:
    """Runs one generator: materialize, then archive if configured, then report."""

    def __init__(
        self,
        table: TemplateTable,
        config: Config,
        reporter: ConsoleReporter | None = None,
    ) -> None:
        self.table = table
        self.config = config
        self.reporter = reporter or ConsoleReporter()
        self.materializer = TreeMaterializer(
            config.project_path,
            on_file_written=self.reporter.file_written if config.report_files else None,
        )
        self.packager = (
            ArchivePackager(config.archive.compression_level)
            if config.archive is not None
            else None
        )

    async def generate(self) -> GenerationResult:
        """Generate the tree (and archive).

        Errors from either phase propagate unchanged; a failed
        materialization never produces an archive.
        """
        report = await self.materializer.materialize(self.table.entries)

        archive = None
        archive_path = self.config.archive_path
        if self.packager is not None and archive_path is not None:
            archive = await self.packager.package(self.config.project_path, archive_path)
            self.reporter.archive_complete(archive)
        else:
            self.reporter.scaffold_complete(self.config.completion_message)

        return GenerationResult(report=report, archive=archive)
