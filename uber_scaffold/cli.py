"""Zero-argument console entry points.

``generate-uber-clone``
    Writes the React + Mapbox demo to ``./uber-clone/`` and zips it to
    ``./uber-clone.zip``.

``setup-uber-frontend``
    Writes the Next.js frontend straight into the working directory.
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

from .config import Config
from .errors import ScaffoldError
from .generator import ScaffoldGenerator
from .models import GenerationResult, TemplateTable
from .reporter import ConsoleReporter
from .templates import TEMPLATE_TABLES


def run(
    table: TemplateTable,
    config: Config,
    reporter: ConsoleReporter | None = None,
) -> GenerationResult:
    """Run one generator to completion, raising on failure."""
    generator = ScaffoldGenerator(table, config, reporter)
    return asyncio.run(generator.generate())


def _main(table_name: str, config: Config) -> None:
    reporter = ConsoleReporter()
    try:
        run(TEMPLATE_TABLES[table_name], config, reporter)
    except ScaffoldError as exc:
        reporter.failure(exc)
        sys.exit(1)


def generate_uber_clone() -> None:
    """CLI entry point for ``generate-uber-clone``."""
    _main("uber-clone", Config.for_uber_clone(Path.cwd()))


def setup_uber_frontend() -> None:
    """CLI entry point for ``setup-uber-frontend``."""
    _main("uber-frontend", Config.for_uber_frontend(Path.cwd()))
