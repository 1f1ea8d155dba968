"""Console reporting for generator runs."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.traceback import Traceback

from .models import ArchiveResult, FileResult
from .utils import console as default_console
from .utils import print_error, print_success


class ConsoleReporter:
    """Prints per-file lines and the final summary line of a run.

    Args:
        console: Target console.  Defaults to the shared package console;
            tests pass a ``Console(file=StringIO())``.
        show_files: Whether :meth:`file_written` prints anything.
    """

    def __init__(self, console: Console | None = None, show_files: bool = True) -> None:
        self.console = console or default_console
        self.show_files = show_files

    def file_written(self, result: FileResult) -> None:
        """Print a ``Created: <path>`` line for one written file."""
        if self.show_files:
            self.console.print(
                f"Created: {escape(str(result.path))}", highlight=False, soft_wrap=True
            )

    def archive_complete(self, result: ArchiveResult) -> None:
        """Print the archive summary line with its final size in bytes."""
        print_success(
            f"{escape(result.archive_path.name)} created successfully! "
            f"Total bytes: {result.size_bytes}",
            target=self.console,
        )

    def scaffold_complete(self, message: str) -> None:
        """Print *message* as the run's summary line when no archive is made."""
        print_success(escape(message), target=self.console)

    def failure(self, exc: BaseException) -> None:
        """Print the error line followed by its traceback."""
        print_error(f"Error: {escape(str(exc))}", target=self.console)
        self.console.print(Traceback.from_exception(type(exc), exc, exc.__traceback__))
