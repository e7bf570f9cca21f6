"""console output for sync and render operations."""

from typing import Optional

from rich.console import Console
from rich.markup import escape

from changelog2html.core.errors import ChangelogWarning


class ConsoleReporter:
    """reports progress, diagnostics and a summary on stderr."""

    def __init__(self, quiet: bool = False, console: Optional[Console] = None) -> None:
        self.quiet = quiet
        self._console = console if console is not None else Console(stderr=True)
        self._warnings: list[ChangelogWarning] = []

    def __enter__(self) -> "ConsoleReporter":
        return self

    def __exit__(
        self,
        exc_type: Optional[type],
        exc_val: Optional[BaseException],
        exc_tb: Optional[object],
    ) -> None:
        self._console.file.flush()

    @property
    def warning_count(self) -> int:
        return len(self._warnings)

    def log_warning(self, warning: ChangelogWarning) -> None:
        """records a diagnostic and prints it (always shown, even in quiet mode)."""
        self._warnings.append(warning)
        self._console.print(f"[yellow]WARNING:[/yellow] {escape(str(warning))}")

    def log_error(self, message: str) -> None:
        """prints error message (always shown, even in quiet mode)."""
        self._console.print(f"[red]ERROR:[/red] {escape(message)}")

    def log_info(self, message: str) -> None:
        """prints info message unless quiet."""
        if self.quiet:
            return

        self._console.print(escape(message))

    def finish(self, version_label: str, entry_count: int) -> None:
        """prints summary unless quiet."""
        if self.quiet:
            return

        self._console.print(
            f"Version {escape(version_label)}: {entry_count} entry(ies), "
            f"{self.warning_count} warning(s)"
        )
