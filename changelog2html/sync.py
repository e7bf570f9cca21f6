"""Sync module: reads an update log source and exports it."""

import json
import logging
from pathlib import Path

from changelog2html.core.errors import EmptyDocumentError
from changelog2html.core.models import VersionEntry
from changelog2html.core.parser import parse_changelog
from changelog2html.core.update_log import load_settings_update_log
from changelog2html.exporters.base import Exporter
from changelog2html.exporters.html import HTMLExporter
from changelog2html.exporters.settings import SettingsExporter
from changelog2html.reporting import ConsoleReporter

logger = logging.getLogger(__name__)

EXPORTERS: dict[str, type[Exporter]] = {
    "settings": SettingsExporter,
    "html": HTMLExporter,
}


def load_entries(source: Path, reporter: ConsoleReporter) -> list[VersionEntry]:
    """
    loads version entries from a changelog document or stored settings.

    Args:
        source: changelog Markdown file, or .json settings / update log file
        reporter: receives parser diagnostics

    Returns:
        version entries in document order

    Raises:
        FileNotFoundError: if source doesn't exist
        EmptyDocumentError: if no entries could be extracted
        ValueError: if a JSON source is invalid
    """
    if not source.is_file():
        raise FileNotFoundError(f"Source not found: {source}")

    raw = source.read_text(encoding="utf-8")

    if source.suffix == ".json":
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise ValueError(f"{source.name} is not valid JSON: {e}") from e
        entries = load_settings_update_log(data)
        if not entries:
            raise EmptyDocumentError(f"{source.name} contains no valid update log")
        return entries

    return parse_changelog(raw, on_diagnostic=reporter.log_warning)


def sync_changelog(
    source: Path,
    destination: str,
    output_format: str = "settings",
    dry_run: bool = False,
    overwrite: bool = False,
    strict: bool = False,
    quiet: bool = False,
) -> int:
    """
    syncs an update log from source to destination.

    Args:
        source: changelog Markdown file or stored settings JSON
        destination: settings file path, or output directory for html
        output_format: "settings" or "html"
        dry_run: if True, don't write anything
        overwrite: if True, rewrite output even when unchanged or existing
        strict: if True, diagnostics make the run exit with 1
        quiet: if True, suppress non-error output

    Returns:
        exit code (0 success, 1 diagnostics under strict, 2 fatal error)
    """
    exporter_cls = EXPORTERS.get(output_format)
    if exporter_cls is None:
        raise ValueError(f"Unknown output format: {output_format}")

    with ConsoleReporter(quiet=quiet) as reporter:
        try:
            entries = load_entries(source, reporter)
        except EmptyDocumentError as e:
            reporter.log_error(f"{source}: {e}")
            return 2
        except (OSError, ValueError) as e:
            reporter.log_error(str(e))
            return 2

        version_label = entries[-1].version
        reporter.log_info(
            f"Found {len(entries)} entry(ies), current version {version_label}"
        )

        exporter = exporter_cls()
        try:
            written = exporter.export(
                entries, destination, dry_run=dry_run, overwrite=overwrite
            )
        except (OSError, ValueError) as e:
            reporter.log_error(f"Export failed: {e}")
            return 2

        if dry_run:
            reporter.log_info(
                f"Dry run: would write version '{version_label}' "
                f"with {len(entries)} entry(ies) to {destination}"
            )
        elif not written:
            reporter.log_info(f"Nothing written to {destination}")

        reporter.finish(version_label, len(entries))

        if strict and reporter.warning_count > 0:
            return 1
        return 0
