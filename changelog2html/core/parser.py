"""Parser for the heading-delimited, bullet-based changelog format."""

import logging
import re
from datetime import date
from typing import Callable, Optional

from changelog2html.core.errors import (
    ChangelogWarning,
    EmptyDocumentError,
    InvalidDateWarning,
    MalformedHeadingWarning,
)
from changelog2html.core.models import ParseResult, VersionEntry

logger = logging.getLogger(__name__)

DiagnosticSink = Callable[[ChangelogWarning], None]

LINE_BREAK_PATTERN = re.compile(r"\r?\n")
HEADING_PREFIX = "## "
HEADING_PATTERN = re.compile(r"^##\s+([^()]+?)(?:\s*\(([^)]+)\))?\s*$")
BULLET_PATTERN = re.compile(r"^[-*•]\s+")
ISO_DATE_PATTERN = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")
DAY_FIRST_PATTERN = re.compile(
    r"^([0-9]{2})(?P<sep>[./])([0-9]{2})(?P=sep)([0-9]{4})$"
)


def normalize_date(raw: str) -> Optional[str]:
    """
    normalizes a heading date candidate to ISO YYYY-MM-DD.

    Args:
        raw: date text from the parenthesized heading suffix

    Returns:
        ISO date string, or None for a blank candidate

    Raises:
        ValueError: if the candidate has an unknown shape or is not a calendar date
    """
    value = raw.strip()
    if not value:
        return None

    candidate = value
    day_first = DAY_FIRST_PATTERN.match(value)
    if day_first:
        day, _sep, month, year = day_first.groups()
        candidate = f"{year}-{month}-{day}"

    if not ISO_DATE_PATTERN.match(candidate):
        raise ValueError(f"date '{value}' is not in YYYY-MM-DD or DD.MM.YYYY format")

    try:
        return date.fromisoformat(candidate).isoformat()
    except ValueError as e:
        raise ValueError(f"date '{value}' could not be parsed: {e}") from e


class _EntryBuilder:  # pylint: disable=too-few-public-methods
    """accumulates the bullets of the currently open version heading."""

    def __init__(self, version: str, entry_date: Optional[str]) -> None:
        self.version = version
        self.date = entry_date
        self.changes: list[str] = []

    def build(self) -> VersionEntry:
        changes = [change for change in self.changes if change]
        return VersionEntry(version=self.version, date=self.date, changes=changes)


def parse_changelog(
    document: str, on_diagnostic: Optional[DiagnosticSink] = None
) -> list[VersionEntry]:
    """
    extracts version entries from a changelog document.

    Args:
        document: raw changelog text, any line-ending convention
        on_diagnostic: optional sink receiving non-fatal warnings

    Returns:
        version entries in document order (last entry is the current version)

    Raises:
        EmptyDocumentError: if no entry could be extracted
    """
    diagnostics: list[ChangelogWarning] = []

    def report(warning: ChangelogWarning) -> None:
        logger.debug("%s", warning)
        diagnostics.append(warning)
        if on_diagnostic is not None:
            on_diagnostic(warning)

    entries: list[VersionEntry] = []
    current: Optional[_EntryBuilder] = None

    for line_number, line in enumerate(LINE_BREAK_PATTERN.split(document), start=1):
        trimmed = line.strip()

        if trimmed.startswith(HEADING_PREFIX):
            if current is not None:
                entries.append(current.build())
            current = _start_entry(trimmed, line_number, report)
            continue

        if current is None:
            continue

        if BULLET_PATTERN.match(trimmed):
            text = BULLET_PATTERN.sub("", trimmed, count=1).strip()
            if text:
                current.changes.append(text)

    if current is not None:
        entries.append(current.build())

    if not entries:
        raise EmptyDocumentError(diagnostics=diagnostics)

    logger.debug("extracted %d changelog entries", len(entries))
    return entries


def _start_entry(
    heading: str, line_number: int, report: DiagnosticSink
) -> Optional[_EntryBuilder]:
    """opens a new entry for a heading line, or None if it is malformed."""
    match = HEADING_PATTERN.match(heading)
    if not match:
        report(
            MalformedHeadingWarning(
                f"heading could not be interpreted: '{heading}'", line_number, heading
            )
        )
        return None

    version_raw, date_raw = match.groups()
    version = version_raw.strip()
    if not version:
        report(
            MalformedHeadingWarning(
                f"heading without version label: '{heading}'", line_number, heading
            )
        )
        return None

    entry_date = None
    if date_raw is not None:
        try:
            entry_date = normalize_date(date_raw)
        except ValueError as e:
            report(
                InvalidDateWarning(
                    f"entry {version}: {e}; date is ignored", line_number, heading
                )
            )

    return _EntryBuilder(version, entry_date)


def parse_changelog_report(document: str) -> ParseResult:
    """
    parses a changelog and returns entries together with all diagnostics.

    Raises:
        EmptyDocumentError: if no entry could be extracted
    """
    diagnostics: list[ChangelogWarning] = []
    entries = parse_changelog(document, on_diagnostic=diagnostics.append)
    return ParseResult(entries=entries, diagnostics=diagnostics)
