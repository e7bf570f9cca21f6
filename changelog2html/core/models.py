"""Data models for changelog entries."""

from dataclasses import dataclass, field
from typing import Any, Optional

from changelog2html.core.errors import ChangelogWarning


@dataclass
class VersionEntry:
    """One changelog record extracted from a `##` heading block."""

    version: str
    date: Optional[str] = None  # ISO YYYY-MM-DD
    changes: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """returns the JSON-serializable form persisted in site settings."""
        return {
            "version": self.version,
            "date": self.date,
            "changes": list(self.changes),
        }


@dataclass
class ParseResult:
    """Entries of a parsed document together with its diagnostics."""

    entries: list[VersionEntry]
    diagnostics: list[ChangelogWarning] = field(default_factory=list)

    @property
    def current(self) -> Optional[VersionEntry]:
        """last entry in document order, which the site shows as its version."""
        return self.entries[-1] if self.entries else None

    def to_payload(self) -> list[dict[str, Any]]:
        return [entry.to_dict() for entry in self.entries]
