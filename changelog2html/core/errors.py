"""Errors and diagnostics raised while reading changelog documents."""

from typing import Optional


class ChangelogError(Exception):
    """base class for hard failures of the changelog engine."""


class EmptyDocumentError(ChangelogError):
    """raised when a document yields no version entries at all."""

    def __init__(
        self,
        message: str = "changelog contains no valid entries",
        diagnostics: Optional[list["ChangelogWarning"]] = None,
    ) -> None:
        super().__init__(message)
        self.diagnostics: list[ChangelogWarning] = list(diagnostics or [])


class ChangelogWarning(UserWarning):
    """non-fatal diagnostic; handed to a sink, never raised by the parser."""

    def __init__(
        self,
        message: str,
        line_number: Optional[int] = None,
        line: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.line_number = line_number
        self.line = line

    def __str__(self) -> str:
        if self.line_number is None:
            return self.message
        return f"line {self.line_number}: {self.message}"


class MalformedHeadingWarning(ChangelogWarning):
    """a version heading could not be interpreted; its entry is skipped."""


class InvalidDateWarning(ChangelogWarning):
    """a version heading carried a date that could not be normalized."""
