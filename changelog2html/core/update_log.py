"""Normalization of update logs stored as JSON in site settings."""

import json
import logging
import re
from collections.abc import Mapping
from typing import Any, Optional

from changelog2html.core.models import VersionEntry
from changelog2html.core.parser import normalize_date

logger = logging.getLogger(__name__)

WHITESPACE_RUN = re.compile(r"\s+")


def _text(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""


def _normalize_entry(item: Any) -> Optional[VersionEntry]:
    """converts one stored item to a VersionEntry, or None if unusable."""
    if not isinstance(item, Mapping):
        return None

    version = WHITESPACE_RUN.sub(" ", _text(item.get("version")))
    if not version:
        return None

    entry_date = None
    raw_date = item.get("date")
    if isinstance(raw_date, str):
        try:
            entry_date = normalize_date(raw_date)
        except ValueError:
            logger.debug("dropping invalid stored date %r for %s", raw_date, version)

    raw_changes = item.get("changes")
    changes = (
        [text for text in (_text(c) for c in raw_changes) if text]
        if isinstance(raw_changes, list)
        else []
    )

    return VersionEntry(version=version, date=entry_date, changes=changes)


def normalize_update_log(value: Any) -> list[VersionEntry]:
    """
    normalizes a stored update log payload.

    Args:
        value: list of entry mappings, or a JSON string encoding one

    Returns:
        valid entries in stored order; empty list for unusable payloads
    """
    if isinstance(value, (str, bytes)):
        try:
            value = json.loads(value)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.warning("Failed to parse update log payload: %s", e)
            return []

    if not isinstance(value, list):
        if value is not None:
            logger.warning(
                "Ignoring update log payload of type %s", type(value).__name__
            )
        return []

    entries = []
    for item in value:
        entry = _normalize_entry(item)
        if entry is not None:
            entries.append(entry)
    return entries


def load_settings_update_log(data: Any) -> list[VersionEntry]:
    """returns the normalized update log of a settings mapping or bare list."""
    if isinstance(data, Mapping):
        return normalize_update_log(data.get("update_log"))
    return normalize_update_log(data)
