"""site settings exporter: stores the current version and the full update log."""

import json
import logging
import os
import tempfile
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from changelog2html.core.models import VersionEntry
from changelog2html.exporters.base import Exporter

logger = logging.getLogger(__name__)


class SettingsExporter(Exporter):  # pylint: disable=too-few-public-methods
    """writes version_label and update_log into a JSON site settings file."""

    def export(
        self,
        entries: list[VersionEntry],
        destination: str,
        dry_run: bool = False,
        overwrite: bool = False,
    ) -> bool:
        """
        updates the settings file in a single read-modify-write.

        Args:
            entries: version entries in document order
            destination: path of the JSON settings file
            dry_run: if True, only logs what would be written
            overwrite: if True, rewrites even when the stored log is unchanged

        Returns:
            True if the file was written

        Raises:
            ValueError: if entries is empty or the existing file is not a JSON object
        """
        if not entries:
            raise ValueError("update log contains no entries")

        version_label = entries[-1].version
        update_log = [entry.to_dict() for entry in entries]
        output_path = Path(destination)

        if dry_run:
            logger.info(
                "Would write version '%s' with %d entries to %s",
                version_label,
                len(update_log),
                output_path,
            )
            return False

        settings = self._read_settings(output_path)
        unchanged = (
            settings.get("version_label") == version_label
            and settings.get("update_log") == update_log
        )
        if unchanged and not overwrite:
            logger.info("Settings already up to date: %s", output_path)
            return False

        settings["version_label"] = version_label
        settings["update_log"] = update_log
        settings["updated_at"] = datetime.now(timezone.utc).isoformat()

        self._write_atomic(output_path, settings)
        logger.info(
            "Version set to '%s' (%d log entries synced)",
            version_label,
            len(update_log),
        )
        return True

    def _read_settings(self, path: Path) -> dict[str, Any]:
        """reads existing settings; missing file yields an empty mapping."""
        if not path.exists():
            return {}

        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ValueError(f"Settings file {path} is not valid JSON: {e}") from e

        if not isinstance(data, dict):
            raise ValueError(f"Settings file {path} does not contain a JSON object")
        return data

    def _write_atomic(self, path: Path, settings: dict[str, Any]) -> None:
        """writes to a temp file next to the target, then swaps it in."""
        path.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            mode="w",
            suffix=".json",
            dir=path.parent,
            delete=False,
            encoding="utf-8",
        ) as tmp_file:
            json.dump(settings, tmp_file, ensure_ascii=False, indent=2)
            tmp_file.write("\n")
            tmp_path = tmp_file.name

        try:
            os.replace(tmp_path, path)
        except OSError:
            Path(tmp_path).unlink(missing_ok=True)
            raise
