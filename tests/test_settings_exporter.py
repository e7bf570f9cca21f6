"""tests for the site settings exporter."""

import json
from pathlib import Path

import pytest

from changelog2html.core.models import VersionEntry
from changelog2html.exporters.settings import SettingsExporter

ENTRIES = [
    VersionEntry(version="1.0.0", date="2024-01-10", changes=["Initial release"]),
    VersionEntry(version="1.1.0", date=None, changes=["Added leaderboard"]),
]


def _read(path: Path) -> dict:
    return json.loads(path.read_text(encoding="utf-8"))


def test_writes_version_label_and_log(tmp_path: Path) -> None:
    """the newest entry's version becomes the label; the full log is stored."""
    settings_file = tmp_path / "site_settings.json"

    assert SettingsExporter().export(ENTRIES, str(settings_file))

    data = _read(settings_file)
    assert data["version_label"] == "1.1.0"
    assert data["update_log"] == [
        {"version": "1.0.0", "date": "2024-01-10", "changes": ["Initial release"]},
        {"version": "1.1.0", "date": None, "changes": ["Added leaderboard"]},
    ]
    assert "updated_at" in data


def test_preserves_other_settings(tmp_path: Path) -> None:
    """keys other than the update log are kept."""
    settings_file = tmp_path / "site_settings.json"
    settings_file.write_text(
        json.dumps({"primary_color": "#ff0000", "version_label": "v0.9"}),
        encoding="utf-8",
    )

    SettingsExporter().export(ENTRIES, str(settings_file))

    data = _read(settings_file)
    assert data["primary_color"] == "#ff0000"
    assert data["version_label"] == "1.1.0"


def test_unchanged_log_is_not_rewritten(tmp_path: Path) -> None:
    """a second export of the same log writes nothing unless overwrite is set."""
    settings_file = tmp_path / "site_settings.json"
    exporter = SettingsExporter()

    assert exporter.export(ENTRIES, str(settings_file))
    first = settings_file.read_text(encoding="utf-8")

    assert not exporter.export(ENTRIES, str(settings_file))
    assert settings_file.read_text(encoding="utf-8") == first

    assert exporter.export(ENTRIES, str(settings_file), overwrite=True)


def test_dry_run_writes_nothing(tmp_path: Path) -> None:
    """dry run leaves the destination untouched."""
    settings_file = tmp_path / "site_settings.json"

    assert not SettingsExporter().export(ENTRIES, str(settings_file), dry_run=True)
    assert not settings_file.exists()


def test_creates_parent_directories(tmp_path: Path) -> None:
    """missing parent directories are created."""
    settings_file = tmp_path / "config" / "site_settings.json"

    SettingsExporter().export(ENTRIES, str(settings_file))

    assert settings_file.exists()
    assert list(settings_file.parent.iterdir()) == [settings_file]


def test_empty_entries_raise(tmp_path: Path) -> None:
    """an empty log is never written."""
    with pytest.raises(ValueError):
        SettingsExporter().export([], str(tmp_path / "s.json"))


def test_invalid_existing_file_raises(tmp_path: Path) -> None:
    """a corrupt settings file is reported, not replaced."""
    settings_file = tmp_path / "site_settings.json"
    settings_file.write_text("{broken", encoding="utf-8")

    with pytest.raises(ValueError, match="not valid JSON"):
        SettingsExporter().export(ENTRIES, str(settings_file))

    assert settings_file.read_text(encoding="utf-8") == "{broken"


def test_non_object_existing_file_raises(tmp_path: Path) -> None:
    """settings must be a JSON object."""
    settings_file = tmp_path / "site_settings.json"
    settings_file.write_text("[]", encoding="utf-8")

    with pytest.raises(ValueError, match="JSON object"):
        SettingsExporter().export(ENTRIES, str(settings_file))
