"""tests for sync module."""

import json
from pathlib import Path

import pytest

from changelog2html.core.errors import EmptyDocumentError
from changelog2html.reporting import ConsoleReporter
from changelog2html.sync import load_entries, sync_changelog

CHANGELOG = """# Changelog

## 1.0.0 (2024-01-10)
- Initial release

## 1.1.0 (11.01.2024)
- Added **leaderboard**
"""


@pytest.fixture(name="changelog")
def fixture_changelog(tmp_path: Path) -> Path:
    path = tmp_path / "CHANGELOG.md"
    path.write_text(CHANGELOG, encoding="utf-8")
    return path


def test_load_entries_from_markdown(changelog: Path) -> None:
    """markdown sources go through the changelog parser."""
    entries = load_entries(changelog, ConsoleReporter(quiet=True))

    assert [e.version for e in entries] == ["1.0.0", "1.1.0"]
    assert entries[1].date == "2024-01-11"


def test_load_entries_from_settings_json(tmp_path: Path) -> None:
    """json sources are read as stored settings."""
    source = tmp_path / "site_settings.json"
    source.write_text(
        json.dumps(
            {"update_log": [{"version": " 2.0 ", "date": "bad", "changes": ["x"]}]}
        ),
        encoding="utf-8",
    )

    entries = load_entries(source, ConsoleReporter(quiet=True))

    assert len(entries) == 1
    assert entries[0].version == "2.0"
    assert entries[0].date is None


def test_load_entries_missing_source(tmp_path: Path) -> None:
    """missing source raises FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        load_entries(tmp_path / "nope.md", ConsoleReporter(quiet=True))


def test_load_entries_empty_json_log(tmp_path: Path) -> None:
    """a json source without usable entries is an empty document."""
    source = tmp_path / "site_settings.json"
    source.write_text(json.dumps({"update_log": []}), encoding="utf-8")

    with pytest.raises(EmptyDocumentError):
        load_entries(source, ConsoleReporter(quiet=True))


def test_sync_writes_settings(changelog: Path, tmp_path: Path) -> None:
    """sync writes the version label and log to the settings file."""
    destination = tmp_path / "out" / "site_settings.json"

    exit_code = sync_changelog(changelog, str(destination), quiet=True)

    assert exit_code == 0
    data = json.loads(destination.read_text(encoding="utf-8"))
    assert data["version_label"] == "1.1.0"
    assert len(data["update_log"]) == 2


def test_sync_html_format(changelog: Path, tmp_path: Path) -> None:
    """html format writes the update log page."""
    exit_code = sync_changelog(
        changelog, str(tmp_path / "site"), output_format="html", quiet=True
    )

    assert exit_code == 0
    assert (tmp_path / "site" / "update-log.html").exists()


def test_sync_dry_run_writes_nothing(
    changelog: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """dry run parses and reports without writing."""
    destination = tmp_path / "site_settings.json"

    exit_code = sync_changelog(changelog, str(destination), dry_run=True)

    assert exit_code == 0
    assert not destination.exists()
    err = capsys.readouterr().err
    assert "Dry run: would write version '1.1.0'" in err
    assert "2 entry(ies), 0 warning(s)" in err


def test_sync_empty_document_fails(tmp_path: Path) -> None:
    """a changelog without entries is a fatal error."""
    source = tmp_path / "CHANGELOG.md"
    source.write_text("# Changelog\n\nnothing yet\n", encoding="utf-8")
    destination = tmp_path / "site_settings.json"

    assert sync_changelog(source, str(destination), quiet=True) == 2
    assert not destination.exists()


def test_sync_strict_with_warnings(tmp_path: Path) -> None:
    """diagnostics only fail the run under strict."""
    source = tmp_path / "CHANGELOG.md"
    source.write_text("## (2024-01-01)\n- lost\n## 1.0\n- kept\n", encoding="utf-8")

    assert sync_changelog(source, str(tmp_path / "a.json"), quiet=True) == 0
    assert (
        sync_changelog(source, str(tmp_path / "b.json"), strict=True, quiet=True)
        == 1
    )


def test_sync_invalid_settings_destination(changelog: Path, tmp_path: Path) -> None:
    """a corrupt destination file is reported as an export failure."""
    destination = tmp_path / "site_settings.json"
    destination.write_text("not json", encoding="utf-8")

    assert sync_changelog(changelog, str(destination), quiet=True) == 2
    assert destination.read_text(encoding="utf-8") == "not json"


def test_sync_unknown_format(changelog: Path, tmp_path: Path) -> None:
    """unknown formats are rejected."""
    with pytest.raises(ValueError, match="Unknown output format"):
        sync_changelog(changelog, str(tmp_path), output_format="pdf")
