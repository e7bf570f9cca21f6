"""HTML exporter producing a standalone update log page."""

import html as html_lib
import logging
from datetime import date
from pathlib import Path

from changelog2html.core.models import VersionEntry
from changelog2html.exporters.base import Exporter
from changelog2html.exporters.handlers import RenderContext, load_default_handlers

logger = logging.getLogger(__name__)

PAGE_FILENAME = "update-log.html"


def format_entry_date(iso_date: str) -> str:
    """formats an ISO date as DD.MM.YYYY, returning the input if unparsable."""
    try:
        return date.fromisoformat(iso_date).strftime("%d.%m.%Y")
    except ValueError:
        return iso_date


class HTMLExporter(Exporter):  # pylint: disable=too-few-public-methods
    """exports the update log to an HTML page, newest entry first."""

    def __init__(self, title: str = "Update log") -> None:
        self.title = title
        self._registry = load_default_handlers()

    def export(
        self,
        entries: list[VersionEntry],
        destination: str,
        dry_run: bool = False,
        overwrite: bool = False,
    ) -> bool:
        """writes update-log.html into the destination directory."""
        output_path = Path(destination) / PAGE_FILENAME

        if dry_run:
            logger.info("Would write to: %s", output_path)
            return False

        if output_path.exists() and not overwrite:
            logger.info("Skipping existing file: %s", output_path)
            return False

        html_content = self.render_page(entries)

        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(html_content, encoding="utf-8")
        return True

    def render_entry(self, entry: VersionEntry) -> str:
        """renders one entry as a section with heading, date and changes."""
        parts = [
            '<section class="update-log-entry">',
            f"<h2>Version {html_lib.escape(entry.version)}</h2>",
        ]

        if entry.date:
            parts.append(
                f'<time datetime="{html_lib.escape(entry.date)}">'
                f"{html_lib.escape(format_entry_date(entry.date))}</time>"
            )

        markdown = "\n".join(entry.changes).strip()
        if markdown:
            changes_html = self._registry.render(
                "document", markdown, RenderContext(fallback_paragraph=True)
            )
            if changes_html:
                parts.append(f'<div class="update-log-changes">{changes_html}</div>')

        parts.append("</section>")
        return "".join(parts)

    def render_page(self, entries: list[VersionEntry]) -> str:
        """generates the full HTML document."""
        title_escaped = html_lib.escape(self.title)

        if entries:
            body = "\n".join(self.render_entry(e) for e in reversed(entries))
        else:
            body = "<p>No entries yet.</p>"

        return f"""<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <title>{title_escaped}</title>
</head>
<body>
    <h1>{title_escaped}</h1>
    {body}
</body>
</html>"""
