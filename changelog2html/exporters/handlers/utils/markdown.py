"""Block-level rendering of the changelog Markdown dialect to HTML."""

import re
from typing import Optional

from changelog2html.exporters.handlers.utils.inline import apply_inline_formatting

LINE_BREAK_PATTERN = re.compile(r"\r?\n")
HEADING_PATTERN = re.compile(r"^#{1,4}\s+")
UNORDERED_PATTERN = re.compile(r"^[-*+]\s+")
ORDERED_PATTERN = re.compile(r"^[0-9]+\.\s+")
QUOTE_PATTERN = re.compile(r"^>\s+")

PARAGRAPH_CLASS = "leading-relaxed"
LIST_ITEM_CLASS = "text-sm text-gray-200"
LIST_CLASSES = {
    "ul": "list-disc list-inside space-y-1 pl-5 marker:text-[var(--accent-color)]",
    "ol": "list-decimal list-inside space-y-1 pl-5 marker:text-[var(--accent-color)]",
}
QUOTE_CLASS = (
    "border-l-2 border-[var(--accent-color)]/60 pl-4 text-sm text-gray-300 italic"
)
HEADING_CLASSES = {
    1: "text-3xl font-bold tracking-tight mt-6 mb-3 text-white",
    2: "text-2xl font-semibold tracking-tight mt-5 mb-2 text-white",
    3: "text-xl font-semibold mt-4 mb-2 text-white",
    4: "text-lg font-semibold mt-3 mb-2 text-white",
}


def _split_lines(text: str) -> list[str]:
    return LINE_BREAK_PATTERN.split(text)


def _list_item(content: str) -> str:
    return f'<li class="{LIST_ITEM_CLASS}">{apply_inline_formatting(content)}</li>'


class _BlockWriter:
    """
    block state machine behind render_document.

    States are NONE, PARAGRAPH (paragraph buffer non-empty) and LIST
    (list_tag set). Paragraph and list state can coexist: a plain line after
    a bullet is buffered without closing the list, and is emitted as a <p>
    inside that list when the next blank line or marker flushes it.
    """

    def __init__(self) -> None:
        self.html: list[str] = []
        self.paragraph: list[str] = []
        self.list_tag: Optional[str] = None

    def flush_paragraph(self) -> None:
        if not self.paragraph:
            return
        content = " ".join(self.paragraph).strip()
        if content:
            self.html.append(
                f'<p class="{PARAGRAPH_CLASS}">{apply_inline_formatting(content)}</p>'
            )
        self.paragraph = []

    def close_list(self) -> None:
        if self.list_tag:
            self.html.append(f"</{self.list_tag}>")
            self.list_tag = None

    def open_list(self, tag: str) -> None:
        if self.list_tag == tag:
            return
        self.close_list()
        self.list_tag = tag
        self.html.append(f'<{tag} class="{LIST_CLASSES[tag]}">')

    def feed(self, line: str) -> None:
        """consumes one input line."""
        trimmed = line.strip()

        if not trimmed:
            self.flush_paragraph()
            self.close_list()
            return

        heading = HEADING_PATTERN.match(trimmed)
        if heading:
            self.flush_paragraph()
            self.close_list()
            level = min(len(heading.group(0).strip()), 4)
            content = apply_inline_formatting(trimmed[heading.end() :].strip())
            self.html.append(
                f'<h{level} class="{HEADING_CLASSES[level]}">{content}</h{level}>'
            )
            return

        for pattern, tag in ((UNORDERED_PATTERN, "ul"), (ORDERED_PATTERN, "ol")):
            if pattern.match(trimmed):
                self.flush_paragraph()
                self.open_list(tag)
                # ordinal numbers are not preserved
                self.html.append(_list_item(pattern.sub("", trimmed, count=1)))
                return

        if QUOTE_PATTERN.match(trimmed):
            self.flush_paragraph()
            self.close_list()
            content = apply_inline_formatting(QUOTE_PATTERN.sub("", trimmed, count=1))
            self.html.append(
                f'<blockquote class="{QUOTE_CLASS}">{content}</blockquote>'
            )
            return

        self.paragraph.append(trimmed)

    def close(self) -> str:
        self.flush_paragraph()
        self.close_list()
        return "".join(self.html)


def render_document(text: str) -> str:
    """
    renders a Markdown-dialect document to sanitized HTML.

    Args:
        text: document text with block and inline markers

    Returns:
        HTML fragment; empty string for blank input
    """
    if not text or not text.strip():
        return ""

    writer = _BlockWriter()
    for line in _split_lines(text):
        writer.feed(line)
    return writer.close()


def render_list(text: str) -> str:
    """
    renders every non-blank line as one item of an unordered list.

    Lines are taken verbatim (trimmed); bullet markers are not stripped.
    """
    if not text or not text.strip():
        return ""

    items = [line.strip() for line in _split_lines(text) if line.strip()]
    if not items:
        return ""

    list_items = "".join(_list_item(item) for item in items)
    return f'<ul class="{LIST_CLASSES["ul"]}">{list_items}</ul>'


def render_inline(text: str) -> str:
    """renders inline markers only, without block wrapping."""
    return apply_inline_formatting(text or "")
