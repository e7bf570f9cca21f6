"""Inline formatting cascade for the changelog Markdown dialect."""

import html
import re
from dataclasses import dataclass

LINK_CLASS = "text-[var(--accent-color)] underline"
STRIKETHROUGH_CLASS = "line-through"
CODE_CLASS = (
    "rounded bg-black/50 px-1 py-0.5 text-xs font-mono text-[var(--accent-color)]"
)

ANCHOR_TAG_PATTERN = re.compile(r"<a [^>]*>")


@dataclass(frozen=True)
class InlinePass:
    """one rewrite pass of the cascade; patterns run in order."""

    name: str
    patterns: tuple[re.Pattern[str], ...]
    template: str
    # output tags are hidden from the passes that follow
    protect_output: bool = False

    def apply(self, text: str) -> str:
        for pattern in self.patterns:
            text = pattern.sub(self.template, text)
        return text


# order matters: bold must consume `**` before italic sees single markers
INLINE_PASSES: tuple[InlinePass, ...] = (
    InlinePass(
        name="link",
        patterns=(re.compile(r"\[([^\]\n]+)\]\((https?://[^)\s]+)\)"),),
        template=(
            r'<a href="\g<2>" target="_blank" rel="noopener noreferrer" '
            f'class="{LINK_CLASS}">' + r"\g<1></a>"
        ),
        protect_output=True,
    ),
    InlinePass(
        name="bold",
        patterns=(
            re.compile(r"\*\*([^*\n]+)\*\*"),
            re.compile(r"__([^_\n]+)__"),
        ),
        template=r"<strong>\g<1></strong>",
    ),
    InlinePass(
        name="italic",
        patterns=(
            re.compile(r"\*(?!\*)([^*\n]+)\*"),
            re.compile(r"_(?!_)([^_\n]+)_"),
        ),
        template=r"<em>\g<1></em>",
    ),
    InlinePass(
        name="strikethrough",
        patterns=(re.compile(r"~~([^~\n]+)~~"),),
        template=f'<span class="{STRIKETHROUGH_CLASS}">' + r"\g<1></span>",
    ),
    InlinePass(
        name="code",
        patterns=(re.compile(r"`([^`\n]+)`"),),
        template=f'<code class="{CODE_CLASS}">' + r"\g<1></code>",
    ),
)


def escape_html(text: str) -> str:
    """
    escapes the five HTML metacharacters.

    NUL characters become U+FFFD, as an HTML parser would treat them, which
    keeps the placeholder delimiter out of user text.
    """
    return html.escape(text.replace("\x00", "\ufffd"), quote=True)


def protect_tags(text: str, stash: list[str]) -> str:
    """replaces emitted anchor tags with placeholders."""

    def replacer(match: re.Match[str]) -> str:
        stash.append(match.group(0))
        return f"\x00{len(stash) - 1}\x00"

    return ANCHOR_TAG_PATTERN.sub(replacer, text)


def restore_tags(text: str, stash: list[str]) -> str:
    """restores tags from placeholders."""
    for i, tag in enumerate(stash):
        text = text.replace(f"\x00{i}\x00", tag)
    return text


def apply_inline_formatting(text: str) -> str:
    """
    converts inline markers of one block to HTML.

    The whole text is escaped before any markup is introduced, so passes only
    ever wrap already-escaped user text in the fixed tag vocabulary.

    Args:
        text: block text (inline markers only)

    Returns:
        escaped HTML fragment; empty string for blank input
    """
    if not text or not text.strip():
        return ""

    transformed = escape_html(text)
    stash: list[str] = []
    for inline_pass in INLINE_PASSES:
        transformed = inline_pass.apply(transformed)
        if inline_pass.protect_output:
            transformed = protect_tags(transformed, stash)

    return restore_tags(transformed, stash) if stash else transformed
