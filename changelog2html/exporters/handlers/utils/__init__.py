"""utility modules for render mode handlers."""

from changelog2html.exporters.handlers.utils.inline import (
    INLINE_PASSES,
    apply_inline_formatting,
    escape_html,
)
from changelog2html.exporters.handlers.utils.markdown import (
    render_document,
    render_inline,
    render_list,
)

__all__ = [
    "INLINE_PASSES",
    "apply_inline_formatting",
    "escape_html",
    "render_document",
    "render_inline",
    "render_list",
]
