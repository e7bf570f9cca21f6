"""document render mode handler."""

from changelog2html.exporters.handlers import RenderContext, handler
from changelog2html.exporters.handlers.utils.markdown import (
    PARAGRAPH_CLASS,
    render_document,
    render_inline,
)


@handler("document")
class DocumentHandler:  # pylint: disable=too-few-public-methods
    """renders full block-level Markdown."""

    def render(self, text: str, ctx: RenderContext) -> str:
        """
        renders text as a document.

        Args:
            text: Markdown-dialect text
            ctx: render context; fallback_paragraph wraps inline output in <p>
                when block rendering produced nothing

        Returns:
            rendered HTML string
        """
        html = render_document(text)
        if html or not ctx.fallback_paragraph:
            return html

        inline = render_inline(text)
        return f'<p class="{PARAGRAPH_CLASS}">{inline}</p>' if inline else ""
