"""inline render mode handler."""

from changelog2html.exporters.handlers import RenderContext, handler
from changelog2html.exporters.handlers.utils.markdown import render_inline


@handler("inline")
class InlineHandler:  # pylint: disable=too-few-public-methods
    """renders inline markers only, for short rich-text fields."""

    def render(self, text: str, _ctx: RenderContext) -> str:
        return render_inline(text)
