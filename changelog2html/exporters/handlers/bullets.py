"""list render mode handler."""

from changelog2html.exporters.handlers import RenderContext, handler
from changelog2html.exporters.handlers.utils.markdown import render_list


@handler("list")
class ListHandler:  # pylint: disable=too-few-public-methods
    """renders each non-blank line as a list item."""

    def render(self, text: str, _ctx: RenderContext) -> str:
        """renders text as a bullet list."""
        return render_list(text)
