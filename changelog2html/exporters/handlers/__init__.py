"""handler registry and base types for rich-text rendering modes."""

from dataclasses import dataclass
from typing import Callable, Optional, Protocol, TypeVar


@dataclass
class RenderContext:
    """context passed to handlers during rendering."""

    # wraps inline output in a paragraph when block rendering yields nothing
    fallback_paragraph: bool = False


class ModeHandler(Protocol):  # pylint: disable=too-few-public-methods
    """protocol for render mode handlers."""

    mode: str

    def render(self, text: str, ctx: RenderContext) -> str:
        """renders text to HTML."""


class HandlerRegistry:
    """registry for render mode handlers."""

    def __init__(self) -> None:
        self._handlers: dict[str, ModeHandler] = {}

    def register(self, handler_instance: ModeHandler) -> None:
        """registers a handler for its mode."""
        self._handlers[handler_instance.mode] = handler_instance

    def modes(self) -> list[str]:
        """returns registered mode names, sorted."""
        return sorted(self._handlers)

    def render(self, mode: str, text: str, ctx: RenderContext) -> Optional[str]:
        """
        renders text using the handler for the given mode.

        Args:
            mode: render mode name ("document", "list", "inline")
            text: Markdown-dialect text
            ctx: render context with flags

        Returns:
            rendered HTML string, or None if the mode is unknown
        """
        handler_instance = self._handlers.get(mode)
        if not handler_instance:
            return None
        return handler_instance.render(text, ctx)


# global registry
registry = HandlerRegistry()

T = TypeVar("T")


def handler(
    mode: str, target_registry: HandlerRegistry = registry
) -> Callable[[type[T]], type[T]]:
    """
    decorator to register a render mode handler.

    Args:
        mode: render mode name
        target_registry: registry to register with (defaults to global)

    Returns:
        decorator function
    """

    def decorator(cls: type[T]) -> type[T]:
        cls.mode = mode  # type: ignore[attr-defined]
        target_registry.register(cls())  # type: ignore[arg-type]
        return cls

    return decorator


def load_default_handlers() -> HandlerRegistry:
    """imports the built-in handler modules so they register themselves."""
    # pylint: disable=import-outside-toplevel,unused-import
    import changelog2html.exporters.handlers.bullets  # noqa: F401
    import changelog2html.exporters.handlers.document  # noqa: F401
    import changelog2html.exporters.handlers.inline  # noqa: F401

    return registry
