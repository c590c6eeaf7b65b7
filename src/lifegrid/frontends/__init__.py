"""Frontend interfaces for the grid engine."""

from .render import TextRenderer, HtmlTableRenderer

__all__ = ["TextRenderer", "HtmlTableRenderer"]
