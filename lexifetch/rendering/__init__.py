"""Document rendering."""

from lexifetch.rendering.markdown import html_to_markdown, render_callout, render_markdown

__all__ = ["html_to_markdown", "render_callout", "render_markdown"]
