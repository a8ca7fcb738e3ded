"""Output renderers for graph diffs."""

from .dot import DotRenderer, quote, render_diff

__all__ = ["DotRenderer", "quote", "render_diff"]
