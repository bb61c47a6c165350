"""Render syntax-highlighted code as self-contained SVG over MCP."""

from highlight_svg.grammars import GrammarRegistry
from highlight_svg.render import render_highlighted_svg

__version__ = "0.1.0"

__all__ = ["GrammarRegistry", "render_highlighted_svg", "__version__"]
