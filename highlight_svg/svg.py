"""Compose the SVG document around tokenized markup."""

from __future__ import annotations

import math
import re
from html import escape
from xml.sax.saxutils import escape as _xml_escape

from highlight_svg.config import CORNER_RADIUS, LINE_HEIGHT, STYLED_CATEGORIES
from highlight_svg.models import RenderRequest, ResolvedTheme

SVG_NS = "http://www.w3.org/2000/svg"
XHTML_NS = "http://www.w3.org/1999/xhtml"

_NEWLINE = re.compile(r"\r?\n")


def escape_xml(value: str) -> str:
    """Escape the five reserved XML characters for attribute context."""
    return _xml_escape(value, {'"': "&quot;", "'": "&apos;"})


def format_number(value: float) -> str:
    """Print integral values without a trailing ``.0``."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def count_lines(code: str) -> int:
    return len(_NEWLINE.split(code)) or 1


def compute_height(code: str, font_size: float, padding: float) -> int:
    return max(1, math.floor(count_lines(code) * font_size * LINE_HEIGHT + padding * 2))


def build_stylesheet(request: RenderRequest, theme: ResolvedTheme) -> str:
    rules = [
        f":root {{ color-scheme: {escape(theme.color_scheme)}; }}",
        f".code {{ font: {format_number(request.font_size)}px/{LINE_HEIGHT} "
        f"{escape(request.font_family)}; white-space: pre; }}",
    ]
    for category in STYLED_CATEGORIES:
        rules.append(f".token.{category}{{ color:{escape(getattr(theme, category))} }}")
    rules.append(f"body{{ margin:0; background:transparent; color:{escape(theme.foreground)} }}")
    body = "".join(f"\n      {rule}" for rule in rules)
    return f"\n    <style>{body}\n    </style>\n  "


def embed_markup(markup: str, request: RenderRequest, theme: ResolvedTheme) -> str:
    style = build_stylesheet(request, theme)
    language = escape(request.language)
    return (
        f'<div xmlns="{XHTML_NS}">{style}'
        f'<pre class="code language-{language}">{markup}</pre></div>'
    )


def render_svg(request: RenderRequest, theme: ResolvedTheme, markup: str) -> str:
    """Build the complete SVG text.

    The canvas is ``request.width`` wide and tall enough for every line
    at ``LINE_HEIGHT``. The highlighted block sits in a foreignObject
    inset by ``padding`` on each side.
    """
    width = request.width
    padding = request.padding
    height = compute_height(request.code, request.font_size, padding)

    w = format_number(width)
    h = format_number(height)
    p = format_number(padding)
    inner_w = format_number(width - padding * 2)
    inner_h = format_number(height - padding * 2)

    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<svg xmlns="{SVG_NS}" width="{w}" height="{h}" viewBox="0 0 {w} {h}">',
        f'  <rect x="0" y="0" width="100%" height="100%" rx="{CORNER_RADIUS}" ry="{CORNER_RADIUS}" '
        f'fill="{escape_xml(theme.background)}" />',
        f'  <foreignObject x="{p}" y="{p}" width="{inner_w}" height="{inner_h}">',
        f"    {embed_markup(markup, request, theme)}",
        "  </foreignObject>",
        "</svg>",
    ]
    return "\n".join(lines)
