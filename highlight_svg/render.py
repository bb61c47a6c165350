"""End-to-end pipeline: parameters in, SVG text out."""

from __future__ import annotations

from typing import Any, Mapping

from highlight_svg.grammars import GrammarRegistry
from highlight_svg.params import resolve_request, resolve_theme
from highlight_svg.svg import render_svg
from highlight_svg.tokenizer import select_lexer, tokenize


def render_highlighted_svg(raw: Mapping[str, Any], registry: GrammarRegistry) -> str:
    request = resolve_request(raw)
    theme = resolve_theme(request)
    registry.try_load(request.language)
    markup = tokenize(request.code, select_lexer(registry, request.language))
    return render_svg(request, theme, markup)
