"""Pygments adapter producing category-tagged HTML."""

from __future__ import annotations

from html import escape
from typing import Optional

from pygments import highlight
from pygments.formatter import Formatter
from pygments.lexer import Lexer
from pygments.token import (
    Comment,
    Generic,
    Keyword,
    Name,
    Number,
    Operator,
    Punctuation,
    String,
)

from highlight_svg.config import FALLBACK_LANGUAGE
from highlight_svg.grammars import GrammarRegistry

# First match wins; subtypes match their ancestors.
TOKEN_CATEGORIES = (
    (Comment, "comment"),
    (String, "string"),
    (Keyword, "keyword"),
    (Name.Function, "function"),
    (Number, "number"),
    (Operator, "operator"),
    (Punctuation, "punctuation"),
    (Name.Builtin, "builtin"),
    (Name.Class, "class-name"),
    (Name.Tag, "tag"),
    (Name.Attribute, "attr-name"),
    (Name.Variable, "variable"),
    (Generic.Inserted, "inserted"),
    (Generic.Deleted, "deleted"),
)


def category_for(ttype) -> Optional[str]:
    for parent, category in TOKEN_CATEGORIES:
        if ttype in parent:
            return category
    return None


class TokenClassFormatter(Formatter):
    """Wrap each categorized token in ``<span class="token CATEGORY">``."""

    name = "Token class HTML"
    aliases = ["tokenclass"]

    def format(self, tokensource, outfile):
        for ttype, value in tokensource:
            text = escape(value, quote=False)
            category = category_for(ttype)
            if category:
                outfile.write(f'<span class="token {category}">{text}</span>')
            else:
                outfile.write(text)


def select_lexer(registry: GrammarRegistry, language: str) -> Lexer:
    if registry.has_grammar(language):
        return registry.get(language)
    return registry.get(FALLBACK_LANGUAGE)


def tokenize(code: str, lexer: Lexer) -> str:
    """Return ``code`` as HTML with syntax spans tagged by category."""
    return highlight(code, lexer, TokenClassFormatter())
