"""Process-wide registry of Pygments lexers, keyed by language id."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Set

from pygments.lexer import Lexer
from pygments.lexers import find_lexer_class_by_name

from highlight_svg.config import FALLBACK_LANGUAGE, LANGUAGE_ALIASES, PRELOADED_LANGUAGES

logger = logging.getLogger(__name__)

# Tokenize the code exactly as given: no stripping, no appended newline.
LEXER_OPTIONS = {"stripnl": False, "ensurenl": False}


class GrammarRegistry:
    """Load-once cache of lexers.

    Entries are only ever added. Ids that failed to load are remembered
    so a repeated request gives the same answer without another lookup.
    """

    def __init__(self, preload: Iterable[str] = PRELOADED_LANGUAGES):
        self._lexers: Dict[str, Lexer] = {}
        self._failed: Set[str] = set()
        for language in preload:
            self.try_load(language)
        if not self.has_grammar(FALLBACK_LANGUAGE) and not self.try_load(FALLBACK_LANGUAGE):
            raise RuntimeError(f"fallback grammar {FALLBACK_LANGUAGE!r} is not available")

    def has_grammar(self, language: str) -> bool:
        return language in self._lexers

    def try_load(self, language: str) -> bool:
        """Register the lexer for ``language``; return whether one is available."""
        if language in self._lexers:
            return True
        if language in self._failed:
            return False
        name = LANGUAGE_ALIASES.get(language, language)
        try:
            lexer_cls = find_lexer_class_by_name(name)
            self._lexers[language] = lexer_cls(**LEXER_OPTIONS)
        except Exception as exc:
            logger.debug("No grammar for %r: %s", language, exc)
            self._failed.add(language)
            return False
        logger.debug("Loaded grammar %r (%s)", language, lexer_cls.__name__)
        return True

    def get(self, language: str) -> Lexer:
        return self._lexers[language]
