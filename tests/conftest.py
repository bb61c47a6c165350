"""Shared test fixtures."""

from __future__ import annotations

import pytest
from pygments.lexers import get_lexer_by_name

from highlight_svg.grammars import LEXER_OPTIONS, GrammarRegistry

THREE_LINES = "const a = 1;\nconst b = 2;\nconst c = a + b;"

PYTHON_SNIPPET = "def greet(name):\n    # say hi\n    return 'hi ' + name\n"


class FakeRegistry:
    """Registry that reports only the given languages as present."""

    def __init__(self, present=("javascript",)):
        self._lexers = {name: get_lexer_by_name(name, **LEXER_OPTIONS) for name in present}
        self.load_attempts = []

    def has_grammar(self, language):
        return language in self._lexers

    def try_load(self, language):
        self.load_attempts.append(language)
        return language in self._lexers

    def get(self, language):
        return self._lexers[language]


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def registry() -> GrammarRegistry:
    return GrammarRegistry()


@pytest.fixture
def fake_registry() -> FakeRegistry:
    return FakeRegistry()
