"""Tests for the grammar registry."""

from pygments.lexers import HtmlLexer, JavascriptLexer, PythonLexer

from highlight_svg.grammars import GrammarRegistry


def test_fallback_preloaded():
    reg = GrammarRegistry()
    assert reg.has_grammar("javascript")
    assert isinstance(reg.get("javascript"), JavascriptLexer)


def test_prism_ids_resolve_through_aliases():
    reg = GrammarRegistry()
    assert reg.has_grammar("markup")
    assert isinstance(reg.get("markup"), HtmlLexer)
    assert reg.try_load("svg")


def test_try_load_known_language():
    reg = GrammarRegistry()
    assert not reg.has_grammar("python")
    assert reg.try_load("python")
    assert reg.has_grammar("python")
    assert isinstance(reg.get("python"), PythonLexer)


def test_try_load_is_idempotent():
    reg = GrammarRegistry()
    assert reg.try_load("python")
    first = reg.get("python")
    assert reg.try_load("python")
    assert reg.get("python") is first


def test_unknown_language_does_not_raise():
    reg = GrammarRegistry()
    assert reg.try_load("not-a-real-language") is False
    assert not reg.has_grammar("not-a-real-language")


def test_failed_load_is_remembered(monkeypatch):
    reg = GrammarRegistry()
    assert reg.try_load("not-a-real-language") is False

    calls = []
    monkeypatch.setattr(
        "highlight_svg.grammars.find_lexer_class_by_name",
        lambda name: calls.append(name),
    )
    assert reg.try_load("not-a-real-language") is False
    assert calls == []


def test_lexers_keep_code_verbatim():
    reg = GrammarRegistry()
    lexer = reg.get("javascript")
    assert lexer.stripnl is False
    assert lexer.ensurenl is False


def test_broken_lexer_lookup_falls_back(monkeypatch):
    def broken(name):
        raise ValueError("broken lexer plugin")

    reg = GrammarRegistry()
    monkeypatch.setattr("highlight_svg.grammars.find_lexer_class_by_name", broken)
    assert reg.try_load("brokenlang") is False
    assert not reg.has_grammar("brokenlang")
    assert reg.has_grammar("javascript")


def test_lexer_constructor_error_is_swallowed(monkeypatch):
    class ExplodingLexer:
        def __init__(self, **options):
            raise TypeError("bad options")

    reg = GrammarRegistry()
    monkeypatch.setattr(
        "highlight_svg.grammars.find_lexer_class_by_name", lambda name: ExplodingLexer
    )
    assert reg.try_load("exploding") is False
    assert reg.try_load("exploding") is False
