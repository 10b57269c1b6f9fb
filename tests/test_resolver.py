# tests/test_resolver.py
"""
Unit tests for TermResolver: term dispatch, positional cross-references and
fail-soft behaviour on dangling or missing data.
"""

import pytest

from grammaticus import Renderer, TermStore, TermStoreBuilder
from grammaticus.core.domain.models import parse_body, parse_term
from grammaticus.core.resolver import item_at
from grammaticus.morphology import DefaultAgreementRules, EnglishAgreementRules


class RecordingRules(DefaultAgreementRules):
    """Default rules that remember what modifier_form was asked."""

    def __init__(self, locale="en", **kwargs):
        super().__init__(locale, **kwargs)
        self.calls = []

    def modifier_form(self, term_type, term_form, noun_form, noun, next_term):
        self.calls.append((term_type, term_form, noun_form, noun, next_term))
        return term_form


@pytest.fixture
def recording(english_store):
    rules = RecordingRules()
    return Renderer(english_store, rules), rules


def _render(renderer, raw_body, nouns=None, args=None):
    return renderer.render_body(parse_body(raw_body), nouns, args)


def test_next_term_equal_to_associated_noun_passes_the_noun(recording, english_store) -> None:
    renderer, rules = recording
    body = [{"t": "d", "l": "a", "f": "0-v", "an": 1, "nt": 1}, {"t": "n", "l": "account", "f": "0"}]
    assert _render(renderer, body) == "anaccount"

    _, term_form, noun_form, noun, next_term = rules.calls[0]
    account = english_store.lookup_part("n", "account")
    assert term_form == "0-v"
    assert noun_form == "0"
    assert noun is account
    assert next_term is account


def test_next_term_can_be_another_modifier(recording, english_store) -> None:
    renderer, rules = recording
    body = [
        {"t": "d", "l": "a", "f": "0-c", "an": 2, "nt": 1},
        {"t": "a", "l": "new", "f": "0", "an": 2, "nt": 2},
        {"t": "n", "l": "account", "f": "0"},
    ]
    _render(renderer, body)
    assert rules.calls[0][4] is english_store.lookup_part("a", "new")


def test_dangling_next_term_falls_back_to_noun(recording, english_store) -> None:
    renderer, rules = recording
    body = [{"t": "d", "l": "a", "f": "0-c", "an": 1, "nt": 9}, {"t": "n", "l": "account", "f": "0"}]
    _render(renderer, body)
    assert rules.calls[0][4] is english_store.lookup_part("n", "account")


def test_dangling_associated_noun_renders_empty(recording) -> None:
    renderer, rules = recording
    body = ["[", {"t": "d", "l": "a", "f": "0-c", "an": 7, "nt": 7}, "]"]
    assert _render(renderer, body) == "[]"
    assert rules.calls == []


def test_associated_null_segment_renders_empty(recording) -> None:
    renderer, _ = recording
    body = [{"t": "d", "l": "a", "f": "0-c", "an": 1, "nt": 1}, None, "!"]
    assert _render(renderer, body) == "!"


def test_modifier_uses_dynamic_noun(english_store) -> None:
    renderer = Renderer(english_store, EnglishAgreementRules("en"))
    body = [{"t": "d", "l": "a", "f": "0-c", "an": 2, "nt": 2}, " ", {"t": "n", "l": "task", "f": "0", "i": 0}]
    assert _render(renderer, body, nouns=["opportunity"]) == "an opportunity"


def test_modifier_with_unknown_noun_still_renders(english_store) -> None:
    """Without a noun the next term's class defaults to consonant."""
    renderer = Renderer(english_store, EnglishAgreementRules("en"))
    body = [{"t": "d", "l": "a", "f": "0-v", "an": 2, "nt": 2}, " ", {"t": "n", "l": "task", "f": "0", "i": 0}]
    assert _render(renderer, body, nouns=["unknown"]) == "a "


def test_modifier_capitalize_flag(english_store) -> None:
    renderer = Renderer(english_store, EnglishAgreementRules("en"))
    body = [{"t": "d", "l": "a", "f": "0-c", "an": 2, "nt": 2, "c": True}, " ", {"t": "n", "l": "task", "f": "0"}]
    assert _render(renderer, body) == "A task"


def test_modifier_without_table_renders_empty() -> None:
    store = TermStoreBuilder().add_terms({"n": {"task": {"l": "task", "v": {"0": "Task"}}}}).build()
    renderer = Renderer(store, EnglishAgreementRules("en"))
    body = [{"t": "d", "l": "a", "f": "0-c", "an": 2, "nt": 2}, "|", {"t": "n", "l": "task", "f": "0"}]
    assert _render(renderer, body) == "|task"


def test_unknown_modifier_or_form_renders_empty(english_store) -> None:
    renderer = Renderer(english_store, DefaultAgreementRules("en"))
    unknown = [{"t": "a", "l": "shiny", "f": "0", "an": 1, "nt": 1}, {"t": "n", "l": "task", "f": "0"}]
    bad_form = [{"t": "a", "l": "new", "f": "9", "an": 1, "nt": 1}, {"t": "n", "l": "task", "f": "0"}]
    assert _render(renderer, unknown) == "task"
    assert _render(renderer, bad_form) == "task"


def test_noun_with_unknown_form_renders_empty(english) -> None:
    body = ["<", {"t": "n", "l": "account", "f": "7"}, ">"]
    assert _render(english, body) == "<>"


def test_noun_dynamic_index_zero_is_used(english) -> None:
    body = [{"t": "n", "l": "account", "f": "0", "i": 0, "c": True}]
    assert _render(english, body, nouns=["task"]) == "Task"


def test_non_string_noun_argument_renders_empty(english) -> None:
    body = [{"t": "n", "l": "account", "f": "0", "i": 0}, "."]
    assert _render(english, body, nouns=[42]) == "."


def test_gender_phrase_falls_back_to_default(french) -> None:
    body = [{"t": "n", "l": "compte", "f": "0", "i": 0}, {"t": "g", "an": 0, "def": "/d", "v": {"x": "/x"}}]
    assert _render(french, body, nouns=["opportunite"]) == "opportunité/d"


def test_null_gender_variant_uses_default(french) -> None:
    """A variant written as null is absent, not an empty phrase."""
    body = [{"t": "n", "l": "tache", "f": "0"}, {"t": "g", "an": 0, "def": "DEFAULT", "v": {"f": None}}]
    assert _render(french, body) == "tâcheDEFAULT"


def test_gender_phrase_with_dangling_noun_uses_default(french) -> None:
    assert _render(french, [{"t": "g", "an": 4, "def": "default", "v": {"m": "masc"}}]) == "default"


def test_nested_phrase_resolves_terms_against_its_own_segments(french) -> None:
    nested = [
        {"t": "a", "l": "nouveau", "f": "0-m-c", "an": 2, "nt": 2},
        " ",
        {"t": "n", "l": "tache", "f": "0"},
    ]
    body = [
        {"t": "n", "l": "compte", "f": "0", "i": 0},
        " ",
        {"t": "g", "an": 0, "def": "?", "v": {"f": nested}},
    ]
    assert _render(french, body, nouns=["opportunite"]) == "opportunité nouvelle tâche"
    assert _render(french, body, nouns=["compte"]) == "compte ?"


def test_plural_with_dangling_index_uses_classifier_on_nothing(english) -> None:
    body = [{"t": "p", "i": 3, "def": "d", "v": {"other": "many", "one": "one"}}]
    assert _render(english, body, args=[1]) == "many"


def test_null_plural_variant_uses_default(english) -> None:
    body = [{"t": "p", "i": 0, "def": "DEFAULT", "v": {"one": None, "zero": None, "other": "some"}}]
    assert _render(english, body, args=[1]) == "DEFAULT"
    assert _render(english, body, args=[0]) == "some"
    assert _render(english, body, args=[2]) == "some"


def test_plural_with_string_keyed_arguments(english) -> None:
    body = [{"t": "p", "i": 0, "def": "d", "v": {"one": "ONE", "other": "OTHER"}}]
    assert _render(english, body, args={"0": 1}) == "ONE"
    assert _render(english, body, args={0: 1}) == "ONE"
    assert _render(english, body, args={"0": 4}) == "OTHER"


def test_plural_explicit_zero_only_for_exact_zero(english) -> None:
    body = [{"t": "p", "i": 0, "def": "d", "v": {"zero": "none", "other": "some"}}]
    assert _render(english, body, args=[0]) == "none"
    assert _render(english, body, args=[0.0]) == "none"
    assert _render(english, body, args=[0.5]) == "some"
    assert _render(english, body, args=[False]) == "some"


def test_counter_without_noun_uses_language_default(japanese) -> None:
    assert _render(japanese, [{"t": "c", "an": 5}]) == "つ"


def test_counter_in_language_without_counters(english) -> None:
    body = ["1", {"t": "c", "an": 3}, " ", {"t": "n", "l": "account", "f": "0"}]
    assert _render(english, body) == "1 account"


def test_resolver_never_returns_none(english) -> None:
    term = parse_term({"t": "n", "l": "nothing", "f": "0"})
    assert english.resolver.resolve(term, None, None, [term]) == ""


@pytest.mark.parametrize(
    "values, index, expected",
    [
        (["a", "b"], 1, "b"),
        (["a", "b"], 2, None),
        (["a", "b"], -1, None),
        (["a"], None, None),
        (None, 0, None),
        ({0: "x"}, 0, "x"),
        ({"0": "x"}, 0, "x"),
        ({0: "int", "0": "str"}, 0, "int"),
        ({"1": "x"}, 0, None),
        ("abc", 0, None),
        (42, 0, None),
    ],
)
def test_item_at(values, index, expected) -> None:
    assert item_at(values, index) == expected


def test_store_is_shared_between_renderers(english_store) -> None:
    first = Renderer(english_store, EnglishAgreementRules("en"))
    second = Renderer(english_store, EnglishAgreementRules("en", dont_capitalize=True))
    assert first.render("Sample.hello", nouns=["world"]) == "Hello, world!"
    assert second.render("Sample.hello", nouns=["world"]) == "Hello, World!"
    assert isinstance(english_store, TermStore)
