# grammaticus/core/resolver.py
"""
Term resolution.

A label body is a list of literal strings and term references. The resolver
turns one term reference into text. Modifier, gender and counter terms do
not carry noun data themselves: they point at another term of the same body
(`associated_noun`, `next_term` are list positions), and that term resolves,
statically by name or dynamically through the caller's noun arguments, to a
Noun in the store.

Every handler is fail-soft: a missing noun, form, table or dangling position
yields "" for that term only, so the rest of the label still renders.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Callable, Dict, Mapping, Optional, Sequence

from grammaticus.adapters.persistence.term_store import TermStore
from grammaticus.core.domain.models import (
    CounterRef,
    GenderRef,
    GrammaticalPart,
    LabelBody,
    ModifierRef,
    Noun,
    NounRef,
    PluralRef,
    TermReference,
    TermType,
)
from grammaticus.core.ports import AgreementRules

BodyRenderer = Callable[[LabelBody, Optional[Sequence[str]], Any], str]

ZERO_CATEGORY = "zero"


def item_at(values: Any, index: Optional[int]) -> Any:
    """
    Positional access that never raises: lists by index, mappings by key.

    Mappings decoded from JSON carry string keys ("0"), so the string form
    of the index is tried after the integer.
    """
    if values is None or index is None:
        return None
    if isinstance(values, Mapping):
        if index in values:
            return values[index]
        return values.get(str(index))
    if isinstance(values, (str, bytes)) or not isinstance(values, Sequence):
        return None
    if 0 <= index < len(values):
        return values[index]
    return None


def _is_exact_zero(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    return isinstance(value, (int, float, Decimal)) and value == 0


class TermResolver:
    """
    Resolves term references against a TermStore using a language's AgreementRules.

    `render_body` renders nested bodies (gender and plural variants); the
    Renderer passes its own render_body here.
    """

    def __init__(self, store: TermStore, rules: AgreementRules, render_body: BodyRenderer):
        self.store = store
        self.rules = rules
        self._render_body = render_body
        self._handlers: Dict[type, Callable[..., Optional[str]]] = {
            NounRef: self._resolve_noun,
            ModifierRef: self._resolve_modifier,
            GenderRef: self._resolve_gender,
            PluralRef: self._resolve_plural,
            CounterRef: self._resolve_counter,
        }

    def resolve(
        self,
        term: TermReference,
        nouns: Optional[Sequence[str]],
        args: Any,
        term_list: Sequence[Any],
    ) -> str:
        handler = self._handlers.get(type(term))
        if handler is None:
            return ""
        value = handler(term, nouns, args, term_list)
        # Never leak None into the output
        if not value:
            return ""
        return value

    # ------------------------------------------------------------------
    # Noun lookup shared by all handlers
    # ------------------------------------------------------------------

    def _noun_name(self, ref: TermReference, nouns: Optional[Sequence[str]]) -> Optional[str]:
        index = getattr(ref, "index", None)
        if index is not None and nouns is not None:
            name = item_at(nouns, index)
        else:
            name = getattr(ref, "name", None)
        if not isinstance(name, str) or not name:
            return None
        return name

    def _noun_for(self, ref: Any, nouns: Optional[Sequence[str]]) -> Optional[Noun]:
        if not isinstance(ref, TermReference):
            return None
        name = self._noun_name(ref, nouns)
        if name is None:
            return None
        return self.store.lookup_part(TermType.NOUN, name)

    def _part_for(self, ref: Any, nouns: Optional[Sequence[str]]) -> Optional[GrammaticalPart]:
        if isinstance(ref, NounRef):
            return self._noun_for(ref, nouns)
        if isinstance(ref, ModifierRef):
            return self.store.lookup_part(ref.term_type, ref.name)
        return None

    # ------------------------------------------------------------------
    # Handlers
    # ------------------------------------------------------------------

    def _resolve_noun(self, term: NounRef, nouns, args, term_list) -> Optional[str]:
        noun = self._noun_for(term, nouns)
        if noun is None:
            return None

        value = noun.form(term.form)
        if value and not term.capitalize:
            value = self.rules.lowercase_noun(value, term.form)
        return value

    def _resolve_modifier(self, term: ModifierRef, nouns, args, term_list) -> Optional[str]:
        associated = item_at(term_list, term.associated_noun)
        if associated is None:
            # No agreement target at all
            return None

        noun = self._noun_for(associated, nouns)

        if term.next_term == term.associated_noun:
            next_part = noun
        else:
            next_ref = item_at(term_list, term.next_term)
            next_part = self._part_for(next_ref, nouns) if next_ref is not None else noun

        form = self.rules.modifier_form(
            term.term_type,
            term.form,
            getattr(associated, "form", None),
            noun,
            next_part,
        )

        if not self.store.has_part_type(term.term_type):
            return None
        modifier = self.store.lookup_part(term.term_type, term.name)
        if modifier is None:
            return None

        value = modifier.form(form)
        # Not 100% correct for every language; matches the compiled labels.
        if value and not term.capitalize:
            value = self.rules.lowercase_modifier(value, form)
        return value

    def _resolve_gender(self, term: GenderRef, nouns, args, term_list) -> str:
        associated = item_at(term_list, term.associated_noun)
        noun = self._noun_for(associated, nouns) if associated is not None else None

        body = None
        if noun is not None:
            gender = getattr(noun, "gender", None)
            if gender is not None:
                body = term.forms.get(gender)
        if body is None:
            body = term.default
        return self._render_body(body, nouns, args)

    def _resolve_plural(self, term: PluralRef, nouns, args, term_list) -> str:
        value = item_at(args, term.index)

        if _is_exact_zero(value) and ZERO_CATEGORY in term.forms:
            body = term.forms[ZERO_CATEGORY]
        else:
            body = term.forms.get(self.rules.plural_category(value))
        if body is None:
            body = term.default
        return self._render_body(body, nouns, args)

    def _resolve_counter(self, term: CounterRef, nouns, args, term_list) -> str:
        associated = item_at(term_list, term.associated_noun)
        noun = self._noun_for(associated, nouns) if associated is not None else None
        if noun is None:
            return self.rules.default_counter_word()
        return getattr(noun, "counter", None) or self.rules.default_counter_word()
