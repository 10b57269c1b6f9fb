"""
morphology/defaults.py

Baseline agreement rules shared by every language.

* Modifier forms are used exactly as the label requested them.
* Nouns and modifiers are lowercased when used mid-sentence, unless the
  language has no letter case (dont_capitalize).
* There is no counter word.
* Plural categories come from the plural-rule table for the locale.

Language families subclass this and override only what differs.
"""

from __future__ import annotations

from typing import Any, Optional

from grammaticus.core.domain.models import GrammaticalPart, Noun, TermType
from grammaticus.core.ports import AgreementRules
from grammaticus.morphology.plurals import plural_rule_for

# Phonetic class used when the following term does not declare one.
CONSONANT = "c"
VOWEL = "v"


def starts_with_of(part: Optional[GrammaticalPart]) -> str:
    if part is None or not part.starts_with:
        return CONSONANT
    return part.starts_with


def gender_of(noun: Optional[Noun]) -> Optional[str]:
    return getattr(noun, "gender", None) or None


class DefaultAgreementRules(AgreementRules):
    dont_capitalize = False
    counter_word = ""

    def __init__(
        self,
        locale: str = "",
        *,
        dont_capitalize: Optional[bool] = None,
        counter_word: Optional[str] = None,
    ) -> None:
        self.locale = locale or ""
        if dont_capitalize is not None:
            self.dont_capitalize = dont_capitalize
        if counter_word is not None:
            self.counter_word = counter_word
        self._plural_rule = plural_rule_for(self.locale)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(locale={self.locale!r})"

    def lowercase_noun(self, value: str, form: Optional[str]) -> str:
        return value if self.dont_capitalize else value.lower()

    def lowercase_modifier(self, value: str, form: Optional[str]) -> str:
        return value if self.dont_capitalize else value.lower()

    def modifier_form(
        self,
        term_type: TermType,
        term_form: Optional[str],
        noun_form: Optional[str],
        noun: Optional[Noun],
        next_term: Optional[GrammaticalPart],
    ) -> Optional[str]:
        return term_form

    def default_counter_word(self) -> str:
        return self.counter_word

    def plural_category(self, value: Any) -> str:
        return self._plural_rule(value)
