"""
morphology/isolating.py

Agreement rules for languages without inflected modifiers.

* Scripts without letter case (Japanese, Chinese, Korean, Thai,
  Vietnamese, Tagalog) never lowercase.
* Classifier languages count with a counter word; nouns may define their
  own, otherwise the language default below is used.
* Korean particles agree with the ending of the preceding noun; the
  particle form key *is* the noun's ends-with class ("c", "v" or "s").
* Malay/Indonesian modifiers keep plural forms and otherwise agree with
  the starts-with class of the following word.
"""

from __future__ import annotations

from typing import Optional

from grammaticus.core.domain.models import GrammaticalPart, Noun, TermType
from grammaticus.morphology.defaults import DefaultAgreementRules, starts_with_of
from grammaticus.morphology.plurals import split_locale

# Keyed by language, or by "language_COUNTRY" where the script differs.
DEFAULT_COUNTER_WORDS = {
    "ja": "つ",
    "zh": "个",
    "zh_TW": "個",
    "zh_HK": "個",
    "ko": "개",
    "vi": "cái",
    "bn": "টা",
    "ms": "buah",
    "in": "buah",
    "id": "buah",
}

UNCASED_LANGUAGES = frozenset({"ja", "zh", "ko", "th", "vi", "tl"})

_PLURAL_PREFIX = "1"
_SINGULAR_PREFIX = "0-"


def default_counter_word_for(locale: Optional[str]) -> str:
    language, country = split_locale(locale)
    if country and f"{language}_{country}" in DEFAULT_COUNTER_WORDS:
        return DEFAULT_COUNTER_WORDS[f"{language}_{country}"]
    return DEFAULT_COUNTER_WORDS.get(language, "")


class IsolatingAgreementRules(DefaultAgreementRules):
    """Uncased, uninflected languages, optionally with classifiers."""

    dont_capitalize = True

    def __init__(self, locale: str = "", **kwargs) -> None:
        kwargs.setdefault("counter_word", default_counter_word_for(locale))
        super().__init__(locale, **kwargs)


class KoreanAgreementRules(IsolatingAgreementRules):

    def modifier_form(
        self,
        term_type: TermType,
        term_form: Optional[str],
        noun_form: Optional[str],
        noun: Optional[Noun],
        next_term: Optional[GrammaticalPart],
    ) -> Optional[str]:
        return starts_with_of(next_term)


class MalayoPolynesianAgreementRules(DefaultAgreementRules):

    def __init__(self, locale: str = "", **kwargs) -> None:
        kwargs.setdefault("counter_word", default_counter_word_for(locale))
        super().__init__(locale, **kwargs)

    def modifier_form(
        self,
        term_type: TermType,
        term_form: Optional[str],
        noun_form: Optional[str],
        noun: Optional[Noun],
        next_term: Optional[GrammaticalPart],
    ) -> Optional[str]:
        if term_form and term_form.startswith(_PLURAL_PREFIX):
            return term_form
        return _SINGULAR_PREFIX + starts_with_of(next_term)
