"""
morphology/germanic.py

Agreement rules for Germanic languages.

English
    Articles agree with the starts-with class of the word that follows
    them ("a new account" / "an account"). Article form keys are
    "<number>-<startsWith>", e.g. "0-c", "0-v", "1-c".

German
    Nouns keep their capital letter mid-sentence. Modifier form keys start
    with the gender ("m-0-a-n" = masculine, singular, accusative,
    after indefinite article), so a renamed noun of a different gender
    swaps the first character.
"""

from __future__ import annotations

from typing import Optional

from grammaticus.core.domain.models import GrammaticalPart, Noun, TermType
from grammaticus.morphology.defaults import DefaultAgreementRules, starts_with_of
from grammaticus.morphology.romance import GenderPrefixedAgreementRules


class EnglishAgreementRules(DefaultAgreementRules):

    def modifier_form(
        self,
        term_type: TermType,
        term_form: Optional[str],
        noun_form: Optional[str],
        noun: Optional[Noun],
        next_term: Optional[GrammaticalPart],
    ) -> Optional[str]:
        if term_type != TermType.ARTICLE or term_form is None:
            return term_form
        return term_form[:2] + starts_with_of(next_term)


class GermanAgreementRules(GenderPrefixedAgreementRules):

    def lowercase_noun(self, value: str, form: Optional[str]) -> str:
        # German capitalizes nouns even after an article
        return value
