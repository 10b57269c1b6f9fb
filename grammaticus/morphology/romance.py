"""
ROMANCE AGREEMENT RULES
-----------------------

Modifier form selection for Romance languages (es, pt, it, fr, ca, rm, ro).

Modifier form keys written by the label compiler:

    es/pt/it   "<number>-<gender>"                 e.g. "0-m", "1-f"
    fr/ca/rm   "<number>-<gender>-<startsWith>"    e.g. "0-f-v"
    ro         "<gender><rest>"                    e.g. "f-n-0"

The label records the form for the noun it was written against. When the
noun is renamed at runtime (a masculine noun replaced by a feminine one, or
a consonant-initial one by a vowel-initial one) the key is rebuilt from the
actual noun:

    rules = FrenchAgreementRules("fr")
    rules.modifier_form(TermType.ARTICLE, "0-m-c", "0", ecole, ecole)
    # ecole is feminine and vowel-initial -> "0-f-v" (l'école)

When the noun's gender is unknown, the requested form is kept.
"""

from __future__ import annotations

from typing import Optional

from grammaticus.core.domain.models import GrammaticalPart, Noun, TermType
from grammaticus.morphology.defaults import DefaultAgreementRules, gender_of, starts_with_of


class RomanceAgreementRules(DefaultAgreementRules):
    """Number prefix + noun gender (Spanish, Portuguese, Italian)."""

    def modifier_form(
        self,
        term_type: TermType,
        term_form: Optional[str],
        noun_form: Optional[str],
        noun: Optional[Noun],
        next_term: Optional[GrammaticalPart],
    ) -> Optional[str]:
        gender = gender_of(noun)
        if term_form is None or gender is None:
            return term_form
        return term_form[:2] + gender


class FrenchAgreementRules(DefaultAgreementRules):
    """Number prefix + noun gender + starts-with of the following word (French, Catalan, Romansh)."""

    def modifier_form(
        self,
        term_type: TermType,
        term_form: Optional[str],
        noun_form: Optional[str],
        noun: Optional[Noun],
        next_term: Optional[GrammaticalPart],
    ) -> Optional[str]:
        gender = gender_of(noun)
        if term_form is None or gender is None:
            return term_form
        return term_form[:2] + gender + "-" + starts_with_of(next_term)


class GenderPrefixedAgreementRules(DefaultAgreementRules):
    """Noun gender replaces the first character of the form (Romanian, and Semitic languages)."""

    def modifier_form(
        self,
        term_type: TermType,
        term_form: Optional[str],
        noun_form: Optional[str],
        noun: Optional[Noun],
        next_term: Optional[GrammaticalPart],
    ) -> Optional[str]:
        gender = gender_of(noun)
        if not term_form or gender is None:
            return term_form
        return gender + term_form[1:]
