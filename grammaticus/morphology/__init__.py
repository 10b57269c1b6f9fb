"""
Per-language agreement rules.

`rules_for_locale` is the single entry point used by the renderer factory:

    from grammaticus.morphology import rules_for_locale

    rules = rules_for_locale("fr_CA")   # FrenchAgreementRules(locale='fr_CA')
"""

from __future__ import annotations

from typing import Dict, Optional, Type

from grammaticus.morphology.defaults import DefaultAgreementRules
from grammaticus.morphology.germanic import EnglishAgreementRules, GermanAgreementRules
from grammaticus.morphology.isolating import (
    UNCASED_LANGUAGES,
    IsolatingAgreementRules,
    KoreanAgreementRules,
    MalayoPolynesianAgreementRules,
    default_counter_word_for,
)
from grammaticus.morphology.plurals import plural_rule_for, split_locale
from grammaticus.morphology.romance import (
    FrenchAgreementRules,
    GenderPrefixedAgreementRules,
    RomanceAgreementRules,
)
from grammaticus.shared.config import settings

RULES_BY_LANGUAGE: Dict[str, Type[DefaultAgreementRules]] = {
    "en": EnglishAgreementRules,
    "de": GermanAgreementRules,
    "es": RomanceAgreementRules,
    "pt": RomanceAgreementRules,
    "it": RomanceAgreementRules,
    "fr": FrenchAgreementRules,
    "ca": FrenchAgreementRules,
    "rm": FrenchAgreementRules,
    "ro": GenderPrefixedAgreementRules,
    "iw": GenderPrefixedAgreementRules,
    "he": GenderPrefixedAgreementRules,
    "ko": KoreanAgreementRules,
    "in": MalayoPolynesianAgreementRules,
    "id": MalayoPolynesianAgreementRules,
    "ms": MalayoPolynesianAgreementRules,
}

for _language in UNCASED_LANGUAGES:
    RULES_BY_LANGUAGE.setdefault(_language, IsolatingAgreementRules)


def rules_for_locale(locale: Optional[str] = None) -> DefaultAgreementRules:
    """
    Build the agreement rules for a locale ('fr', 'pt_BR', 'zh-TW', ...).

    Unknown languages get DefaultAgreementRules, which still classifies
    plurals when a rule exists for the language. settings.DONT_CAPITALIZE,
    when set, overrides the per-language lowercasing policy.
    """
    locale = locale or settings.DEFAULT_LOCALE
    language, _ = split_locale(locale)
    rules_cls = RULES_BY_LANGUAGE.get(language, DefaultAgreementRules)

    kwargs = {}
    if settings.DONT_CAPITALIZE is not None:
        kwargs["dont_capitalize"] = settings.DONT_CAPITALIZE
    if rules_cls is DefaultAgreementRules:
        kwargs["counter_word"] = default_counter_word_for(locale)
    return rules_cls(locale, **kwargs)


__all__ = [
    "DefaultAgreementRules",
    "EnglishAgreementRules",
    "FrenchAgreementRules",
    "GenderPrefixedAgreementRules",
    "GermanAgreementRules",
    "IsolatingAgreementRules",
    "KoreanAgreementRules",
    "MalayoPolynesianAgreementRules",
    "RULES_BY_LANGUAGE",
    "RomanceAgreementRules",
    "plural_rule_for",
    "rules_for_locale",
]
