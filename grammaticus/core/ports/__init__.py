"""
Core Ports (Interfaces).

The term resolver does not know any language. Everything that varies per
language (which inflection form a modifier takes, whether nouns are
lowercased, the default counter word, how numbers map to plural categories)
is supplied through the AgreementRules port. Implementations live in
`grammaticus.morphology`.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from grammaticus.core.domain.models import GrammaticalPart, Noun, TermType


class AgreementRules(ABC):
    """
    Port for language-specific agreement behaviour.

    Attributes:
        locale: The locale string the rules were built for (e.g. 'fr', 'pt_BR').
        dont_capitalize: True for scripts without letter case; disables all
            lowercasing of nouns and modifiers.
    """

    locale: str = ""
    dont_capitalize: bool = False

    @abstractmethod
    def lowercase_noun(self, value: str, form: Optional[str]) -> str:
        """Lowercase a noun surface form used mid-sentence."""
        pass

    @abstractmethod
    def lowercase_modifier(self, value: str, form: Optional[str]) -> str:
        """Lowercase an adjective or article surface form used mid-sentence."""
        pass

    @abstractmethod
    def modifier_form(
        self,
        term_type: TermType,
        term_form: Optional[str],
        noun_form: Optional[str],
        noun: Optional[Noun],
        next_term: Optional[GrammaticalPart],
    ) -> Optional[str]:
        """
        Compute the form key a modifier should be looked up with.

        Args:
            term_type: ADJECTIVE or ARTICLE.
            term_form: The form the label requested for the modifier.
            noun_form: The form the label requested for the associated noun.
            noun: The associated noun, if it resolved.
            next_term: The part that follows the modifier in the sentence
                (the noun itself when the modifier directly precedes it).
        """
        pass

    @abstractmethod
    def default_counter_word(self) -> str:
        """Counter word used when a noun does not define one."""
        pass

    @abstractmethod
    def plural_category(self, value: Any) -> str:
        """Classify a number into 'zero', 'one', 'two', 'few', 'many' or 'other'."""
        pass
