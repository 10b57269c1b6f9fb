# grammaticus/core/use_cases/render_label.py
import re
from typing import Any, Mapping, Optional, Sequence

from grammaticus.adapters.persistence.term_store import TermStore
from grammaticus.core.domain.models import LabelBody, TermReference
from grammaticus.core.ports import AgreementRules
from grammaticus.core.resolver import TermResolver
from grammaticus.morphology import rules_for_locale
from grammaticus.shared.config import settings

_PLACEHOLDER_RE = re.compile(r"\{([0-9]+)\}")


def _format_value(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_args(text: str, args: Any) -> str:
    """
    Replace {N} placeholders with args[N].

    `args` may be a sequence or a mapping keyed by int or by the int's
    string form (maps decoded from JSON). A sequence-valued argument
    contributes its first element (older runtimes passed every argument
    wrapped in a one-element array). Placeholders without a
    matching argument are left as written.
    """
    if args is None or "{" not in text:
        return text

    def _substitute(match: "re.Match[str]") -> str:
        index = int(match.group(1))
        if isinstance(args, Mapping):
            if index in args:
                value = args[index]
            elif str(index) in args:
                value = args[str(index)]
            else:
                return match.group(0)
        elif isinstance(args, Sequence) and not isinstance(args, (str, bytes)):
            if index >= len(args):
                return match.group(0)
            value = args[index]
        else:
            return match.group(0)

        if isinstance(value, (list, tuple)):
            value = value[0] if value else None
        return _format_value(value)

    return _PLACEHOLDER_RE.sub(_substitute, text)


class Renderer:
    """
    Use Case: Renders a label of a compiled bundle into text.

    Responsibilities:
    1. Looks up the label body in the TermStore.
    2. Walks the body, delegating each term reference to the TermResolver.
    3. Substitutes positional {N} arguments into the assembled string.

    Rendering never raises for missing data: unknown or empty labels render
    as the MISSING sentinel and unresolvable terms as "".
    """

    def __init__(self, store: TermStore, rules: AgreementRules, missing: Optional[str] = None):
        self.store = store
        self.rules = rules
        self.missing = settings.MISSING_LABEL if missing is None else missing
        self.resolver = TermResolver(store, rules, self.render_body)

    @classmethod
    def for_locale(cls, store: TermStore, locale: Optional[str] = None) -> "Renderer":
        return cls(store, rules_for_locale(locale))

    @property
    def locale(self) -> str:
        return self.rules.locale

    def render_body(
        self,
        body: LabelBody,
        nouns: Optional[Sequence[str]] = None,
        args: Any = None,
    ) -> str:
        """Resolve every term of a body; strings are returned as they are."""
        if body is None:
            return ""
        if isinstance(body, str):
            return body
        if not isinstance(body, (list, tuple)):
            return str(body)

        out = []
        for segment in body:
            if isinstance(segment, str):
                out.append(segment)
            elif isinstance(segment, TermReference):
                out.append(self.resolver.resolve(segment, nouns, args, body))
        return "".join(out)

    def get_label(
        self,
        label_id: str,
        nouns: Optional[Sequence[str]] = None,
        args: Any = None,
    ) -> str:
        """Render a label's terms without the {N} substitution pass."""
        body = self.store.lookup_label(label_id, default=None)
        # Empty labels count as missing, like unknown ids.
        if not body:
            return self.missing
        return self.render_body(body, nouns, args)

    def render(
        self,
        label_id: str,
        nouns: Optional[Sequence[str]] = None,
        args: Any = None,
    ) -> str:
        """Render a label completely: terms first, then {N} arguments."""
        return format_args(self.get_label(label_id, nouns, args), args)
