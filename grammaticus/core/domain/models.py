# grammaticus/core/domain/models.py
"""
Domain models for compiled label bundles.

The offline label compiler emits a compact JSON representation. Every model
below maps 1:1 onto that representation, using the compiler's single-letter
keys as field aliases so that a bundle can be ingested without translation:

    Noun part:       {"t": "n", "l": "account", "g": "m", "s": "v", "c": "件",
                      "v": {"0-n": "Account", "1-n": "Accounts"}}
    Modifier part:   {"t": "a", "l": "new", "s": "c", "v": {"m-0-n-n": "Neuer"}}

    Noun ref:        {"t": "n", "l": "account", "f": "0-a", "c": false, "i": 0}
    Modifier ref:    {"t": "d", "l": "a", "f": "0-c", "c": false, "an": 5, "nt": 3}
    Gender ref:      {"t": "g", "an": 1, "def": "...", "v": {"f": "..."}}
    Plural ref:      {"t": "p", "i": 0, "def": "...", "v": {"one": "..."}}
    Counter ref:     {"t": "c", "an": 1}

A label body is either a plain string or a list of segments, where each
segment is a literal string or a term reference. Gender and plural refs carry
nested bodies of the same shape.

Unknown term tags are rejected here, at ingestion time, with
InvalidTermError. Everything that survives ingestion is rendered fail-soft.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from grammaticus.core.domain.exceptions import InvalidTermError


class TermType(str, Enum):
    """Term type tags as written by the label compiler."""
    NOUN = "n"
    ADJECTIVE = "a"
    ARTICLE = "d"
    GENDER = "g"
    PLURAL = "p"
    COUNTER = "c"


MODIFIER_TYPES = frozenset({TermType.ADJECTIVE, TermType.ARTICLE})

# Tables whose keys are looked up case-insensitively.
KEYED_PART_TYPES = frozenset({TermType.NOUN, TermType.ADJECTIVE, TermType.ARTICLE})

# Returned by the renderer for unknown label ids.
MISSING = "MISSING"


class _WireModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


# -----------------------------
# Grammatical parts
# -----------------------------

class GrammaticalPart(_WireModel):
    """
    A dictionary entry: a table of inflected forms keyed by form id.

    `starts_with` is the phonetic class of the entry ("c" consonant, "v"
    vowel, or an ends-with class for Korean particles). Agreement rules read
    it from the term *following* a modifier to handle elision.
    """
    name: Optional[str] = Field(None, alias="l")
    forms: Dict[str, str] = Field(default_factory=dict, alias="v")
    starts_with: Optional[str] = Field(None, alias="s")

    def form(self, key: Optional[str]) -> Optional[str]:
        if key is None:
            return None
        return self.forms.get(key)


class Noun(GrammaticalPart):
    """A renameable noun. Carries the gender tag and counter word modifiers agree with."""
    gender: Optional[str] = Field(None, alias="g")
    counter: Optional[str] = Field(None, alias="c")


class Modifier(GrammaticalPart):
    """An adjective or article; only consumed through modifier agreement."""


# -----------------------------
# Term references
# -----------------------------

class TermReference(_WireModel):
    term_type: TermType = Field(..., alias="t")


class NounRef(TermReference):
    """
    Reference to a noun. Static when `index` is None (use `name`), dynamic
    otherwise (use the caller's noun argument at `index`; 0 is a valid index).
    """
    name: Optional[str] = Field(None, alias="l")
    form: Optional[str] = Field(None, alias="f")
    capitalize: bool = Field(False, alias="c")
    index: Optional[int] = Field(None, alias="i")

    @property
    def is_dynamic(self) -> bool:
        return self.index is not None


class ModifierRef(TermReference):
    """
    Reference to an adjective or article. `associated_noun` and `next_term`
    are positions in the enclosing body's segment list.
    """
    name: Optional[str] = Field(None, alias="l")
    form: Optional[str] = Field(None, alias="f")
    capitalize: bool = Field(False, alias="c")
    associated_noun: Optional[int] = Field(None, alias="an")
    next_term: Optional[int] = Field(None, alias="nt")


class GenderRef(TermReference):
    """Phrase chosen by the gender of the associated noun."""
    associated_noun: Optional[int] = Field(None, alias="an")
    default: Any = Field("", alias="def")
    forms: Dict[str, Any] = Field(default_factory=dict, alias="v")

    @field_validator("default", mode="before")
    @classmethod
    def _parse_default(cls, value: Any) -> Any:
        return parse_body(value)

    @field_validator("forms", mode="before")
    @classmethod
    def _parse_forms(cls, value: Any) -> Any:
        return _parse_body_map(value)


class PluralRef(TermReference):
    """Phrase chosen by the plural category of the argument at `index`."""
    index: Optional[int] = Field(None, alias="i")
    default: Any = Field("", alias="def")
    forms: Dict[str, Any] = Field(default_factory=dict, alias="v")

    @field_validator("default", mode="before")
    @classmethod
    def _parse_default(cls, value: Any) -> Any:
        return parse_body(value)

    @field_validator("forms", mode="before")
    @classmethod
    def _parse_forms(cls, value: Any) -> Any:
        return _parse_body_map(value)


class CounterRef(TermReference):
    """Counter word (classifier) of the associated noun."""
    associated_noun: Optional[int] = Field(None, alias="an")


Segment = Optional[Union[str, TermReference]]
LabelBody = Union[str, List[Segment]]

_TERM_MODELS = {
    TermType.NOUN: NounRef,
    TermType.ADJECTIVE: ModifierRef,
    TermType.ARTICLE: ModifierRef,
    TermType.GENDER: GenderRef,
    TermType.PLURAL: PluralRef,
    TermType.COUNTER: CounterRef,
}

_PART_MODELS = {
    TermType.NOUN: Noun,
    TermType.ADJECTIVE: Modifier,
    TermType.ARTICLE: Modifier,
}


# -----------------------------
# Ingestion
# -----------------------------

def coerce_term_type(tag: Any) -> TermType:
    """Map a raw tag to a TermType, raising InvalidTermError for unknown tags."""
    if isinstance(tag, TermType):
        return tag
    try:
        return TermType(tag)
    except ValueError:
        raise InvalidTermError(f"Unknown term type tag: {tag!r}", raw=tag) from None


def parse_term(raw: Any) -> TermReference:
    """Validate one compiled term reference into its variant model."""
    if isinstance(raw, TermReference):
        return raw
    if not isinstance(raw, Mapping):
        raise InvalidTermError(f"Term reference must be an object, got {type(raw).__name__}", raw=raw)

    term_type = coerce_term_type(raw.get("t"))
    try:
        return _TERM_MODELS[term_type].model_validate(raw)
    except ValidationError as e:
        raise InvalidTermError(f"Malformed '{term_type.value}' term: {e}", raw=raw) from e


def parse_body(raw: Any) -> LabelBody:
    """
    Validate a label body.

    Strings pass through, lists become segment lists (None segments are kept
    so that positional cross-references stay aligned), anything else is
    stringified.
    """
    if raw is None:
        return ""
    if isinstance(raw, str):
        return raw
    if isinstance(raw, (list, tuple)):
        segments: List[Segment] = []
        for part in raw:
            if part is None or isinstance(part, str):
                segments.append(part)
            else:
                segments.append(parse_term(part))
        return segments
    return str(raw)


def _parse_body_map(raw: Any) -> Dict[str, LabelBody]:
    if raw is None:
        return {}
    if not isinstance(raw, Mapping):
        raise InvalidTermError("Phrase variants must be an object", raw=raw)
    # A null variant means "no entry"; the default body applies.
    return {str(k): parse_body(v) for k, v in raw.items() if v is not None}


def parse_part(term_type: Any, raw: Any) -> GrammaticalPart:
    """Validate one dictionary entry for the given part table."""
    ttype = coerce_term_type(term_type)
    if isinstance(raw, GrammaticalPart):
        return raw
    if not isinstance(raw, Mapping):
        raise InvalidTermError(f"Part in table '{ttype.value}' must be an object", raw=raw)

    model = _PART_MODELS.get(ttype, GrammaticalPart)
    try:
        return model.model_validate(raw)
    except ValidationError as e:
        raise InvalidTermError(f"Malformed part in table '{ttype.value}': {e}", raw=raw) from e
