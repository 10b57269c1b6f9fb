# grammaticus/adapters/persistence/term_store.py
"""
Term store for one language context.

A store is assembled by a TermStoreBuilder, which accepts any number of
additive merges (the base bundle, then component-specific bundles), and is
then frozen with build(). The resulting TermStore is read-only and can be
shared between threads without locking.

Merge semantics (both tables):

    builder.add_terms({"n": {"account": {...}}})
    builder.add_terms({"n": {"account": {...new...}, "contact": {...}}})
    # -> "account" holds the newer part, "contact" is added,
    #    every other previously added part is kept.

Noun and modifier keys are case-folded on the way in and on lookup; the part
data itself keeps its original casing.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Dict, Iterator, Mapping, Optional

import structlog

from grammaticus.core.domain.exceptions import InvalidBundleError, InvalidTermError
from grammaticus.core.domain.models import (
    KEYED_PART_TYPES,
    MISSING,
    GrammaticalPart,
    LabelBody,
    TermType,
    coerce_term_type,
    parse_body,
    parse_part,
)

# Emits through the "grammaticus" stdlib logger tree.
logger = structlog.wrap_logger(logging.getLogger(__name__))


def normalize_key(term_type: TermType, key: Any) -> str:
    """Lookup key for a part table; case-insensitive for nouns and modifiers."""
    text = "" if key is None else str(key)
    if term_type in KEYED_PART_TYPES:
        return text.casefold()
    return text


def _bundle_sections(bundle: Any) -> tuple:
    if not isinstance(bundle, Mapping):
        raise InvalidBundleError(f"Bundle must be an object, got {type(bundle).__name__}")
    terms = bundle.get("terms") or {}
    labels = bundle.get("labels") or {}
    if not isinstance(terms, Mapping) or not isinstance(labels, Mapping):
        raise InvalidBundleError("Bundle 'terms' and 'labels' must be objects")
    return terms, labels


class TermStoreBuilder:
    """Accumulates grammatical parts and labels before freezing them into a TermStore."""

    def __init__(self) -> None:
        self._parts: Dict[TermType, Dict[str, GrammaticalPart]] = {}
        self._labels: Dict[str, LabelBody] = {}

    def add_terms(self, parts_by_type: Mapping[Any, Mapping[Any, Any]]) -> "TermStoreBuilder":
        """
        Merge a nested mapping of part type -> key -> part.

        Raises:
            InvalidTermError: unknown part type or malformed part.
        """
        added = 0
        for raw_type, table in parts_by_type.items():
            try:
                term_type = coerce_term_type(raw_type)
            except InvalidTermError:
                logger.warning("term_table_rejected", term_type=raw_type)
                raise
            target = self._parts.setdefault(term_type, {})
            for key, raw_part in (table or {}).items():
                try:
                    target[normalize_key(term_type, key)] = parse_part(term_type, raw_part)
                except InvalidTermError as e:
                    logger.warning("term_rejected", term_type=term_type.value, key=key, error=str(e))
                    raise
                added += 1

        logger.debug("terms_merged", count=added, tables=len(self._parts))
        return self

    def add_labels(self, labels_by_id: Mapping[Any, Any]) -> "TermStoreBuilder":
        """
        Merge a mapping of label id -> label value (string or segment list).

        Raises:
            InvalidTermError: a segment carries an unknown or malformed term.
        """
        for label_id, raw in labels_by_id.items():
            try:
                self._labels[str(label_id)] = parse_body(raw)
            except InvalidTermError as e:
                logger.warning("label_rejected", label_id=label_id, error=str(e))
                raise

        logger.debug("labels_merged", count=len(labels_by_id), total=len(self._labels))
        return self

    def add_bundle(self, bundle: Mapping[str, Any]) -> "TermStoreBuilder":
        """Merge a compiled bundle of the form {"terms": {...}, "labels": {...}}."""
        terms, labels = _bundle_sections(bundle)
        self.add_terms(terms)
        self.add_labels(labels)
        return self

    def build(self) -> "TermStore":
        """Freeze the accumulated tables. The builder can keep merging afterwards."""
        return TermStore(self._parts, self._labels)


class TermStore:
    """
    Immutable grammatical-parts and labels tables for one language context.
    """

    def __init__(
        self,
        parts: Optional[Mapping[TermType, Mapping[str, GrammaticalPart]]] = None,
        labels: Optional[Mapping[str, LabelBody]] = None,
    ) -> None:
        self._parts = MappingProxyType(
            {t: MappingProxyType(dict(table)) for t, table in (parts or {}).items()}
        )
        self._labels = MappingProxyType(dict(labels or {}))

    @classmethod
    def from_bundle(cls, bundle: Mapping[str, Any]) -> "TermStore":
        return TermStoreBuilder().add_bundle(bundle).build()

    # --- parts ---

    def has_part_type(self, term_type: Any) -> bool:
        try:
            return coerce_term_type(term_type) in self._parts
        except InvalidTermError:
            return False

    def lookup_part(self, term_type: Any, key: Any) -> Optional[GrammaticalPart]:
        """Return the stored part, or None when the table or key is absent."""
        if key is None:
            return None
        try:
            ttype = coerce_term_type(term_type)
        except InvalidTermError:
            return None
        table = self._parts.get(ttype)
        if table is None:
            return None
        return table.get(normalize_key(ttype, key))

    def parts(self, term_type: Any) -> Mapping[str, GrammaticalPart]:
        """Read-only view of one part table (empty when absent)."""
        try:
            return self._parts.get(coerce_term_type(term_type), MappingProxyType({}))
        except InvalidTermError:
            return MappingProxyType({})

    # --- labels ---

    @property
    def has_labels(self) -> bool:
        return bool(self._labels)

    def lookup_label(self, label_id: Any, default: Any = MISSING) -> Any:
        """Return the label body, or `default` when the store is empty or the id is unknown."""
        if not self._labels:
            return default
        return self._labels.get(str(label_id), default)

    def label_ids(self) -> Iterator[str]:
        return iter(self._labels)

    def __contains__(self, label_id: object) -> bool:
        return str(label_id) in self._labels
