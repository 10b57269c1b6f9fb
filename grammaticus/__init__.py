"""
grammaticus: runtime renderer for compiled grammatical label bundles.

Basic usage:

    from grammaticus import Renderer, TermStoreBuilder

    store = (
        TermStoreBuilder()
        .add_terms(bundle["terms"])
        .add_labels(bundle["labels"])
        .build()
    )
    renderer = Renderer.for_locale(store, "fr")
    renderer.render("Sample.create_new", nouns=["account"], args=["Bob"])
"""

import logging
from typing import Any, Mapping, Optional

from grammaticus.adapters.persistence.term_store import TermStore, TermStoreBuilder
from grammaticus.core.domain.exceptions import (
    GrammaticusError,
    InvalidBundleError,
    InvalidTermError,
)
from grammaticus.core.domain.models import MISSING, TermType
from grammaticus.core.ports import AgreementRules
from grammaticus.core.use_cases.render_label import Renderer, format_args
from grammaticus.morphology import rules_for_locale

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())


def renderer_from_bundle(bundle: Mapping[str, Any], locale: Optional[str] = None) -> Renderer:
    """Build a store from one compiled bundle and wrap it in a Renderer for `locale`."""
    return Renderer.for_locale(TermStore.from_bundle(bundle), locale)


__all__ = [
    "MISSING",
    "AgreementRules",
    "GrammaticusError",
    "InvalidBundleError",
    "InvalidTermError",
    "Renderer",
    "TermStore",
    "TermStoreBuilder",
    "TermType",
    "format_args",
    "renderer_from_bundle",
    "rules_for_locale",
]
