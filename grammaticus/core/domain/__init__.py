from grammaticus.core.domain.exceptions import (
    GrammaticusError,
    InvalidBundleError,
    InvalidTermError,
)
from grammaticus.core.domain.models import (
    MISSING,
    CounterRef,
    GenderRef,
    GrammaticalPart,
    LabelBody,
    Modifier,
    ModifierRef,
    Noun,
    NounRef,
    PluralRef,
    Segment,
    TermReference,
    TermType,
    parse_body,
    parse_part,
    parse_term,
)
