"""
morphology/plurals.py

Plural category selection (CLDR categories: zero, one, two, few, many, other).

The classifiers below reproduce the rules the label compiler ships for each
language. They work on the CLDR operands of the number's decimal form:

    n  absolute value
    i  integer digits
    v  number of visible fraction digits
    f  visible fraction digits as an integer
    t  visible fraction digits without trailing zeros

Some rules compare the *signed* value (e.g. "-1 is singular in English"), so
`value` is kept alongside the operands.

Languages without a rule fall back to a single category, 'other'.

Typical usage:

    from grammaticus.morphology.plurals import plural_rule_for

    select = plural_rule_for("ru")
    select(21)   # 'one'
    select(5)    # 'many'
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, Dict, Optional

PluralRule = Callable[[Any], str]

ZERO = "zero"
ONE = "one"
TWO = "two"
FEW = "few"
MANY = "many"
OTHER = "other"


@dataclass(frozen=True)
class Operands:
    value: Decimal
    n: Decimal
    i: int
    v: int
    f: int
    t: int

    @property
    def is_integer(self) -> bool:
        """True when the fraction is zero ('1' or '1.0')."""
        return self.f == 0

    @property
    def no_fraction_digits(self) -> bool:
        """True when no fraction digits are visible ('1', not '1.0')."""
        return self.v == 0


def _number_text(value: Any) -> Optional[str]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if value != value or value in (float("inf"), float("-inf")):
            return None
        # 1.0 is written "1" by the client runtime; keep that shape.
        return str(int(value)) if value.is_integer() else repr(value)
    if isinstance(value, Decimal):
        return str(value) if value.is_finite() else None
    if isinstance(value, str):
        return value.strip() or None
    return None


def operands(value: Any) -> Optional[Operands]:
    """Compute CLDR operands, or None when `value` is not a finite number."""
    text = _number_text(value)
    if text is None:
        return None
    try:
        number = Decimal(text)
    except InvalidOperation:
        return None
    if not number.is_finite():
        return None

    # Expand exponent notation so the digits can be split.
    plain = format(number, "f")
    integer_part, _, fraction = plain.lstrip("+-").partition(".")
    stripped = fraction.rstrip("0")
    return Operands(
        value=number,
        n=abs(number),
        i=int(integer_part or "0"),
        v=len(fraction),
        f=int(fraction) if fraction else 0,
        t=int(stripped) if stripped else 0,
    )


# ---------------------------------------------------------------------------
# Shared rules
# ---------------------------------------------------------------------------

def _none(op: Operands) -> str:
    return OTHER


def _one(op: Operands) -> str:
    return ONE if op.n == 1 else OTHER


def _one_or_zero(op: Operands) -> str:
    return ONE if op.n in (0, 1) else OTHER


def _exact_one(op: Operands) -> str:
    return ONE if op.value == 1 and op.no_fraction_digits else OTHER


def _exact_one_or_neg_one(op: Operands) -> str:
    return ONE if op.n == 1 and op.no_fraction_digits else OTHER


def _zero_to_one(op: Operands) -> str:
    return ONE if 0 <= op.value <= 1 else OTHER


# ---------------------------------------------------------------------------
# Language-specific rules
# ---------------------------------------------------------------------------

def _arabic(op: Operands) -> str:
    n100 = op.i % 100 if op.is_integer else None
    if op.value == 0:
        return ZERO
    if op.value == 1:
        return ONE
    if op.value == 2:
        return TWO
    if n100 is not None and 3 <= n100 <= 10:
        return FEW
    if n100 is not None and 11 <= n100 <= 99:
        return MANY
    return OTHER


def _serbo_croatian(op: Operands) -> str:
    i10, i100 = op.i % 10, op.i % 100
    f10, f100 = op.f % 10, op.f % 100
    v0 = op.no_fraction_digits
    if (v0 and i10 == 1 and i100 != 11) or (f10 == 1 and f100 != 11):
        return ONE
    if (v0 and 2 <= i10 <= 4 and not 12 <= i100 <= 14) or (2 <= f10 <= 4 and not 12 <= f100 <= 14):
        return FEW
    return OTHER


def _czech(op: Operands) -> str:
    v0 = op.no_fraction_digits
    if op.value == 1 and v0:
        return ONE
    if 2 <= op.i <= 4 and v0:
        return FEW
    if not v0:
        return MANY
    return OTHER


def _welsh(op: Operands) -> str:
    return {0: ZERO, 1: ONE, 2: TWO, 3: FEW, 6: MANY}.get(op.value, OTHER) if op.is_integer else OTHER


def _danish(op: Operands) -> str:
    if op.n == 1 or (not op.is_integer and op.i in (0, 1)):
        return ONE
    return OTHER


def _french(op: Operands) -> str:
    return ONE if -1 < op.value < 2 else OTHER


def _irish(op: Operands) -> str:
    if op.value == 1:
        return ONE
    if op.value == 2:
        return TWO
    if op.is_integer and 3 <= op.value <= 6:
        return FEW
    if op.is_integer and 7 <= op.value <= 10:
        return MANY
    return OTHER


def _hebrew(op: Operands) -> str:
    v0 = op.no_fraction_digits
    if (op.i == 1 and v0) or (op.i == 0 and not v0):
        return ONE
    if op.i == 2 and v0:
        return TWO
    return OTHER


def _armenian(op: Operands) -> str:
    return ONE if 0 <= op.value < 2 else OTHER


def _icelandic(op: Operands) -> str:
    if op.is_integer and op.i % 10 == 1 and op.i % 100 != 11:
        return ONE
    return OTHER


def _lithuanian(op: Operands) -> str:
    if op.is_integer:
        n10, n100 = op.i % 10, op.i % 100
        if n10 == 1 and not 11 <= n100 <= 19:
            return ONE
        if 2 <= n10 <= 9 and not 11 <= n100 <= 19:
            return FEW
    if op.f != 0:
        return MANY
    return OTHER


def _latvian(op: Operands) -> str:
    f10, f100 = op.f % 10, op.f % 100
    has_fraction = op.v > 0
    if op.is_integer:
        n10, n100 = op.i % 10, op.i % 100
        if n10 == 0 or 11 <= n100 <= 19:
            return ZERO
    if op.v == 2 and 11 <= f100 <= 19:
        return ZERO
    if op.is_integer and op.i % 10 == 1 and op.i % 100 != 11:
        return ONE
    if op.v == 2 and f10 == 1 and f100 != 11:
        return ONE
    if op.v != 2 and has_fraction and f10 == 1:
        return ONE
    return OTHER


def _macedonian(op: Operands) -> str:
    i10, i100 = op.i % 10, op.i % 100
    f10, f100 = op.f % 10, op.f % 100
    if (op.no_fraction_digits and i10 == 1 and i100 != 11) or (f10 == 1 and f100 != 11):
        return ONE
    return OTHER


def _maltese(op: Operands) -> str:
    n100 = op.i % 100 if op.is_integer else None
    if op.value == 1:
        return ONE
    if op.value == 2:
        return TWO
    if op.value == 0 or (n100 is not None and 2 < n100 <= 10):
        return FEW
    if n100 is not None and 11 <= n100 <= 19:
        return MANY
    return OTHER


def _polish(op: Operands) -> str:
    v0 = op.no_fraction_digits
    i10, i100 = op.i % 10, op.i % 100
    if op.value == 1 and v0:
        return ONE
    if v0 and 2 <= i10 <= 4 and not 12 <= i100 <= 14:
        return FEW
    if v0 and ((op.i != 1 and i10 in (0, 1)) or 5 <= i10 <= 9 or 12 <= i100 <= 14):
        return MANY
    return OTHER


def _portuguese_brazil(op: Operands) -> str:
    return ONE if 0 <= op.value < 2 else OTHER


def _romanian(op: Operands) -> str:
    v0 = op.no_fraction_digits
    if op.value == 1 and v0:
        return ONE
    n100 = op.i % 100 if op.is_integer else None
    if not v0 or op.value == 0 or (op.value != 1 and n100 is not None and 1 <= n100 <= 19):
        return FEW
    return OTHER


def _east_slavic(op: Operands) -> str:
    v0 = op.no_fraction_digits
    i10, i100 = op.i % 10, op.i % 100
    if v0 and i10 == 1 and i100 != 11:
        return ONE
    if v0 and 2 <= i10 <= 4 and not 12 <= i100 <= 14:
        return FEW
    if v0 and (i10 == 0 or 5 <= i10 <= 9 or 11 <= i100 <= 14):
        return MANY
    return OTHER


def _slovenian(op: Operands) -> str:
    v0 = op.no_fraction_digits
    i100 = op.i % 100
    if v0 and i100 == 1:
        return ONE
    if v0 and i100 == 2:
        return TWO
    if (v0 and i100 in (3, 4)) or not v0:
        return FEW
    return OTHER


def _tagalog(op: Operands) -> str:
    v0 = op.no_fraction_digits
    if v0 and (op.i in (1, 2, 3) or op.i % 10 not in (4, 6, 9)):
        return ONE
    if not v0 and op.f % 10 not in (4, 6, 9):
        return ONE
    return OTHER


# Keyed by the language part of the locale; a few entries are keyed by
# the full locale where a country variant differs.
PLURAL_RULES: Dict[str, Callable[[Operands], str]] = {
    "af": _one,
    "am": _zero_to_one,
    "ar": _arabic,
    "bg": _one,
    "bn": _zero_to_one,
    "bs": _serbo_croatian,
    "ca": _exact_one,
    "cs": _czech,
    "cy": _welsh,
    "da": _danish,
    "de": _exact_one,
    "el": _one,
    "en": _exact_one_or_neg_one,
    "eo": _one,
    "es": _one,
    "et": _exact_one,
    "eu": _one,
    "fa": _zero_to_one,
    "fi": _exact_one,
    "fr": _french,
    "ga": _irish,
    "gu": _zero_to_one,
    "haw": _exact_one,
    "he": _hebrew,
    "hi": _zero_to_one,
    "hr": _serbo_croatian,
    "hu": _one,
    "hy": _armenian,
    "is": _icelandic,
    "it": _exact_one,
    "iw": _hebrew,
    "ji": _one,
    "ka": _one,
    "kk": _one,
    "kl": _exact_one,
    "kn": _zero_to_one,
    "lb": _one,
    "lt": _lithuanian,
    "lv": _latvian,
    "mk": _macedonian,
    "ml": _one,
    "mo": _romanian,
    "mr": _one,
    "mt": _maltese,
    "nl": _exact_one,
    "no": _one,
    "pa": _one_or_zero,
    "pl": _polish,
    "pnb": _one_or_zero,
    "pt": _portuguese_brazil,
    "pt_PT": _exact_one,
    "rm": _one,
    "ro": _romanian,
    "ru": _east_slavic,
    "sh": _serbo_croatian,
    "sk": _czech,
    "sl": _slovenian,
    "sq": _one,
    "sr": _serbo_croatian,
    "sv": _exact_one,
    "sw": _exact_one,
    "ta": _one,
    "te": _one,
    "tl": _tagalog,
    "tr": _one,
    "uk": _east_slavic,
    "ur": _exact_one,
    "xh": _one,
    "yi": _one,
    "zu": _zero_to_one,
}


def split_locale(locale: Optional[str]) -> tuple:
    """'pt-BR' / 'pt_BR' -> ('pt', 'BR'). Language is lowercased, country uppercased."""
    text = (locale or "").strip().replace("-", "_")
    language, _, rest = text.partition("_")
    country = rest.split("_", 1)[0] if rest else ""
    return language.lower(), country.upper()


def _rule_for_locale(locale: Optional[str]) -> Callable[[Operands], str]:
    language, country = split_locale(locale)
    if country:
        specific = PLURAL_RULES.get(f"{language}_{country}")
        if specific is not None:
            return specific
    return PLURAL_RULES.get(language, _none)


def has_plural_rule(locale: Optional[str]) -> bool:
    return _rule_for_locale(locale) is not _none


def plural_rule_for(locale: Optional[str]) -> PluralRule:
    """Return a classifier taking a raw value (number or numeric string)."""
    rule = _rule_for_locale(locale)

    def select(value: Any) -> str:
        op = operands(value)
        if op is None:
            return OTHER
        return rule(op)

    return select


__all__ = [
    "PLURAL_RULES",
    "Operands",
    "has_plural_rule",
    "operands",
    "plural_rule_for",
    "split_locale",
]
