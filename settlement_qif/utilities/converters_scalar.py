# settlement_qif/utilities/converters_scalar.py
from __future__ import annotations

import math
import re
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Final, Optional

from typing_extensions import TypeAlias

NormalizedAmount: TypeAlias = str
"""Signed decimal text with exactly two fractional digits, e.g. ``-31.15``."""

ZERO_AMOUNT: Final[NormalizedAmount] = "0.00"

_CURRENCY_NOISE: Final = re.compile(r"[$,'\"]")
_PARENS: Final = re.compile(r"[()]")
# Leading number as accepted by a float-prefix parser: sign, digits, fraction, exponent.
_NUMERIC_PREFIX: Final = re.compile(
    r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII
)
_CENTS: Final = Decimal("0.01")
# Enough digits to quantize the largest finite float to cents.
_QUANTIZE_PRECISION: Final = 400


def parse_numeric_prefix(text: str) -> Optional[float]:
    """
    Parse the longest numeric prefix of `text` as a float.

    Leading whitespace is skipped and anything after the number is ignored,
    so ``"12.5abc"`` gives ``12.5``. Returns ``None`` when no number starts the
    string.
    """
    m = _NUMERIC_PREFIX.match(text.lstrip())
    if m is None:
        return None
    return float(m.group(0))


def format_cents(value: float) -> NormalizedAmount:
    """
    Render `value` with exactly two decimals.

    Rounding is half away from zero on the exact binary value, and any zero
    (including ``-0.0`` and values that round to zero) is rendered ``0.00``.
    A negative value that rounds to zero loses its sign: ``-0.001`` gives
    ``0.00``, not ``-0.00``.
    """
    with localcontext() as ctx:
        ctx.prec = _QUANTIZE_PRECISION
        cents = Decimal(value).quantize(_CENTS, rounding=ROUND_HALF_UP)
    if cents.is_zero():
        return ZERO_AMOUNT
    return f"{cents:f}"


def normalize_amount(raw: Optional[str]) -> NormalizedAmount:
    """
    Clean a spreadsheet money value into QIF-ready signed decimal text.

    Handles currency symbols, thousands separators, stray quotes, accounting
    parentheses and explicit minus signs:

        normalize_amount("$1,234.56")  -> "1234.56"
        normalize_amount("(31.15)")    -> "-31.15"
        normalize_amount("$(1,000)")   -> "-1000.00"
        normalize_amount("-5")         -> "-5.00"

    Empty, missing, or non-numeric input yields ``"0.00"``; this function
    never raises.
    """
    if not raw:
        return ZERO_AMOUNT

    cleaned = _CURRENCY_NOISE.sub("", raw).strip()
    is_negative = "(" in raw or cleaned.startswith("-")
    cleaned = _PARENS.sub("", cleaned)

    num = parse_numeric_prefix(cleaned)
    if num is None or not math.isfinite(num):
        return ZERO_AMOUNT

    # A literal minus already made it negative; don't flip it back.
    if is_negative and num > 0:
        num = -num

    return format_cents(num)
