# -*- coding: utf-8 -*-
"""
Output formatting policy.

Each calculator owns its rounding: fixed decimals for most values, plain
numbers for counts, grouped thousands for large totals. Every helper
returns the empty string for None, NaN and +/-Infinity so a non-finite
value can never leak into a formatted output.

Rounding is half away from zero on the exact binary value, the same
rule a browser's toFixed applies.
"""

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Optional, Union

Number = Union[int, float]

BLANK = ""


def is_finite(value: Optional[Number]) -> bool:
    if value is None or isinstance(value, bool):
        return False
    try:
        return math.isfinite(value)
    except TypeError:
        return False


def _quantize(value: Number, decimals: int) -> Decimal:
    exact = Decimal(value)
    with localcontext() as ctx:
        ctx.prec = max(28, exact.adjusted() + decimals + 2)
        return exact.quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP)


def _strip_negative_zero(text: str) -> str:
    if text.startswith("-") and not any(ch in "123456789" for ch in text):
        return text[1:]
    return text


def to_fixed(value: Optional[Number], decimals: int) -> str:
    """Fixed-point text with exactly `decimals` fraction digits."""
    if not is_finite(value):
        return BLANK
    return _strip_negative_zero(f"{_quantize(value, decimals):f}")


def js_round(value: float) -> float:
    """Round half toward positive infinity (Math.round semantics)."""
    return float(math.floor(value + 0.5))


def plain_number(value: Optional[Number]) -> str:
    """Shortest text for a number; integral values drop the trailing .0"""
    if not is_finite(value):
        return BLANK
    value = float(value)
    if value.is_integer() and abs(value) < 1e21:
        return _strip_negative_zero(str(int(value)))
    return repr(value)


def integer_text(value: Optional[Number]) -> str:
    if not is_finite(value):
        return BLANK
    return str(int(value))


def grouped(value: Optional[Number], max_decimals: int = 3) -> str:
    """Thousands-grouped text with up to `max_decimals` fraction digits."""
    if not is_finite(value):
        return BLANK
    text = f"{_quantize(value, max_decimals):,f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return _strip_negative_zero(text)


def signed(value: Optional[Number], decimals: int = 0) -> str:
    """Fixed-point text with an explicit sign for non-negative values."""
    text = to_fixed(value, decimals)
    if text and not text.startswith("-"):
        return f"+{text}"
    return text


def currency(value: Optional[Number], symbol: str = "$") -> str:
    """US-style currency text, e.g. $1,234.56 or -$12.00"""
    if not is_finite(value):
        return BLANK
    amount = _strip_negative_zero(f"{_quantize(value, 2):,f}")
    if amount.startswith("-"):
        return f"-{symbol}{amount[1:]}"
    return f"{symbol}{amount}"


def format_value(value: object, decimals: Optional[int] = None) -> str:
    """
    Apply an output's precision policy to whatever a calculator returned.

    Strings pass through untouched, numbers use fixed decimals when the
    output declares them and plain form otherwise, anything else blanks.
    """
    if value is None:
        return BLANK
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return BLANK
    if isinstance(value, (int, float)):
        if decimals is None:
            return plain_number(value)
        return to_fixed(value, decimals)
    return BLANK
