# -*- coding: utf-8 -*-
"""
Numeric Input Coercion

Turns the raw text a user typed into a value a calculator can use. Every
failure resolves to the not-a-number sentinel (or None for selections),
never to 0 and never to an exception.

Accepted numeric literals:
- optional sign, digits with an optional fraction, optional exponent
- surrounding whitespace is ignored
- thousands separators, "inf"/"nan" words and trailing junk are rejected
"""

import math
import re
from typing import Any, Mapping, Optional

NAN = float("nan")

_NUMBER_RE = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$")
_TIME_RE = re.compile(r"^(\d{1,2}):(\d{2})$")


def is_invalid(value: Any) -> bool:
    """True for None and NaN, the two "not computable" markers."""
    if value is None:
        return True
    return isinstance(value, float) and math.isnan(value)


def parse_number(raw: Optional[str]) -> float:
    """
    Parse raw text into a float.

    Args:
        raw: Raw field content (may be None)

    Returns:
        Parsed finite float, or NaN when the text is empty, malformed
        or overflows to infinity
    """
    if raw is None:
        return NAN
    text = str(raw).strip()
    if not text or not _NUMBER_RE.match(text):
        return NAN
    value = float(text)
    if not math.isfinite(value):
        return NAN
    return value


def parse_integer(raw: Optional[str]) -> float:
    """
    Parse raw text for an integer field (counts, years, prefix lengths).

    Fractions are truncated toward zero. The result stays a float so the
    NaN sentinel can flow through the same checks as other inputs.
    """
    value = parse_number(raw)
    if math.isnan(value):
        return NAN
    return float(math.trunc(value))


def parse_time_of_day(raw: Optional[str]) -> float:
    """Parse "HH:MM" into minutes after midnight, NaN when malformed."""
    if raw is None:
        return NAN
    match = _TIME_RE.match(str(raw).strip())
    if not match:
        return NAN
    hours, minutes = int(match.group(1)), int(match.group(2))
    if hours > 23 or minutes > 59:
        return NAN
    return float(hours * 60 + minutes)


def parse_text(raw: Optional[str]) -> Optional[str]:
    """Stripped text, or None when nothing was entered."""
    if raw is None:
        return None
    text = str(raw).strip()
    return text or None


def parse_selection(raw: Optional[str], options: Mapping[str, str]) -> Optional[str]:
    """
    Resolve a selector key against its closed set of options.

    Returns:
        The key when it is one of the declared options, otherwise None.
        Unknown keys never fall back to a default option.
    """
    key = parse_text(raw)
    if key is None or key not in options:
        return None
    return key
