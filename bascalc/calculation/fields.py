# -*- coding: utf-8 -*-
"""
Calculator field declarations.

A calculator declares its inputs (numbers, times, free text, selectors)
and its outputs up front. The engine uses these declarations to coerce
raw strings, fill defaults, and decide which outputs can be computed.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from bascalc.calculation import coercion


@dataclass(frozen=True)
class InputField:
    """Base input declaration. Subclasses decide how raw text is coerced."""
    name: str
    label: str
    unit: Optional[str] = None
    default: Optional[str] = None

    kind = "text"

    def coerce(self, raw: Optional[str]) -> Any:
        return coercion.parse_text(raw)

    def describe(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "label": self.label,
            "kind": self.kind,
            "unit": self.unit,
            "default": self.default,
        }


@dataclass(frozen=True)
class NumberInput(InputField):
    """Numeric field; integer=True truncates like a count or year field."""
    integer: bool = False

    @property
    def kind(self) -> str:  # type: ignore[override]
        return "integer" if self.integer else "number"

    def coerce(self, raw: Optional[str]) -> float:
        if self.integer:
            return coercion.parse_integer(raw)
        return coercion.parse_number(raw)


@dataclass(frozen=True)
class TimeInput(InputField):
    """Time of day entered as HH:MM, coerced to minutes after midnight."""

    kind = "time"

    def coerce(self, raw: Optional[str]) -> float:
        return coercion.parse_time_of_day(raw)


@dataclass(frozen=True)
class TextInput(InputField):
    """Free text handed to the calculator as-is (stripped)."""

    kind = "text"


@dataclass(frozen=True)
class SelectInput(InputField):
    """Closed set of choices; options maps key -> display label."""
    options: Dict[str, str] = field(default_factory=dict)

    kind = "select"

    def coerce(self, raw: Optional[str]) -> Optional[str]:
        return coercion.parse_selection(raw, self.options)

    def describe(self) -> Dict[str, Any]:
        info = super().describe()
        info["options"] = dict(self.options)
        return info


@dataclass(frozen=True)
class OutputField:
    """
    Output declaration.

    Attributes:
        name: Key in the calculator's result mapping
        label: Display label
        unit: Display unit (None for unitless or text outputs)
        decimals: Fixed-point precision applied to float values; None
            leaves floats in plain form and passes strings through
        requires: Input names this output depends on. None means every
            declared input, so outputs sharing inputs blank together.
    """
    name: str
    label: str
    unit: Optional[str] = None
    decimals: Optional[int] = None
    requires: Optional[Tuple[str, ...]] = None

    def describe(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "label": self.label,
            "unit": self.unit,
            "decimals": self.decimals,
            "requires": list(self.requires) if self.requires is not None else None,
        }
