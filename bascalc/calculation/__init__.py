"""
bascalc Calculation Core
========================

Input coercion, field declarations, output formatting, the calculator
registry and the evaluation engine.
"""

from bascalc.calculation.coercion import (
    is_invalid,
    parse_integer,
    parse_number,
    parse_selection,
    parse_time_of_day,
)
from bascalc.calculation.engine import calculate, coerce_inputs, evaluate
from bascalc.calculation.fields import (
    InputField,
    NumberInput,
    OutputField,
    SelectInput,
    TextInput,
    TimeInput,
)
from bascalc.calculation.registry import (
    Category,
    CalculatorDefinition,
    CalculatorRegistry,
    calculator,
    default_registry,
    get_registry,
)
from bascalc.calculation.results import CalculatorOutput, CalculatorResult
from bascalc.calculation.unit_converter import UnitConverter

__all__ = [
    "Category",
    "CalculatorDefinition",
    "CalculatorOutput",
    "CalculatorRegistry",
    "CalculatorResult",
    "InputField",
    "NumberInput",
    "OutputField",
    "SelectInput",
    "TextInput",
    "TimeInput",
    "UnitConverter",
    "calculate",
    "calculator",
    "coerce_inputs",
    "default_registry",
    "evaluate",
    "get_registry",
    "is_invalid",
    "parse_integer",
    "parse_number",
    "parse_selection",
    "parse_time_of_day",
]
