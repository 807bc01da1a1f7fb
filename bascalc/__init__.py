"""
bascalc: Building Automation Engineering Calculators
====================================================

Pure, stateless field calculators for BAS/HVAC controls work. Every
calculator maps raw text inputs to formatted, unit-tagged outputs and
blanks any output whose inputs are not computable.

    >>> from bascalc import calculate
    >>> calculate("valve_cv", {"flow": "50", "delta_p": "4", "specific_gravity": "1"}).value("cv")
    '25.0'
"""

from ._version import __version__

from bascalc.calculation import (
    Category,
    CalculatorResult,
    calculate,
    get_registry,
)
from bascalc.exceptions import BasCalcException, CalculatorNotFoundError

__all__ = [
    "__version__",
    "BasCalcException",
    "CalculatorNotFoundError",
    "CalculatorResult",
    "Category",
    "calculate",
    "get_registry",
]
