# -*- coding: utf-8 -*-
"""
Calculator Registry

Every calculator is a pure function registered under a stable id
together with its field declarations. Calculator modules register
themselves with the `calculator` decorator when `bascalc.calculations`
is imported.

Example:
    >>> @calculator(
    ...     "chiller_efficiency",
    ...     title="Chiller Efficiency",
    ...     category=Category.ENERGY,
    ...     inputs=[NumberInput("kw", "Power Input", "kW")],
    ...     outputs=[OutputField("kw_per_ton", "Efficiency", "kW/ton", decimals=3)],
    ... )
    ... def chiller_efficiency(kw, tons):
    ...     ...
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, Iterator, List, Optional, Sequence

from bascalc.calculation.fields import InputField, OutputField
from bascalc.exceptions import CalculatorNotFoundError, RegistrationError

logger = logging.getLogger(__name__)


class Category(str, Enum):
    """Thematic calculator groups."""
    SIGNAL_SCALING = "signal_scaling"
    AIRSIDE = "airside"
    NETWORK = "network"
    HYDRONIC = "hydronic"
    ELECTRICAL = "electrical"
    PSYCHROMETRICS = "psychrometrics"
    SCHEDULING = "scheduling"
    COMMISSIONING = "commissioning"
    ENERGY = "energy"
    CONTROLS = "controls"
    CONVERSIONS = "conversions"


CATEGORY_TITLES: Dict[Category, str] = {
    Category.SIGNAL_SCALING: "Sensor & Signal Scaling",
    Category.AIRSIDE: "Airside Calculations",
    Category.NETWORK: "Network & Integration",
    Category.HYDRONIC: "Hydronic Systems",
    Category.ELECTRICAL: "Electrical & Power",
    Category.PSYCHROMETRICS: "Psychrometrics",
    Category.SCHEDULING: "Scheduling & Time",
    Category.COMMISSIONING: "Commissioning & Troubleshooting",
    Category.ENERGY: "Energy & Equipment",
    Category.CONTROLS: "Controls Math",
    Category.CONVERSIONS: "Unit Conversions",
}


@dataclass
class CalculatorDefinition:
    """A registered calculator: its body plus field declarations."""
    calculator_id: str
    title: str
    category: Category
    func: Callable[..., Dict[str, object]]
    inputs: List[InputField] = field(default_factory=list)
    outputs: List[OutputField] = field(default_factory=list)
    description: str = ""

    def input_names(self) -> List[str]:
        return [f.name for f in self.inputs]

    def required_inputs(self, output: OutputField) -> Sequence[str]:
        if output.requires is None:
            return self.input_names()
        return output.requires

    def default_inputs(self) -> Dict[str, str]:
        return {f.name: f.default for f in self.inputs if f.default is not None}

    def describe(self) -> Dict[str, object]:
        return {
            "id": self.calculator_id,
            "title": self.title,
            "category": self.category.value,
            "description": self.description,
            "inputs": [f.describe() for f in self.inputs],
            "outputs": [o.describe() for o in self.outputs],
        }


class CalculatorRegistry:
    """Id -> CalculatorDefinition lookup with category listing."""

    def __init__(self):
        self._calculators: Dict[str, CalculatorDefinition] = {}

    def register(self, definition: CalculatorDefinition) -> CalculatorDefinition:
        """
        Register a calculator definition.

        Raises:
            RegistrationError: On duplicate ids, duplicate field names, or
                outputs requiring undeclared inputs
        """
        calc_id = definition.calculator_id
        if calc_id in self._calculators:
            raise RegistrationError(
                f"Calculator already registered: {calc_id}", calculator_id=calc_id
            )

        names = definition.input_names()
        if len(set(names)) != len(names):
            raise RegistrationError(
                "Duplicate input names", calculator_id=calc_id, context={"inputs": names}
            )

        for output in definition.outputs:
            unknown = [n for n in definition.required_inputs(output) if n not in names]
            if unknown:
                raise RegistrationError(
                    f"Output '{output.name}' requires undeclared inputs",
                    calculator_id=calc_id,
                    context={"unknown_inputs": unknown},
                )

        self._calculators[calc_id] = definition
        logger.debug(f"Registered calculator {calc_id} ({definition.category.value})")
        return definition

    def get(self, calculator_id: str) -> CalculatorDefinition:
        try:
            return self._calculators[calculator_id]
        except KeyError:
            raise CalculatorNotFoundError(
                calculator_id, available=list(self._calculators)
            ) from None

    def list(self, category: Optional[Category] = None) -> List[CalculatorDefinition]:
        """Definitions in registration order, optionally for one category."""
        if category is None:
            return list(self._calculators.values())
        category = Category(category)
        return [d for d in self._calculators.values() if d.category == category]

    def categories(self) -> List[Category]:
        seen = {d.category for d in self._calculators.values()}
        return [c for c in Category if c in seen]

    def __contains__(self, calculator_id: object) -> bool:
        return calculator_id in self._calculators

    def __len__(self) -> int:
        return len(self._calculators)

    def __iter__(self) -> Iterator[CalculatorDefinition]:
        return iter(self._calculators.values())


default_registry = CalculatorRegistry()


def calculator(
    calculator_id: str,
    *,
    title: str,
    category: Category,
    inputs: Sequence[InputField],
    outputs: Sequence[OutputField],
    registry: Optional[CalculatorRegistry] = None,
):
    """Decorator registering a calculator body under `calculator_id`."""

    def decorator(func):
        description = (func.__doc__ or "").strip().split("\n\n")[0]
        definition = CalculatorDefinition(
            calculator_id=calculator_id,
            title=title,
            category=category,
            func=func,
            inputs=list(inputs),
            outputs=list(outputs),
            description=" ".join(description.split()),
        )
        target = registry if registry is not None else default_registry
        target.register(definition)
        func.definition = definition
        return func

    return decorator


def get_registry() -> CalculatorRegistry:
    """Default registry with every bundled calculator loaded."""
    import bascalc.calculations  # noqa: F401  (registers on import)

    return default_registry
