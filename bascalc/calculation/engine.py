# -*- coding: utf-8 -*-
"""
Calculator Evaluation Engine

One evaluation cycle: raw strings -> coercion -> calculator body ->
formatted outputs. Pure and synchronous; nothing is cached between calls.

GUARANTEES:
- A calculator never raises to the caller
- An output whose required inputs are not computable is blank, and the
  calculator body is not consulted for it
- NaN and Infinity never reach a formatted string
"""

import logging
from typing import Any, Dict, Mapping, Optional

from bascalc.calculation.coercion import is_invalid, parse_text
from bascalc.calculation.fields import SelectInput
from bascalc.calculation.formatting import format_value
from bascalc.calculation.registry import (
    CalculatorDefinition,
    CalculatorRegistry,
    get_registry,
)
from bascalc.calculation.results import (
    CalculatorOutput,
    CalculatorResult,
    compute_provenance_hash,
)

logger = logging.getLogger(__name__)


def coerce_inputs(
    definition: CalculatorDefinition,
    raw_inputs: Optional[Mapping[str, Any]] = None,
    fill_defaults: bool = False,
) -> Dict[str, Any]:
    """
    Coerce a raw input snapshot for one calculator.

    Args:
        definition: Calculator whose declared inputs are coerced
        raw_inputs: Input name -> raw text; missing names read as empty
        fill_defaults: Use declared defaults for missing names

    Returns:
        Input name -> coerced value (NaN/None when not computable)
    """
    raw_inputs = raw_inputs or {}
    defaults = definition.default_inputs() if fill_defaults else {}

    unknown = set(raw_inputs) - set(definition.input_names())
    if unknown:
        logger.debug(f"{definition.calculator_id}: ignoring unknown inputs {sorted(unknown)}")

    values: Dict[str, Any] = {}
    for field in definition.inputs:
        raw = raw_inputs.get(field.name, defaults.get(field.name, ""))
        value = field.coerce(raw)
        if isinstance(field, SelectInput) and value is None and parse_text(raw) is not None:
            logger.warning(
                f"{definition.calculator_id}: unknown {field.name} selection {raw!r}, "
                f"expected one of {sorted(field.options)}"
            )
        values[field.name] = value
    return values


def evaluate(
    definition: CalculatorDefinition,
    raw_inputs: Optional[Mapping[str, Any]] = None,
    fill_defaults: bool = False,
) -> CalculatorResult:
    """Run one evaluation cycle for a calculator definition."""
    values = coerce_inputs(definition, raw_inputs, fill_defaults)
    invalid = {name for name, value in values.items() if is_invalid(value)}

    computable = {
        output.name
        for output in definition.outputs
        if not invalid.intersection(definition.required_inputs(output))
    }

    produced: Dict[str, object] = {}
    if computable:
        try:
            produced = definition.func(**values) or {}
        except (ArithmeticError, ValueError) as e:
            logger.warning(
                f"{definition.calculator_id}: {type(e).__name__} during evaluation "
                f"({e}); outputs blanked"
            )
            produced = {}
    else:
        logger.debug(f"{definition.calculator_id}: inputs not computable {sorted(invalid)}")

    outputs = []
    for output in definition.outputs:
        formatted = ""
        if output.name in computable:
            formatted = format_value(produced.get(output.name), output.decimals)
        outputs.append(
            CalculatorOutput(
                name=output.name,
                label=output.label,
                value=formatted,
                unit=output.unit,
            )
        )

    logger.debug(
        f"{definition.calculator_id}: evaluated, "
        f"{sum(1 for o in outputs if o.value)}/{len(outputs)} outputs computed"
    )
    return CalculatorResult(
        calculator_id=definition.calculator_id,
        title=definition.title,
        category=definition.category.value,
        outputs=outputs,
        provenance_hash=compute_provenance_hash(definition.calculator_id, values, outputs),
    )


def calculate(
    calculator_id: str,
    raw_inputs: Optional[Mapping[str, Any]] = None,
    fill_defaults: bool = False,
    registry: Optional[CalculatorRegistry] = None,
) -> CalculatorResult:
    """
    Evaluate a registered calculator by id.

    Args:
        calculator_id: Registered calculator id (e.g. "valve_cv")
        raw_inputs: Input name -> raw text snapshot
        fill_defaults: Use declared defaults for inputs not supplied
        registry: Registry to look the id up in (bundled calculators by default)

    Returns:
        CalculatorResult with blank outputs wherever inputs are not computable

    Raises:
        CalculatorNotFoundError: If no calculator has this id
    """
    if registry is None:
        registry = get_registry()
    definition = registry.get(calculator_id)
    return evaluate(definition, raw_inputs, fill_defaults)
