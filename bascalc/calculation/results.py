# -*- coding: utf-8 -*-
"""
Calculator result models.

A result is an ordered list of (label, formatted string, unit) outputs.
An empty formatted string means "nothing to show"; it is a valid state,
not an error.
"""

import hashlib
import json
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class CalculatorOutput(BaseModel):
    """One named, unit-tagged output of a calculator evaluation."""

    name: str = Field(..., description="Output key")
    label: str = Field(..., description="Display label")
    value: str = Field(default="", description="Formatted value, empty when not computable")
    unit: Optional[str] = Field(default=None, description="Display unit")

    @property
    def is_blank(self) -> bool:
        return self.value == ""

    def display(self, placeholder: str = "—") -> str:
        return self.value or placeholder


class CalculatorResult(BaseModel):
    """
    Complete result of one calculator evaluation.

    DETERMINISTIC: the provenance hash depends only on the calculator id,
    the coerced inputs and the formatted outputs, so the same snapshot
    always yields the same hash.
    """

    calculator_id: str
    title: str
    category: str
    outputs: List[CalculatorOutput] = Field(default_factory=list)
    provenance_hash: str = ""

    @property
    def is_blank(self) -> bool:
        """True when no output has anything to show."""
        return all(output.is_blank for output in self.outputs)

    def output(self, name: str) -> CalculatorOutput:
        for output in self.outputs:
            if output.name == name:
                return output
        raise KeyError(name)

    def value(self, name: str) -> str:
        """Formatted value for an output name."""
        return self.output(name).value

    def to_dict(self) -> Dict[str, Dict[str, Any]]:
        """Mapping of output name to {formatted, unit}."""
        return {
            output.name: {"formatted": output.value, "unit": output.unit}
            for output in self.outputs
        }

    def display(self, placeholder: str = "—") -> Dict[str, str]:
        """Output name -> display text with blanks replaced by a placeholder."""
        return {output.name: output.display(placeholder) for output in self.outputs}


def compute_provenance_hash(
    calculator_id: str,
    inputs: Dict[str, Any],
    outputs: List[CalculatorOutput],
) -> str:
    """
    SHA-256 over the calculator id, coerced inputs and formatted outputs.

    Args:
        calculator_id: Registered calculator id
        inputs: Coerced input values keyed by input name
        outputs: Formatted outputs in declaration order

    Returns:
        Hex digest string
    """
    provenance_data = {
        "calculator": calculator_id,
        "inputs": {k: repr(v) for k, v in sorted(inputs.items())},
        "outputs": [[o.name, o.value, o.unit] for o in outputs],
    }
    provenance_str = json.dumps(provenance_data, sort_keys=True, ensure_ascii=False)
    return hashlib.sha256(provenance_str.encode("utf-8")).hexdigest()
