"""Tests for the evaluation engine and result models."""

import logging

import pytest

from bascalc.calculation.engine import calculate, coerce_inputs, evaluate
from bascalc.calculation.fields import NumberInput, OutputField, SelectInput
from bascalc.calculation.registry import Category, CalculatorRegistry, calculator
from bascalc.exceptions import CalculatorNotFoundError


@pytest.fixture
def private_registry():
    registry = CalculatorRegistry()

    @calculator(
        "split",
        title="Split",
        category=Category.CONTROLS,
        inputs=[NumberInput("a", "A"), NumberInput("b", "B")],
        outputs=[
            OutputField("only_a", "Only A", decimals=1, requires=("a",)),
            OutputField("ratio", "A/B", decimals=2),
        ],
        registry=registry,
    )
    def split(a, b):
        return {"only_a": a * 2, "ratio": a / b}

    @calculator(
        "mode",
        title="Mode",
        category=Category.CONTROLS,
        inputs=[SelectInput("mode", "Mode", options={"on": "On", "off": "Off"}, default="on")],
        outputs=[OutputField("state", "State")],
        registry=registry,
    )
    def mode(mode):
        return {"state": mode.upper()}

    return registry


class TestBlankOnInvalidInput:
    """No bundled calculator produces output from an empty snapshot."""

    def test_every_calculator_blank_when_empty(self, registry):
        for definition in registry:
            result = evaluate(definition, {})
            assert result.is_blank, definition.calculator_id

    def test_every_calculator_computes_with_defaults(self, registry):
        for definition in registry:
            result = evaluate(definition, {}, fill_defaults=True)
            assert not result.is_blank, definition.calculator_id

    def test_every_calculator_blank_on_garbage(self, registry):
        for definition in registry:
            raw = {name: "not a number" for name in definition.input_names()}
            result = evaluate(definition, raw)
            assert result.is_blank, definition.calculator_id

    def test_single_invalid_input_blanks_dependent_outputs(self, calc):
        result = calc("valve_cv", flow="50", delta_p="", specific_gravity="1")
        assert result.value("cv") == ""


class TestPartialBlanking:
    """Outputs only blank when their own required inputs are invalid."""

    def test_independent_output_survives(self, private_registry):
        result = calculate("split", {"a": "1.5", "b": ""}, registry=private_registry)
        assert result.value("only_a") == "3.0"
        assert result.value("ratio") == ""

    def test_arithmetic_failure_blanks_evaluation(self, private_registry, caplog):
        with caplog.at_level(logging.WARNING, logger="bascalc.calculation.engine"):
            result = calculate("split", {"a": "1", "b": "0"}, registry=private_registry)
        assert result.is_blank
        assert "ZeroDivisionError" in caplog.text

    def test_body_not_called_when_nothing_computable(self):
        registry = CalculatorRegistry()
        calls = []

        @calculator(
            "spy",
            title="Spy",
            category=Category.CONTROLS,
            inputs=[NumberInput("x", "X")],
            outputs=[OutputField("y", "Y")],
            registry=registry,
        )
        def spy(x):
            calls.append(x)
            return {"y": x}

        calculate("spy", {"x": "abc"}, registry=registry)
        assert calls == []


class TestSelections:

    def test_unknown_selection_blanks_and_warns(self, private_registry, caplog):
        with caplog.at_level(logging.WARNING, logger="bascalc.calculation.engine"):
            result = calculate("mode", {"mode": "auto"}, registry=private_registry)
        assert result.value("state") == ""
        assert "unknown mode selection" in caplog.text

    def test_unknown_selection_does_not_fall_back_to_default(self, private_registry):
        result = calculate(
            "mode", {"mode": "auto"}, fill_defaults=True, registry=private_registry
        )
        assert result.value("state") == ""

    def test_missing_selection_uses_default_when_filling(self, private_registry):
        result = calculate("mode", {}, fill_defaults=True, registry=private_registry)
        assert result.value("state") == "ON"


class TestCoerceInputs:

    def test_missing_inputs_read_as_empty(self, registry):
        values = coerce_inputs(registry.get("valve_cv"), {"flow": "50"})
        assert values["flow"] == 50.0
        assert values["delta_p"] != values["delta_p"]  # NaN

    def test_supplied_values_override_defaults(self, registry):
        values = coerce_inputs(registry.get("valve_cv"), {"flow": "10"}, fill_defaults=True)
        assert values == {"flow": 10.0, "delta_p": 4.0, "specific_gravity": 1.0}


class TestResults:

    def test_unknown_calculator_raises(self):
        with pytest.raises(CalculatorNotFoundError):
            calculate("no_such_calculator", {})

    def test_result_metadata(self, calc):
        result = calc("valve_cv", flow="50", delta_p="4", specific_gravity="1")
        assert result.calculator_id == "valve_cv"
        assert result.category == "hydronic"
        assert result.to_dict() == {"cv": {"formatted": "25.0", "unit": None}}

    def test_output_lookup(self, calc):
        result = calc("chiller_efficiency", kw="100", tons="150")
        assert result.output("kw_per_ton").unit == "kW/ton"
        with pytest.raises(KeyError):
            result.output("cop")

    def test_display_uses_placeholder(self, calc):
        result = calc("valve_cv", flow="50", delta_p="0", specific_gravity="1")
        assert result.display() == {"cv": "—"}
        assert result.display("n/a") == {"cv": "n/a"}

    def test_provenance_hash_is_deterministic(self, calc):
        first = calc("three_phase_power", volts="480", amps="50", power_factor="0.85")
        second = calc("three_phase_power", volts=" 480 ", amps="50.0", power_factor="0.85")
        assert first.provenance_hash == second.provenance_hash
        assert len(first.provenance_hash) == 64

    def test_provenance_hash_changes_with_inputs(self, calc):
        first = calc("three_phase_power", volts="480", amps="50", power_factor="0.85")
        second = calc("three_phase_power", volts="208", amps="50", power_factor="0.85")
        assert first.provenance_hash != second.provenance_hash
