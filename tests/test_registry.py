"""Tests for the calculator registry and registration decorator."""

import pytest

from bascalc.calculation.fields import NumberInput, OutputField
from bascalc.calculation.registry import (
    CATEGORY_TITLES,
    Category,
    CalculatorRegistry,
    calculator,
)
from bascalc.exceptions import CalculatorNotFoundError, RegistrationError

EXPECTED_COUNTS = {
    Category.SIGNAL_SCALING: 3,
    Category.AIRSIDE: 3,
    Category.NETWORK: 4,
    Category.HYDRONIC: 5,
    Category.ELECTRICAL: 4,
    Category.PSYCHROMETRICS: 4,
    Category.SCHEDULING: 5,
    Category.COMMISSIONING: 3,
    Category.ENERGY: 3,
    Category.CONTROLS: 2,
    Category.CONVERSIONS: 3,
}


class TestBundledRegistry:
    """The default registry holds every bundled calculator."""

    def test_total_count(self, registry):
        assert len(registry) == sum(EXPECTED_COUNTS.values())

    @pytest.mark.parametrize("category,count", EXPECTED_COUNTS.items())
    def test_category_counts(self, registry, category, count):
        assert len(registry.list(category)) == count

    def test_all_categories_present_in_order(self, registry):
        assert registry.categories() == list(Category)

    def test_every_category_has_a_title(self):
        assert set(CATEGORY_TITLES) == set(Category)

    def test_list_accepts_category_value(self, registry):
        ids = [d.calculator_id for d in registry.list("hydronic")]
        assert "valve_cv" in ids

    def test_contains_and_get(self, registry):
        assert "valve_cv" in registry
        assert registry.get("valve_cv").title == "Valve Cv Calculator"

    def test_unknown_id_raises(self, registry):
        with pytest.raises(CalculatorNotFoundError) as exc_info:
            registry.get("valve_cw")
        assert exc_info.value.calculator_id == "valve_cw"
        assert "valve_cv" in exc_info.value.context["available"]

    def test_every_input_has_a_default(self, registry):
        for definition in registry:
            assert set(definition.default_inputs()) == set(definition.input_names()), (
                definition.calculator_id
            )

    def test_description_from_docstring(self, registry):
        assert registry.get("valve_cv").description == "Cv = Q / sqrt(dP / SG)."

    def test_describe(self, registry):
        info = registry.get("optimal_start").describe()
        assert info["id"] == "optimal_start"
        assert info["category"] == "scheduling"
        assert [field["name"] for field in info["inputs"]] == ["delta_t", "thermal_mass"]
        assert info["inputs"][1]["options"] == {"light": "Light", "medium": "Medium", "heavy": "Heavy"}
        assert info["outputs"] == [{
            "name": "lead_time",
            "label": "Start Lead Time",
            "unit": "minutes",
            "decimals": None,
            "requires": None,
        }]


class TestRegistration:
    """Registration validation on a private registry."""

    def test_decorator_registers_and_tags_function(self):
        registry = CalculatorRegistry()

        @calculator(
            "double",
            title="Double",
            category=Category.CONTROLS,
            inputs=[NumberInput("x", "X")],
            outputs=[OutputField("y", "Y")],
            registry=registry,
        )
        def double(x):
            """Twice the input.

            Longer notes that are not part of the description.
            """
            return {"y": 2 * x}

        assert "double" in registry
        assert double.definition is registry.get("double")
        assert double.definition.description == "Twice the input."
        assert double(x=2.0) == {"y": 4.0}

    def test_duplicate_id_rejected(self):
        registry = CalculatorRegistry()
        kwargs = dict(
            title="Noop",
            category=Category.CONTROLS,
            inputs=[NumberInput("x", "X")],
            outputs=[OutputField("y", "Y")],
            registry=registry,
        )
        calculator("noop", **kwargs)(lambda x: {})
        with pytest.raises(RegistrationError):
            calculator("noop", **kwargs)(lambda x: {})

    def test_duplicate_input_names_rejected(self):
        registry = CalculatorRegistry()
        with pytest.raises(RegistrationError):
            calculator(
                "dup_inputs",
                title="Dup",
                category=Category.CONTROLS,
                inputs=[NumberInput("x", "X"), NumberInput("x", "X again")],
                outputs=[OutputField("y", "Y")],
                registry=registry,
            )(lambda x: {})

    def test_output_requiring_unknown_input_rejected(self):
        registry = CalculatorRegistry()
        with pytest.raises(RegistrationError) as exc_info:
            calculator(
                "bad_requires",
                title="Bad",
                category=Category.CONTROLS,
                inputs=[NumberInput("x", "X")],
                outputs=[OutputField("y", "Y", requires=("z",))],
                registry=registry,
            )(lambda x: {})
        assert exc_info.value.context["unknown_inputs"] == ["z"]
