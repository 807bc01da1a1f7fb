"""Tests for the canonical-unit converter."""

from decimal import Decimal

import pytest

from bascalc.calculation.unit_converter import UnitConverter
from bascalc.exceptions import UnitConversionError


@pytest.fixture
def converter():
    return UnitConverter()


class TestUnitConverter:

    def test_unit_categories(self, converter):
        assert converter.get_unit_category("Pa") == "pressure"
        assert converter.get_unit_category(" CFM ") == "airflow"
        assert converter.get_unit_category("k") == "temperature"

    def test_unknown_unit_raises(self, converter):
        with pytest.raises(UnitConversionError):
            converter.get_unit_category("furlong")

    def test_compatibility(self, converter):
        assert converter.is_compatible("psi", "kpa")
        assert not converter.is_compatible("psi", "cfm")
        assert not converter.is_compatible("psi", "furlong")

    def test_to_canonical_is_decimal(self, converter):
        assert converter.to_canonical(1, "psi") == Decimal("27.68")
        assert converter.to_canonical(0, "c") == Decimal("32")

    def test_convert(self, converter):
        assert converter.convert(100, "c", "f") == pytest.approx(212.0)
        assert converter.convert(1, "psi", "pa") == pytest.approx(27.68 * 249.09)

    def test_same_unit_is_identity(self, converter):
        assert converter.convert(12.5, "cfm", "CFM") == 12.5

    def test_cross_quantity_raises(self, converter):
        with pytest.raises(UnitConversionError):
            converter.convert(1, "psi", "cfm")

    def test_fan_out_covers_every_unit(self, converter):
        values = converter.fan_out(1, "iwc")
        assert set(values) == {"iwc", "pa", "psi", "kpa"}
        assert values["iwc"] == 1.0

    def test_fan_out_is_consistent_with_convert(self, converter):
        values = converter.fan_out(20, "c")
        for unit, value in values.items():
            assert value == pytest.approx(converter.convert(20, "c", unit))

    def test_list_supported_units(self, converter):
        assert converter.list_supported_units("airflow") == {"airflow": ["cfm", "ls", "m3h"]}
        assert set(converter.list_supported_units()) == {"pressure", "airflow", "temperature"}
        with pytest.raises(UnitConversionError):
            converter.list_supported_units("energy")
