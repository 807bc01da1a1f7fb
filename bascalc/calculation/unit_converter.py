# -*- coding: utf-8 -*-
"""
Unit Conversion Engine

All conversions go through one canonical unit per quantity: the source
value is converted to the canonical unit once, and every target is
derived from that canonical value. Units are never cross-converted
pairwise, so rounding error does not compound.

Supports:
- Pressure (canonical: in WC): iwc, pa, psi, kpa
- Airflow (canonical: CFM): cfm, ls, m3h
- Temperature (canonical: F): f, c, k
"""

from decimal import Decimal, localcontext
from typing import Dict, Optional, Tuple, Union

from bascalc.exceptions import UnitConversionError

# (scale, offset): canonical = value * scale + offset
Affine = Tuple[Decimal, Decimal]

_ZERO = Decimal("0")
_PRECISION = 40


class UnitConverter:
    """
    Deterministic canonical-unit converter.

    GUARANTEES:
    - Same input -> same output
    - Unknown units -> UnitConversionError
    - Factors held as Decimal, converted to float only at the end
    """

    # 1 in WC = 249.09 Pa, 1 psi = 27.68 in WC, 1 kPa = 4.0147 in WC
    PRESSURE_TO_IWC: Dict[str, Affine] = {
        'iwc': (Decimal('1'), _ZERO),
        'pa': (Decimal('1') / Decimal('249.09'), _ZERO),
        'psi': (Decimal('27.68'), _ZERO),
        'kpa': (Decimal('4.0147'), _ZERO),
    }

    # 1 L/s = 2.119 CFM, 1 m3/h = 0.5886 CFM
    AIRFLOW_TO_CFM: Dict[str, Affine] = {
        'cfm': (Decimal('1'), _ZERO),
        'ls': (Decimal('2.119'), _ZERO),
        'm3h': (Decimal('0.5886'), _ZERO),
    }

    TEMPERATURE_TO_F: Dict[str, Affine] = {
        'f': (Decimal('1'), _ZERO),
        'c': (Decimal('1.8'), Decimal('32')),
        'k': (Decimal('1.8'), Decimal('-459.67')),
    }

    CANONICAL_UNITS: Dict[str, str] = {
        'pressure': 'iwc',
        'airflow': 'cfm',
        'temperature': 'f',
    }

    def __init__(self):
        self.conversion_tables = {
            'pressure': self.PRESSURE_TO_IWC,
            'airflow': self.AIRFLOW_TO_CFM,
            'temperature': self.TEMPERATURE_TO_F,
        }

    @staticmethod
    def _normalize(unit: str) -> str:
        return unit.lower().strip()

    def _get_unit_category(self, unit: str) -> Optional[str]:
        for category, table in self.conversion_tables.items():
            if unit in table:
                return category
        return None

    def get_unit_category(self, unit: str) -> str:
        """
        Get the quantity a unit belongs to.

        Raises:
            UnitConversionError: If the unit is unknown
        """
        category = self._get_unit_category(self._normalize(unit))
        if category is None:
            raise UnitConversionError(f"Unknown unit: {unit}")
        return category

    def is_compatible(self, unit1: str, unit2: str) -> bool:
        category1 = self._get_unit_category(self._normalize(unit1))
        category2 = self._get_unit_category(self._normalize(unit2))
        return category1 is not None and category1 == category2

    def to_canonical(self, value: Union[float, Decimal], unit: str) -> Decimal:
        """Convert a value in `unit` to its quantity's canonical unit."""
        unit = self._normalize(unit)
        category = self.get_unit_category(unit)
        scale, offset = self.conversion_tables[category][unit]
        with localcontext() as ctx:
            ctx.prec = _PRECISION
            return Decimal(str(value)) * scale + offset

    def from_canonical(self, canonical: Decimal, unit: str) -> float:
        """Convert a canonical value to `unit`."""
        unit = self._normalize(unit)
        category = self.get_unit_category(unit)
        scale, offset = self.conversion_tables[category][unit]
        with localcontext() as ctx:
            ctx.prec = _PRECISION
            return float((canonical - offset) / scale)

    def convert(self, value: Union[float, Decimal], from_unit: str, to_unit: str) -> float:
        """
        Convert value from one unit to another via the canonical unit.

        Args:
            value: Numerical value to convert
            from_unit: Source unit (e.g., 'pa')
            to_unit: Target unit (e.g., 'iwc')

        Returns:
            Converted value as float

        Raises:
            UnitConversionError: If units unknown or from different quantities
        """
        from_category = self.get_unit_category(from_unit)
        to_category = self.get_unit_category(to_unit)
        if from_category != to_category:
            raise UnitConversionError(
                f"Cannot convert between different quantities: "
                f"{from_unit} ({from_category}) -> {to_unit} ({to_category})"
            )
        if self._normalize(from_unit) == self._normalize(to_unit):
            return float(value)
        return self.from_canonical(self.to_canonical(value, from_unit), to_unit)

    def fan_out(self, value: Union[float, Decimal], from_unit: str) -> Dict[str, float]:
        """
        Convert a value to every unit of its quantity.

        Returns:
            Unit -> converted value, all derived from one canonical value
        """
        category = self.get_unit_category(from_unit)
        canonical = self.to_canonical(value, from_unit)
        return {
            unit: self.from_canonical(canonical, unit)
            for unit in self.conversion_tables[category]
        }

    def list_supported_units(self, category: Optional[str] = None) -> Dict[str, list]:
        if category:
            if category not in self.conversion_tables:
                raise UnitConversionError(f"Unknown quantity: {category}")
            return {category: list(self.conversion_tables[category])}
        return {cat: list(table) for cat, table in self.conversion_tables.items()}
