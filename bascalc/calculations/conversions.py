# -*- coding: utf-8 -*-
"""
Unit Conversion Calculators

Each converter reads one value in a selected unit and reports it in every
unit of the same quantity. All outputs are derived from a single canonical
value (in WC, CFM, °F) so results never compound pairwise rounding.
"""

from bascalc.calculation.fields import NumberInput, OutputField, SelectInput
from bascalc.calculation.registry import Category, calculator
from bascalc.calculation.unit_converter import UnitConverter

converter = UnitConverter()

PRESSURE_UNITS = {"iwc": "in WC", "pa": "Pa", "psi": "psi", "kpa": "kPa"}
AIRFLOW_UNITS = {"cfm": "CFM", "ls": "L/s", "m3h": "m³/h"}
TEMPERATURE_UNITS = {"f": "°F", "c": "°C", "k": "K"}


@calculator(
    "pressure_conversion",
    title="Pressure Conversions",
    category=Category.CONVERSIONS,
    inputs=[
        NumberInput("value", "Value", default="1"),
        SelectInput("unit", "From Unit", options=PRESSURE_UNITS, default="iwc"),
    ],
    outputs=[
        OutputField("iwc", "Inches Water Column", "in WC", decimals=3),
        OutputField("pa", "Pascals", "Pa", decimals=2),
        OutputField("psi", "PSI", "psi", decimals=4),
        OutputField("kpa", "Kilopascals", "kPa", decimals=4),
    ],
)
def pressure_conversion(value, unit):
    return converter.fan_out(value, unit)


@calculator(
    "airflow_conversion",
    title="Airflow Conversions",
    category=Category.CONVERSIONS,
    inputs=[
        NumberInput("value", "Value", default="1000"),
        SelectInput("unit", "From Unit", options=AIRFLOW_UNITS, default="cfm"),
    ],
    outputs=[
        OutputField("cfm", "CFM", "CFM", decimals=1),
        OutputField("ls", "Liters/Second", "L/s", decimals=2),
        OutputField("m3h", "Cubic Meters/Hour", "m³/h", decimals=1),
    ],
)
def airflow_conversion(value, unit):
    return converter.fan_out(value, unit)


@calculator(
    "temperature_conversion",
    title="Temperature Conversions",
    category=Category.CONVERSIONS,
    inputs=[
        NumberInput("value", "Value", default="72"),
        SelectInput("unit", "From Unit", options=TEMPERATURE_UNITS, default="f"),
    ],
    outputs=[
        OutputField("f", "Fahrenheit", "°F", decimals=2),
        OutputField("c", "Celsius", "°C", decimals=2),
        OutputField("k", "Kelvin", "K", decimals=2),
    ],
)
def temperature_conversion(value, unit):
    return converter.fan_out(value, unit)
