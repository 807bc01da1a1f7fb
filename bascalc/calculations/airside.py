# -*- coding: utf-8 -*-
"""Airside calculators: air changes, mixed air temperature, economizer enthalpy."""

from bascalc.calculation.fields import NumberInput, OutputField
from bascalc.calculation.registry import Category, calculator
from bascalc.physics import psychrometrics


@calculator(
    "air_changes",
    title="Air Changes per Hour",
    category=Category.AIRSIDE,
    inputs=[
        NumberInput("cfm", "Airflow", "CFM", default="500"),
        NumberInput("length", "Length", "ft", default="20"),
        NumberInput("width", "Width", "ft", default="15"),
        NumberInput("height", "Height", "ft", default="10"),
    ],
    outputs=[OutputField("ach", "Air Changes/Hour", "ACH", decimals=2)],
)
def air_changes(cfm, length, width, height):
    volume = length * width * height
    if volume == 0:
        return {}
    return {"ach": cfm * 60 / volume}


@calculator(
    "mixed_air_temperature",
    title="Mixed Air Temperature",
    category=Category.AIRSIDE,
    inputs=[
        NumberInput("oa_temp", "Outside Air Temp", "°F", default="35"),
        NumberInput("ra_temp", "Return Air Temp", "°F", default="72"),
        NumberInput("oa_damper", "OA Damper Position", "%", default="30"),
    ],
    outputs=[OutputField("mixed_air", "Mixed Air Temp", "°F", decimals=1)],
)
def mixed_air_temperature(oa_temp, ra_temp, oa_damper):
    """Outside and return air temperatures weighted by the OA damper fraction."""
    fraction = oa_damper / 100
    return {"mixed_air": oa_temp * fraction + ra_temp * (1 - fraction)}


@calculator(
    "economizer_enthalpy",
    title="Economizer Enthalpy",
    category=Category.AIRSIDE,
    inputs=[
        NumberInput("dry_bulb", "Dry Bulb Temp", "°F", default="70"),
        NumberInput("rh", "Relative Humidity", "%", default="50"),
    ],
    outputs=[OutputField("enthalpy", "Enthalpy", "BTU/lb", decimals=2)],
)
def economizer_enthalpy(dry_bulb, rh):
    return {"enthalpy": psychrometrics.enthalpy(dry_bulb, rh)}
