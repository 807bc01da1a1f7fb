# -*- coding: utf-8 -*-
"""
Energy Calculators

- Chiller efficiency (kW/ton)
- VFD fan/pump savings by the cube affinity law
- Cooling tower range and approach
"""

import math

from bascalc.calculation.fields import NumberInput, OutputField
from bascalc.calculation.formatting import currency, grouped
from bascalc.calculation.registry import Category, calculator

KW_PER_HP = 0.746


@calculator(
    "chiller_efficiency",
    title="Chiller Efficiency",
    category=Category.ENERGY,
    inputs=[
        NumberInput("kw", "Power Input", "kW", default="100"),
        NumberInput("tons", "Cooling Output", "tons", default="150"),
    ],
    outputs=[OutputField("kw_per_ton", "Efficiency", "kW/ton", decimals=3)],
)
def chiller_efficiency(kw, tons):
    if tons == 0:
        return {}
    return {"kw_per_ton": kw / tons}


@calculator(
    "vfd_savings",
    title="VFD Energy Savings",
    category=Category.ENERGY,
    inputs=[
        NumberInput("speed_reduction", "Speed Reduction", "%", default="20"),
        NumberInput("motor_hp", "Motor Size", "HP", default="50"),
        NumberInput("hours", "Run Hours/Year", "hrs", default="4000"),
        NumberInput("kwh_cost", "Energy Cost", "$/kWh", default="0.10"),
    ],
    outputs=[
        OutputField("kwh_saved", "Annual Savings", "kWh"),
        OutputField("dollars_saved", "Annual Savings", "USD"),
    ],
)
def vfd_savings(speed_reduction, motor_hp, hours, kwh_cost):
    """
    Power drops with the cube of speed, so a 20% speed reduction leaves
    about 51% of full-load power.
    """
    full_kw = motor_hp * KW_PER_HP
    reduced_kw = full_kw * (1 - speed_reduction / 100) ** 3
    saved_kwh = (full_kw - reduced_kw) * hours
    saved_dollars = saved_kwh * kwh_cost
    if not (math.isfinite(saved_kwh) and math.isfinite(saved_dollars)):
        return {}
    return {
        "kwh_saved": grouped(saved_kwh, 0),
        "dollars_saved": currency(saved_dollars),
    }


@calculator(
    "cooling_tower",
    title="Cooling Tower Performance",
    category=Category.ENERGY,
    inputs=[
        NumberInput("entering", "Entering Water", "°F", default="95"),
        NumberInput("leaving", "Leaving Water", "°F", default="85"),
        NumberInput("wet_bulb", "Ambient Wet Bulb", "°F", default="78"),
    ],
    outputs=[
        OutputField("range", "Range", "°F", decimals=1),
        OutputField("approach", "Approach", "°F", decimals=1),
    ],
)
def cooling_tower(entering, leaving, wet_bulb):
    return {"range": entering - leaving, "approach": leaving - wet_bulb}
