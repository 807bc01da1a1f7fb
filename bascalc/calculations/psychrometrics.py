# -*- coding: utf-8 -*-
"""
Psychrometric Calculators

Enthalpy and humidity ratio share the saturation-pressure model in
bascalc.physics.psychrometrics with the airside economizer calculator.
Dew point (Magnus) and wet bulb (Stull) use their own correlations.
"""

from bascalc.calculation.fields import NumberInput, OutputField
from bascalc.calculation.registry import Category, calculator
from bascalc.physics import psychrometrics
from bascalc.physics.psychrometrics import celsius_to_fahrenheit


@calculator(
    "dew_point",
    title="Dew Point",
    category=Category.PSYCHROMETRICS,
    inputs=[
        NumberInput("dry_bulb", "Dry Bulb Temp", "°F", default="72"),
        NumberInput("rh", "Relative Humidity", "%", default="50"),
    ],
    outputs=[
        OutputField("dew_point_f", "Dew Point", "°F", decimals=1),
        OutputField("dew_point_c", "Dew Point", "°C", decimals=1),
    ],
)
def dew_point(dry_bulb, rh):
    dp_c = psychrometrics.dew_point_c(dry_bulb, rh)
    return {"dew_point_f": celsius_to_fahrenheit(dp_c), "dew_point_c": dp_c}


@calculator(
    "enthalpy",
    title="Enthalpy",
    category=Category.PSYCHROMETRICS,
    inputs=[
        NumberInput("dry_bulb", "Dry Bulb Temp", "°F", default="75"),
        NumberInput("rh", "Relative Humidity", "%", default="50"),
    ],
    outputs=[OutputField("enthalpy", "Enthalpy", "BTU/lb", decimals=2)],
)
def enthalpy(dry_bulb, rh):
    return {"enthalpy": psychrometrics.enthalpy(dry_bulb, rh)}


@calculator(
    "wet_bulb",
    title="Wet Bulb Temperature",
    category=Category.PSYCHROMETRICS,
    inputs=[
        NumberInput("dry_bulb", "Dry Bulb Temp", "°F", default="80"),
        NumberInput("rh", "Relative Humidity", "%", default="60"),
    ],
    outputs=[
        OutputField("wet_bulb_f", "Wet Bulb", "°F", decimals=1),
        OutputField("wet_bulb_c", "Wet Bulb", "°C", decimals=1),
    ],
)
def wet_bulb(dry_bulb, rh):
    wb_c = psychrometrics.wet_bulb_c(dry_bulb, rh)
    return {"wet_bulb_f": celsius_to_fahrenheit(wb_c), "wet_bulb_c": wb_c}


@calculator(
    "humidity_ratio",
    title="Humidity Ratio",
    category=Category.PSYCHROMETRICS,
    inputs=[
        NumberInput("dry_bulb", "Dry Bulb Temp", "°F", default="75"),
        NumberInput("rh", "Relative Humidity", "%", default="50"),
    ],
    outputs=[
        OutputField("grains", "Grains/lb dry air", "gr/lb", decimals=1),
        OutputField("lb_per_1000", "lb moisture/1000 lb air", "lb/1000 lb", decimals=3),
    ],
)
def humidity_ratio(dry_bulb, rh):
    state = psychrometrics.moist_air_state(dry_bulb, rh)
    return {"grains": state.grains_per_lb, "lb_per_1000": state.lb_per_1000_lb}
