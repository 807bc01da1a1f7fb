# -*- coding: utf-8 -*-
"""Commissioning calculators: sensor drift, actuator stroke time, duct static reset."""

import math

from bascalc.calculation.fields import NumberInput, OutputField
from bascalc.calculation.registry import Category, calculator

WITHIN_TOLERANCE = "Within tolerance"
EXCEEDS_TOLERANCE = "Exceeds tolerance"


@calculator(
    "sensor_drift",
    title="Sensor Drift Check",
    category=Category.COMMISSIONING,
    inputs=[
        NumberInput("expected", "Reference Value", default="72"),
        NumberInput("actual", "Sensor Reading", default="73.5"),
        NumberInput("tolerance", "Tolerance (±)", default="1"),
    ],
    outputs=[
        OutputField("deviation", "Deviation", decimals=2),
        OutputField("status", "Status"),
    ],
)
def sensor_drift(expected, actual, tolerance):
    deviation = actual - expected
    if not math.isfinite(deviation):
        return {}
    status = WITHIN_TOLERANCE if abs(deviation) <= tolerance else EXCEEDS_TOLERANCE
    return {"deviation": deviation, "status": status}


@calculator(
    "actuator_stroke",
    title="Actuator Stroke Time",
    category=Category.COMMISSIONING,
    inputs=[
        NumberInput("travel", "Travel", "°", default="90"),
        NumberInput("speed", "Speed", "°/s", default="30"),
    ],
    outputs=[OutputField("stroke_time", "Stroke Time", "seconds", decimals=0)],
)
def actuator_stroke(travel, speed):
    if speed == 0:
        return {}
    return {"stroke_time": travel / speed}


@calculator(
    "duct_static_setpoint",
    title="Duct Static Setpoint",
    category=Category.COMMISSIONING,
    inputs=[
        NumberInput("design_cfm", "Design Airflow", "CFM", default="10000"),
        NumberInput("design_sp", "Design Static", "in WC", default="2.5"),
        NumberInput("actual_cfm", "Actual Airflow", "CFM", default="7500"),
    ],
    outputs=[OutputField("setpoint", "Reset Setpoint", "in WC", decimals=2)],
)
def duct_static_setpoint(design_cfm, design_sp, actual_cfm):
    """Static pressure follows the square of the airflow ratio (fan law)."""
    if design_cfm == 0:
        return {}
    return {"setpoint": design_sp * (actual_cfm / design_cfm) ** 2}
