# -*- coding: utf-8 -*-
"""
Controls Math Calculators

- Ziegler-Nichols PID tuning from ultimate gain and period
- Outdoor air temperature reset schedule
"""

import math

from bascalc.calculation.fields import NumberInput, OutputField
from bascalc.calculation.registry import Category, calculator

# Classic Ziegler-Nichols closed-loop PID rules
ZN_KP_FACTOR = 0.6
ZN_KI_FACTOR = 1.2
ZN_KD_FACTOR = 0.075


@calculator(
    "pid_tuning",
    title="PID Tuning (Ziegler-Nichols)",
    category=Category.CONTROLS,
    inputs=[
        NumberInput("ku", "Ultimate Gain (Ku)", default="2"),
        NumberInput("tu", "Ultimate Period (Tu)", "s", default="60"),
    ],
    outputs=[
        OutputField("kp", "Kp", decimals=3),
        OutputField("ki", "Ki", decimals=4),
        OutputField("kd", "Kd", decimals=2),
    ],
)
def pid_tuning(ku, tu):
    # Ki is undefined for a zero period; Kp and Kd still apply
    ki = ZN_KI_FACTOR * ku / tu if tu != 0 else math.nan
    return {
        "kp": ZN_KP_FACTOR * ku,
        "ki": ki,
        "kd": ZN_KD_FACTOR * ku * tu,
    }


@calculator(
    "oat_reset",
    title="OAT Reset Schedule",
    category=Category.CONTROLS,
    inputs=[
        NumberInput("oat_min", "OAT Min", "°F", default="0"),
        NumberInput("oat_max", "OAT Max", "°F", default="70"),
        NumberInput("sp_min", "Setpoint at OAT Min", "°F", default="180"),
        NumberInput("sp_max", "Setpoint at OAT Max", "°F", default="140"),
        NumberInput("oat", "Current OAT", "°F", default="35"),
    ],
    outputs=[OutputField("setpoint", "Reset Setpoint", "°F", decimals=1)],
)
def oat_reset(oat_min, oat_max, sp_min, sp_max, oat):
    """
    Linear reset between two outdoor air temperatures. The position along
    the OAT span is clamped to [0, 1], so the setpoint holds at sp_min below
    oat_min and at sp_max above oat_max.
    """
    if oat_max == oat_min:
        return {}
    ratio = max(0.0, min(1.0, (oat - oat_min) / (oat_max - oat_min)))
    return {"setpoint": sp_min + ratio * (sp_max - sp_min)}
