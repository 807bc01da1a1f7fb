# -*- coding: utf-8 -*-
"""
Electrical & Power Calculators

- Three-phase power
- Control transformer sizing
- 24 VAC wire gauge by voltage drop
- UPS runtime estimate
"""

import math
from typing import List, Tuple

from bascalc.calculation.fields import NumberInput, OutputField
from bascalc.calculation.formatting import integer_text, js_round
from bascalc.calculation.registry import Category, calculator

SQRT_3 = math.sqrt(3)

TRANSFORMER_SAFETY_FACTOR = 1.25
STANDARD_TRANSFORMER_VA: List[int] = [50, 75, 100, 150, 200, 300, 500, 750, 1000]

# Round-trip conductor resistance factor used for the drop estimate
WIRE_DROP_FACTOR = 0.00328

# (voltage drop threshold, gauge) checked from largest drop down
WIRE_GAUGE_LADDER: List[Tuple[float, str]] = [
    (2.4, "14 AWG (consider larger)"),
    (1.5, "16 AWG"),
    (0.9, "18 AWG"),
]
SMALLEST_GAUGE = "20 AWG"

UPS_MINUTES_AT_FULL_LOAD = 5


@calculator(
    "three_phase_power",
    title="3-Phase Power",
    category=Category.ELECTRICAL,
    inputs=[
        NumberInput("volts", "Voltage", "V", default="480"),
        NumberInput("amps", "Current", "A", default="50"),
        NumberInput("power_factor", "Power Factor", default="0.85"),
    ],
    outputs=[OutputField("power", "Power", "kW", decimals=2)],
)
def three_phase_power(volts, amps, power_factor):
    return {"power": volts * amps * SQRT_3 * power_factor / 1000}


@calculator(
    "transformer_sizing",
    title="Transformer Sizing",
    category=Category.ELECTRICAL,
    inputs=[
        NumberInput("loads", "Number of Loads", default="20", integer=True),
        NumberInput("va_per_load", "VA per Load", "VA", default="15"),
    ],
    outputs=[
        OutputField("total_va", "Connected Load", "VA"),
        OutputField("recommended", "Recommended Size", "VA"),
    ],
)
def transformer_sizing(loads, va_per_load):
    """
    Total VA with a 25% margin and the smallest standard size that covers it.

    Totals beyond the largest standard size recommend the largest size.
    """
    total = loads * va_per_load * TRANSFORMER_SAFETY_FACTOR
    recommended = next(
        (size for size in STANDARD_TRANSFORMER_VA if size >= total),
        STANDARD_TRANSFORMER_VA[-1],
    )
    return {
        "total_va": integer_text(math.ceil(total)),
        "recommended": str(recommended),
    }


@calculator(
    "wire_gauge",
    title="24VAC Wire Gauge",
    category=Category.ELECTRICAL,
    inputs=[
        NumberInput("distance", "One-Way Distance", "ft", default="100"),
        NumberInput("current", "Load Current", "A", default="2"),
    ],
    outputs=[OutputField("gauge", "Recommended Gauge")],
)
def wire_gauge(distance, current):
    voltage_drop = 2 * distance * current * WIRE_DROP_FACTOR
    if not math.isfinite(voltage_drop):
        return {}
    for threshold, gauge in WIRE_GAUGE_LADDER:
        if voltage_drop > threshold:
            return {"gauge": gauge}
    return {"gauge": SMALLEST_GAUGE}


@calculator(
    "ups_runtime",
    title="UPS Runtime",
    category=Category.ELECTRICAL,
    inputs=[
        NumberInput("ups_va", "UPS Capacity", "VA", default="1500"),
        NumberInput("load_va", "Connected Load", "VA", default="500"),
    ],
    outputs=[OutputField("runtime", "Estimated Runtime", "min")],
)
def ups_runtime(ups_va, load_va):
    if load_va == 0:
        return {}
    runtime = ups_va / load_va * UPS_MINUTES_AT_FULL_LOAD
    if not math.isfinite(runtime):
        return {}
    return {"runtime": f"~{integer_text(js_round(runtime))}"}
