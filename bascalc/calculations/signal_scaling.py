# -*- coding: utf-8 -*-
"""
Sensor & Signal Scaling Calculators

- Analog input scaling (linear mA/V to engineering units)
- Thermistor resistance to temperature (Steinhart-Hart)
- Pressure correction to sea level
"""

import math
from typing import Dict, Tuple

from bascalc.calculation.fields import NumberInput, OutputField, SelectInput
from bascalc.calculation.registry import Category, calculator
from bascalc.physics.psychrometrics import celsius_to_fahrenheit

# Steinhart-Hart coefficients (a, b, c): 1/T = a + b*ln(R) + c*ln(R)^3
STANDARD_10K_CURVE: Tuple[float, float, float] = (0.001129148, 0.000234125, 8.76741e-8)

# Type III and 3K curves have no dedicated coefficients yet and evaluate
# on the standard 10K curve.
THERMISTOR_CURVES: Dict[str, Tuple[float, float, float]] = {
    "10k-type2": STANDARD_10K_CURVE,
    "10k-type3": STANDARD_10K_CURVE,
    "3k": STANDARD_10K_CURVE,
}

THERMISTOR_TYPES = {
    "10k-type2": "10K Type II",
    "10k-type3": "10K Type III",
    "3k": "3K NTC",
}

KELVIN_OFFSET = 273.15

# Barometric scale height used for the elevation correction, ft
PRESSURE_SCALE_HEIGHT_FT = 27000.0


@calculator(
    "analog_scaling",
    title="Analog Input Scaling",
    category=Category.SIGNAL_SCALING,
    inputs=[
        NumberInput("raw_min", "Raw Min", "mA/V", default="4"),
        NumberInput("raw_max", "Raw Max", "mA/V", default="20"),
        NumberInput("eng_min", "Eng Min", default="0"),
        NumberInput("eng_max", "Eng Max", default="100"),
        NumberInput("raw", "Raw Input Value", "mA/V", default="12"),
    ],
    outputs=[OutputField("scaled", "Scaled Output", "eng", decimals=2)],
)
def analog_scaling(raw_min, raw_max, eng_min, eng_max, raw):
    """Linear interpolation of a raw signal onto an engineering range."""
    if raw_max == raw_min:
        return {}
    scaled = (raw - raw_min) / (raw_max - raw_min) * (eng_max - eng_min) + eng_min
    return {"scaled": scaled}


@calculator(
    "thermistor",
    title="Thermistor Temperature",
    category=Category.SIGNAL_SCALING,
    inputs=[
        NumberInput("resistance", "Resistance", "Ω", default="10000"),
        SelectInput("thermistor_type", "Thermistor Type", options=THERMISTOR_TYPES,
                    default="10k-type2"),
    ],
    outputs=[
        OutputField("temperature_c", "Temperature", "°C", decimals=1),
        OutputField("temperature_f", "Temperature", "°F", decimals=1),
    ],
)
def thermistor(resistance, thermistor_type):
    """Thermistor resistance to temperature via the selected curve's coefficients."""
    if resistance <= 0:
        return {}
    a, b, c = THERMISTOR_CURVES[thermistor_type]
    ln_r = math.log(resistance)
    denominator = a + b * ln_r + c * ln_r ** 3
    if denominator == 0:
        return {}
    temp_c = 1.0 / denominator - KELVIN_OFFSET
    return {
        "temperature_c": temp_c,
        "temperature_f": celsius_to_fahrenheit(temp_c),
    }


@calculator(
    "pressure_elevation",
    title="Pressure with Elevation",
    category=Category.SIGNAL_SCALING,
    inputs=[
        NumberInput("pressure", "Measured Pressure", "psi", default="14.7"),
        NumberInput("elevation", "Elevation", "ft", default="0"),
    ],
    outputs=[OutputField("corrected", "Corrected (sea level)", "psi", decimals=3)],
)
def pressure_elevation(pressure, elevation):
    """Measured pressure corrected to sea level with an exponential atmosphere."""
    correction = math.exp(-elevation / PRESSURE_SCALE_HEIGHT_FT)
    if correction == 0:
        return {}
    return {"corrected": pressure / correction}
