# -*- coding: utf-8 -*-
"""
Shared Psychrometric Model - Imperial Units

One saturation-pressure correlation, one humidity ratio and one enthalpy,
used by every calculator that needs moist-air state. Keeping a single
implementation guarantees the Enthalpy and Economizer Enthalpy
calculators can never drift apart.

KEY FORMULAS (t = dry-bulb F, rh = relative humidity %):
- T = t + 459.67
- P_ws = exp(77.345 + 0.0057*T - 7235/T) / T^8.2
- W = 0.62198 * (rh/100) * P_ws / (14.696 - (rh/100) * P_ws)   [lb/lb dry air]
- h = 0.24*t + W*(1061 + 0.444*t)                              [BTU/lb dry air]

No ice-phase branch: the correlation is meant for comfort-range
temperatures above freezing.

Every function returns NaN instead of raising when its inputs leave the
numeric domain of the formula.
"""

import math
from dataclasses import dataclass

NAN = float("nan")


class PsychrometricConstants:
    """Coefficients of the saturation-pressure and moist-air equations."""

    RANKINE_OFFSET = 459.67

    # Saturation pressure correlation
    C1 = 77.345
    C2 = 0.0057
    C3 = 7235.0
    EXPONENT = 8.2

    # Molecular weight ratio water vapor / dry air
    EPSILON = 0.62198
    STD_PRESSURE_PSIA = 14.696

    CP_DRY_AIR_BTU_LB_F = 0.24
    CP_WATER_VAPOR_BTU_LB_F = 0.444
    LATENT_HEAT_BTU_LB = 1061.0

    GRAINS_PER_LB = 7000.0

    # Magnus-form dew point coefficients (Celsius)
    MAGNUS_A = 17.27
    MAGNUS_B = 237.7


C = PsychrometricConstants

# exp() overflows a double above ~709.78
_MAX_EXP_ARGUMENT = 709.0


def fahrenheit_to_celsius(temp_f: float) -> float:
    return (temp_f - 32.0) * 5.0 / 9.0


def celsius_to_fahrenheit(temp_c: float) -> float:
    return temp_c * 9.0 / 5.0 + 32.0


def saturation_pressure(dry_bulb_f: float) -> float:
    """Saturation vapor pressure from the closed-form correlation, NaN out of domain."""
    t_abs = dry_bulb_f + C.RANKINE_OFFSET
    if not t_abs > 0:
        return NAN
    exponent = C.C1 + C.C2 * t_abs - C.C3 / t_abs
    if exponent > _MAX_EXP_ARGUMENT:
        return NAN
    try:
        return math.exp(exponent) / math.pow(t_abs, C.EXPONENT)
    except OverflowError:
        return NAN


def humidity_ratio(dry_bulb_f: float, rh_pct: float) -> float:
    """Humidity ratio W in lb water per lb dry air, NaN when not computable."""
    pws = saturation_pressure(dry_bulb_f)
    if math.isnan(pws) or math.isnan(rh_pct):
        return NAN
    partial = (rh_pct / 100.0) * pws
    denominator = C.STD_PRESSURE_PSIA - partial
    if denominator == 0:
        return NAN
    w = C.EPSILON * partial / denominator
    return w if math.isfinite(w) else NAN


def enthalpy(dry_bulb_f: float, rh_pct: float) -> float:
    """Moist-air enthalpy in BTU per lb dry air."""
    w = humidity_ratio(dry_bulb_f, rh_pct)
    if math.isnan(w):
        return NAN
    h = C.CP_DRY_AIR_BTU_LB_F * dry_bulb_f + w * (
        C.LATENT_HEAT_BTU_LB + C.CP_WATER_VAPOR_BTU_LB_F * dry_bulb_f
    )
    return h if math.isfinite(h) else NAN


@dataclass(frozen=True)
class MoistAirState:
    """State derived from one (dry-bulb, RH) pair; all fields share W."""
    dry_bulb_f: float
    rh_pct: float
    saturation_pressure: float
    humidity_ratio: float
    enthalpy_btu_lb: float

    @property
    def grains_per_lb(self) -> float:
        return self.humidity_ratio * C.GRAINS_PER_LB

    @property
    def lb_per_1000_lb(self) -> float:
        return self.humidity_ratio * 1000.0


def moist_air_state(dry_bulb_f: float, rh_pct: float) -> MoistAirState:
    return MoistAirState(
        dry_bulb_f=dry_bulb_f,
        rh_pct=rh_pct,
        saturation_pressure=saturation_pressure(dry_bulb_f),
        humidity_ratio=humidity_ratio(dry_bulb_f, rh_pct),
        enthalpy_btu_lb=enthalpy(dry_bulb_f, rh_pct),
    )


def dew_point_c(dry_bulb_f: float, rh_pct: float) -> float:
    """
    Dew point by the inverse Magnus form, in Celsius.

    Returns NaN for rh <= 0 (log domain) and when alpha reaches the
    Magnus A coefficient (division by zero).
    """
    if not rh_pct > 0:
        return NAN
    tc = fahrenheit_to_celsius(dry_bulb_f)
    if tc + C.MAGNUS_B == 0:
        return NAN
    alpha = (C.MAGNUS_A * tc) / (C.MAGNUS_B + tc) + math.log(rh_pct / 100.0)
    if alpha == C.MAGNUS_A:
        return NAN
    return (C.MAGNUS_B * alpha) / (C.MAGNUS_A - alpha)


def wet_bulb_c(dry_bulb_f: float, rh_pct: float) -> float:
    """
    Wet-bulb temperature by Stull's empirical arctangent fit, in Celsius.

    A different model from the saturation-pressure correlation above.
    Returns NaN for negative rh (square root and fractional power domain).
    """
    if not rh_pct >= 0:
        return NAN
    t = fahrenheit_to_celsius(dry_bulb_f)
    return (
        t * math.atan(0.151977 * math.sqrt(rh_pct + 8.313659))
        + math.atan(t + rh_pct)
        - math.atan(rh_pct - 1.676331)
        + 0.00391838 * math.pow(rh_pct, 1.5) * math.atan(0.023101 * rh_pct)
        - 4.686035
    )
