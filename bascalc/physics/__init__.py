"""Shared physical and addressing models used by several calculators."""

from bascalc.physics.psychrometrics import (
    PsychrometricConstants,
    MoistAirState,
    saturation_pressure,
    humidity_ratio,
    enthalpy,
    moist_air_state,
    dew_point_c,
    wet_bulb_c,
    fahrenheit_to_celsius,
    celsius_to_fahrenheit,
)
from bascalc.physics.ipv4 import (
    Subnet,
    parse_dotted_quad,
    to_dotted_quad,
    prefix_to_mask,
    subnet,
)

__all__ = [
    "PsychrometricConstants",
    "MoistAirState",
    "saturation_pressure",
    "humidity_ratio",
    "enthalpy",
    "moist_air_state",
    "dew_point_c",
    "wet_bulb_c",
    "fahrenheit_to_celsius",
    "celsius_to_fahrenheit",
    "Subnet",
    "parse_dotted_quad",
    "to_dotted_quad",
    "prefix_to_mask",
    "subnet",
]
