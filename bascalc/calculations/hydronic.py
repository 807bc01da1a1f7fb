# -*- coding: utf-8 -*-
"""
Hydronic System Calculators

- Pump head (pipe friction loss estimate)
- Glycol capacity and flow effects
- Expansion tank sizing
- Valve flow coefficient (Cv)
- Heat transfer from water flow
"""

import math

from bascalc.calculation.fields import NumberInput, OutputField
from bascalc.calculation.formatting import grouped, signed
from bascalc.calculation.registry import Category, calculator

# v [ft/s] = gpm * 0.408 / d^2 [in]
VELOCITY_FACTOR = 0.408
FRICTION_COEFFICIENT = 0.2
FRICTION_EXPONENT = 1.85

GLYCOL_CAPACITY_LOSS_PER_PCT = 0.5
GLYCOL_FLOW_INCREASE_PER_PCT = 0.3

WATER_EXPANSION_PER_F = 0.00012
EXPANSION_TANK_FACTOR = 2.5

# BTU/hr per (GPM * F) for water
WATER_HEAT_FACTOR = 500
BTU_PER_TON = 12000


@calculator(
    "pump_head",
    title="Pump Head Pressure",
    category=Category.HYDRONIC,
    inputs=[
        NumberInput("gpm", "Flow Rate", "GPM", default="100"),
        NumberInput("length", "Pipe Run Length", "ft", default="200"),
        NumberInput("diameter", "Pipe Diameter", "in", default="2"),
    ],
    outputs=[OutputField("friction_loss", "Friction Loss", "ft H₂O", decimals=1)],
)
def pump_head(gpm, length, diameter):
    if diameter == 0:
        return {}
    velocity = gpm * VELOCITY_FACTOR / (diameter * diameter)
    if velocity < 0:
        return {}
    loss = FRICTION_COEFFICIENT * math.pow(velocity, FRICTION_EXPONENT) * (length / 100)
    return {"friction_loss": loss}


@calculator(
    "glycol_effects",
    title="Glycol Effects",
    category=Category.HYDRONIC,
    inputs=[NumberInput("glycol_pct", "Glycol Concentration", "%", default="30")],
    outputs=[
        OutputField("capacity", "Heat Transfer Capacity", "%", decimals=0),
        OutputField("flow_increase", "Required Flow Increase", "%"),
    ],
)
def glycol_effects(glycol_pct):
    return {
        "capacity": 100 - glycol_pct * GLYCOL_CAPACITY_LOSS_PER_PCT,
        "flow_increase": signed(glycol_pct * GLYCOL_FLOW_INCREASE_PER_PCT, 0),
    }


@calculator(
    "expansion_tank",
    title="Expansion Tank Sizing",
    category=Category.HYDRONIC,
    inputs=[
        NumberInput("system_volume", "System Volume", "gal", default="100"),
        NumberInput("delta_t", "Temperature Rise", "°F", default="40"),
    ],
    outputs=[OutputField("tank_size", "Minimum Tank Size", "gal", decimals=1)],
)
def expansion_tank(system_volume, delta_t):
    expansion = system_volume * (delta_t * WATER_EXPANSION_PER_F)
    return {"tank_size": expansion * EXPANSION_TANK_FACTOR}


@calculator(
    "valve_cv",
    title="Valve Cv Calculator",
    category=Category.HYDRONIC,
    inputs=[
        NumberInput("flow", "Flow Rate", "GPM", default="50"),
        NumberInput("delta_p", "Pressure Drop", "psi", default="4"),
        NumberInput("specific_gravity", "Specific Gravity", default="1.0"),
    ],
    outputs=[OutputField("cv", "Required Cv", decimals=1)],
)
def valve_cv(flow, delta_p, specific_gravity):
    """Cv = Q / sqrt(dP / SG)."""
    if delta_p == 0 or specific_gravity <= 0:
        return {}
    ratio = delta_p / specific_gravity
    if ratio < 0:
        return {}
    return {"cv": flow / math.sqrt(ratio)}


@calculator(
    "btu_from_flow",
    title="BTU from Flow",
    category=Category.HYDRONIC,
    inputs=[
        NumberInput("gpm", "Flow Rate", "GPM", default="50"),
        NumberInput("delta_t", "Temperature Difference", "°F", default="10"),
    ],
    outputs=[
        OutputField("btu_per_hour", "Heat Transfer", "BTU/hr"),
        OutputField("tons", "Cooling Tons", "tons", decimals=2),
    ],
)
def btu_from_flow(gpm, delta_t):
    btu = gpm * delta_t * WATER_HEAT_FACTOR
    return {"btu_per_hour": grouped(btu), "tons": btu / BTU_PER_TON}
