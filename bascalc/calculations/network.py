# -*- coding: utf-8 -*-
"""
Network & Integration Calculators

- BACnet device instance numbering
- MS/TP trunk length derating
- Trend log storage estimate
- IPv4 subnet
"""

import logging
import math

from bascalc.calculation.fields import NumberInput, OutputField, SelectInput, TextInput
from bascalc.calculation.formatting import grouped, integer_text, js_round
from bascalc.calculation.registry import Category, calculator
from bascalc.physics import ipv4

logger = logging.getLogger(__name__)

# Ceiling of the 22-bit BACnet device instance field
BACNET_MAX_INSTANCE = 4194303

# Largest integer a float holds exactly
MAX_EXACT_INSTANCE = 2 ** 53

BUILDING_MULTIPLIER = 100000
FLOOR_MULTIPLIER = 1000

# Base maximum MS/TP segment length per baud rate, ft
MSTP_BASE_LENGTH_FT = {
    "9600": 4000,
    "19200": 4000,
    "38400": 4000,
    "76800": 4000,
}

MSTP_DERATING_PER_DEVICE = 0.02
MSTP_MIN_DERATING = 0.5

TREND_BYTES_PER_SAMPLE = 20


@calculator(
    "bacnet_instance",
    title="BACnet Device Instance",
    category=Category.NETWORK,
    inputs=[
        NumberInput("building", "Building Number", default="1", integer=True),
        NumberInput("floor", "Floor Number", default="1", integer=True),
        NumberInput("device", "Device Number", default="1", integer=True),
    ],
    outputs=[
        OutputField("instance", "Device Instance"),
        OutputField("in_range", "Within BACnet Range"),
    ],
)
def bacnet_instance(building, floor, device):
    """
    Pack building/floor/device numbers into one device instance.

    The instance is reported as computed; `in_range` flags values outside
    the protocol's 0-4194303 range instead of wrapping or clamping them.
    Values too large to print exactly blank both outputs.
    """
    instance = building * BUILDING_MULTIPLIER + floor * FLOOR_MULTIPLIER + device
    if not math.isfinite(instance) or abs(instance) > MAX_EXACT_INSTANCE:
        return {}
    in_range = 0 <= instance <= BACNET_MAX_INSTANCE
    if not in_range:
        logger.debug(f"BACnet instance {instance:.0f} outside 0-{BACNET_MAX_INSTANCE}")
    return {
        "instance": integer_text(instance),
        "in_range": "Yes" if in_range else f"No (max {BACNET_MAX_INSTANCE})",
    }


@calculator(
    "mstp_trunk_length",
    title="MS/TP Trunk Length",
    category=Category.NETWORK,
    inputs=[
        SelectInput("baud", "Baud Rate", options={k: k for k in MSTP_BASE_LENGTH_FT},
                    default="76800"),
        NumberInput("device_count", "Device Count", default="10", integer=True),
    ],
    outputs=[OutputField("max_length", "Max Trunk Length", "ft")],
)
def mstp_trunk_length(baud, device_count):
    base = MSTP_BASE_LENGTH_FT[baud]
    derating = max(MSTP_MIN_DERATING, 1 - (device_count - 1) * MSTP_DERATING_PER_DEVICE)
    return {"max_length": integer_text(js_round(base * derating))}


@calculator(
    "trend_storage",
    title="Trend Log Storage",
    category=Category.NETWORK,
    inputs=[
        NumberInput("points", "Number of Points", default="100", integer=True),
        NumberInput("interval", "Sample Interval", "min", default="5", integer=True),
        NumberInput("retention", "Retention Period", "days", default="30", integer=True),
    ],
    outputs=[OutputField("storage", "Storage Required", "MB", decimals=1)],
)
def trend_storage(points, interval, retention):
    if interval == 0:
        return {}
    samples_per_day = 24 * 60 / interval
    total_samples = points * samples_per_day * retention
    return {"storage": total_samples * TREND_BYTES_PER_SAMPLE / (1024 * 1024)}


@calculator(
    "ip_subnet",
    title="IP Subnet Calculator",
    category=Category.NETWORK,
    inputs=[
        TextInput("address", "Network Address", default="192.168.1.0"),
        NumberInput("cidr", "CIDR Mask", "bits", default="24", integer=True),
    ],
    outputs=[
        OutputField("usable_hosts", "Usable Hosts"),
        OutputField("host_range", "Host Range"),
        OutputField("network", "Network Address"),
        OutputField("broadcast", "Broadcast Address"),
        OutputField("netmask", "Subnet Mask"),
    ],
)
def ip_subnet(address, cidr):
    """Usable host count and host range for an IPv4 address and prefix length."""
    net = ipv4.subnet(address, int(cidr))
    if net is None:
        return {}
    host_range = ""
    if net.usable_hosts:
        host_range = (
            f"{ipv4.to_dotted_quad(net.first_host)} - {ipv4.to_dotted_quad(net.last_host)}"
        )
    return {
        "usable_hosts": grouped(net.usable_hosts, 0),
        "host_range": host_range,
        "network": ipv4.to_dotted_quad(net.network),
        "broadcast": ipv4.to_dotted_quad(net.broadcast),
        "netmask": ipv4.to_dotted_quad(net.mask),
    }
