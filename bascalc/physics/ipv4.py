# -*- coding: utf-8 -*-
"""
IPv4 address arithmetic.

Dotted-quad parsing and 32-bit packing shared by the subnet calculator.
Parsing failures return None rather than raising.
"""

from dataclasses import dataclass
from typing import Optional

MAX_U32 = 0xFFFFFFFF


def parse_dotted_quad(address: Optional[str]) -> Optional[int]:
    """
    Pack "a.b.c.d" into an unsigned 32-bit integer.

    Each octet must be a plain decimal number 0-255; anything else
    (missing octets, signs, spaces inside, out of range) returns None.
    """
    if address is None:
        return None
    parts = address.strip().split(".")
    if len(parts) != 4:
        return None
    packed = 0
    for i, part in enumerate(parts):
        if not part.isdigit() or not part.isascii():
            return None
        octet = int(part)
        if octet > 255:
            return None
        packed += octet << (24 - 8 * i)
    return packed


def to_dotted_quad(value: int) -> str:
    value &= MAX_U32
    return ".".join(str((value >> shift) & 255) for shift in (24, 16, 8, 0))


def prefix_to_mask(prefix: int) -> Optional[int]:
    """Netmask for a CIDR prefix length; a /0 prefix is an all-zero mask."""
    if prefix < 0 or prefix > 32:
        return None
    if prefix == 0:
        return 0
    return (MAX_U32 << (32 - prefix)) & MAX_U32


@dataclass(frozen=True)
class Subnet:
    """Network derived from an address and prefix length."""
    address: int
    prefix: int
    mask: int

    @property
    def network(self) -> int:
        return self.address & self.mask

    @property
    def broadcast(self) -> int:
        return self.network | (~self.mask & MAX_U32)

    @property
    def usable_hosts(self) -> int:
        return max(0, 2 ** (32 - self.prefix) - 2)

    @property
    def first_host(self) -> Optional[int]:
        return self.network + 1 if self.usable_hosts else None

    @property
    def last_host(self) -> Optional[int]:
        return self.broadcast - 1 if self.usable_hosts else None


def subnet(address: Optional[str], prefix: int) -> Optional[Subnet]:
    """Subnet for a dotted-quad address and prefix, None when either is invalid."""
    packed = parse_dotted_quad(address)
    mask = prefix_to_mask(prefix)
    if packed is None or mask is None:
        return None
    return Subnet(address=packed, prefix=prefix, mask=mask)
