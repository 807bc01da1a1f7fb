"""
Bundled calculators, one module per category.

Importing this package registers every calculator with the default
registry, in category order.
"""

from bascalc.calculations import (  # noqa: F401
    signal_scaling,
    airside,
    network,
    hydronic,
    electrical,
    psychrometrics,
    scheduling,
    commissioning,
    energy,
    controls,
    conversions,
)
