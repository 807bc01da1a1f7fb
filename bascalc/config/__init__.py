"""
bascalc Configuration Package
=============================

Environment-based settings (BASCALC_ prefix) and logging setup for the
command-line adapter.
"""

from bascalc.config.settings import (
    BasCalcSettings,
    configure_logging,
    get_settings,
    reload_settings,
)

__all__ = [
    "BasCalcSettings",
    "configure_logging",
    "get_settings",
    "reload_settings",
]
