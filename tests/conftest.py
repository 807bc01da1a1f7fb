# -*- coding: utf-8 -*-
"""Pytest configuration and shared fixtures."""

import pytest

from bascalc.calculation.engine import calculate
from bascalc.calculation.registry import get_registry
from bascalc.config import settings as settings_module


@pytest.fixture(scope="session")
def registry():
    """Default registry with every bundled calculator loaded."""
    return get_registry()


@pytest.fixture
def calc():
    """
    Evaluate a calculator from keyword raw inputs.

    Usage:
        result = calc("valve_cv", flow="50", delta_p="4", specific_gravity="1")
    """
    def _calc(calculator_id, fill_defaults=False, **raw_inputs):
        return calculate(calculator_id, raw_inputs, fill_defaults=fill_defaults)

    return _calc


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Isolate tests from BASCALC_ variables and the settings cache."""
    for name in (
        "BASCALC_LOG_LEVEL",
        "BASCALC_LOG_FORMAT",
        "BASCALC_BLANK_PLACEHOLDER",
        "BASCALC_FILL_DEFAULTS",
        "BASCALC_OUTPUT_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)
    settings_module.get_settings.cache_clear()
    yield
    settings_module.get_settings.cache_clear()
