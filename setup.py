#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Setup script for bascalc

This file is kept for pip editable installs on older tooling.
The main package configuration is in pyproject.toml.
"""

from setuptools import setup

# Keep in sync with bascalc/_version.py
VERSION = "0.1.0"

# All other configuration comes from pyproject.toml
setup(
    version=VERSION,
)
