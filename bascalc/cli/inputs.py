# -*- coding: utf-8 -*-
"""
Raw input snapshots for `bascalc run`.

Inputs come from an optional YAML/JSON file and repeated `--set name=value`
pairs, later pairs overriding earlier ones. Everything is handed to the
engine as raw text, so a file value of 12.5 and a typed "12.5" coerce
identically.
"""

import json
import logging
from pathlib import Path
from typing import Dict, Iterable, Mapping, Optional

import yaml

from bascalc.exceptions import InputFileError

logger = logging.getLogger(__name__)

YAML_SUFFIXES = (".yaml", ".yml")
JSON_SUFFIXES = (".json",)


def _to_raw(value) -> str:
    if value is None:
        return ""
    return str(value)


def load_input_file(path: Path) -> Dict[str, str]:
    """
    Load an input snapshot from a YAML or JSON mapping.

    YAML is read without type resolution so values such as 07:00 stay
    text instead of becoming sexagesimal integers.

    Raises:
        InputFileError: Unsupported suffix, unreadable file, invalid
            syntax, or a top level that is not a mapping
    """
    suffix = path.suffix.lower()
    if suffix not in YAML_SUFFIXES + JSON_SUFFIXES:
        raise InputFileError(
            f"Unsupported file format '{path.suffix}' (expected .yaml, .yml or .json)",
            path=str(path),
        )

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise InputFileError(f"Cannot read input file: {path}", path=str(path), cause=e) from e

    try:
        if suffix in JSON_SUFFIXES:
            data = json.loads(text)
        else:
            data = yaml.load(text, Loader=yaml.BaseLoader)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise InputFileError(f"Cannot parse input file: {path}", path=str(path), cause=e) from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise InputFileError(
            f"Input file must contain a mapping of input names to values: {path}",
            path=str(path),
        )

    logger.debug(f"Loaded {len(data)} inputs from {path}")
    return {str(name): _to_raw(value) for name, value in data.items()}


def parse_assignments(assignments: Iterable[str]) -> Dict[str, str]:
    """
    Parse `name=value` pairs. The value may be empty or contain '='.

    Raises:
        ValueError: On a pair without '=' or with an empty name
    """
    values: Dict[str, str] = {}
    for item in assignments:
        name, sep, value = item.partition("=")
        name = name.strip()
        if not sep or not name:
            raise ValueError(f"Expected name=value, got {item!r}")
        values[name] = value
    return values


def build_inputs(
    path: Optional[Path] = None,
    assignments: Iterable[str] = (),
) -> Mapping[str, str]:
    """File values first, then --set pairs on top."""
    raw: Dict[str, str] = {}
    if path is not None:
        raw.update(load_input_file(path))
    raw.update(parse_assignments(assignments))
    return raw
