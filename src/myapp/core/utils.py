#!/usr/bin/env python3
"""
Purpose:
    Provides common utility functions such as dictionary merge, range checks
    and file I/O helpers for myapp.
"""

import json
from pathlib import Path
from typing import Dict, Any

from myapp.core.constants import DEFAULT_TEXT_ENCODING, U16_MIN, U16_MAX


# --- Validation Helpers --- #

def is_u16(value: int) -> bool:
    """Return True if the integer fits the unsigned 16-bit range."""
    return U16_MIN <= value <= U16_MAX


# --- Generic Utilities --- #

def merge_dicts(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Layer `override` on top of `base`; nested tables merge, anything else replaces."""
    merged = dict(base)
    for key, value in override.items():
        below = merged.get(key)
        merged[key] = merge_dicts(below, value) if isinstance(below, dict) and isinstance(value, dict) else value
    return merged


# --- File I/O Helpers --- #

def load_json_file(path: Path) -> Dict[str, Any]:
    """
    Read one config layer from `path`. A missing file is an empty layer.

    Raises:
        ValueError: on invalid JSON, or if the top level is not an object.
    """
    if not path.is_file():
        return {}
    text = path.read_text(encoding=DEFAULT_TEXT_ENCODING)
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(
            f"Invalid JSON in {str(path)!r}: {e.msg} (line {e.lineno}, col {e.colno})"
        ) from e
    if not isinstance(data, dict):
        raise ValueError(f"Config layer {str(path)!r} must be a JSON object, got {type(data).__name__}")
    return data
