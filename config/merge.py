"""Config merging helpers."""

from __future__ import annotations

from typing import Any, Dict


def merge_dicts(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge overrides into base without mutating either.

    A ``null`` override keeps the base value, so a user file can list a key
    without changing its packaged default.
    """
    merged = dict(base)
    for key, value in overrides.items():
        if value is None and key in merged:
            continue
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged


def merge_sections(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Merge per-section overrides into the base config.

    Sections whose override value is not a mapping are dropped.
    """
    merged = dict(base)
    for section, values in overrides.items():
        if not isinstance(values, dict):
            continue
        if isinstance(merged.get(section), dict):
            merged[section] = merge_dicts(merged[section], values)
        else:
            merged[section] = dict(values)
    return merged
