"""Config merging helpers."""

from __future__ import annotations

from typing import Any, Dict


def merge_section(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Overlay one section's keys; None in overrides keeps the base value."""
    merged = dict(base)
    merged.update({key: value for key, value in overrides.items() if value is not None})
    return merged


def merge_sections(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Merge per-section overrides into the base config.

    Sections that are dicts on both sides are overlaid key by key. Anything
    else in ``overrides`` replaces the base section outright.
    """
    merged = dict(base)
    for section, values in overrides.items():
        if isinstance(values, dict) and isinstance(merged.get(section), dict):
            merged[section] = merge_section(merged[section], values)
        else:
            merged[section] = values
    return merged
