"""Logic for overlaying user configuration on the defaults."""

from typing import Any


def deep_merge(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Return ``base`` overlaid with ``update`` without mutating either.

    Sections present in both as mappings are overlaid key by key; any other
    value from ``update`` (lists included) wins outright.
    """
    merged = dict(base)
    for key, value in update.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            value = deep_merge(current, value)
        merged[key] = value
    return merged
