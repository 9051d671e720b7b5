"""Logic for deep merging configuration dictionaries."""

from typing import Any

# Prefix tables are order-sensitive: a user table replaces the default one
# instead of being interleaved with it.
REPLACED_WHOLE = frozenset({"hierarchical", "underscore"})


def deep_merge(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries.

    - Objects are merged recursively.
    - Prefix tables ('hierarchical', 'underscore') in 'update' replace 'base'.
    - Scalars and arrays in 'update' replace 'base'.
    """
    result = base.copy()
    for key, value in update.items():
        if (
            key in result
            and key not in REPLACED_WHOLE
            and isinstance(result[key], dict)
            and isinstance(value, dict)
        ):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result
