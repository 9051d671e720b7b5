"""Naming conventions supported by the resolver."""

from enum import Enum

DEFAULT_NAMESPACE_SEPARATOR = "\\"
UNDERSCORE_SEPARATOR = "_"


class NamingConvention(Enum):
    """Shape of a symbol name, and the sub-table consulted for it."""

    PREFIXED_HIERARCHICAL = "hierarchical"
    UNDERSCORE_FLAT = "underscore"

    def separator(self, namespace_separator: str = DEFAULT_NAMESPACE_SEPARATOR) -> str:
        """Return the character treated as a directory boundary."""
        if self is NamingConvention.PREFIXED_HIERARCHICAL:
            return namespace_separator
        return UNDERSCORE_SEPARATOR


def select_convention(
    symbol_name: str, namespace_separator: str = DEFAULT_NAMESPACE_SEPARATOR
) -> NamingConvention:
    """Infer the naming convention from the shape of the name."""
    if namespace_separator in symbol_name:
        return NamingConvention.PREFIXED_HIERARCHICAL
    return NamingConvention.UNDERSCORE_FLAT
