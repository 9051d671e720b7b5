"""Host-owned table of symbol prefixes and the directories they map to."""

import os
from collections.abc import Iterator, Sequence
from typing import Any

from classmap.mapping_config_error import MappingConfigError
from classmap.naming_convention import (
    DEFAULT_NAMESPACE_SEPARATOR,
    UNDERSCORE_SEPARATOR,
    NamingConvention,
)
from classmap.path_spec import CompositePathSpec, PathSpec, SimplePathSpec

WILDCARD = "*"
DEFAULT_EXTENSION = ".py"


class MappingTable:
    """Ordered prefix mappings per naming convention.

    More specific prefixes must be registered before more general ones:
    the resolver takes the first registered prefix the name starts with,
    e.g. Vendor\\Package\\Sub has to go before Vendor\\Package.
    """

    def __init__(
        self,
        extension: str = DEFAULT_EXTENSION,
        namespace_separator: str = DEFAULT_NAMESPACE_SEPARATOR,
    ) -> None:
        """Initialize an empty table."""
        if len(namespace_separator) != 1 or namespace_separator in (
            UNDERSCORE_SEPARATOR,
            WILDCARD,
        ):
            msg = (
                "Namespace separator must be one character other than '_' or '*', "
                f"got {namespace_separator!r}"
            )
            raise MappingConfigError(msg)
        self.extension = extension
        self.namespace_separator = namespace_separator
        # convention -> prefix -> spec; dicts keep registration order
        self._entries: dict[NamingConvention, dict[str, PathSpec]] = {
            convention: {} for convention in NamingConvention
        }
        self._wildcards: dict[NamingConvention, PathSpec] = {}

    def register(
        self, convention: NamingConvention, prefix: str, spec: Any
    ) -> PathSpec:
        """Add or replace the mapping for a prefix.

        A re-registered prefix keeps its original position in the scan order.
        """
        if not prefix:
            msg = "Prefix must be a non-empty string"
            raise MappingConfigError(msg, prefix)

        path_spec = coerce_path_spec(spec, prefix)
        if prefix == WILDCARD:
            self._wildcards[convention] = path_spec
        else:
            self._entries[convention][prefix] = path_spec
        return path_spec

    def entries(self, convention: NamingConvention) -> list[tuple[str, PathSpec]]:
        """Return the non-wildcard entries in registration order."""
        return list(self._entries[convention].items())

    def wildcard(self, convention: NamingConvention) -> PathSpec | None:
        """Return the fallback spec for a convention, if one is registered."""
        return self._wildcards.get(convention)

    def lookup(self, convention: NamingConvention, prefix: str) -> PathSpec | None:
        """Return the spec registered under exactly this prefix."""
        if prefix == WILDCARD:
            return self.wildcard(convention)
        return self._entries[convention].get(prefix)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, tuple) or len(key) != 2:
            return False
        convention, prefix = key
        if not isinstance(convention, NamingConvention) or not isinstance(prefix, str):
            return False
        return self.lookup(convention, prefix) is not None

    def __len__(self) -> int:
        return sum(len(e) for e in self._entries.values()) + len(self._wildcards)

    def __iter__(self) -> Iterator[tuple[NamingConvention, str, PathSpec]]:
        for convention in NamingConvention:
            for prefix, spec in self._entries[convention].items():
                yield convention, prefix, spec
            if convention in self._wildcards:
                yield convention, WILDCARD, self._wildcards[convention]


def coerce_path_spec(spec: Any, prefix: str | None = None) -> PathSpec:
    """Validate a spec value, accepting bare paths and path sequences."""
    if isinstance(spec, SimplePathSpec):
        return SimplePathSpec(_check_path(spec.path, prefix))

    if isinstance(spec, CompositePathSpec):
        if not spec.paths:
            msg = "Composite path spec needs at least one directory"
            raise MappingConfigError(msg, prefix)
        if spec.transform is not None and not callable(spec.transform):
            msg = f"Name transform {spec.transform!r} is not callable"
            raise MappingConfigError(msg, prefix)
        paths = tuple(_check_path(p, prefix) for p in spec.paths)
        return CompositePathSpec(paths, spec.transform)

    if isinstance(spec, (str, os.PathLike)):
        return SimplePathSpec(_check_path(spec, prefix))

    if isinstance(spec, Sequence):
        return coerce_path_spec(CompositePathSpec(tuple(spec)), prefix)

    msg = f"Unsupported path spec {spec!r}"
    raise MappingConfigError(msg, prefix)


def _check_path(path: Any, prefix: str | None) -> str:
    if isinstance(path, os.PathLike):
        path = os.fspath(path)
    if not isinstance(path, str) or not path:
        msg = f"Directory must be a non-empty path, got {path!r}"
        raise MappingConfigError(msg, prefix)
    return path
