"""Resolve symbol names to source files through a prefix mapping table.

The resolver is stateless: every call works only from the MappingTable it
was given. A name nobody mapped is not an error; resolve() returns False
so that the host can fall through to the next resolver in its chain.
"""

import logging
import os
from collections.abc import Callable
from pathlib import Path
from typing import Any

from classmap.load_source_file import load_source_file
from classmap.mapping_table import WILDCARD, MappingTable
from classmap.naming_convention import NamingConvention, select_convention
from classmap.path_spec import CompositePathSpec, PathSpec
from classmap.resolution_result import ResolutionResult
from classmap.symbol_relpath import (
    candidate_path,
    strip_leading_separator,
    strip_prefix,
    symbol_relpath,
)

logger = logging.getLogger(__name__)

Loader = Callable[[Path], Any]
ExistsCheck = Callable[[str], bool]


class Resolver:
    """Maps symbol names to files using a host-owned MappingTable."""

    def __init__(
        self,
        table: MappingTable,
        loader: Loader = load_source_file,
        exists: ExistsCheck = os.path.isfile,
    ) -> None:
        """Initialize with the table to read and the load/exists primitives."""
        self.table = table
        self.loader = loader
        self.exists = exists

    def __call__(self, symbol_name: str) -> bool:
        return self.resolve(symbol_name)

    def resolve(self, symbol_name: str) -> bool:
        """Load the file backing symbol_name; return whether one was loaded."""
        result = self.locate(symbol_name)
        if result is None or result.found is None:
            return False
        self.loader(result.found)
        return True

    def locate(self, symbol_name: str) -> ResolutionResult | None:
        """Find the file for symbol_name without loading it.

        Returns None when no prefix and no wildcard matches; in that case no
        filesystem access happens. Otherwise the result lists every probed
        path, and found is the first one that exists.
        """
        sep = self.table.namespace_separator
        name = strip_leading_separator(symbol_name, sep)
        convention = select_convention(name, sep)

        match = self._match_prefix(name, convention)
        if match is None:
            logger.debug("No %s mapping for %s", convention.value, name)
            return None
        prefix, spec = match

        remainder = name if prefix == WILDCARD else strip_prefix(name, prefix)
        if not remainder:
            logger.debug("Prefix %s covers all of %s; empty file stem", prefix, name)
        relpath = symbol_relpath(remainder, convention.separator(sep))

        if isinstance(spec, CompositePathSpec) and spec.transform is not None:
            relpath = spec.transform(relpath)

        result = ResolutionResult(
            symbol_name=name,
            convention=convention,
            matched_prefix=prefix,
            spec=spec,
            relative_path=relpath,
        )
        for directory in spec.paths:
            path = candidate_path(directory, relpath, self.table.extension)
            result.probed.append(Path(path))
            if self.exists(path):
                result.found = Path(path)
                return result
            logger.debug("Missed %s for %s", path, name)

        return result

    def _match_prefix(
        self, name: str, convention: NamingConvention
    ) -> tuple[str, PathSpec] | None:
        # First registered prefix wins; the wildcard is only a fallback.
        for prefix, spec in self.table.entries(convention):
            if name.startswith(prefix):
                return prefix, spec

        wildcard = self.table.wildcard(convention)
        if wildcard is None:
            return None
        return WILDCARD, wildcard
