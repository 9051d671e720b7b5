"""Data models for symbol resolution results."""

from dataclasses import dataclass, field
from pathlib import Path

from classmap.mapping_table import WILDCARD
from classmap.naming_convention import NamingConvention
from classmap.path_spec import PathSpec


@dataclass
class ResolutionResult:
    """Represents the outcome of resolving a symbol name to a source file."""

    symbol_name: str  # After leading-separator stripping
    convention: NamingConvention
    matched_prefix: str  # "*" when the wildcard was used
    spec: PathSpec
    relative_path: str  # Separator-converted and transformed remainder
    probed: list[Path] = field(default_factory=list)  # In probe order
    found: Path | None = None

    @property
    def used_wildcard(self) -> bool:
        return self.matched_prefix == WILDCARD
