"""Compile a configuration dictionary into a MappingTable."""

from pathlib import Path
from typing import Any

from classmap.load_config import load_config
from classmap.mapping_config_error import MappingConfigError
from classmap.mapping_table import DEFAULT_EXTENSION, MappingTable
from classmap.name_transforms import resolve_transform
from classmap.naming_convention import DEFAULT_NAMESPACE_SEPARATOR, NamingConvention
from classmap.path_spec import CompositePathSpec, PathSpec

SPEC_KEYS = frozenset({"path", "translate"})


def build_mapping_table(config: dict[str, Any]) -> MappingTable:
    """Build a validated table from a config produced by load_config."""
    extension = config.get("extension", DEFAULT_EXTENSION)
    separator = config.get("namespace_separator", DEFAULT_NAMESPACE_SEPARATOR)
    if not isinstance(extension, str) or not isinstance(separator, str):
        msg = "'extension' and 'namespace_separator' must be strings"
        raise MappingConfigError(msg)
    table = MappingTable(extension=extension, namespace_separator=separator)

    classmap = config.get("classmap") or {}
    if not isinstance(classmap, dict):
        msg = "'classmap' must be a mapping of convention name to prefix table"
        raise MappingConfigError(msg)

    for key, prefixes in classmap.items():
        try:
            convention = NamingConvention(key)
        except ValueError as e:
            msg = f"Unknown naming convention {key!r}"
            raise MappingConfigError(msg) from e
        if prefixes is not None and not isinstance(prefixes, dict):
            msg = f"Prefix table for {key!r} must be a mapping"
            raise MappingConfigError(msg)

        for prefix, raw in (prefixes or {}).items():
            table.register(convention, str(prefix), parse_path_spec(raw, str(prefix)))

    return table


def parse_path_spec(raw: Any, prefix: str) -> PathSpec | str | list[str]:
    """Translate a YAML value into something MappingTable.register accepts.

    Accepted shapes:
      /lib/vendor
      [/lib/vendor, /common/lib/vendor]
      {path: /lib/vendor | [...], translate: lower}
    """
    if not isinstance(raw, dict):
        return raw

    unknown = set(raw) - SPEC_KEYS
    if unknown:
        msg = f"Unknown path spec keys {sorted(unknown)}"
        raise MappingConfigError(msg, prefix)
    if "path" not in raw:
        msg = "Path spec mapping requires a 'path' key"
        raise MappingConfigError(msg, prefix)

    paths = raw["path"]
    if isinstance(paths, str):
        paths = [paths]
    if not isinstance(paths, list):
        msg = f"'path' must be a string or a list, got {paths!r}"
        raise MappingConfigError(msg, prefix)

    transform = None
    if raw.get("translate") is not None:
        transform = resolve_transform(str(raw["translate"]), prefix)
    return CompositePathSpec(tuple(paths), transform)


def load_mapping_table(path: str | Path | None = None) -> MappingTable:
    """Load a YAML configuration file and compile it into a MappingTable."""
    return build_mapping_table(load_config(path))
