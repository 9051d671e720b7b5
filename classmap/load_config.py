"""Logic for loading and merging configuration files."""

import copy
from pathlib import Path
from typing import Any

import yaml

from classmap.deep_merge import deep_merge
from classmap.mapping_config_error import MappingConfigError
from classmap.mapping_table import DEFAULT_EXTENSION
from classmap.naming_convention import DEFAULT_NAMESPACE_SEPARATOR

DEFAULT_CONFIG: dict[str, Any] = {
    "extension": DEFAULT_EXTENSION,
    "namespace_separator": DEFAULT_NAMESPACE_SEPARATOR,
    "classmap": {
        "hierarchical": {},
        "underscore": {},
    },
}


def load_config(path: str | Path | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            if not isinstance(user_config, dict):
                msg = f"Configuration root in {p} must be a mapping"
                raise MappingConfigError(msg)
            config = deep_merge(config, user_config)
    return config
