"""Named transforms that configuration files may reference."""

import importlib

from classmap.mapping_config_error import MappingConfigError
from classmap.path_spec import NameTransform


def lcfirst(name: str) -> str:
    """Lowercase the first character only."""
    return name[:1].lower() + name[1:]


def ucfirst(name: str) -> str:
    """Uppercase the first character only."""
    return name[:1].upper() + name[1:]


NAME_TRANSFORMS: dict[str, NameTransform] = {
    "lower": str.lower,
    "upper": str.upper,
    "casefold": str.casefold,
    "lcfirst": lcfirst,
    "ucfirst": ucfirst,
    # Spellings used by existing classmap files
    "strtolower": str.lower,
    "strtoupper": str.upper,
}


def resolve_transform(ref: str, prefix: str | None = None) -> NameTransform:
    """Turn a transform name or 'module:function' reference into a callable."""
    if ref in NAME_TRANSFORMS:
        return NAME_TRANSFORMS[ref]

    module_name, sep, attr = ref.partition(":")
    if not sep or not module_name or not attr:
        msg = f"Unknown name transform {ref!r}"
        raise MappingConfigError(msg, prefix)

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        msg = f"Cannot import transform module {module_name!r}: {e}"
        raise MappingConfigError(msg, prefix) from e

    func = getattr(module, attr, None)
    if not callable(func):
        msg = f"Transform {ref!r} is not callable"
        raise MappingConfigError(msg, prefix)
    return func
