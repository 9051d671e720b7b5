"""Default load primitive: execute a resolved source file as a module."""

import hashlib
import importlib.util
import logging
import re
import sys
from importlib.machinery import SourceFileLoader
from pathlib import Path
from types import ModuleType

logger = logging.getLogger(__name__)

MODULE_NAME_PREFIX = "classmap_loaded"
_NON_IDENT_RE = re.compile(r"\W+")


def module_name_for_path(path: Path) -> str:
    """Derive a stable, importable module name from a file path.

    The readable part is lossy (A/B.py and A_B.py share it), so a short hash
    of the resolved path keeps names distinct.
    """
    resolved = str(path.resolve())
    token = _NON_IDENT_RE.sub("_", resolved).strip("_")
    digest = hashlib.md5(resolved.encode("utf-8")).hexdigest()[:12]
    return f"{MODULE_NAME_PREFIX}_{token}_{digest}"


def load_source_file(path: Path) -> ModuleType:
    """Execute the file and register the module in sys.modules.

    Works for any file extension. Each call executes the file again and
    replaces the previous module object. Exceptions raised by the loaded
    code propagate to the caller.
    """
    name = module_name_for_path(path)
    loader = SourceFileLoader(name, str(path))
    spec = importlib.util.spec_from_loader(name, loader)
    if spec is None:  # pragma: no cover - spec_from_loader only fails on bad loaders
        msg = f"Cannot build module spec for {path}"
        raise ImportError(msg)

    module = importlib.util.module_from_spec(spec)
    sys.modules[name] = module
    try:
        loader.exec_module(module)
    except BaseException:
        sys.modules.pop(name, None)
        raise

    logger.info("Loaded %s as %s", path, name)
    return module
