"""Format backend registry.

Each backend lives in its own module that imports its parsing library at
the top. A module whose library is not installed is simply left out of the
registry, so only the formats you install (see the package extras) are
available. JSON needs nothing beyond the standard library.
"""
from __future__ import annotations

import importlib
import logging
from typing import Dict, List, Optional

from ..errors import UnknownFormatError
from .base import FormatBackend

logger = logging.getLogger(__name__)

# (module, class) pairs in lookup priority order
_BACKEND_MODULES = [
    ("json_backend", "JsonBackend"),
    ("json5_backend", "Json5Backend"),
    ("toml_backend", "TomlBackend"),
    ("yaml_backend", "YamlBackend"),
]

_registry: Optional[Dict[str, FormatBackend]] = None


def _load_registry() -> Dict[str, FormatBackend]:
    backends: Dict[str, FormatBackend] = {}
    for module_name, class_name in _BACKEND_MODULES:
        try:
            module = importlib.import_module(f"{__name__}.{module_name}")
        except ImportError as e:
            logger.debug("Format backend %s disabled: %s", module_name, e)
            continue
        backend = getattr(module, class_name)()
        backends[backend.name] = backend
        logger.debug("Registered %s backend for %s", backend.name, ", ".join(backend.extensions))
    return backends


def available_backends() -> Dict[str, FormatBackend]:
    """Return installed backends keyed by name."""
    global _registry
    if _registry is None:
        _registry = _load_registry()
    return dict(_registry)


def known_extensions() -> List[str]:
    return [ext for b in available_backends().values() for ext in b.extensions]


def get_backend(name: str) -> FormatBackend:
    backends = available_backends()
    try:
        return backends[name]
    except KeyError:
        raise UnknownFormatError(name, known_extensions()) from None


def backend_for_extension(extension: str) -> FormatBackend:
    """Find the backend declaring ``extension`` (no leading dot, case-sensitive)."""
    ext = extension[1:] if extension.startswith(".") else extension
    if ext:
        for backend in available_backends().values():
            if ext in backend.extensions:
                return backend
    raise UnknownFormatError(ext or None, known_extensions())


__all__ = [
    "FormatBackend",
    "available_backends",
    "backend_for_extension",
    "get_backend",
    "known_extensions",
]
