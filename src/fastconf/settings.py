from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from .backends import FormatBackend, backend_for_extension, get_backend
from .errors import InvalidPathError
from .paths import user_config_path
from .style import DEFAULT_STYLE, Style

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


def _as_path(path: PathLike) -> Path:
    raw = os.fspath(path)
    if not raw or not raw.strip():
        raise InvalidPathError("Config path must not be empty")
    return Path(raw)


@dataclass(frozen=True)
class ConfigSettings:
    """Resolved (path, backend, style) bundle for one Config.

    Build it with ``default`` (backend inferred from the extension),
    ``explicit`` or ``for_app``. Resolution never touches the filesystem.
    """

    path: Path
    backend: FormatBackend
    style: Style = DEFAULT_STYLE

    @classmethod
    def default(cls, path: PathLike, style: Optional[Style] = None) -> "ConfigSettings":
        """Infer the backend from the file extension.

        Raises UnknownFormatError when the extension is missing or unknown.
        """
        p = _as_path(path)
        backend = backend_for_extension(p.suffix)
        logger.debug("Resolved %s to the %s backend", p, backend.name)
        return cls(path=p, backend=backend, style=style or DEFAULT_STYLE)

    @classmethod
    def explicit(
        cls,
        path: PathLike,
        backend: Union[FormatBackend, str],
        style: Optional[Style] = None,
    ) -> "ConfigSettings":
        p = _as_path(path)
        if isinstance(backend, str):
            backend = get_backend(backend)
        return cls(path=p, backend=backend, style=style or DEFAULT_STYLE)

    @classmethod
    def for_app(cls, app_name: str, filename: str, style: Optional[Style] = None) -> "ConfigSettings":
        """Place ``filename`` in the per-user config directory of ``app_name``."""
        return cls.default(user_config_path(app_name, filename), style=style)
