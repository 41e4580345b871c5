from __future__ import annotations

import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import Any, Generic, Optional, TypeVar

from .backends import FormatBackend
from .errors import ConfigIOError, DeserializationError
from .settings import ConfigSettings, PathLike
from .style import Style

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _read_bytes(path: Path) -> bytes:
    try:
        with path.open("rb") as f:
            return f.read()
    except OSError as e:
        raise ConfigIOError(path, "read", e) from e


def _ensure_parent(path: Path) -> None:
    parent = path.parent
    try:
        parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ConfigIOError(parent, "create directory", e) from e


def _file_mode_for(path: Path) -> int:
    """Mode the written file should end up with.

    An existing file keeps its permission bits; a new one gets the usual
    umask-derived mode rather than mkstemp's 0600.
    """
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def _atomic_write_bytes(path: Path, data: bytes) -> None:
    """Write through a temp file in the same directory, then os.replace.

    Either the old file remains or the new file fully replaces it.
    """
    _ensure_parent(path)
    tmp_name: Optional[str] = None
    try:
        mode = _file_mode_for(path)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
        with os.fdopen(fd, "wb") as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        os.chmod(tmp_name, mode)
        os.replace(tmp_name, path)
        tmp_name = None
    except OSError as e:
        raise ConfigIOError(path, "write", e) from e
    finally:
        if tmp_name is not None and os.path.exists(tmp_name):
            try:
                os.remove(tmp_name)
            except OSError:
                logger.debug("Could not remove temp file %s", tmp_name, exc_info=True)


class Config(Generic[T]):
    """A typed record bound to a file on disk.

    ``data`` is the live record; mutate it directly and call ``save()`` to
    persist. Nothing is written implicitly, including when the object is
    garbage collected.

    Construction loads the file when it exists (failing on a corrupt file
    rather than falling back to the default) and otherwise writes the given
    default record so the file exists afterwards.
    """

    def __init__(self, settings: ConfigSettings, data: T, record_type: Any) -> None:
        # Use Config.new / Config.from_settings; they run the load-or-create step.
        self._settings = settings
        self._record_type = record_type
        self.data = data

    @classmethod
    def new(
        cls,
        path: PathLike,
        default: T,
        *,
        style: Optional[Style] = None,
        record_type: Any = None,
    ) -> "Config[T]":
        """Open ``path``, inferring the format from its extension."""
        return cls.from_settings(ConfigSettings.default(path, style=style), default, record_type=record_type)

    @classmethod
    def from_settings(cls, settings: ConfigSettings, default: T, *, record_type: Any = None) -> "Config[T]":
        config = cls(settings, default, record_type if record_type is not None else type(default))
        path = settings.path
        if path.exists():
            config.data = config._load()
            logger.debug("Loaded %s config from %s", settings.backend.name, path)
        else:
            _ensure_parent(path)
            config.save()
            logger.info("Created %s with default %s config", path, settings.backend.name)
        return config

    @property
    def settings(self) -> ConfigSettings:
        return self._settings

    @property
    def path(self) -> Path:
        return self._settings.path

    @property
    def backend(self) -> FormatBackend:
        return self._settings.backend

    @property
    def style(self) -> Style:
        return self._settings.style

    def _load(self) -> T:
        raw = _read_bytes(self.path)
        try:
            return self.backend.deserialize(raw, self._record_type)
        except DeserializationError as e:
            e.with_path(self.path)
            raise

    def reload(self) -> None:
        """Re-read the file, discarding in-memory changes.

        On failure the current record is kept as is.
        """
        self.data = self._load()
        logger.debug("Reloaded %s", self.path)

    def save(self) -> None:
        """Serialize the record and replace the file contents."""
        payload = self.backend.serialize(self.data, self.style, self._record_type)
        _atomic_write_bytes(self.path, payload)
        logger.info("Saved config to %s", self.path)

    def __repr__(self) -> str:
        return f"Config(path={str(self.path)!r}, format={self.backend.name!r}, data={self.data!r})"
