"""fastconf: typed configuration files.

Bind a dataclass or pydantic model to a JSON, JSON5, TOML or YAML file:

    @dataclass
    class AppConfig:
        volume: float = 0.8
        name: str = "player"

    config = Config.new("settings.toml", AppConfig())
    config.data.volume = 0.5
    config.save()

Formats other than JSON need their library installed (see the package
extras); ``available_backends()`` lists what is usable at runtime.
"""

from .backends import FormatBackend, available_backends, backend_for_extension, get_backend
from .config import Config
from .errors import (
    ConfigError,
    ConfigIOError,
    DeserializationError,
    InvalidPathError,
    SerializationError,
    UnknownFormatError,
)
from .settings import ConfigSettings
from .style import Style

__all__ = [
    "Config",
    "ConfigSettings",
    "Style",
    "FormatBackend",
    "available_backends",
    "backend_for_extension",
    "get_backend",
    "ConfigError",
    "ConfigIOError",
    "DeserializationError",
    "InvalidPathError",
    "SerializationError",
    "UnknownFormatError",
]

__version__ = "0.1.0"
