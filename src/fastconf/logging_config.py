import logging
import os

ENV_LOG_LEVEL = "FASTCONF_LOG_LEVEL"


def configure_logging(default_level: int = logging.INFO) -> None:
    """Configure root logger with a sane default format.

    Respects FASTCONF_LOG_LEVEL env var if present. The library itself never
    calls this; applications opt in.
    """
    level_name = os.getenv(ENV_LOG_LEVEL)
    level = default_level
    if level_name:
        named = getattr(logging, level_name.upper(), None)
        # logging also exposes functions and classes under upper-case names
        if isinstance(named, int):
            level = named
    logging.basicConfig(
        level=level,
        format="[%(asctime)s] [%(levelname)s] %(name)s: %(message)s",
    )
    logging.getLogger("fastconf").setLevel(level)
