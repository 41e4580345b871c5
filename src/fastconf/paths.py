from __future__ import annotations

import logging
import os
from pathlib import Path

from platformdirs import PlatformDirs

logger = logging.getLogger(__name__)

# Overrides the per-user config root (useful for tests and portable installs)
ENV_CONFIG_DIR = "FASTCONF_CONFIG_DIR"


def user_config_dir(app_name: str) -> Path:
    """Return the platform config directory for ``app_name``.

    Linux: ~/.config/<app>, macOS: ~/Library/Application Support/<app>,
    Windows: %LOCALAPPDATA%\\<app>. When FASTCONF_CONFIG_DIR is set, the
    directory is ``$FASTCONF_CONFIG_DIR/<app>`` instead.
    """
    override = os.getenv(ENV_CONFIG_DIR)
    if override:
        base = Path(override).expanduser().resolve() / app_name
        logger.debug("Config dir for %s overridden by %s: %s", app_name, ENV_CONFIG_DIR, base)
        return base
    dirs = PlatformDirs(appname=app_name, appauthor=False)
    return Path(dirs.user_config_dir).expanduser().resolve()


def user_config_path(app_name: str, filename: str) -> Path:
    """Path of ``filename`` inside the app's config directory. Nothing is created."""
    return user_config_dir(app_name) / filename
