"""Platform-specific utilities for cross-platform compatibility."""

import os
import sys
from pathlib import Path

APP_DIR_NAME = 'spotify-cadence'


def is_windows() -> bool:
    """Check if running on Windows."""
    return sys.platform == 'win32' or os.name == 'nt'


def is_macos() -> bool:
    """Check if running on macOS."""
    return sys.platform == 'darwin'


def get_config_dir(create: bool = True) -> Path:
    """Get the configuration directory based on the platform.

    Args:
        create: Create the directory if it does not exist

    Returns:
        Path: Configuration directory path
            - Windows: %APPDATA%/spotify-cadence
            - macOS: ~/Library/Application Support/spotify-cadence
            - Linux: ~/.config/spotify-cadence
    """
    if is_windows():
        base = Path(os.environ.get('APPDATA', Path.home()))
    elif is_macos():
        base = Path.home() / 'Library' / 'Application Support'
    else:  # Linux and others
        base = Path(os.environ.get('XDG_CONFIG_HOME', Path.home() / '.config'))

    config_dir = base / APP_DIR_NAME
    if create:
        config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir
