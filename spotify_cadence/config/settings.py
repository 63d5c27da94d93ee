"""Configuration management for Spotify Cadence Demo."""

import logging
import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

from ..core.auth import DEFAULT_TOKEN_URL
from ..core.search import DEFAULT_SEARCH_URL
from ..utils.platform import get_config_dir

MAX_SEARCH_LIMIT = 50


@dataclass
class SpotifyConfig:
    """Spotify endpoint configuration.

    Credentials are not part of the config file; they come from
    SPOTIFY_CLIENT_ID and SPOTIFY_CLIENT_SECRET.
    """

    token_url: str = DEFAULT_TOKEN_URL
    search_url: str = DEFAULT_SEARCH_URL
    timeout_seconds: float = 10.0

    def __post_init__(self):
        """Validate configuration."""
        if self.timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be > 0")


@dataclass
class SearchConfig:
    """Search configuration."""

    term: str = "Daft Punk"
    limit: int = 5

    def __post_init__(self):
        """Validate configuration."""
        if not self.term or not self.term.strip():
            raise ValueError("term must not be empty")
        if isinstance(self.limit, bool) or not isinstance(self.limit, int):
            raise ValueError(f"limit must be an integer, got {self.limit!r}")
        if not (1 <= self.limit <= MAX_SEARCH_LIMIT):
            raise ValueError(f"limit must be between 1 and {MAX_SEARCH_LIMIT}")


@dataclass
class CadenceConfig:
    """Cadence estimate inputs."""

    height_m: float = 1.75
    speed_mps: float = 2.68224  # 6 mph

    def __post_init__(self):
        """Validate configuration."""
        if not math.isfinite(self.height_m) or self.height_m <= 0:
            raise ValueError("height_m must be > 0")
        if not math.isfinite(self.speed_mps) or self.speed_mps < 0:
            raise ValueError("speed_mps must be >= 0")


@dataclass
class LoggingConfig:
    """Logging configuration."""

    path: Optional[Path] = None
    level: str = "WARNING"
    max_size_mb: int = 10
    backup_count: int = 5

    def __post_init__(self):
        """Validate configuration."""
        if isinstance(self.path, str):
            self.path = Path(self.path).expanduser()

        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if self.level.upper() not in valid_levels:
            raise ValueError(f"level must be one of {valid_levels}")


@dataclass
class Settings:
    """Main settings container."""

    spotify: SpotifyConfig = field(default_factory=SpotifyConfig)
    search: SearchConfig = field(default_factory=SearchConfig)
    cadence: CadenceConfig = field(default_factory=CadenceConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_file(cls, config_path: Path) -> 'Settings':
        """Load settings from YAML file.

        Args:
            config_path: Path to configuration file

        Returns:
            Settings instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If config is invalid
        """
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, 'r', encoding='utf-8') as f:
            try:
                data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {config_path}: {e}") from e

        if not isinstance(data, dict):
            raise ValueError(f"Configuration root must be a mapping: {config_path}")

        try:
            return cls(
                spotify=SpotifyConfig(**(data.get('spotify') or {})),
                search=SearchConfig(**(data.get('search') or {})),
                cadence=CadenceConfig(**(data.get('cadence') or {})),
                logging=LoggingConfig(**(data.get('logging') or {})),
            )
        except TypeError as e:
            # Unknown keys in a section
            raise ValueError(f"Invalid configuration in {config_path}: {e}") from e

    @classmethod
    def from_file_or_default(cls, config_path: Optional[Path] = None) -> 'Settings':
        """Load settings from file or return defaults.

        An explicitly given path that fails to load is an error; the
        default location falls back to defaults with a warning.

        Args:
            config_path: Path to configuration file (optional)

        Returns:
            Settings instance
        """
        if config_path is not None:
            return cls.from_file(config_path)

        config_path = get_config_dir(create=False) / 'config.yaml'

        if config_path.exists():
            try:
                return cls.from_file(config_path)
            except Exception as e:
                logging.warning(f"Failed to load config from {config_path}: {e}")
                logging.warning("Using default configuration")
                return cls()
        else:
            logging.debug(f"Config file not found at {config_path}, using defaults")
            return cls()

    def save(self, config_path: Optional[Path] = None) -> Path:
        """Save settings to YAML file.

        Args:
            config_path: Path to save configuration (default: config.yaml in config dir)

        Returns:
            Path the file was written to
        """
        if config_path is None:
            config_path = get_config_dir() / 'config.yaml'

        config_path.parent.mkdir(parents=True, exist_ok=True)

        data = {
            'spotify': {
                'token_url': self.spotify.token_url,
                'search_url': self.spotify.search_url,
                'timeout_seconds': self.spotify.timeout_seconds
            },
            'search': {
                'term': self.search.term,
                'limit': self.search.limit
            },
            'cadence': {
                'height_m': self.cadence.height_m,
                'speed_mps': self.cadence.speed_mps
            },
            'logging': {
                'path': str(self.logging.path) if self.logging.path else None,
                'level': self.logging.level,
                'max_size_mb': self.logging.max_size_mb,
                'backup_count': self.logging.backup_count
            }
        }

        with open(config_path, 'w', encoding='utf-8') as f:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False, indent=2)

        return config_path
