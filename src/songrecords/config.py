"""Configuration management for songrecords.

Handles loading, saving, and validating TOML configuration stored in:
- macOS: ~/.config/songrecords/config.toml
- Linux: ~/.config/songrecords/config.toml (XDG_CONFIG_HOME)
- Windows: %APPDATA%\\songrecords\\config.toml
"""

import os
import sys
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Optional

import tomllib
import tomli_w

DB_PATH_ENV_VAR = "SONGRECORDS_DB_PATH"


@dataclass
class SongRecordsConfig:
    """Configuration for songrecords.

    Attributes:
        db_path: Local SQLite database path
        log_dir: Directory for the session log file
        log_level: Logging level name (e.g. "INFO", "DEBUG")
    """

    # Local Database
    db_path: Path = field(default_factory=lambda: get_default_db_path())

    # Logging
    log_dir: Path = field(default_factory=lambda: get_default_log_dir())
    log_level: str = "INFO"

    # Database path from the file, and the environment value replacing it
    _file_db_path: Optional[Path] = field(default=None, init=False, repr=False, compare=False)
    _env_db_path: Optional[Path] = field(default=None, init=False, repr=False, compare=False)

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "SongRecordsConfig":
        """Load configuration from TOML file.

        Args:
            path: Path to config file (defaults to standard location)

        Returns:
            SongRecordsConfig instance with loaded values

        Raises:
            FileNotFoundError: If config file doesn't exist
        """
        if path is None:
            path = get_config_path()

        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, "rb") as f:
            data = tomllib.load(f)

        config = cls()

        # Load database path
        if "database" in data:
            db_path = data["database"].get("path")
            if db_path:
                config.db_path = Path(db_path)

        # Override database path from environment (takes precedence, never saved)
        env_db_path = os.environ.get(DB_PATH_ENV_VAR)
        if env_db_path:
            config._file_db_path = config.db_path
            config._env_db_path = Path(env_db_path)
            config.db_path = config._env_db_path

        # Load logging config
        if "logging" in data:
            log = data["logging"]
            log_dir = log.get("dir")
            if log_dir:
                config.log_dir = Path(log_dir)
            config.log_level = log.get("level", config.log_level)

        return config

    def save(self, path: Optional[Path] = None) -> None:
        """Save configuration to TOML file.

        Args:
            path: Path to save config (defaults to standard location)
        """
        if path is None:
            path = get_config_path()

        # Ensure directory exists
        path.parent.mkdir(parents=True, exist_ok=True)

        db_path = self.db_path
        if self._env_db_path is not None and db_path == self._env_db_path:
            db_path = self._file_db_path

        data = {
            "database": {"path": str(db_path)},
            "logging": {"dir": str(self.log_dir), "level": self.log_level},
        }

        with open(path, "wb") as f:
            tomli_w.dump(data, f)

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Get a configuration value by attribute name.

        Args:
            key: Configuration key (e.g. "db_path")
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        if key.startswith("_") or key not in {f.name for f in fields(self)}:
            return default

        value = getattr(self, key)
        if isinstance(value, Path):
            return str(value)
        return value

    def set(self, key: str, value: str) -> None:
        """Set a configuration value by attribute name.

        Args:
            key: Configuration key (e.g. "log_level")
            value: Configuration value

        Raises:
            ValueError: If the key is not a configuration attribute
        """
        if key.startswith("_") or key not in {f.name for f in fields(self)}:
            raise ValueError(f"Invalid config key: {key}")

        # Try to preserve type
        current = getattr(self, key)
        if isinstance(current, Path):
            new_value = Path(value)
        elif key == "log_level":
            new_value = value.upper()
        else:
            new_value = value

        setattr(self, key, new_value)


def get_config_dir() -> Path:
    """Get the platform-specific config directory.

    Returns:
        Path to the config directory for songrecords.
    """
    if sys.platform == "darwin" or sys.platform == "linux":
        xdg_config = os.environ.get("XDG_CONFIG_HOME")
        if xdg_config:
            return Path(xdg_config) / "songrecords"
        return Path.home() / ".config" / "songrecords"
    elif sys.platform == "win32":
        appdata = os.environ.get("APPDATA")
        if appdata:
            return Path(appdata) / "songrecords"
        return Path.home() / "AppData" / "Roaming" / "songrecords"
    else:
        return Path.home() / ".config" / "songrecords"


def get_config_path() -> Path:
    """Get the path to the config.toml file.

    Returns:
        Path to config.toml
    """
    return get_config_dir() / "config.toml"


def get_default_db_path() -> Path:
    """Get the default database path.

    Returns:
        Path to default database location
    """
    return get_config_dir() / "db" / "songs.db"


def get_default_log_dir() -> Path:
    """Get the default log directory."""
    return get_config_dir() / "logs"


def ensure_config_exists(path: Optional[Path] = None) -> SongRecordsConfig:
    """Ensure config file exists, creating default if needed.

    Args:
        path: Path to config file (defaults to standard location)

    Returns:
        SongRecordsConfig instance
    """
    config_path = path or get_config_path()

    if config_path.exists():
        return SongRecordsConfig.load(config_path)

    config = SongRecordsConfig()
    config.save(config_path)
    return config
