"""Configuration models for the event emitter."""

import logging
import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Optional

import yaml
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "ASTA_CONFIG"

DISPATCH_SNAPSHOT = "snapshot"
DISPATCH_LIVE = "live"
DISPATCH_MODES = (DISPATCH_SNAPSHOT, DISPATCH_LIVE)


# --- CUSTOM EXCEPTIONS ---

class AstaError(Exception):
    """Base exception for asta errors."""


class ConfigError(AstaError):
    """Configuration loading error."""


# --- CONFIGURATION DATACLASSES ---

@dataclass
class EmitterConfig:
    """Configuration for emitter dispatch behavior.

    Attributes:
        dispatch: 'snapshot' copies handler lists before each emission,
            'live' iterates the lists handlers may be mutating.
        thread_safe: Guard registries with a reentrant lock.
    """
    dispatch: str = DISPATCH_SNAPSHOT
    thread_safe: bool = False

    def validate(self) -> 'EmitterConfig':
        if self.dispatch not in DISPATCH_MODES:
            raise ConfigError(
                f"Unknown dispatch mode '{self.dispatch}'. "
                f"Expected one of: {', '.join(DISPATCH_MODES)}"
            )
        if not isinstance(self.thread_safe, bool):
            raise ConfigError(
                f"thread_safe must be true or false, got {self.thread_safe!r}"
            )
        return self


@dataclass
class LoggingConfig:
    """Configuration for logging behavior."""
    level: str = "WARNING"


# --- HELPER FUNCTIONS ---

def safe_load_dataclass(dclass_type, data: Optional[dict], section_name: str):
    """Safely load a dataclass from a dictionary.

    Ignores unknown keys and logs warnings for them.

    Args:
        dclass_type: Dataclass type to instantiate
        data: Dictionary with configuration data (None means defaults)
        section_name: Name of config section (for logging)

    Returns:
        Instance of dclass_type with filtered data

    Raises:
        ConfigError: If the section is not a mapping
    """
    if data is None:
        return dclass_type()
    if not isinstance(data, dict):
        raise ConfigError(f"Section '{section_name}' must be a mapping.")

    valid_keys = {f.name for f in fields(dclass_type)}
    filtered_data = {}

    for k, v in data.items():
        if k in valid_keys:
            filtered_data[k] = v
        else:
            logger.warning(
                "Config warning: Unknown key '%s' in section '%s' ignored.",
                k, section_name
            )

    return dclass_type(**filtered_data)


@dataclass
class AppConfig:
    """Main configuration container."""
    emitter: EmitterConfig = field(default_factory=EmitterConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def load(cls, config_path: Path | str) -> 'AppConfig':
        """Load configuration from a YAML file.

        Args:
            config_path: Path to the YAML file

        Returns:
            AppConfig instance with loaded configuration

        Raises:
            ConfigError: If file not found, YAML parsing fails or
                a value is invalid
        """
        path = Path(config_path)
        if not path.exists():
            raise ConfigError(f"Configuration file '{path}' not found.")

        try:
            with path.open('r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Error parsing YAML: {e}") from e

        data = data or {}
        if not isinstance(data, dict):
            raise ConfigError(f"Configuration file '{path}' must contain a mapping.")

        emitter = safe_load_dataclass(EmitterConfig, data.get('emitter'), 'emitter')
        return cls(
            emitter=emitter.validate(),
            logging=safe_load_dataclass(LoggingConfig, data.get('logging'), 'logging'),
        )

    @classmethod
    def from_env(cls, default_path: Path | str | None = None) -> 'AppConfig':
        """Load configuration named by the ASTA_CONFIG environment variable.

        A .env file is read first. Falls back to default_path, then to
        built-in defaults.
        """
        load_dotenv()
        env_path = os.getenv(CONFIG_ENV_VAR)
        if env_path:
            logger.debug("Loading config from %s=%s", CONFIG_ENV_VAR, env_path)
            return cls.load(env_path)
        if default_path is not None:
            return cls.load(default_path)
        return cls()
