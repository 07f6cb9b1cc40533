"""Configuration package for asta."""

from .models import (
    AppConfig,
    EmitterConfig,
    LoggingConfig,
    AstaError,
    ConfigError,
    CONFIG_ENV_VAR,
    DISPATCH_LIVE,
    DISPATCH_SNAPSHOT,
    DISPATCH_MODES,
    safe_load_dataclass,
)

__all__ = [
    'AppConfig',
    'EmitterConfig',
    'LoggingConfig',
    'AstaError',
    'ConfigError',
    'CONFIG_ENV_VAR',
    'DISPATCH_LIVE',
    'DISPATCH_SNAPSHOT',
    'DISPATCH_MODES',
    'safe_load_dataclass',
]
