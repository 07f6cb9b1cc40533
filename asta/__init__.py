"""asta: a minimal synchronous event emitter.

Example:
    >>> from asta import asta
    >>> emitter = asta()
    >>> emitter.on('*', lambda e: print(e.type, e.event))
    >>> emitter.emit('saved', {'id': 1})
    saved {'id': 1}
"""

from .config import AppConfig, EmitterConfig, AstaError, ConfigError
from .core import WILDCARD, EventHandler, WildcardEvent, Emitter, asta

__all__ = [
    'asta',
    'Emitter',
    'EventHandler',
    'WildcardEvent',
    'WILDCARD',
    'AppConfig',
    'EmitterConfig',
    'AstaError',
    'ConfigError',
]
