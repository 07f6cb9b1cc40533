"""Core emitter logic."""

from .event_types import WILDCARD, EventHandler, WildcardEvent
from .emitter import Emitter, asta

__all__ = [
    'WILDCARD',
    'EventHandler',
    'WildcardEvent',
    'Emitter',
    'asta',
]
