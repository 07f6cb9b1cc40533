"""Types shared by emitters and their handlers."""

from dataclasses import dataclass
from typing import Any, Callable

# Reserved event type. Subscribing to it means "every event"; it is never
# stored as a key in the per-type registry.
WILDCARD = "*"

EventHandler = Callable[[Any], None]


@dataclass(frozen=True)
class WildcardEvent:
    """Value delivered to wildcard handlers: the emitted type and its payload."""
    type: str
    event: Any
