"""Synchronous event emitter with wildcard and one-shot subscriptions."""

import functools
import logging
import threading
from contextlib import nullcontext
from typing import Any, Dict, List, Optional, Sequence

from ..config import DISPATCH_LIVE, EmitterConfig
from ..utils.formatters import format_handler
from .event_types import WILDCARD, EventHandler, WildcardEvent

logger = logging.getLogger(__name__)


def _same_handler(a: EventHandler, b: EventHandler) -> bool:
    """Identity match, treating bound methods of one function on one instance as equal."""
    if a is b:
        return True
    self_a = getattr(a, '__self__', None)
    if self_a is None or self_a is not getattr(b, '__self__', None):
        return False
    if type(a) is not type(b):
        return False
    func_a = getattr(a, '__func__', None)
    if func_a is not None:
        return func_a is getattr(b, '__func__', None)
    # Builtin methods (list.append, set.add) carry __self__ but no __func__.
    name_a = getattr(a, '__name__', None)
    return name_a is not None and name_a == getattr(b, '__name__', None)


def _index_of(handlers: Sequence[EventHandler], handler: EventHandler) -> int:
    for index, candidate in enumerate(handlers):
        if _same_handler(candidate, handler):
            return index
    return -1


def _call_live(handlers: List[EventHandler], value: Any) -> None:
    # Bounded by the length at call time; removals shift later handlers down.
    for index in range(len(handlers)):
        if index >= len(handlers):
            break
        handlers[index](value)


def _call_snapshot(handlers: Sequence[EventHandler], value: Any) -> None:
    for handler in handlers:
        handler(value)


class Emitter:
    """In-process event emitter.

    Handlers are plain callables taking one argument. Handlers registered
    for a type receive the emitted payload; handlers registered for
    WILDCARD ('*') receive a WildcardEvent carrying both type and payload.
    Dispatch is synchronous: exceptions raised by a handler propagate out
    of emit() and the remaining handlers of that emission are not called.

    Example:
        >>> emitter = asta()
        >>> emitter.on('greet', lambda name: print(f"Hello, {name}"))
        >>> emitter.emit('greet', 'world')
        Hello, world
    """

    def __init__(self, config: Optional[EmitterConfig] = None):
        """Initialize empty registries.

        Args:
            config: Dispatch settings (defaults to snapshot dispatch, no locking)

        Raises:
            ConfigError: If config names an unknown dispatch mode
        """
        self.config = (config or EmitterConfig()).validate()
        self._events: Dict[str, List[EventHandler]] = {}
        self._wildcard_listeners: List[EventHandler] = []
        self._lock = threading.RLock() if self.config.thread_safe else nullcontext()

    def on(self, event_type: str, handler: EventHandler) -> None:
        """Register a handler for an event type or for WILDCARD.

        The same handler may be registered more than once; it is then
        called once per registration.

        Args:
            event_type: Event type, or '*' to receive every event
            handler: Callable invoked with the payload (or WildcardEvent)
        """
        with self._lock:
            if event_type == WILDCARD:
                self._wildcard_listeners.append(handler)
            else:
                self._events.setdefault(event_type, []).append(handler)

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Subscribed %s to '%s'", format_handler(handler), event_type)

    def once(self, event_type: str, handler: EventHandler) -> None:
        """Register a handler that is called at most once.

        A wrapper is registered in place of handler and removes itself
        after its first call. Because the wrapper is what gets stored,
        off(event_type, handler) does not cancel a pending once().

        Args:
            event_type: Event type, or '*' to receive the next event of any type
            handler: Callable invoked with the payload (or WildcardEvent)
        """
        fired = False

        @functools.wraps(handler, updated=())
        def once_handler(event: Any) -> None:
            nonlocal fired
            if fired:
                return
            fired = True
            try:
                handler(event)
            finally:
                self.off(event_type, once_handler)

        self.on(event_type, once_handler)

    def off(self, event_type: str, handler: EventHandler) -> None:
        """Remove the first registration of handler for an event type.

        Unknown types and handlers are ignored. A handler registered
        several times needs one off() call per registration.

        Args:
            event_type: Event type, or '*' for wildcard handlers
            handler: The exact callable passed to on()
        """
        with self._lock:
            if event_type == WILDCARD:
                handlers = self._wildcard_listeners
            else:
                handlers = self._events.get(event_type)
            if not handlers:
                return

            index = _index_of(handlers, handler)
            if index == -1:
                return
            del handlers[index]

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Unsubscribed %s from '%s'", format_handler(handler), event_type)

    def emit(self, event_type: str, event: Any = None) -> None:
        """Call every handler for event_type, then every wildcard handler.

        Type handlers receive event; wildcard handlers receive
        WildcardEvent(type=event_type, event=event). Both groups run in
        registration order on the calling thread.

        Args:
            event_type: Event type to emit
            event: Payload passed to handlers
        """
        if self.config.dispatch == DISPATCH_LIVE:
            with self._lock:
                _call_live(self._events.get(event_type, []), event)
                _call_live(self._wildcard_listeners, WildcardEvent(event_type, event))
            return

        with self._lock:
            handlers = list(self._events.get(event_type, ()))
            wildcard_listeners = list(self._wildcard_listeners)

        _call_snapshot(handlers, event)
        if wildcard_listeners:
            _call_snapshot(wildcard_listeners, WildcardEvent(event_type, event))


def asta(config: Optional[EmitterConfig] = None) -> Emitter:
    """Create a new, independent emitter.

    Args:
        config: Optional dispatch settings

    Returns:
        Emitter with empty registries
    """
    return Emitter(config)
