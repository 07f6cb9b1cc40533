"""Formatting utilities for presenting events and handlers."""

from typing import Any, Callable


def format_payload(value: Any, max_width: int = 60) -> str:
    """Format an event payload for display.

    Uses repr() and truncates long output:
    - 'hi' -> "'hi'"
    - list(range(100)) -> '[0, 1, 2, 3, ...'

    Args:
        value: Payload to format
        max_width: Maximum length of the result, including the ellipsis

    Returns:
        Formatted string representation
    """
    text = repr(value)
    if len(text) <= max_width:
        return text
    if max_width <= 3:
        return "..."[:max_width]
    return text[:max_width - 3] + "..."


def format_handler(handler: Callable) -> str:
    """Return a readable name for a handler.

    Functions and bound methods render as their qualified name,
    anything else (callable instances, partials) as repr().
    """
    name = getattr(handler, '__qualname__', None)
    if name is None:
        return repr(handler)
    module = getattr(handler, '__module__', None)
    return f"{module}.{name}" if module else name
