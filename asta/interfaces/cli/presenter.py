"""CLI presentation layer for emitter activity.

This module prints every emission of an attached emitter to the console,
which is handy when wiring handlers together in scripts and notebooks.
"""

from collections import Counter

from ...core import WILDCARD, Emitter, WildcardEvent
from ...utils import format_payload


class EventTracePresenter:
    """Prints one line per emission of the emitters it is attached to.

    Subscribes as a wildcard handler, so it sees every event type:
    - '<type>: <payload>' line for each emission
    - per-type counts for a closing summary

    Example:
        emitter = asta()
        presenter = EventTracePresenter()
        presenter.attach(emitter)

        emitter.emit('saved', {'id': 1})   # prints "  saved: {'id': 1}"
        print(presenter.summary())         # "1 events (saved x1)"
    """

    def __init__(self, max_width: int = 60, indent: int = 2):
        """Initialize CLI presenter.

        Args:
            max_width: Longest payload rendering before truncation
            indent: Number of spaces before each trace line
        """
        self.max_width = max_width
        self.indent = indent
        self.counts: Counter[str] = Counter()

    def attach(self, emitter: Emitter):
        """Subscribe to all events of emitter.

        Args:
            emitter: Emitter to trace
        """
        emitter.on(WILDCARD, self._on_event)

    def detach(self, emitter: Emitter):
        """Stop tracing emitter. Does nothing if not attached."""
        emitter.off(WILDCARD, self._on_event)

    def _on_event(self, wildcard_event: WildcardEvent):
        self.counts[wildcard_event.type] += 1
        payload = format_payload(wildcard_event.event, self.max_width)
        self.print_info(f"{wildcard_event.type}: {payload}", indent=self.indent)

    def summary(self) -> str:
        """Format counts of traced events, most frequent first.

        Returns:
            e.g. '3 events (saved x2, deleted x1)'
        """
        total = sum(self.counts.values())
        if not total:
            return "0 events"
        parts = ", ".join(f"{name} x{count}" for name, count in self.counts.most_common())
        return f"{total} events ({parts})"

    @staticmethod
    def print_info(msg: str, indent: int = 2):
        """Print info message with indentation.

        Args:
            msg: Message to print
            indent: Number of spaces to indent
        """
        prefix = " " * indent
        print(f"{prefix}{msg}")
