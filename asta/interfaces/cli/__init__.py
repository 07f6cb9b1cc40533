"""Console presentation of emitter activity."""

from .presenter import EventTracePresenter

__all__ = ['EventTracePresenter']
