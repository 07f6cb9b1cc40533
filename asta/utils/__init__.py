"""Utility functions for asta."""

from .formatters import format_payload, format_handler
from .logging_setup import setup_logging, configure_logging

__all__ = [
    'format_payload',
    'format_handler',
    'setup_logging',
    'configure_logging',
]
