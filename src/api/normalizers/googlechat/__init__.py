"""Normalizer Google Chat: payload do webhook para IncomingEvent."""

from .extractor import InvalidEventError, parse_event

__all__ = [
    "InvalidEventError",
    "parse_event",
]
