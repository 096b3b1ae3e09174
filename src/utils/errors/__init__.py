"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    ChatApiError,
    InfrastructureError,
    PolicyConfigError,
    SessionEngineError,
)

__all__ = [
    "ChatApiError",
    "InfrastructureError",
    "PolicyConfigError",
    "SessionEngineError",
]
