"""Protocolos e contratos do core da aplicação."""

from .chat_api import ChatApiClientProtocol
from .formatter import ResponseFormatterProtocol
from .session_engine import (
    AgentIdentityProviderProtocol,
    ChannelRef,
    InjectionMeta,
    SessionEngineProtocol,
)

__all__ = [
    "AgentIdentityProviderProtocol",
    "ChannelRef",
    "ChatApiClientProtocol",
    "InjectionMeta",
    "ResponseFormatterProtocol",
    "SessionEngineProtocol",
]
