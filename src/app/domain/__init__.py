"""Modelos de domínio do adaptador Google Chat."""

from app.domain.envelope import ResponseEnvelope
from app.domain.events import (
    CardAction,
    ChatMessage,
    ConversationSurface,
    IncomingEvent,
    Sender,
    SlashCommandAnnotation,
)
from app.domain.identity import AgentIdentity, derive_session_key, strip_prefix
from app.domain.policy_config import GroupOverride, PolicyConfig

__all__ = [
    "AgentIdentity",
    "CardAction",
    "ChatMessage",
    "ConversationSurface",
    "GroupOverride",
    "IncomingEvent",
    "PolicyConfig",
    "ResponseEnvelope",
    "Sender",
    "SlashCommandAnnotation",
    "derive_session_key",
    "strip_prefix",
]
