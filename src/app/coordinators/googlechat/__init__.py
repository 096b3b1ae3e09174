"""Coordenação de eventos e envio do Google Chat."""

from app.coordinators.googlechat.channel_provider import (
    ChannelCommand,
    ChannelMessageParser,
    GoogleChatChannelProvider,
)
from app.coordinators.googlechat.dispatcher import EventDispatcher

__all__ = [
    "ChannelCommand",
    "ChannelMessageParser",
    "EventDispatcher",
    "GoogleChatChannelProvider",
]
