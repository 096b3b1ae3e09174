"""Builders de resposta síncrona do Google Chat (texto e Cards v2)."""

from api.payload_builders.googlechat.card import CardPayloadBuilder, format_card
from api.payload_builders.googlechat.factory import (
    GoogleChatResponseFormatter,
    format_response,
)
from api.payload_builders.googlechat.text import ELLIPSIS, TextPayloadBuilder, truncate

__all__ = [
    "ELLIPSIS",
    "CardPayloadBuilder",
    "GoogleChatResponseFormatter",
    "TextPayloadBuilder",
    "format_card",
    "format_response",
    "truncate",
]
