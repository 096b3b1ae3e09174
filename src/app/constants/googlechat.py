"""Enums e constantes do canal Google Chat."""

from __future__ import annotations

from enum import StrEnum

# Limite de caracteres de uma mensagem síncrona do Google Chat
GCHAT_TEXT_LIMIT = 4096

CHANNEL_TYPE = "googlechat"
SPACE_PREFIX = "spaces/"
USER_PREFIX = "users/"

DEFAULT_AGENT_NAME = "Relay"


class EventKind(StrEnum):
    """Tipos de evento de interação entregues pelo Google Chat."""

    MESSAGE = "MESSAGE"
    ADDED_TO_SPACE = "ADDED_TO_SPACE"
    REMOVED_FROM_SPACE = "REMOVED_FROM_SPACE"
    CARD_CLICKED = "CARD_CLICKED"


class SurfaceKind(StrEnum):
    """Tipo de superfície de conversa."""

    DM = "DM"
    GROUP = "GROUP"


class ActionResponseType(StrEnum):
    """Tipos de actionResponse aceitos na resposta síncrona."""

    NEW_MESSAGE = "NEW_MESSAGE"
    UPDATE_MESSAGE = "UPDATE_MESSAGE"
