"""Política de acesso: decide se o bot deve responder a um evento.

Função pura e total: mesma entrada, mesma saída, sem IO. A tabela de
decisão é avaliada de cima para baixo (primeiro match vence):

    REMOVED_FROM_SPACE                                   -> False
    ADDED_TO_SPACE / CARD_CLICKED                        -> True
    MESSAGE sem payload ou remetente bot                 -> False
    MESSAGE em DM:    closed -> False | open -> True
                      pairing -> allowFrom vazio/curinga ou remetente listado
    MESSAGE em grupo: disabled -> False | open -> True
                      allowlist -> entrada do grupo existente, enabled e allowed
    qualquer outro caso                                  -> False
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.constants.googlechat import EventKind

if TYPE_CHECKING:
    from app.domain.events import ChatMessage, IncomingEvent
    from app.domain.policy_config import PolicyConfig

_ALWAYS_ANSWERED = frozenset({EventKind.ADDED_TO_SPACE, EventKind.CARD_CLICKED})


def should_respond(event: IncomingEvent, config: PolicyConfig) -> bool:
    """Aplica a política de DM/grupo ao evento.

    Args:
        event: Evento já normalizado
        config: Snapshot da política capturado na entrada do request

    Returns:
        True se o evento deve receber resposta.
    """
    if event.kind is EventKind.REMOVED_FROM_SPACE:
        return False
    if event.kind in _ALWAYS_ANSWERED:
        return True
    if event.kind is not EventKind.MESSAGE or event.message is None:
        return False

    message = event.message
    if message.sender.is_bot:
        return False
    if message.surface.is_dm:
        return _dm_allowed(message, config)
    return _group_allowed(message, config)


def _dm_allowed(message: ChatMessage, config: PolicyConfig) -> bool:
    if config.dm_policy == "closed":
        return False
    if config.dm_policy == "open":
        return True
    # pairing
    if config.allows_any_dm_sender:
        return True
    return message.sender.id in config.allow_from


def _group_allowed(message: ChatMessage, config: PolicyConfig) -> bool:
    if config.group_policy == "disabled":
        return False
    if config.group_policy == "open":
        return True
    # allowlist
    entry = config.per_group_override.get(message.surface.id)
    if entry is None:
        return False
    return entry.enabled and entry.allowed
