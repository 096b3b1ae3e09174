"""Extrator de eventos de interação do Google Chat.

Converte o corpo JSON do webhook em IncomingEvent. O tipo do evento é
validado aqui, na borda: corpo ausente, sem `type` ou com tipo fora da
união fechada é rejeitado com InvalidEventError (HTTP 400).

Estrutura do evento:
- type: MESSAGE | ADDED_TO_SPACE | REMOVED_FROM_SPACE | CARD_CLICKED
- message: {name, text, argumentText, sender, space, thread, slashCommand, annotations}
- space / user / action: sub-registros opcionais
"""

from __future__ import annotations

from typing import Any

from api.normalizers.googlechat._extraction_helpers import (
    extract_action,
    extract_annotations,
    extract_sender,
    extract_slash_command_id,
    extract_surface,
    extract_thread_name,
)
from app.constants.googlechat import EventKind
from app.domain.events import ChatMessage, IncomingEvent, Sender


class InvalidEventError(ValueError):
    """Payload sem tipo de evento reconhecível."""


def parse_event(payload: Any) -> IncomingEvent:
    """Normaliza o payload do webhook.

    Args:
        payload: Corpo JSON já decodificado

    Returns:
        IncomingEvent com os sub-registros presentes.

    Raises:
        InvalidEventError: Se payload não for objeto ou `type` não for reconhecido.
    """
    if not isinstance(payload, dict) or not payload:
        raise InvalidEventError("missing_body")

    raw_type = payload.get("type")
    if not raw_type:
        raise InvalidEventError("missing_event_type")
    try:
        kind = EventKind(raw_type)
    except ValueError as exc:
        raise InvalidEventError("unknown_event_type") from exc

    space = extract_surface(payload.get("space"))
    return IncomingEvent(
        kind=kind,
        event_time=str(payload.get("eventTime", "")),
        message=_extract_message(payload.get("message"), fallback_space=payload.get("space")),
        space=space,
        user=extract_sender(payload.get("user")),
        action=extract_action(payload.get("action")),
    )


def _extract_message(block: Any, *, fallback_space: Any) -> ChatMessage | None:
    if not isinstance(block, dict):
        return None

    surface = extract_surface(block.get("space")) or extract_surface(fallback_space)
    if surface is None:
        return None
    sender = extract_sender(block.get("sender")) or Sender(id="", name="", display_name="")

    text = block.get("text")
    argument_text = block.get("argumentText")
    return ChatMessage(
        name=str(block.get("name", "")),
        text=text if isinstance(text, str) else "",
        sender=sender,
        surface=surface,
        argument_text=argument_text if isinstance(argument_text, str) else None,
        thread_name=extract_thread_name(block.get("thread")),
        slash_command_id=extract_slash_command_id(block.get("slashCommand")),
        annotations=extract_annotations(block.get("annotations")),
    )
