"""Helpers de extração dos sub-registros do evento Google Chat.

Cada função recebe o bloco cru (possivelmente ausente ou malformado) e
devolve o modelo de domínio ou None. Campos ausentes viram strings vazias.
"""

from __future__ import annotations

from typing import Any

from app.constants.googlechat import SurfaceKind
from app.domain.events import (
    CardAction,
    ConversationSurface,
    Sender,
    SlashCommandAnnotation,
)
from app.domain.identity import space_id, user_id


def _str(block: dict[str, Any], key: str) -> str:
    value = block.get(key)
    return value if isinstance(value, str) else ""


def _opt_str(block: dict[str, Any], key: str) -> str | None:
    value = block.get(key)
    return value if isinstance(value, str) else None


def extract_surface(block: Any) -> ConversationSurface | None:
    """Extrai a superfície; DM quando type == DM ou singleUserBotDm."""
    if not isinstance(block, dict):
        return None
    name = _str(block, "name")
    is_dm = block.get("singleUserBotDm") is True or block.get("type") == "DM"
    return ConversationSurface(
        id=space_id(name),
        name=name,
        display_name=_opt_str(block, "displayName") or None,
        kind=SurfaceKind.DM if is_dm else SurfaceKind.GROUP,
    )


def extract_sender(block: Any) -> Sender | None:
    """Extrai remetente/usuário; bot quando type == BOT."""
    if not isinstance(block, dict):
        return None
    name = _str(block, "name")
    return Sender(
        id=user_id(name),
        name=name,
        display_name=_str(block, "displayName"),
        is_bot=block.get("type") == "BOT",
    )


def extract_thread_name(block: Any) -> str | None:
    if not isinstance(block, dict):
        return None
    return _opt_str(block, "name") or None


def extract_slash_command_id(block: Any) -> str | None:
    if not isinstance(block, dict):
        return None
    command_id = block.get("commandId")
    if command_id is None:
        return None
    return str(command_id)


def extract_annotations(raw: Any) -> tuple[SlashCommandAnnotation, ...]:
    """Mantém apenas anotações SLASH_COMMAND."""
    if not isinstance(raw, list):
        return ()
    found: list[SlashCommandAnnotation] = []
    for item in raw:
        if not isinstance(item, dict) or item.get("type") != "SLASH_COMMAND":
            continue
        block = item.get("slashCommand")
        if not isinstance(block, dict):
            continue
        found.append(
            SlashCommandAnnotation(
                command_id=str(block.get("commandId", "")),
                command_name=_opt_str(block, "commandName") or None,
            )
        )
    return tuple(found)


def extract_action(block: Any) -> CardAction | None:
    """Extrai ação de card (actionMethodName + parameters key/value)."""
    if not isinstance(block, dict):
        return None
    parameters: dict[str, str] = {}
    raw_params = block.get("parameters")
    if isinstance(raw_params, list):
        for param in raw_params:
            if isinstance(param, dict) and isinstance(param.get("key"), str):
                parameters[param["key"]] = str(param.get("value", ""))
    return CardAction(
        method_name=_str(block, "actionMethodName"),
        parameters=parameters,
    )
