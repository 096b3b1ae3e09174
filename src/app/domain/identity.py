"""Derivação de identidade e chaves de sessão.

Funções puras: mapeiam identificadores crus do Google Chat para as chaves
canônicas usadas no roteamento para o motor de sessão.
"""

from __future__ import annotations

from dataclasses import dataclass

from app.constants.googlechat import DEFAULT_AGENT_NAME, SPACE_PREFIX, USER_PREFIX

DM_KEY_PREFIX = "dm:"
GROUP_KEY_PREFIX = "group:"


@dataclass(frozen=True, slots=True)
class AgentIdentity:
    """Identidade do agente exibida em cards e saudações."""

    name: str = DEFAULT_AGENT_NAME
    emoji: str | None = None


def strip_prefix(raw: str, prefix: str) -> str:
    """Remove o prefixo de namespace quando presente.

    Idempotente: um ID já sem prefixo é devolvido inalterado.

    Args:
        raw: Identificador cru (ex.: "spaces/AAA")
        prefix: Prefixo conhecido (ex.: "spaces/")

    Returns:
        Identificador sem o prefixo.
    """
    if prefix and raw.startswith(prefix):
        return raw[len(prefix) :]
    return raw


def space_id(space_name: str) -> str:
    """ID do espaço a partir do nome do recurso."""
    return strip_prefix(space_name, SPACE_PREFIX)


def user_id(user_name: str) -> str:
    """ID do usuário a partir do nome do recurso."""
    return strip_prefix(user_name, USER_PREFIX)


def derive_session_key(surface_id: str, user_id: str, is_dm: bool) -> str:
    """Deriva a chave de sessão determinística.

    DM: uma conversa por interlocutor (`dm:{user_id}`), independente do espaço.
    Grupo: uma conversa compartilhada por grupo (`group:{surface_id}`),
    independente de quem enviou.
    """
    if is_dm:
        return f"{DM_KEY_PREFIX}{user_id}"
    return f"{GROUP_KEY_PREFIX}{surface_id}"
