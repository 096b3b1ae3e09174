"""Protocolos do motor de sessão (colaborador externo de inferência).

O core só deriva a chave de sessão e delega; estado de conversa é
responsabilidade do motor.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from app.domain.identity import AgentIdentity


@dataclass(frozen=True, slots=True)
class ChannelRef:
    """Referência do canal enviada junto com a mensagem injetada."""

    id: str
    type: str
    name: str | None = None

    def to_dict(self) -> dict[str, str]:
        data = {"id": self.id, "type": self.type}
        if self.name is not None:
            data["name"] = self.name
        return data


@dataclass(frozen=True, slots=True)
class InjectionMeta:
    """Metadados de origem de uma mensagem (remetente e canal)."""

    sender: str
    channel: ChannelRef

    def to_dict(self) -> dict[str, Any]:
        return {"from": self.sender, "channel": self.channel.to_dict()}


class SessionEngineProtocol(Protocol):
    """Contrato mínimo consumido pelo dispatcher."""

    async def inject(self, session_key: str, text: str, meta: InjectionMeta) -> str:
        """Injeta mensagem na sessão e devolve a resposta do agente.

        Raises:
            SessionEngineError (ou qualquer exceção): falha do colaborador.
        """
        ...

    async def log_passive_message(self, session_key: str, text: str, meta: InjectionMeta) -> None:
        """Registra mensagem sem resposta (histórico). Best-effort."""
        ...

    async def notify_removed(self, space_id: str) -> None:
        """Notifica remoção do bot de um espaço. Best-effort."""
        ...


class AgentIdentityProviderProtocol(Protocol):
    """Fonte da identidade do agente (lida uma vez na inicialização)."""

    async def get_agent_identity(self) -> AgentIdentity: ...
