"""Protocolo de formatação da resposta síncrona."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.domain.envelope import ResponseEnvelope
    from app.domain.policy_config import PolicyConfig


class ResponseFormatterProtocol(Protocol):
    """Contrato para transformar texto em envelope (texto ou card)."""

    def format_response(
        self,
        text: str,
        config: PolicyConfig,
        agent_name: str,
    ) -> ResponseEnvelope: ...
