"""Protocolo do cliente da API REST do Google Chat (envio assíncrono)."""

from __future__ import annotations

from typing import Any, Protocol


class ChatApiClientProtocol(Protocol):
    """Contrato mínimo para criar mensagens fora do ciclo do webhook."""

    async def create_message(self, space_name: str, body: dict[str, Any]) -> dict[str, Any]: ...
