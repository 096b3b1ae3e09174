"""Channel provider do Google Chat para o host.

Outros componentes registram comandos e parsers de mensagem aqui e usam
send() para mensagens assíncronas (fora do ciclo síncrono do webhook).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from app.constants.googlechat import CHANNEL_TYPE, SPACE_PREFIX

if TYPE_CHECKING:
    from collections.abc import Callable

    from app.domain.identity import AgentIdentity
    from app.infra.stores.policy_config_store import PolicyConfigStore
    from app.protocols.chat_api import ChatApiClientProtocol
    from app.protocols.formatter import ResponseFormatterProtocol

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ChannelCommand:
    """Comando de canal registrado por outro componente."""

    name: str
    description: str = ""
    handler: Callable[..., Any] | None = None


@dataclass(frozen=True, slots=True)
class ChannelMessageParser:
    """Parser de mensagem registrado por outro componente."""

    id: str
    pattern: str = ""
    handler: Callable[..., Any] | None = field(default=None, compare=False)


class GoogleChatChannelProvider:
    """Registro de comandos/parsers e envio assíncrono.

    Args:
        chat_client: Cliente da API REST (None = modo somente webhook)
        formatter: Formatação texto/card
        policy_store: Fonte do snapshot vigente (use_rich_format, theme_color)
        agent_identity: Identidade do agente
    """

    id = CHANNEL_TYPE

    def __init__(
        self,
        *,
        chat_client: ChatApiClientProtocol | None,
        formatter: ResponseFormatterProtocol,
        policy_store: PolicyConfigStore,
        agent_identity: AgentIdentity,
    ) -> None:
        self._chat_client = chat_client
        self._formatter = formatter
        self._policy_store = policy_store
        self._agent = agent_identity
        self._commands: dict[str, ChannelCommand] = {}
        self._parsers: dict[str, ChannelMessageParser] = {}

    def register_command(self, command: ChannelCommand) -> None:
        self._commands[command.name] = command
        logger.info("channel_command_registered", extra={"command_name": command.name})

    def unregister_command(self, name: str) -> None:
        self._commands.pop(name, None)

    def get_commands(self) -> list[ChannelCommand]:
        return list(self._commands.values())

    def add_message_parser(self, parser: ChannelMessageParser) -> None:
        self._parsers[parser.id] = parser
        logger.info("message_parser_registered", extra={"parser_id": parser.id})

    def remove_message_parser(self, parser_id: str) -> None:
        self._parsers.pop(parser_id, None)

    def get_message_parsers(self) -> list[ChannelMessageParser]:
        return list(self._parsers.values())

    def get_bot_username(self) -> str:
        return self._agent.name

    async def send(self, channel_id: str, content: str) -> None:
        """Envia mensagem a um espaço (ID cru ou spaces/ID).

        Sem cliente configurado, registra erro e retorna sem enviar.

        Raises:
            ChatApiError: Falha da API (registrada e propagada).
        """
        if self._chat_client is None:
            logger.error(
                "chat_api_client_not_initialized",
                extra={"channel": "googlechat", "channel_id": channel_id},
            )
            return

        space_name = (
            channel_id if channel_id.startswith(SPACE_PREFIX) else f"{SPACE_PREFIX}{channel_id}"
        )
        envelope = self._formatter.format_response(
            content,
            self._policy_store.snapshot(),
            self._agent.name,
        )
        try:
            await self._chat_client.create_message(space_name, envelope.to_dict())
        except Exception as exc:
            logger.error(
                "channel_send_failed",
                extra={
                    "channel": "googlechat",
                    "channel_id": channel_id,
                    "error_type": type(exc).__name__,
                },
            )
            raise
