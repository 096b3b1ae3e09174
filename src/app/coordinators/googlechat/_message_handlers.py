"""Sub-caminhos de MESSAGE: slash command e mensagem comum.

Ambos injetam o texto no motor de sessão e formatam a resposta. Falha do
motor nunca chega ao chamador: vira o texto genérico de erro.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from app.constants.googlechat import CHANNEL_TYPE
from app.constants.googlechat_replies import EMPTY_REPLY_TEXT, GENERIC_ERROR_TEXT
from app.domain.identity import derive_session_key
from app.protocols.session_engine import ChannelRef, InjectionMeta
from config.logging import log_fallback

if TYPE_CHECKING:
    from app.domain.envelope import ResponseEnvelope
    from app.domain.events import ChatMessage
    from app.domain.policy_config import PolicyConfig
    from app.protocols.formatter import ResponseFormatterProtocol
    from app.protocols.session_engine import SessionEngineProtocol

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MessageRoute:
    """Destino de uma mensagem: chave de sessão + metadados de origem."""

    session_key: str
    meta: InjectionMeta


def route_for(message: ChatMessage) -> MessageRoute:
    """Deriva chave de sessão e referência de canal da mensagem."""
    surface = message.surface
    sender = message.sender
    if surface.display_name:
        channel_name = surface.display_name
    elif surface.is_dm:
        channel_name = f"DM with {sender.display_name}"
    else:
        channel_name = surface.id
    return MessageRoute(
        session_key=derive_session_key(surface.id, sender.id, surface.is_dm),
        meta=InjectionMeta(
            sender=sender.display_name,
            channel=ChannelRef(id=surface.id, type=CHANNEL_TYPE, name=channel_name),
        ),
    )


def passive_route_for(message: ChatMessage) -> MessageRoute:
    """Rota para log passivo (canal sem nome)."""
    route = route_for(message)
    channel = ChannelRef(id=route.meta.channel.id, type=CHANNEL_TYPE)
    return MessageRoute(
        session_key=route.session_key,
        meta=InjectionMeta(sender=route.meta.sender, channel=channel),
    )


def resolve_command_name(message: ChatMessage) -> str:
    """Nome legível do comando (anotação) ou nome sintetizado pelo ID."""
    for annotation in message.annotations:
        if annotation.command_name:
            return annotation.command_name
    return f"command-{message.slash_command_id}"


class MessageHandlers:
    """Executa os sub-caminhos de mensagem já autorizada."""

    def __init__(
        self,
        *,
        session_engine: SessionEngineProtocol,
        formatter: ResponseFormatterProtocol,
        agent_name: str,
    ) -> None:
        self._session_engine = session_engine
        self._formatter = formatter
        self._agent_name = agent_name

    async def handle(self, message: ChatMessage, config: PolicyConfig) -> ResponseEnvelope:
        if message.is_slash_command:
            return await self.handle_command(message, config)
        return await self.handle_plain(message, config)

    async def handle_command(self, message: ChatMessage, config: PolicyConfig) -> ResponseEnvelope:
        """Sub-caminho de slash command: injeta `/{nome} {argumentos}`."""
        command_name = resolve_command_name(message)
        arguments = (message.argument_text or "").strip()
        prompt = f"/{command_name} {arguments}".strip()
        route = route_for(message)

        logger.info(
            "slash_command_received",
            extra={
                "channel": "googlechat",
                "command_id": message.slash_command_id,
                "command_name": command_name,
                "arguments_len": len(arguments),
            },
        )

        try:
            reply = await self._session_engine.inject(route.session_key, prompt, route.meta)
        except Exception as exc:
            logger.error(
                "slash_command_failed",
                extra={
                    "channel": "googlechat",
                    "command_id": message.slash_command_id,
                    "error_type": type(exc).__name__,
                },
            )
            log_fallback(logger, "slash_command", reason="session_engine_error")
            return self._format(GENERIC_ERROR_TEXT, config)

        return self._format(reply, config)

    async def handle_plain(self, message: ChatMessage, config: PolicyConfig) -> ResponseEnvelope:
        """Sub-caminho de mensagem comum, com thread opcional."""
        if message.argument_text is not None:
            text = message.argument_text.strip()
        else:
            text = message.text
        route = route_for(message)

        logger.debug(
            "message_received",
            extra={
                "channel": "googlechat",
                "space_id": route.meta.channel.id,
                "is_dm": message.surface.is_dm,
                "text_len": len(text),
            },
        )

        try:
            reply = await self._session_engine.inject(route.session_key, text, route.meta)
        except Exception as exc:
            logger.error(
                "inject_failed",
                extra={"channel": "googlechat", "error_type": type(exc).__name__},
            )
            log_fallback(logger, "plain_message", reason="session_engine_error")
            return self._format(GENERIC_ERROR_TEXT, config)

        if not reply:
            log_fallback(logger, "plain_message", reason="empty_reply")
            reply = EMPTY_REPLY_TEXT

        envelope = self._format(reply, config)
        if config.threading_mode == "thread":
            envelope = envelope.with_thread(message.thread_name)
        return envelope

    def _format(self, text: str, config: PolicyConfig) -> ResponseEnvelope:
        return self._formatter.format_response(text, config, self._agent_name)
