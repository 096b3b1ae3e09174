"""Dispatcher de eventos do Google Chat.

Máquina de estados por evento (nada persiste entre requests):

    Classify -> Authorize -> Handle -> Format

A saída é sempre um ResponseEnvelope. Falhas do motor de sessão são
absorvidas nos sub-caminhos de mensagem; canais laterais (log passivo,
notificação de remoção) rodam em background e nunca afetam a resposta.
Qualquer outra exceção sobe para a borda do webhook, que responde 200.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.constants.googlechat import ActionResponseType, EventKind
from app.constants.googlechat_replies import action_received_text, welcome_text
from app.coordinators.googlechat._message_handlers import MessageHandlers, passive_route_for
from app.coordinators.googlechat.background import schedule_side_effect
from app.domain.envelope import ResponseEnvelope
from app.domain.identity import AgentIdentity
from app.services.access_policy import should_respond

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable
    from typing import Any

    from app.domain.events import IncomingEvent
    from app.domain.policy_config import PolicyConfig
    from app.protocols.formatter import ResponseFormatterProtocol
    from app.protocols.session_engine import SessionEngineProtocol

    EventHandler = Callable[[IncomingEvent, PolicyConfig], Awaitable[ResponseEnvelope]]
    SideEffectScheduler = Callable[[str, Awaitable[Any]], object]

logger = logging.getLogger(__name__)


class EventDispatcher:
    """Roteia cada tipo de evento para seu caminho de tratamento.

    Args:
        session_engine: Colaborador de injeção/log passivo/remoção
        formatter: Formatação texto/card
        agent_identity: Identidade do agente (cacheada na inicialização)
        schedule: Agendador de chamadas best-effort (default: tasks em background)
    """

    def __init__(
        self,
        *,
        session_engine: SessionEngineProtocol,
        formatter: ResponseFormatterProtocol,
        agent_identity: AgentIdentity | None = None,
        schedule: SideEffectScheduler = schedule_side_effect,
    ) -> None:
        self._session_engine = session_engine
        self._formatter = formatter
        self._agent = agent_identity or AgentIdentity()
        self._schedule = schedule
        self._messages = MessageHandlers(
            session_engine=session_engine,
            formatter=formatter,
            agent_name=self._agent.name,
        )
        self._handlers: dict[EventKind, EventHandler] = {
            EventKind.REMOVED_FROM_SPACE: self._on_removed,
            EventKind.ADDED_TO_SPACE: self._on_added,
            EventKind.CARD_CLICKED: self._on_card_clicked,
            EventKind.MESSAGE: self._on_message,
        }

    @property
    def agent_identity(self) -> AgentIdentity:
        return self._agent

    async def dispatch(self, event: IncomingEvent, config: PolicyConfig) -> ResponseEnvelope:
        """Trata o evento com o snapshot de política capturado no request."""
        handler = self._handlers.get(event.kind)
        if handler is None:
            logger.warning(
                "event_kind_unhandled",
                extra={"channel": "googlechat", "event_type": str(event.kind)},
            )
            return ResponseEnvelope.empty()
        return await handler(event, config)

    async def _on_removed(self, event: IncomingEvent, config: PolicyConfig) -> ResponseEnvelope:
        surface = event.surface
        space_id = surface.id if surface is not None else ""
        logger.info("removed_from_space", extra={"channel": "googlechat", "space_id": space_id})
        self._fire("notify_removed", lambda: self._session_engine.notify_removed(space_id))
        return ResponseEnvelope.empty()

    async def _on_added(self, event: IncomingEvent, config: PolicyConfig) -> ResponseEnvelope:
        surface = event.surface
        logger.info(
            "added_to_space",
            extra={
                "channel": "googlechat",
                "space_id": surface.id if surface is not None else "",
                "surface_kind": str(surface.kind) if surface is not None else "",
                "with_mention": bool(event.message and event.message.text),
            },
        )

        # Entrada no espaço via @menção: a mensagem tem prioridade sobre a saudação
        if event.message is not None and event.message.text:
            return await self._messages.handle(event.message, config)

        label = surface.display_name if surface is not None else None
        return self._formatter.format_response(
            welcome_text(self._agent.name, label),
            config,
            self._agent.name,
        )

    async def _on_card_clicked(
        self, event: IncomingEvent, config: PolicyConfig
    ) -> ResponseEnvelope:
        if event.action is None:
            return ResponseEnvelope.empty()

        logger.info(
            "card_clicked",
            extra={
                "channel": "googlechat",
                "method_name": event.action.method_name,
                "parameter_keys": sorted(event.action.parameters),
            },
        )
        return ResponseEnvelope(
            text=action_received_text(event.action.method_name),
            action_response=ActionResponseType.UPDATE_MESSAGE,
        )

    async def _on_message(self, event: IncomingEvent, config: PolicyConfig) -> ResponseEnvelope:
        if not should_respond(event, config):
            self._log_passively(event)
            return ResponseEnvelope.empty()
        if event.message is None:
            return ResponseEnvelope.empty()
        return await self._messages.handle(event.message, config)

    def _log_passively(self, event: IncomingEvent) -> None:
        message = event.message
        if message is None:
            return
        route = passive_route_for(message)
        logger.debug(
            "message_not_answered",
            extra={
                "channel": "googlechat",
                "space_id": route.meta.channel.id,
                "is_dm": message.surface.is_dm,
            },
        )
        self._fire(
            "log_passive_message",
            lambda: self._session_engine.log_passive_message(
                route.session_key, message.text, route.meta
            ),
        )

    def _fire(self, name: str, call: Callable[[], Awaitable[Any]]) -> None:
        """Dispara chamada best-effort; falha ao agendar também é descartada."""
        try:
            self._schedule(name, call())
        except Exception as exc:
            logger.warning(
                "side_effect_failed",
                extra={
                    "channel": "googlechat",
                    "side_effect": name,
                    "error_type": type(exc).__name__,
                },
            )
