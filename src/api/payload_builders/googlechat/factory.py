"""Seleção de formato (texto ou card) conforme a política vigente."""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.payload_builders.googlechat.card import CardPayloadBuilder
from api.payload_builders.googlechat.text import TextPayloadBuilder, truncate

if TYPE_CHECKING:
    from app.domain.envelope import ResponseEnvelope
    from app.domain.policy_config import PolicyConfig

_TEXT_BUILDER = TextPayloadBuilder()
_CARD_BUILDER = CardPayloadBuilder()


def format_response(text: str, config: PolicyConfig, agent_name: str) -> ResponseEnvelope:
    """Trunca o texto e monta o envelope no formato configurado.

    Args:
        text: Texto da resposta
        config: Snapshot da política (use_rich_format, theme_color)
        agent_name: Nome do agente para o header do card

    Returns:
        Envelope `{cardsV2}` se use_rich_format, senão `{text}`.
    """
    safe_text = truncate(text)
    if config.use_rich_format:
        return _CARD_BUILDER.build(safe_text, agent_name, config.theme_color)
    return _TEXT_BUILDER.build(safe_text)


class GoogleChatResponseFormatter:
    """Implementação de ResponseFormatterProtocol injetada no dispatcher."""

    def format_response(
        self,
        text: str,
        config: PolicyConfig,
        agent_name: str,
    ) -> ResponseEnvelope:
        return format_response(text, config, agent_name)
