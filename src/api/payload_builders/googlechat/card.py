"""Builder de resposta em Cards v2."""

from __future__ import annotations

import time
from typing import Any
from uuid import uuid4

from app.constants.googlechat import DEFAULT_AGENT_NAME
from app.domain.envelope import ResponseEnvelope

CARD_ID_PREFIX = "gchat-relay-response"


def new_card_id() -> str:
    """Gera cardId único (timestamp em ms + sufixo aleatório)."""
    return f"{CARD_ID_PREFIX}-{int(time.time() * 1000)}-{uuid4().hex}"


def format_card(
    text: str,
    agent_name: str,
    theme_color: str | None = None,
) -> dict[str, Any]:
    """Monta um card com um header e uma seção de texto.

    Cada chamada gera um cardId novo, mesmo com argumentos idênticos.

    Args:
        text: Conteúdo do parágrafo
        agent_name: Título do header (fallback para o nome padrão se vazio)
        theme_color: Cor opcional, anexada como metadado do header

    Returns:
        Item de `cardsV2` ({"cardId": ..., "card": {...}}).
    """
    header: dict[str, Any] = {
        "title": agent_name or DEFAULT_AGENT_NAME,
        "imageType": "CIRCLE",
    }
    if theme_color:
        header["imageAltText"] = theme_color

    return {
        "cardId": new_card_id(),
        "card": {
            "header": header,
            "sections": [
                {"widgets": [{"textParagraph": {"text": text}}]},
            ],
        },
    }


class CardPayloadBuilder:
    """Builder para respostas `{cardsV2}`."""

    def build(
        self,
        text: str,
        agent_name: str,
        theme_color: str | None = None,
    ) -> ResponseEnvelope:
        return ResponseEnvelope(cards=(format_card(text, agent_name, theme_color),))
