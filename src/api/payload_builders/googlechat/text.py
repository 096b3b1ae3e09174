"""Builder de resposta em texto simples e truncamento."""

from __future__ import annotations

from app.constants.googlechat import GCHAT_TEXT_LIMIT
from app.domain.envelope import ResponseEnvelope

ELLIPSIS = "..."


def truncate(text: str, limit: int = GCHAT_TEXT_LIMIT) -> str:
    """Garante que o texto caiba no limite do Google Chat.

    Texto dentro do limite volta inalterado. Acima dele, o resultado tem
    exatamente `limit` caracteres e termina com reticências.

    Args:
        text: Texto original
        limit: Tamanho máximo (default: 4096)

    Raises:
        ValueError: Se limit for negativo.
    """
    if limit < 0:
        raise ValueError(f"limit deve ser >= 0: {limit}")
    if len(text) <= limit:
        return text
    if limit <= len(ELLIPSIS):
        return ELLIPSIS[:limit]
    return text[: limit - len(ELLIPSIS)] + ELLIPSIS


class TextPayloadBuilder:
    """Builder para respostas `{text}`."""

    def build(self, text: str) -> ResponseEnvelope:
        return ResponseEnvelope(text=text)
