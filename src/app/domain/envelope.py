"""Envelope de resposta síncrona do Google Chat."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from app.constants.googlechat import ActionResponseType


@dataclass(frozen=True, slots=True)
class ResponseEnvelope:
    """Resposta completa devolvida para um único evento.

    `text` e `cards` são mutuamente exclusivos na camada de formatação;
    ambos podem vir acompanhados de `thread_key` e `action_response`.
    O envelope vazio serializa para `{}`.
    """

    text: str | None = None
    cards: tuple[dict[str, Any], ...] | None = None
    thread_key: str | None = None
    action_response: ActionResponseType | None = None

    @classmethod
    def empty(cls) -> ResponseEnvelope:
        return cls()

    @property
    def is_empty(self) -> bool:
        return (
            self.text is None
            and self.cards is None
            and self.thread_key is None
            and self.action_response is None
        )

    def with_thread(self, thread_key: str | None) -> ResponseEnvelope:
        """Cópia com referência de thread (no-op se thread_key for None)."""
        if thread_key is None:
            return self
        return replace(self, thread_key=thread_key)

    def to_dict(self) -> dict[str, Any]:
        """Serializa no formato JSON esperado pelo Google Chat."""
        body: dict[str, Any] = {}
        if self.text is not None:
            body["text"] = self.text
        if self.cards is not None:
            body["cardsV2"] = list(self.cards)
        if self.thread_key is not None:
            body["thread"] = {"threadKey": self.thread_key}
        if self.action_response is not None:
            body["actionResponse"] = {"type": self.action_response.value}
        return body
