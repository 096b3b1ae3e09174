"""Textos fixos devolvidos ao usuário do Google Chat.

Nenhum destes textos carrega detalhes de erro interno: o usuário final
nunca vê stack trace, mensagem crua de exceção ou código de protocolo.
"""

from __future__ import annotations

GENERIC_ERROR_TEXT = "Sorry, I encountered an error processing your request. Please try again."
EMPTY_REPLY_TEXT = "I couldn't generate a response. Please try again."
INTERNAL_ERROR_TEXT = "Internal error occurred."
INVALID_EVENT_TEXT = "Invalid event"
SHUTTING_DOWN_TEXT = "Bot is shutting down"

DEFAULT_SPACE_LABEL = "this space"


def welcome_text(agent_name: str, space_label: str | None) -> str:
    """Monta a saudação enviada quando o bot entra em um espaço."""
    where = space_label or DEFAULT_SPACE_LABEL
    return (
        f"Hello! I'm {agent_name}. I'm ready to chat in {where}. "
        "Send me a message or use a slash command to get started."
    )


def action_received_text(method_name: str) -> str:
    """Texto de confirmação para clique em card."""
    return f'Action "{method_name}" received.'
