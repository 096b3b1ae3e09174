"""Recepção do webhook Google Chat."""

from .receive import InvalidJsonError, WebhookRequestError, parse_webhook_body

__all__ = [
    "InvalidJsonError",
    "WebhookRequestError",
    "parse_webhook_body",
]
