"""Parse inicial do corpo do webhook (sem PII).

Assinatura/JWT do Google não é verificada aqui: é responsabilidade da
camada de transporte.
"""

from __future__ import annotations

import json


class WebhookRequestError(ValueError):
    """Erro base para falhas de webhook."""


class InvalidJsonError(WebhookRequestError):
    """JSON inválido (ou ausente) no corpo do webhook."""


def parse_webhook_body(raw_body: bytes) -> dict[str, object]:
    """Decodifica o corpo JSON do webhook.

    Corpo vazio é tratado como objeto vazio; o extractor decide depois se
    falta o tipo do evento.

    Args:
        raw_body: Corpo bruto do request

    Raises:
        InvalidJsonError: Se o JSON estiver inválido ou não for objeto

    Returns:
        Payload como dict.
    """
    try:
        payload = json.loads(raw_body or b"{}")
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise InvalidJsonError("invalid_json") from exc

    if not isinstance(payload, dict):
        raise InvalidJsonError("payload_not_object")

    return payload
