"""Endpoint de eventos de interação do Google Chat.

Contrato HTTP:
- 200 + envelope JSON para todo evento reconhecido, inclusive quando o
  tratamento falha internamente (o Google Chat reentrega respostas não-200).
- 400 + {"text": "Invalid event"} para corpo ausente/inválido ou `type`
  ausente/desconhecido.
- 503 + {"text": "Bot is shutting down"} durante o drain.

A resposta do bot viaja no corpo do 200 (resposta síncrona).
"""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from api.connectors.googlechat.webhook import InvalidJsonError, parse_webhook_body
from api.normalizers.googlechat import InvalidEventError, parse_event
from api.routes.googlechat.webhook_runtime import get_runtime, get_shutdown_state
from app.constants.googlechat_replies import (
    INTERNAL_ERROR_TEXT,
    INVALID_EVENT_TEXT,
    SHUTTING_DOWN_TEXT,
)
from app.observability import (
    correlation_id_from_headers,
    reset_correlation_id,
    set_correlation_id,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=None)
async def receive_event(request: Request) -> JSONResponse:
    """Recebe um evento, trata e devolve a resposta síncrona."""
    token = set_correlation_id(correlation_id_from_headers(request.headers))
    shutdown = get_shutdown_state()
    try:
        if not shutdown.try_enter():
            logger.warning("webhook_rejected_draining", extra={"channel": "googlechat"})
            return JSONResponse(
                {"text": SHUTTING_DOWN_TEXT},
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            )
        try:
            return await _handle_event(request)
        finally:
            shutdown.leave()
    finally:
        reset_correlation_id(token)


async def _handle_event(request: Request) -> JSONResponse:
    raw_body = await request.body()
    try:
        payload = parse_webhook_body(raw_body)
        event = parse_event(payload)
    except (InvalidJsonError, InvalidEventError) as exc:
        logger.warning(
            "webhook_event_invalid",
            extra={
                "channel": "googlechat",
                "error": str(exc),
                "payload_size": len(raw_body),
            },
        )
        return JSONResponse(
            {"text": INVALID_EVENT_TEXT},
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    started_at = time.perf_counter()
    try:
        runtime = get_runtime()
        if runtime is None:
            raise RuntimeError("googlechat runtime not installed")

        # Snapshot único por request; trocas concorrentes não afetam este evento
        config = runtime.policy_store.snapshot()
        envelope = await runtime.dispatcher.dispatch(event, config)
    except Exception:
        logger.exception(
            "webhook_event_failed",
            extra={"channel": "googlechat", "event_type": str(event.kind)},
        )
        return JSONResponse({"text": INTERNAL_ERROR_TEXT}, status_code=status.HTTP_200_OK)

    logger.info(
        "webhook_event_handled",
        extra={
            "channel": "googlechat",
            "event_type": str(event.kind),
            "empty_reply": envelope.is_empty,
            "elapsed_ms": round((time.perf_counter() - started_at) * 1000, 2),
        },
    )
    return JSONResponse(envelope.to_dict(), status_code=status.HTTP_200_OK)
