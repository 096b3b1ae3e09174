"""Correlation_id por request, propagado via ContextVar.

Uso:
    token = set_correlation_id(correlation_id_from_headers(request.headers))
    try:
        ...
    finally:
        reset_correlation_id(token)
"""

from __future__ import annotations

import uuid
from contextvars import ContextVar, Token
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

# Ordem de preferência; o trace do Cloud vem como "TRACE_ID/SPAN_ID;o=1"
CORRELATION_HEADERS = ("x-correlation-id", "x-cloud-trace-context")

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def get_correlation_id() -> str:
    """Retorna o correlation_id do contexto atual (vazio se não definido)."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o correlation_id no contexto atual.

    Args:
        correlation_id: ID a definir. Se None/vazio, gera um novo UUID.

    Returns:
        Token para reset posterior via reset_correlation_id().
    """
    value = correlation_id or generate_correlation_id()
    return _correlation_id.set(value)


def reset_correlation_id(token: Token[str]) -> None:
    _correlation_id.reset(token)


def generate_correlation_id() -> str:
    return str(uuid.uuid4())


def correlation_id_from_headers(headers: Mapping[str, str]) -> str | None:
    """Extrai correlation_id dos headers do request, se presente."""
    for header in CORRELATION_HEADERS:
        value = headers.get(header)
        if value:
            return value.split("/", 1)[0].strip() or None
    return None
