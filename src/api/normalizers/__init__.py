"""Normalizers por canal: conversão de payloads externos para modelos internos.

Estrutura:
- googlechat/: eventos de interação do Google Chat (webhook HTTP)

Cada canal tem seu próprio extractor, mantendo SRP.
"""

from .googlechat import InvalidEventError, parse_event

__all__ = [
    "InvalidEventError",
    "parse_event",
]
