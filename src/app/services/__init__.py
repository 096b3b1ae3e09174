"""Serviços de aplicação.

Unidades reutilizáveis de decisão (sem IO direto).
Implementações concretas de IO ficam em app/infra/.
"""

from app.services.access_policy import should_respond

__all__ = [
    "should_respond",
]
