"""Barramento in-process de notificações de mudança de configuração.

Substitui o mecanismo de eventos do host: quem altera a configuração
publica (chave, novo valor); assinantes recebem o valor novo. Cada assinatura
devolve uma função de cancelamento.

O serviço não publica nada sozinho: o barramento fica em app.state.config_bus
para o processo hospedeiro (ou um componente embutido) publicar mudanças da
política. Sem publicador, vale o snapshot carregado do YAML no startup.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable

    ChangeListener = Callable[[Any], None]

logger = logging.getLogger(__name__)


class ConfigChangeBus:
    """Publish/subscribe por chave de configuração."""

    def __init__(self) -> None:
        self._listeners: dict[str, list[ChangeListener]] = defaultdict(list)

    def on(self, key: str, listener: ChangeListener) -> Callable[[], None]:
        """Registra listener para a chave; retorna o cancelamento (idempotente)."""
        self._listeners[key].append(listener)

        def _unsubscribe() -> None:
            listeners = self._listeners.get(key, [])
            if listener in listeners:
                listeners.remove(listener)

        return _unsubscribe

    def publish(self, key: str, new_value: Any) -> int:
        """Entrega o novo valor aos listeners da chave.

        Falha de um listener é registrada e não impede os demais.

        Returns:
            Quantidade de listeners notificados com sucesso.
        """
        delivered = 0
        for listener in list(self._listeners.get(key, [])):
            try:
                listener(new_value)
            except Exception as exc:
                logger.warning(
                    "config_listener_failed",
                    extra={"key": key, "error_type": type(exc).__name__},
                )
                continue
            delivered += 1
        return delivered

    def listener_count(self, key: str) -> int:
        return len(self._listeners.get(key, []))
