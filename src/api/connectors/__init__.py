"""Connectors por canal: adapters de borda para APIs externas.

Estrutura:
- googlechat/: webhook de interação do Google Chat

Cada canal tem seu próprio connector, garantindo SRP e isolamento de falhas.
"""

__all__: list[str] = []
