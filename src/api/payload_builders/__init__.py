"""Payload builders por canal: construção das respostas devolvidas ao canal.

Estrutura:
- googlechat/: resposta síncrona do Google Chat (texto e Cards v2)

Cada canal tem seus próprios builders, garantindo SRP e isolamento de falhas.
"""

__all__: list[str] = []
