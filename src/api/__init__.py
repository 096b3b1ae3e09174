"""API: camada de borda do canal Google Chat.

Responsabilidades:
- Receber eventos do webhook de interação
- Normalizar payloads para os modelos de domínio
- Construir as respostas síncronas (texto e Cards v2)

Subpastas:
- connectors/: parse inicial do corpo HTTP
- normalizers/: conversão de payloads externos → modelos internos
- payload_builders/: construção do envelope de resposta
- routes/: endpoints HTTP (webhook, health)

NÃO PODE conter: política de acesso, chamadas ao motor de sessão, estado de sessão.
"""
