"""App: núcleo do adaptador: coordenação de eventos e infraestrutura.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- coordinators/: dispatcher de eventos e envio assíncrono
- services/: decisões puras (política de acesso)
- domain/: modelos imutáveis (eventos, política, envelope)
- infra/: implementações concretas de IO
- protocols/: contratos/interfaces
- observability/: correlation_id para logs
- constants/: constantes e textos fixos

Padrão: app executa; api adapta; utils apoia.
"""
