"""Connector Google Chat: borda HTTP do webhook de interação."""

__all__: list[str] = []
