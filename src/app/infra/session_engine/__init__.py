"""Adapter HTTP do motor de sessão."""

from app.infra.session_engine.http_client import HttpSessionEngineClient

__all__ = ["HttpSessionEngineClient"]
