"""Stores: estado em memória compartilhado entre requests.

Módulos disponíveis:
    - policy_config_store: snapshot vigente da política do canal
"""

from __future__ import annotations

from app.infra.stores.policy_config_store import ConfigSubscription, PolicyConfigStore

__all__ = [
    "ConfigSubscription",
    "PolicyConfigStore",
]
