"""Agregador de settings do gchat_relay.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    DEFAULT_SERVICE_NAME,
    BaseSettings,
    Environment,
    get_base_settings,
)

# Channel-specific settings
from config.settings.googlechat import (
    DEFAULT_WEBHOOK_PATH,
    GoogleChatSettings,
    get_googlechat_settings,
)

# Collaborators
from config.settings.session_engine import (
    SessionEngineSettings,
    get_session_engine_settings,
)

__all__ = [
    # Constants
    "DEFAULT_SERVICE_NAME",
    "DEFAULT_WEBHOOK_PATH",
    # Base
    "BaseSettings",
    "Environment",
    # Channels
    "GoogleChatSettings",
    "SessionEngineSettings",
    "get_base_settings",
    "get_googlechat_settings",
    "get_session_engine_settings",
]
