"""Fontes de configuração dinâmica (política do canal)."""

from app.infra.config.change_bus import ConfigChangeBus
from app.infra.config.policy_loader import (
    POLICY_CONFIG_KEY,
    load_policy_config,
    parse_policy_config,
)

__all__ = [
    "POLICY_CONFIG_KEY",
    "ConfigChangeBus",
    "load_policy_config",
    "parse_policy_config",
]
