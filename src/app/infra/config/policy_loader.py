"""Loader da política do canal a partir de YAML.

Aceita a política em `channels.googlechat` (formato da configuração do host)
ou direto na raiz do documento. Arquivo ausente resulta na política padrão.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from app.domain.policy_config import PolicyConfig
from utils.errors import PolicyConfigError

logger = logging.getLogger(__name__)

POLICY_CONFIG_KEY = "channels.googlechat"


def parse_policy_config(raw: Any) -> PolicyConfig:
    """Valida um valor cru (dict ou None) como PolicyConfig.

    Raises:
        PolicyConfigError: Se o valor não for dict ou tiver campos inválidos.
    """
    if raw is None:
        return PolicyConfig()
    if isinstance(raw, PolicyConfig):
        return raw
    if not isinstance(raw, dict):
        raise PolicyConfigError(f"Política deve ser um dicionário, recebido {type(raw).__name__}")
    try:
        return PolicyConfig.model_validate(raw)
    except ValidationError as exc:
        raise PolicyConfigError(f"Política inválida: {exc.error_count()} erro(s)") from exc


def _select_section(document: dict[str, Any]) -> Any:
    channels = document.get("channels")
    if isinstance(channels, dict) and "googlechat" in channels:
        return channels["googlechat"]
    return document


def load_policy_config(path: str | Path | None) -> PolicyConfig:
    """Carrega a política do arquivo YAML.

    Args:
        path: Caminho do YAML (None ou vazio = política padrão)

    Raises:
        PolicyConfigError: Se o YAML for inválido ou a política não validar.
    """
    if not path:
        return PolicyConfig()

    file_path = Path(path)
    if not file_path.exists():
        logger.warning("policy_config_file_missing", extra={"path": str(file_path)})
        return PolicyConfig()

    try:
        with file_path.open("r", encoding="utf-8") as f:
            document = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise PolicyConfigError(f"YAML inválido em {file_path}") from exc

    if document is None:
        return PolicyConfig()
    if not isinstance(document, dict):
        raise PolicyConfigError("YAML da política deve ser um dicionário")

    config = parse_policy_config(_select_section(document))
    logger.info(
        "policy_config_loaded",
        extra={
            "path": str(file_path),
            "dm_policy": config.dm_policy,
            "group_policy": config.group_policy,
        },
    )
    return config
