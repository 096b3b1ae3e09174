"""Snapshot imutável da configuração de política do canal.

Chaves externas chegam em camelCase (dmPolicy, allowFrom, ...); nomes em
snake_case também são aceitos. Campos desconhecidos são ignorados e valores
fora do domínio são rejeitados pelo Pydantic.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

DmPolicy = Literal["open", "pairing", "closed"]
GroupPolicy = Literal["allowlist", "open", "disabled"]
ThreadingMode = Literal["off", "thread"]

ALLOW_ALL = "*"


class GroupOverride(BaseModel):
    """Entrada de allowlist para um grupo específico."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    allowed: bool = Field(default=True, description="Grupo liberado para respostas.")
    enabled: bool = Field(default=True, description="Entrada ativa.")


class PolicyConfig(BaseModel):
    """Configuração de acesso e formatação consumida a cada request.

    Nunca é mutada: mudanças externas produzem um novo snapshot que substitui
    o anterior de uma vez (ver PolicyConfigStore).
    """

    model_config = ConfigDict(
        extra="ignore",
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        # IDs numéricos sem aspas no YAML viram string
        coerce_numbers_to_str=True,
    )

    dm_policy: DmPolicy = "pairing"
    allow_from: frozenset[str] = Field(default_factory=frozenset)
    group_policy: GroupPolicy = "open"
    per_group_override: dict[str, GroupOverride] = Field(default_factory=dict)
    use_rich_format: bool = False
    theme_color: str | None = None
    threading_mode: ThreadingMode = "off"

    @property
    def allows_any_dm_sender(self) -> bool:
        """Pairing sem allowFrom (ou com curinga) equivale a aberto."""
        return not self.allow_from or ALLOW_ALL in self.allow_from
