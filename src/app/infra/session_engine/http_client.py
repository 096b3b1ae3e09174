"""Cliente HTTP do motor de sessão.

Implementação concreta de IO (httpx) dos protocolos SessionEngineProtocol e
AgentIdentityProviderProtocol. Sem retry: falhas sobem como
SessionEngineError e o dispatcher decide o que mostrar ao usuário.

Endpoints:
- POST {base}/sessions/{key}/inject      -> {"text": "..."}
- POST {base}/sessions/{key}/messages    (log passivo)
- POST {base}/channels/googlechat/removed
- GET  {base}/identity                   -> {"name": "...", "emoji": "..."}
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

import httpx

from app.constants.googlechat import CHANNEL_TYPE
from app.domain.identity import AgentIdentity
from utils.errors import SessionEngineError

if TYPE_CHECKING:
    from app.protocols.session_engine import InjectionMeta

logger = logging.getLogger(__name__)


class HttpSessionEngineClient:
    """Adapter httpx para o motor de sessão.

    Args:
        http_client: Cliente httpx compartilhado (ciclo de vida do app)
        base_url: URL base do motor
        token: Bearer token opcional
    """

    def __init__(
        self,
        *,
        http_client: httpx.AsyncClient,
        base_url: str,
        token: str = "",
    ) -> None:
        self._http = http_client
        self._base_url = base_url.rstrip("/")
        self._headers = {"Content-Type": "application/json"}
        if token:
            self._headers["Authorization"] = f"Bearer {token}"

    async def inject(self, session_key: str, text: str, meta: InjectionMeta) -> str:
        data = await self._post(
            f"/sessions/{quote(session_key, safe='')}/inject",
            {"text": text, **meta.to_dict()},
            operation="inject",
        )
        reply = data.get("text", "")
        return reply if isinstance(reply, str) else str(reply)

    async def log_passive_message(self, session_key: str, text: str, meta: InjectionMeta) -> None:
        await self._post(
            f"/sessions/{quote(session_key, safe='')}/messages",
            {"text": text, **meta.to_dict()},
            operation="log_passive_message",
        )

    async def notify_removed(self, space_id: str) -> None:
        await self._post(
            f"/channels/{CHANNEL_TYPE}/removed",
            {"spaceId": space_id},
            operation="notify_removed",
        )

    async def get_agent_identity(self) -> AgentIdentity:
        """Lê a identidade do agente; falha devolve a identidade padrão."""
        try:
            response = await self._http.get(f"{self._base_url}/identity", headers=self._headers)
            response.raise_for_status()
            data = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning(
                "agent_identity_unavailable",
                extra={"error_type": type(exc).__name__},
            )
            return AgentIdentity()

        if not isinstance(data, dict):
            return AgentIdentity()
        name = data.get("name")
        emoji = data.get("emoji")
        return AgentIdentity(
            name=name if isinstance(name, str) and name else AgentIdentity().name,
            emoji=emoji if isinstance(emoji, str) else None,
        )

    async def _post(self, path: str, payload: dict[str, Any], *, operation: str) -> dict[str, Any]:
        url = f"{self._base_url}{path}"
        try:
            response = await self._http.post(url, json=payload, headers=self._headers)
            response.raise_for_status()
        except httpx.TimeoutException as exc:
            logger.warning("session_engine_timeout", extra={"operation": operation})
            raise SessionEngineError(f"{operation}: timeout") from exc
        except httpx.HTTPStatusError as exc:
            status_code = exc.response.status_code
            logger.warning(
                "session_engine_http_error",
                extra={"operation": operation, "status_code": status_code},
            )
            raise SessionEngineError(f"{operation}: HTTP {status_code}", status_code) from exc
        except httpx.HTTPError as exc:
            logger.warning(
                "session_engine_transport_error",
                extra={"operation": operation, "error_type": type(exc).__name__},
            )
            raise SessionEngineError(f"{operation}: {type(exc).__name__}") from exc

        if not response.content:
            return {}
        try:
            data = response.json()
        except ValueError as exc:
            raise SessionEngineError(f"{operation}: invalid_json") from exc
        return data if isinstance(data, dict) else {}
