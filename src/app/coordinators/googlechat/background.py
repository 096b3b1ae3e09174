"""Tasks em background para canais laterais best-effort.

Log passivo e notificação de remoção não podem atrasar nem derrubar a
resposta síncrona: rodam como tasks rastreadas, com falhas registradas e
descartadas. O shutdown aguarda as pendentes via drain_side_effects().
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Awaitable

logger = logging.getLogger(__name__)

_TASK_SEMAPHORE = asyncio.Semaphore(100)
_active_tasks: set[asyncio.Task[Any]] = set()


def schedule_side_effect(name: str, coroutine: Awaitable[Any]) -> int:
    """Agenda chamada best-effort; retorna o total de tasks ativas."""
    task = asyncio.create_task(_run_best_effort(name, coroutine))
    _active_tasks.add(task)
    task.add_done_callback(_on_side_effect_done)
    return len(_active_tasks)


async def _run_best_effort(name: str, coroutine: Awaitable[Any]) -> None:
    async with _TASK_SEMAPHORE:
        try:
            await coroutine
        except Exception as exc:
            logger.warning(
                "side_effect_failed",
                extra={
                    "channel": "googlechat",
                    "side_effect": name,
                    "error_type": type(exc).__name__,
                },
            )


def _on_side_effect_done(task: asyncio.Task[Any]) -> None:
    _active_tasks.discard(task)
    with contextlib.suppress(asyncio.CancelledError):
        task.exception()


def active_side_effects() -> int:
    return len(_active_tasks)


async def drain_side_effects(timeout_seconds: float = 30.0) -> None:
    """Aguarda tasks pendentes durante shutdown; cancela as que estourarem o prazo."""
    if not _active_tasks:
        return

    pending_now = list(_active_tasks)
    logger.info(
        "side_effects_shutdown_wait",
        extra={
            "channel": "googlechat",
            "pending_tasks": len(pending_now),
            "timeout_seconds": timeout_seconds,
        },
    )
    _, pending = await asyncio.wait(pending_now, timeout=timeout_seconds)
    if not pending:
        return

    for task in pending:
        task.cancel()
    await asyncio.gather(*pending, return_exceptions=True)
    logger.warning(
        "side_effects_shutdown_cancelled",
        extra={"channel": "googlechat", "cancelled_tasks": len(pending)},
    )
