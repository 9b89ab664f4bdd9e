"""Completion statistics endpoints."""

from __future__ import annotations

import asyncio
import logging
from typing import Dict

from fastapi import Depends, FastAPI, HTTPException

from ..auth import get_current_user_id
from ..dependencies import get_task_board, run_core, serialize_productivity, serialize_stats
from ..schemas import CompletionStatsResponse

logger = logging.getLogger(__name__)


def register_statistics_routes(app: FastAPI) -> None:
    """Register per-user and global statistics endpoints."""

    @app.get(
        "/api/estadisticas/tareas-completadas",
        response_model=CompletionStatsResponse,
        response_model_exclude_none=True,
    )
    async def completed_summary(
        user_id: int = Depends(get_current_user_id),
    ) -> CompletionStatsResponse:
        """Completion metrics of the caller's tasks."""
        board = get_task_board()
        try:
            stats = await asyncio.to_thread(board.completed_summary, user_id)
        except Exception as exc:
            logger.exception("Failed to compute statistics for user %s: %s", user_id, exc)
            raise HTTPException(status_code=500, detail="Error interno del servidor") from exc
        return serialize_stats(stats)

    @app.get(
        "/api/estadisticas/productividad-por-usuario",
        response_model=Dict[int, CompletionStatsResponse],
    )
    async def global_productivity(
        user_id: int = Depends(get_current_user_id),
    ) -> Dict[int, CompletionStatsResponse]:
        """Completion metrics of every user, keyed by user id. Admin only."""
        board = get_task_board()
        productivity = await run_core(
            "compute global productivity", board.global_productivity, user_id
        )
        return serialize_productivity(productivity)
