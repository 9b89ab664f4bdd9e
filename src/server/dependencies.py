"""Dependency helpers shared across FastAPI routes."""

from __future__ import annotations

import asyncio
import logging
from functools import lru_cache
from typing import Any, Callable, Dict, TypeVar

from fastapi import HTTPException

from src.taskboard import Category, CompletionStats, Result, Task, TaskBoard, TaskPage, User
from src.taskboard.config import Config

from .errors import unwrap
from .schemas import (
    CategoryResponse,
    CompletionStatsResponse,
    TaskPageResponse,
    TaskResponse,
    UserResponse,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


@lru_cache(maxsize=1)
def get_config() -> Config:
    """Settings loaded once from YAML, or from the environment when no file exists."""
    try:
        return Config.from_yaml()
    except FileNotFoundError as exc:
        logger.warning("Config file not found (%s); using environment settings", exc.filename)
        return Config.from_env()


@lru_cache(maxsize=1)
def get_task_board() -> TaskBoard:
    """Singleton TaskBoard over a fresh in-memory store."""
    config = get_config()
    return TaskBoard.create(seed=config.seed, admin_user_id=config.auth.admin_user_id)


async def run_core(operation: str, func: Callable[..., Result[T]], *args: Any) -> T:
    """Run a core operation on a worker thread and unwrap its result."""
    try:
        result = await asyncio.to_thread(func, *args)
    except Exception as exc:
        logger.exception("Failed to %s: %s", operation, exc)
        raise HTTPException(status_code=500, detail="Error interno del servidor") from exc
    return unwrap(result)


def serialize_task(task: Task) -> TaskResponse:
    """Convert domain Task to API response."""
    return TaskResponse(
        id=task.id,
        titulo=task.title,
        descripcion=task.description,
        completada=task.completed,
        prioridad=task.priority,
        usuarioId=task.owner_id,
        categoriaId=task.category_id,
        fechaCreacion=task.created_at,
        fechaActualizacion=task.updated_at,
    )


def serialize_page(page: TaskPage) -> TaskPageResponse:
    return TaskPageResponse(
        tareas=[serialize_task(task) for task in page.items],
        total=page.total,
        pagina=page.page,
        limite=page.page_size,
        paginasTotal=page.total_pages,
    )


def serialize_user(user: User) -> UserResponse:
    """Public fields only."""
    return UserResponse(id=user.id, nombre=user.name, email=user.email)


def serialize_category(category: Category) -> CategoryResponse:
    return CategoryResponse(id=category.id, nombre=category.name)


def serialize_stats(stats: CompletionStats) -> CompletionStatsResponse:
    return CompletionStatsResponse(
        usuarioId=stats.user_id,
        totalTareas=stats.total,
        completadas=stats.completed,
        pendientes=stats.pending,
        porcentajeCompletadas=stats.percentage,
        nombre=stats.name,
    )


def serialize_productivity(
    productivity: Dict[int, CompletionStats],
) -> Dict[int, CompletionStatsResponse]:
    return {user_id: serialize_stats(stats) for user_id, stats in productivity.items()}
