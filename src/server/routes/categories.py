"""Category endpoints. Categories are shared, so nothing here is owner-scoped."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, List

from fastapi import Body, Depends, FastAPI, HTTPException

from ..auth import get_current_user_id
from ..dependencies import get_task_board, run_core, serialize_category
from ..schemas import CategoryDeletedResponse, CategoryResponse

logger = logging.getLogger(__name__)


def register_category_routes(app: FastAPI) -> None:
    """Register category list/get/create/delete endpoints."""

    @app.get(
        "/api/categorias",
        response_model=List[CategoryResponse],
        dependencies=[Depends(get_current_user_id)],
    )
    async def list_categories() -> List[CategoryResponse]:
        board = get_task_board()
        try:
            categories = await asyncio.to_thread(board.list_categories)
        except Exception as exc:
            logger.exception("Failed to list categories: %s", exc)
            raise HTTPException(status_code=500, detail="Error interno del servidor") from exc
        return [serialize_category(category) for category in categories]

    @app.get(
        "/api/categorias/{category_id}",
        response_model=CategoryResponse,
        dependencies=[Depends(get_current_user_id)],
    )
    async def get_category(category_id: str) -> CategoryResponse:
        board = get_task_board()
        category = await run_core("get category", board.get_category, category_id)
        return serialize_category(category)

    @app.post(
        "/api/categorias",
        response_model=CategoryResponse,
        status_code=201,
        dependencies=[Depends(get_current_user_id)],
    )
    async def create_category(payload: Dict[str, Any] = Body(...)) -> CategoryResponse:
        board = get_task_board()
        category = await run_core("create category", board.create_category, payload)
        return serialize_category(category)

    @app.delete(
        "/api/categorias/{category_id}",
        response_model=CategoryDeletedResponse,
        dependencies=[Depends(get_current_user_id)],
    )
    async def delete_category(category_id: str) -> CategoryDeletedResponse:
        """Delete a category that no task references."""
        board = get_task_board()
        category = await run_core("delete category", board.delete_category, category_id)
        return CategoryDeletedResponse(categoria=serialize_category(category))
