"""User profile endpoints."""

from __future__ import annotations

from fastapi import Depends, FastAPI

from ..auth import get_current_user_id
from ..dependencies import get_task_board, run_core, serialize_user
from ..schemas import UserResponse


def register_user_routes(app: FastAPI) -> None:
    """Register the read-only user profile endpoint."""

    @app.get(
        "/api/usuarios/{user_id}",
        response_model=UserResponse,
        dependencies=[Depends(get_current_user_id)],
    )
    async def get_user(user_id: str) -> UserResponse:
        """Public profile (id, name, e-mail) of any user."""
        board = get_task_board()
        user = await run_core("get user", board.get_user, user_id)
        return serialize_user(user)
