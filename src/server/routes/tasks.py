"""Task endpoints."""

from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import Body, Depends, FastAPI, Query

from ..auth import get_current_user_id
from ..dependencies import get_task_board, run_core, serialize_page, serialize_task
from ..schemas import TaskDeletedResponse, TaskPageResponse, TaskResponse


def register_task_routes(app: FastAPI) -> None:
    """Register task CRUD endpoints. Every route is scoped to the caller."""

    @app.get("/api/tareas", response_model=TaskPageResponse)
    async def list_tasks(
        completada: Optional[str] = Query(None, description="true | false"),
        prioridad: Optional[str] = Query(None, description="baja | media | alta"),
        usuario_id: Optional[str] = Query(None),
        categoria_id: Optional[str] = Query(None),
        q: Optional[str] = Query(None, description="Search terms separated by OR"),
        ordenar: Optional[str] = Query(None, description="titulo | prioridad | fecha"),
        pagina: Optional[str] = Query(None),
        limite: Optional[str] = Query(None),
        user_id: int = Depends(get_current_user_id),
    ) -> TaskPageResponse:
        """List the caller's tasks with filters, search, sorting and pagination."""
        raw = {
            "completada": completada,
            "prioridad": prioridad,
            "usuario_id": usuario_id,
            "categoria_id": categoria_id,
            "q": q,
            "ordenar": ordenar,
            "pagina": pagina,
            "limite": limite,
        }
        params = {key: value for key, value in raw.items() if value is not None}
        board = get_task_board()
        page = await run_core("list tasks", board.list_tasks, user_id, params)
        return serialize_page(page)

    @app.get("/api/tareas/{task_id}", response_model=TaskResponse)
    async def get_task(task_id: str, user_id: int = Depends(get_current_user_id)) -> TaskResponse:
        board = get_task_board()
        task = await run_core("get task", board.get_task, user_id, task_id)
        return serialize_task(task)

    @app.post("/api/tareas", response_model=TaskResponse, status_code=201)
    async def create_task(
        payload: Dict[str, Any] = Body(...),
        user_id: int = Depends(get_current_user_id),
    ) -> TaskResponse:
        board = get_task_board()
        task = await run_core("create task", board.create_task, user_id, payload)
        return serialize_task(task)

    @app.put("/api/tareas/{task_id}", response_model=TaskResponse)
    async def replace_task(
        task_id: str,
        payload: Dict[str, Any] = Body(...),
        user_id: int = Depends(get_current_user_id),
    ) -> TaskResponse:
        """Replace every mutable field of a task."""
        board = get_task_board()
        task = await run_core("replace task", board.replace_task, user_id, task_id, payload)
        return serialize_task(task)

    @app.patch("/api/tareas/{task_id}", response_model=TaskResponse)
    async def update_task(
        task_id: str,
        payload: Dict[str, Any] = Body(...),
        user_id: int = Depends(get_current_user_id),
    ) -> TaskResponse:
        """Update only the supplied fields of a task."""
        board = get_task_board()
        task = await run_core("update task", board.update_task, user_id, task_id, payload)
        return serialize_task(task)

    @app.delete("/api/tareas/{task_id}", response_model=TaskDeletedResponse)
    async def delete_task(
        task_id: str, user_id: int = Depends(get_current_user_id)
    ) -> TaskDeletedResponse:
        board = get_task_board()
        task = await run_core("delete task", board.delete_task, user_id, task_id)
        return TaskDeletedResponse(tarea=serialize_task(task))
