"""Pydantic schemas for the FastAPI server.

Response field names are the API's wire names. Request bodies for tasks and
categories are plain JSON objects validated by the core, so only login has a
request schema here.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from src.taskboard import Priority


class HealthResponse(BaseModel):
    """Response for health check endpoint."""

    status: str


class TaskResponse(BaseModel):
    """Serialized task."""

    model_config = ConfigDict(use_enum_values=True)

    id: int
    titulo: str
    descripcion: str
    completada: bool
    prioridad: Priority
    usuarioId: int
    categoriaId: int
    fechaCreacion: str
    fechaActualizacion: str


class TaskPageResponse(BaseModel):
    """One page of the task listing."""

    tareas: List[TaskResponse]
    total: int
    pagina: int
    limite: int
    paginasTotal: int


class TaskDeletedResponse(BaseModel):
    mensaje: str = "Tarea eliminada"
    tarea: TaskResponse


class UserResponse(BaseModel):
    """Public user profile."""

    id: int
    nombre: str
    email: str


class CategoryResponse(BaseModel):
    id: int
    nombre: str


class CategoryDeletedResponse(BaseModel):
    mensaje: str = "Categoría eliminada"
    categoria: CategoryResponse


class CompletionStatsResponse(BaseModel):
    """Completion metrics of one user."""

    usuarioId: int
    totalTareas: int
    completadas: int
    pendientes: int
    porcentajeCompletadas: float
    nombre: Optional[str] = None


class LoginRequest(BaseModel):
    """Request body for login endpoint."""

    email: str = Field(..., description="Account e-mail")
    password: str = Field(..., description="Account password")


class LoginUser(BaseModel):
    id: int
    nombre: str


class LoginResponse(BaseModel):
    """Bearer token for the authenticated account."""

    token: str
    usuario: LoginUser


class FieldErrorResponse(BaseModel):
    campo: str
    mensaje: str


class ErrorResponse(BaseModel):
    """Body of every error response."""

    error: str
    detalles: Optional[List[FieldErrorResponse]] = None
    timestamp: str
