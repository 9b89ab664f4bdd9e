"""API description and health endpoints."""

from __future__ import annotations

from typing import Any, Dict

from fastapi import FastAPI

from ..dependencies import get_config
from ..schemas import HealthResponse

ENDPOINTS = {
    "auth": {
        "POST /auth/login": "Autenticación",
    },
    "tareas": {
        "GET /api/tareas": "Listar tareas (con filtros, incluyendo categoria_id)",
        "GET /api/tareas/:id": "Obtener tarea específica",
        "POST /api/tareas": "Crear tarea (requiere categoriaId)",
        "PUT /api/tareas/:id": "Actualizar tarea completa (requiere categoriaId)",
        "PATCH /api/tareas/:id": "Actualizar tarea parcial (opcionalmente categoriaId)",
        "DELETE /api/tareas/:id": "Eliminar tarea",
    },
    "usuarios": {
        "GET /api/usuarios/:id": "Obtener perfil de usuario",
    },
    "categorias": {
        "GET /api/categorias": "Listar todas las categorías",
        "GET /api/categorias/:id": "Obtener categoría específica",
        "POST /api/categorias": "Crear categoría",
        "DELETE /api/categorias/:id": "Eliminar categoría (si no tiene tareas asociadas)",
    },
    "estadisticas": {
        "GET /api/estadisticas/tareas-completadas": (
            "Estadísticas de tareas completadas del usuario autenticado"
        ),
        "GET /api/estadisticas/productividad-por-usuario": (
            "Productividad de todos los usuarios (solo Admin)"
        ),
    },
}

EXAMPLES = {
    "login": 'POST /auth/login con {"email":"admin@example.com","password":"admin123"}',
    "listar": "GET /api/tareas?categoria_id=1 (con header: Authorization: Bearer admin-token)",
    "crear_categoria": 'POST /api/categorias con {"nombre":"Compras"}',
}


def register_info_routes(app: FastAPI) -> None:
    """Register the root description and the health check."""

    @app.get("/")
    async def api_info() -> Dict[str, Any]:
        """Describe the API and its endpoints."""
        config = get_config()
        return {
            "nombre": config.api_name,
            "version": config.api_version,
            "descripcion": "API de tareas con filtros, validación, manejo de errores y categorías",
            "endpoints": ENDPOINTS,
            "autenticacion": "Bearer token en header Authorization",
            "ejemplos": EXAMPLES,
        }

    @app.get("/api/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")
