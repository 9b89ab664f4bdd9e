"""FastAPI application bootstrap."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.taskboard.logger import setup_logger

from .dependencies import get_config, get_task_board
from .errors import register_error_handlers
from .routes import (
    register_auth_routes,
    register_category_routes,
    register_info_routes,
    register_statistics_routes,
    register_task_routes,
    register_user_routes,
)

__all__ = ["app", "create_app", "get_config", "get_task_board"]


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    config = get_config()
    setup_logger(log_level=config.log_level, log_file=config.log_file)

    app = FastAPI(title=config.api_name, version=config.api_version)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)
    register_info_routes(app)
    register_auth_routes(app)
    register_task_routes(app)
    register_user_routes(app)
    register_category_routes(app)
    register_statistics_routes(app)

    return app


app = create_app()
