"""Login endpoint issuing the demo bearer tokens."""

from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException

from ..dependencies import get_config
from ..schemas import LoginRequest, LoginResponse, LoginUser

logger = logging.getLogger(__name__)


def register_auth_routes(app: FastAPI) -> None:
    """Register the login endpoint."""

    @app.post("/auth/login", response_model=LoginResponse)
    async def login(request: LoginRequest) -> LoginResponse:
        """Exchange configured demo credentials for a bearer token."""
        account = get_config().auth.login(request.email, request.password)
        if account is None:
            logger.warning("Failed login for %s", request.email)
            raise HTTPException(status_code=401, detail="Credenciales inválidas")
        logger.info("User %s logged in", account.user_id)
        return LoginResponse(
            token=account.token,
            usuario=LoginUser(id=account.user_id, nombre=account.name),
        )
