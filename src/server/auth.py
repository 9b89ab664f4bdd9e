"""Bearer token resolution for authenticated routes."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import Header, HTTPException

from .dependencies import get_config

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


def get_current_user_id(authorization: Optional[str] = Header(default=None)) -> int:
    """Id of the caller identified by the ``Authorization: Bearer`` header."""
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        raise HTTPException(
            status_code=401,
            detail="Token de autenticación requerido",
            headers={"WWW-Authenticate": "Bearer"},
        )
    token = authorization[len(BEARER_PREFIX) :]
    user_id = get_config().auth.user_for_token(token)
    if user_id is None:
        logger.warning("Rejected unknown bearer token")
        raise HTTPException(
            status_code=401,
            detail="Token de autenticación inválido",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user_id
