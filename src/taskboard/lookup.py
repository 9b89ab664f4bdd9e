from __future__ import annotations

import logging
from typing import Any, Optional

from .models import Category, Task, User
from .payloads import FIELD_MESSAGES, parse_positive_int
from .results import FieldError, Ok, Result, forbidden, not_found, validation_failed
from .store import EntityStore

logger = logging.getLogger(__name__)


def invalid_id() -> Result[Any]:
    return validation_failed([FieldError("id", FIELD_MESSAGES["id"])])


class LookupService:
    """Resolve entities by id, enforcing existence and task ownership."""

    def __init__(self, store: EntityStore) -> None:
        self._store = store

    def find_task(self, task_id: Any, owner_id: Optional[int] = None) -> Result[Task]:
        """Task by id; Forbidden when ``owner_id`` is given and does not own it."""
        parsed = parse_positive_int(task_id)
        if parsed is None:
            return invalid_id()
        task = self._store.get_task(parsed)
        if task is None:
            return not_found("Tarea no encontrada")
        if owner_id is not None and task.owner_id != owner_id:
            logger.info("Task %s denied to user %s (owner %s)", task.id, owner_id, task.owner_id)
            return forbidden("No tienes permisos para acceder a esta tarea")
        return Ok(task)

    def find_user(self, user_id: Any) -> Result[User]:
        parsed = parse_positive_int(user_id)
        if parsed is None:
            return invalid_id()
        user = self._store.get_user(parsed)
        if user is None:
            return not_found("Usuario no encontrado")
        return Ok(user)

    def find_category(self, category_id: Any) -> Result[Category]:
        parsed = parse_positive_int(category_id)
        if parsed is None:
            return invalid_id()
        category = self._store.get_category(parsed)
        if category is None:
            return not_found("Categoría no encontrada")
        return Ok(category)
