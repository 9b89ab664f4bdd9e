from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, List, Mapping

from .lookup import LookupService
from .models import Category, Task
from .payloads import (
    FIELD_MESSAGES,
    CategoryCreate,
    TaskCreate,
    TaskPatch,
    TaskReplace,
    parse_payload,
    parse_positive_int,
)
from .results import (
    Failure,
    FieldError,
    Ok,
    Result,
    conflict,
    not_found,
    validation_failed,
)
from .store import EntityStore

logger = logging.getLogger(__name__)


class MutationEngine:
    """Validated writes on tasks and categories.

    Every operation runs under the store lock from its first read to its last
    write. Payloads are parsed first, then checked against the store (category
    existence), and only then applied.
    """

    def __init__(self, store: EntityStore, lookup: LookupService) -> None:
        self._store = store
        self._lookup = lookup

    def _category_errors(self, category_id: int) -> List[FieldError]:
        if self._store.get_category(category_id) is None:
            return [FieldError("categoriaId", FIELD_MESSAGES["categoriaId"])]
        return []

    # ---- tasks ----

    def create_task(self, owner_id: int, payload: Mapping[str, Any]) -> Result[Task]:
        parsed = parse_payload(TaskCreate, payload)
        if isinstance(parsed, Failure):
            return parsed
        data = parsed.value

        with self._store.lock:
            errors = self._category_errors(data.category_id)
            if errors:
                return validation_failed(errors)
            now = self._store.now()
            task = self._store.add_task(
                Task(
                    id=self._store.allocate_task_id(),
                    title=data.title,
                    description=data.description,
                    completed=data.completed,
                    priority=data.priority,
                    owner_id=owner_id,
                    category_id=data.category_id,
                    created_at=now,
                    updated_at=now,
                )
            )
            snapshot = replace(task)
        logger.info(
            "Task created id=%s owner=%s category=%s", snapshot.id, owner_id, snapshot.category_id
        )
        return Ok(snapshot)

    def replace_task(
        self, owner_id: int, task_id: Any, payload: Mapping[str, Any]
    ) -> Result[Task]:
        """Overwrite every mutable field of an owned task."""
        parsed = parse_payload(TaskReplace, payload)
        if isinstance(parsed, Failure):
            return parsed
        data = parsed.value

        with self._store.lock:
            errors = self._category_errors(data.category_id)
            if errors:
                return validation_failed(errors)
            found = self._lookup.find_task(task_id, owner_id)
            if isinstance(found, Failure):
                return found
            task = found.value
            task.title = data.title
            task.description = data.description
            task.priority = data.priority
            task.completed = data.completed
            task.category_id = data.category_id
            task.updated_at = self._store.now()
            snapshot = replace(task)
        logger.info("Task replaced id=%s owner=%s", snapshot.id, owner_id)
        return Ok(snapshot)

    def update_task(
        self, owner_id: int, task_id: Any, changes: Mapping[str, Any]
    ) -> Result[Task]:
        """Apply a partial update after validating every supplied field.

        Unknown keys, invalid values and unknown categories are all collected
        into one validation failure; nothing is written unless every field is
        valid.
        """
        with self._store.lock:
            found = self._lookup.find_task(task_id, owner_id)
            if isinstance(found, Failure):
                return found
            task = found.value

            if not changes:
                return validation_failed(
                    [], "Debe proporcionar al menos un campo para actualizar"
                )

            parsed = parse_payload(TaskPatch, changes)
            if isinstance(parsed, Failure):
                errors = list(parsed.errors)
                category_id = None
                if all(e.field != "categoriaId" for e in errors):
                    category_id = parse_positive_int(changes.get("categoriaId"))
            else:
                errors = []
                category_id = parsed.value.changes().get("category_id")
            if category_id is not None:
                errors.extend(self._category_errors(category_id))
            if isinstance(parsed, Failure) or errors:
                logger.info("Rejected update of task %s: %s", task.id, errors)
                return validation_failed(errors, "Errores de validación")

            for name, value in parsed.value.changes().items():
                setattr(task, name, value)
            task.updated_at = self._store.now()
            snapshot = replace(task)
        logger.info("Task updated id=%s fields=%s", snapshot.id, sorted(changes))
        return Ok(snapshot)

    def delete_task(self, owner_id: int, task_id: Any) -> Result[Task]:
        """Remove an owned task; tasks of other users are reported as missing."""
        with self._store.lock:
            found = self._lookup.find_task(task_id)
            if isinstance(found, Failure):
                return found
            task = found.value
            if task.owner_id != owner_id:
                return not_found("Tarea no encontrada")
            self._store.remove_task(task.id)
        logger.info("Task deleted id=%s owner=%s", task.id, owner_id)
        return Ok(task)

    # ---- categories ----

    def create_category(self, payload: Mapping[str, Any]) -> Result[Category]:
        parsed = parse_payload(CategoryCreate, payload)
        if isinstance(parsed, Failure):
            return parsed
        with self._store.lock:
            category = self._store.add_category(
                Category(id=self._store.allocate_category_id(), name=parsed.value.name)
            )
        logger.info("Category created id=%s name=%s", category.id, category.name)
        return Ok(category)

    def delete_category(self, category_id: Any) -> Result[Category]:
        """Remove a category nobody references."""
        with self._store.lock:
            found = self._lookup.find_category(category_id)
            if isinstance(found, Failure):
                return found
            category = found.value
            references = self._store.count_tasks_in_category(category.id)
            if references:
                logger.warning(
                    "Category %s still referenced by %s task(s)", category.id, references
                )
                return conflict(
                    "No se puede eliminar la categoría porque tiene tareas asociadas"
                )
            self._store.remove_category(category.id)
        logger.info("Category deleted id=%s", category.id)
        return Ok(category)
