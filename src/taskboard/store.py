from __future__ import annotations

import logging
import threading
from datetime import datetime, timezone
from typing import Iterable, Optional

from .models import Category, Priority, Task, User

logger = logging.getLogger(__name__)


SEED_USERS = [
    {"id": 1, "name": "Admin", "email": "admin@example.com"},
    {"id": 2, "name": "Usuario", "email": "user@example.com"},
]

SEED_CATEGORIES = [
    {"id": 1, "name": "Desarrollo"},
    {"id": 2, "name": "Personal"},
    {"id": 3, "name": "Hogar"},
]

SEED_TASKS = [
    {
        "id": 1,
        "title": "Aprender Express",
        "description": "Completar tutorial",
        "completed": False,
        "priority": Priority.HIGH,
        "owner_id": 1,
        "category_id": 1,
    },
    {
        "id": 2,
        "title": "Crear API",
        "description": "Implementar endpoints",
        "completed": True,
        "priority": Priority.MEDIUM,
        "owner_id": 1,
        "category_id": 2,
    },
    {
        "id": 3,
        "title": "Testing",
        "description": "Probar con Postman",
        "completed": False,
        "priority": Priority.LOW,
        "owner_id": 2,
        "category_id": 1,
    },
]


class EntityStore:
    """In-memory collections of tasks, users and categories.

    Each entity type has its own id counter. Counters start above the highest
    loaded id and only move forward, so ids are never reused after deletion.

    ``lock`` must be held around any read-modify-write sequence; the store
    methods themselves do not take it.
    """

    def __init__(self) -> None:
        self.lock = threading.RLock()
        self._tasks: list[Task] = []
        self._users: list[User] = []
        self._categories: list[Category] = []
        self._next_task_id = 1
        self._next_user_id = 1
        self._next_category_id = 1

    @classmethod
    def seeded(cls) -> "EntityStore":
        """Store preloaded with the demo users, categories and tasks."""
        store = cls()
        now = cls.now()
        store.load(
            users=[User(**item) for item in SEED_USERS],
            categories=[Category(**item) for item in SEED_CATEGORIES],
            tasks=[Task(created_at=now, updated_at=now, **item) for item in SEED_TASKS],
        )
        return store

    @staticmethod
    def now() -> str:
        return datetime.now(timezone.utc).isoformat()

    def load(
        self,
        *,
        users: Iterable[User] = (),
        categories: Iterable[Category] = (),
        tasks: Iterable[Task] = (),
    ) -> None:
        """Bulk insert records that already carry ids and bump the counters."""
        self._users.extend(users)
        self._categories.extend(categories)
        self._tasks.extend(tasks)
        self._next_user_id = max([self._next_user_id] + [u.id + 1 for u in self._users])
        self._next_category_id = max(
            [self._next_category_id] + [c.id + 1 for c in self._categories]
        )
        self._next_task_id = max([self._next_task_id] + [t.id + 1 for t in self._tasks])
        logger.info(
            "EntityStore loaded users=%s categories=%s tasks=%s",
            len(self._users),
            len(self._categories),
            len(self._tasks),
        )

    # ---- id counters ----

    def allocate_task_id(self) -> int:
        task_id = self._next_task_id
        self._next_task_id += 1
        return task_id

    def allocate_category_id(self) -> int:
        category_id = self._next_category_id
        self._next_category_id += 1
        return category_id

    @property
    def next_task_id(self) -> int:
        return self._next_task_id

    @property
    def next_category_id(self) -> int:
        return self._next_category_id

    # ---- tasks ----

    def tasks(self) -> list[Task]:
        """Snapshot of the task collection in insertion order."""
        return list(self._tasks)

    def get_task(self, task_id: int) -> Optional[Task]:
        return next((t for t in self._tasks if t.id == task_id), None)

    def add_task(self, task: Task) -> Task:
        self._tasks.append(task)
        return task

    def remove_task(self, task_id: int) -> Optional[Task]:
        for index, task in enumerate(self._tasks):
            if task.id == task_id:
                return self._tasks.pop(index)
        return None

    def count_tasks_in_category(self, category_id: int) -> int:
        return sum(1 for t in self._tasks if t.category_id == category_id)

    # ---- users ----

    def users(self) -> list[User]:
        return list(self._users)

    def get_user(self, user_id: int) -> Optional[User]:
        return next((u for u in self._users if u.id == user_id), None)

    # ---- categories ----

    def categories(self) -> list[Category]:
        return list(self._categories)

    def get_category(self, category_id: int) -> Optional[Category]:
        return next((c for c in self._categories if c.id == category_id), None)

    def add_category(self, category: Category) -> Category:
        self._categories.append(category)
        return category

    def remove_category(self, category_id: int) -> Optional[Category]:
        for index, category in enumerate(self._categories):
            if category.id == category_id:
                return self._categories.pop(index)
        return None
