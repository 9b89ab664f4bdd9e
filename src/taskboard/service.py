from __future__ import annotations

from dataclasses import replace
from typing import Any, Dict, List, Mapping

from .lookup import LookupService
from .models import Category, CompletionStats, Task, TaskPage, User
from .mutations import MutationEngine
from .query import QueryEngine
from .results import Ok, Result
from .statistics import StatisticsAggregator
from .store import EntityStore


class TaskBoard:
    """Every core operation, bound to one entity store.

    This is the single handle the transport layer keeps. ``owner_id`` is the
    authenticated caller resolved by the transport.
    """

    def __init__(self, store: EntityStore, admin_user_id: int = 1) -> None:
        self.store = store
        self.lookup = LookupService(store)
        self.queries = QueryEngine(store)
        self.mutations = MutationEngine(store, self.lookup)
        self.statistics = StatisticsAggregator(store, admin_user_id)

    @classmethod
    def create(cls, *, seed: bool = True, admin_user_id: int = 1) -> "TaskBoard":
        store = EntityStore.seeded() if seed else EntityStore()
        return cls(store, admin_user_id=admin_user_id)

    # ---- tasks ----

    def list_tasks(self, owner_id: int, params: Mapping[str, Any]) -> Result[TaskPage]:
        return self.queries.list_tasks(owner_id, params)

    def get_task(self, owner_id: int, task_id: Any) -> Result[Task]:
        """Copy of an owned task, taken under the store lock."""
        with self.store.lock:
            found = self.lookup.find_task(task_id, owner_id)
            if isinstance(found, Ok):
                return Ok(replace(found.value))
            return found

    def create_task(self, owner_id: int, payload: Mapping[str, Any]) -> Result[Task]:
        return self.mutations.create_task(owner_id, payload)

    def replace_task(self, owner_id: int, task_id: Any, payload: Mapping[str, Any]) -> Result[Task]:
        return self.mutations.replace_task(owner_id, task_id, payload)

    def update_task(self, owner_id: int, task_id: Any, changes: Mapping[str, Any]) -> Result[Task]:
        return self.mutations.update_task(owner_id, task_id, changes)

    def delete_task(self, owner_id: int, task_id: Any) -> Result[Task]:
        return self.mutations.delete_task(owner_id, task_id)

    # ---- users ----

    def get_user(self, user_id: Any) -> Result[User]:
        return self.lookup.find_user(user_id)

    # ---- categories ----

    def list_categories(self) -> List[Category]:
        with self.store.lock:
            return self.store.categories()

    def get_category(self, category_id: Any) -> Result[Category]:
        return self.lookup.find_category(category_id)

    def create_category(self, payload: Mapping[str, Any]) -> Result[Category]:
        return self.mutations.create_category(payload)

    def delete_category(self, category_id: Any) -> Result[Category]:
        return self.mutations.delete_category(category_id)

    # ---- statistics ----

    def completed_summary(self, owner_id: int) -> CompletionStats:
        return self.statistics.completed_summary(owner_id)

    def global_productivity(self, caller_id: int) -> Result[Dict[int, CompletionStats]]:
        return self.statistics.global_productivity(caller_id)
