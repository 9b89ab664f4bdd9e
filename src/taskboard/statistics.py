from __future__ import annotations

import logging
from typing import Dict, Iterable, Optional

from .models import CompletionStats, Task
from .results import Ok, Result, forbidden
from .store import EntityStore

logger = logging.getLogger(__name__)


def completion_stats(user_id: int, tasks: Iterable[Task], name: Optional[str] = None) -> CompletionStats:
    """Completion metrics over ``tasks``; the percentage is 0 when there are none."""
    tasks = list(tasks)
    total = len(tasks)
    completed = sum(1 for t in tasks if t.completed)
    percentage = round(completed / total * 100, 2) if total else 0.0
    return CompletionStats(
        user_id=user_id,
        total=total,
        completed=completed,
        pending=total - completed,
        percentage=percentage,
        name=name,
    )


class StatisticsAggregator:
    """Per-user and global completion metrics computed from the current store."""

    def __init__(self, store: EntityStore, admin_user_id: int) -> None:
        self._store = store
        self._admin_user_id = admin_user_id

    def completed_summary(self, owner_id: int) -> CompletionStats:
        with self._store.lock:
            tasks = self._store.tasks()
            return completion_stats(owner_id, (t for t in tasks if t.owner_id == owner_id))

    def global_productivity(self, caller_id: int) -> Result[Dict[int, CompletionStats]]:
        """Metrics for every known user, keyed by user id. Admin only."""
        if caller_id != self._admin_user_id:
            logger.warning("User %s denied global productivity statistics", caller_id)
            return forbidden(
                "Acceso denegado. Solo administradores pueden ver la productividad global."
            )
        with self._store.lock:
            tasks = self._store.tasks()
            productivity = {
                user.id: completion_stats(
                    user.id, (t for t in tasks if t.owner_id == user.id), name=user.name
                )
                for user in self._store.users()
            }
        return Ok(productivity)
