from __future__ import annotations

import logging
import math
import re
from dataclasses import replace
from typing import Any, Iterable, List, Mapping, Optional

from .models import SortKey, Task, TaskPage
from .payloads import TaskFilters, parse_payload
from .results import Failure, Ok, Result
from .store import EntityStore

logger = logging.getLogger(__name__)

_OR_SPLIT = re.compile(r"\s+OR\s+", re.IGNORECASE)


def parse_search_terms(query: str) -> List[str]:
    """Split a free-text query on ``OR`` into lowercase, non-empty terms."""
    terms = (term.strip().lower() for term in _OR_SPLIT.split(query))
    return [term for term in terms if term]


def matches_any(task: Task, terms: Iterable[str]) -> bool:
    title = task.title.lower()
    description = task.description.lower()
    return any(term in title or term in description for term in terms)


def sort_tasks(tasks: List[Task], key: Optional[SortKey]) -> List[Task]:
    """Order tasks by ``key``; Python's sort is stable so ties keep their order."""
    if key is SortKey.TITLE:
        return sorted(tasks, key=lambda t: t.title)
    if key is SortKey.PRIORITY:
        return sorted(tasks, key=lambda t: t.priority.rank, reverse=True)
    return tasks


def paginate(tasks: List[Task], page: int, page_size: int) -> TaskPage:
    total = len(tasks)
    offset = (page - 1) * page_size
    return TaskPage(
        items=tasks[offset : offset + page_size],
        total=total,
        page=page,
        page_size=page_size,
        total_pages=math.ceil(total / page_size),
    )


class QueryEngine:
    """Filtered, sorted and paginated listing of one owner's tasks."""

    def __init__(self, store: EntityStore) -> None:
        self._store = store

    def list_tasks(self, owner_id: int, params: Mapping[str, Any]) -> Result[TaskPage]:
        """List ``owner_id``'s tasks narrowed by the raw list parameters.

        Every invalid parameter is reported in a single validation failure.
        """
        parsed = parse_payload(TaskFilters, params)
        if isinstance(parsed, Failure):
            logger.info("Rejected task listing for user %s: %s", owner_id, parsed.errors)
            return parsed
        return Ok(self.run(owner_id, parsed.value))

    def run(self, owner_id: int, filters: TaskFilters) -> TaskPage:
        with self._store.lock:
            tasks = [replace(t) for t in self._store.tasks() if t.owner_id == owner_id]

        if filters.completed is not None:
            tasks = [t for t in tasks if t.completed == filters.completed]
        if filters.priority is not None:
            tasks = [t for t in tasks if t.priority is filters.priority]
        if filters.owner_id is not None:
            tasks = [t for t in tasks if t.owner_id == filters.owner_id]
        if filters.category_id is not None:
            tasks = [t for t in tasks if t.category_id == filters.category_id]

        if filters.query:
            terms = parse_search_terms(filters.query)
            if terms:
                tasks = [t for t in tasks if matches_any(t, terms)]

        tasks = sort_tasks(tasks, filters.sort)
        page = paginate(tasks, filters.page, filters.page_size)
        logger.debug(
            "Listed tasks owner=%s total=%s page=%s/%s",
            owner_id,
            page.total,
            page.page,
            page.total_pages,
        )
        return page
