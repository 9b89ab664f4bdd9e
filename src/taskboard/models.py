from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional


class Priority(str, Enum):
    """Task priority. Values are the wire names used by the API."""

    LOW = "baja"
    MEDIUM = "media"
    HIGH = "alta"

    @property
    def rank(self) -> int:
        """Severity rank used by the priority sort (low < medium < high)."""
        return _PRIORITY_RANK[self]


_PRIORITY_RANK = {Priority.LOW: 1, Priority.MEDIUM: 2, Priority.HIGH: 3}


class SortKey(str, Enum):
    """Accepted values of the ``ordenar`` list parameter."""

    TITLE = "titulo"
    PRIORITY = "prioridad"
    # Creation order, which is the collection order.
    NONE = "fecha"


@dataclass(slots=True)
class Task:
    """A task owned by the user who created it."""

    id: int
    title: str
    description: str
    completed: bool
    priority: Priority
    owner_id: int
    category_id: int
    created_at: str
    updated_at: str


@dataclass(slots=True)
class User:
    id: int
    name: str
    email: str


@dataclass(slots=True)
class Category:
    id: int
    name: str


@dataclass(slots=True)
class TaskPage:
    """One page of a filtered task listing."""

    items: List[Task]
    total: int
    page: int
    page_size: int
    total_pages: int


@dataclass(slots=True)
class CompletionStats:
    """Completion metrics over one user's tasks."""

    user_id: int
    total: int
    completed: int
    pending: int
    percentage: float
    name: Optional[str] = None
