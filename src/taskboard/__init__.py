"""Task, category and statistics core shared by the API server and tests."""

from .models import Category, CompletionStats, Priority, SortKey, Task, TaskPage, User
from .results import ErrorKind, Failure, FieldError, Ok, Result
from .service import TaskBoard
from .store import EntityStore

__all__ = [
    "Category",
    "CompletionStats",
    "EntityStore",
    "ErrorKind",
    "Failure",
    "FieldError",
    "Ok",
    "Priority",
    "Result",
    "SortKey",
    "Task",
    "TaskBoard",
    "TaskPage",
    "User",
]
