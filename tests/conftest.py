import pytest

from src.taskboard import TaskBoard


@pytest.fixture
def board() -> TaskBoard:
    """TaskBoard over the demo data: users 1-2, categories 1-3, tasks 1-3."""
    return TaskBoard.create(seed=True, admin_user_id=1)


@pytest.fixture
def empty_board() -> TaskBoard:
    """TaskBoard with a single category (id 1) and no tasks."""
    board = TaskBoard.create(seed=False)
    board.create_category({"nombre": "General"})
    return board
