import threading

from src.taskboard import EntityStore, Ok, Priority, TaskBoard, User


def test_seeded_store_counters_start_above_seed_ids():
    store = EntityStore.seeded()

    assert [t.id for t in store.tasks()] == [1, 2, 3]
    assert [c.id for c in store.categories()] == [1, 2, 3]
    assert [u.id for u in store.users()] == [1, 2]
    assert store.next_task_id == 4
    assert store.next_category_id == 4


def test_seeded_tasks_match_demo_data():
    store = EntityStore.seeded()
    first = store.get_task(1)

    assert first is not None
    assert first.title == "Aprender Express"
    assert first.priority is Priority.HIGH
    assert first.owner_id == 1
    assert store.get_task(2).completed is True
    assert store.get_task(3).owner_id == 2


def test_load_bumps_user_counter():
    store = EntityStore()
    store.load(users=[User(7, "Otra", "otra@example.com")])

    assert store.get_user(7) is not None
    assert store.get_user(8) is None


def test_task_ids_are_never_reused(board):
    created = board.create_task(1, {"titulo": "Primera", "categoriaId": 1})
    assert isinstance(created, Ok)
    assert created.value.id == 4

    deleted = board.delete_task(1, 4)
    assert isinstance(deleted, Ok)

    again = board.create_task(1, {"titulo": "Segunda", "categoriaId": 1})
    assert isinstance(again, Ok)
    assert again.value.id == 5


def test_category_ids_are_never_reused(board):
    created = board.create_category({"nombre": "Compras"})
    assert created.value.id == 4
    assert isinstance(board.delete_category(4), Ok)

    assert board.create_category({"nombre": "Viajes"}).value.id == 5


def test_concurrent_creates_get_unique_ids():
    board = TaskBoard.create(seed=True)
    ids: list[int] = []
    ids_lock = threading.Lock()

    def worker(owner_id: int) -> None:
        for n in range(25):
            result = board.create_task(owner_id, {"titulo": f"Tarea {n}", "categoriaId": 2})
            assert isinstance(result, Ok)
            with ids_lock:
                ids.append(result.value.id)

    threads = [threading.Thread(target=worker, args=(1 + i % 2,)) for i in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(ids) == 200
    assert len(set(ids)) == 200
    assert board.store.next_task_id == 204
    assert len(board.store.tasks()) == 203
