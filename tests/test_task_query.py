import math

import pytest

from src.taskboard import ErrorKind, Failure, Ok, TaskBoard
from src.taskboard.query import parse_search_terms


def add_tasks(board: TaskBoard, owner_id: int, *overrides: dict) -> list[int]:
    ids = []
    for fields in overrides:
        payload = {"categoriaId": 1, **fields}
        result = board.create_task(owner_id, payload)
        assert isinstance(result, Ok), result
        ids.append(result.value.id)
    return ids


def list_ok(board: TaskBoard, owner_id: int, **params):
    result = board.list_tasks(owner_id, params)
    assert isinstance(result, Ok), result
    return result.value


class TestPagination:
    @pytest.mark.parametrize("total", [0, 1, 7, 10, 23])
    @pytest.mark.parametrize("page_size", [1, 3, 10, 100])
    def test_pages_cover_every_task_once(self, empty_board, total, page_size):
        add_tasks(empty_board, 1, *({"titulo": f"Tarea {n:02d}"} for n in range(total)))

        first = list_ok(empty_board, 1, limite=page_size)
        assert first.total == total
        assert first.total_pages == math.ceil(total / page_size)

        seen = []
        for page in range(1, first.total_pages + 1):
            listed = list_ok(empty_board, 1, pagina=page, limite=page_size)
            assert listed.page == page
            assert listed.page_size == page_size
            seen.extend(t.id for t in listed.items)

        assert len(seen) == total
        assert len(set(seen)) == total

    def test_defaults_to_first_page_of_ten(self, empty_board):
        add_tasks(empty_board, 1, *({"titulo": f"Tarea {n:02d}"} for n in range(12)))

        page = list_ok(empty_board, 1)

        assert page.page == 1
        assert page.page_size == 10
        assert len(page.items) == 10
        assert page.total_pages == 2

    def test_page_past_the_end_is_empty(self, empty_board):
        add_tasks(empty_board, 1, {"titulo": "Solo una"})

        page = list_ok(empty_board, 1, pagina="5")

        assert page.items == []
        assert page.total == 1

    def test_empty_collection_has_zero_pages(self, empty_board):
        page = list_ok(empty_board, 1)

        assert page.total == 0
        assert page.total_pages == 0


class TestSearch:
    def test_or_terms_match_either(self, empty_board):
        alpha, beta, _ = add_tasks(
            empty_board,
            1,
            {"titulo": "alpha report"},
            {"titulo": "beta plan"},
            {"titulo": "gamma notes"},
        )

        page = list_ok(empty_board, 1, q="alpha OR beta")

        assert [t.id for t in page.items] == [alpha, beta]

    def test_or_is_case_insensitive_and_terms_are_lowercased(self, empty_board):
        alpha, beta, _ = add_tasks(
            empty_board,
            1,
            {"titulo": "alpha report"},
            {"titulo": "Plan", "descripcion": "the BETA rollout"},
            {"titulo": "gamma notes"},
        )

        page = list_ok(empty_board, 1, q="ALPHA or Beta")

        assert [t.id for t in page.items] == [alpha, beta]

    def test_single_term_matches_title_or_description(self, empty_board):
        by_title, by_description, _ = add_tasks(
            empty_board,
            1,
            {"titulo": "Comprar leche"},
            {"titulo": "Recados", "descripcion": "leche y pan"},
            {"titulo": "Otra cosa"},
        )

        page = list_ok(empty_board, 1, q="LECHE")

        assert [t.id for t in page.items] == [by_title, by_description]

    def test_no_match_is_an_empty_result(self, empty_board):
        add_tasks(empty_board, 1, {"titulo": "alpha report"})

        page = list_ok(empty_board, 1, q="zzz")

        assert page.items == []
        assert page.total == 0
        assert page.total_pages == 0

    @pytest.mark.parametrize("query", ["   ", " OR ", ""])
    def test_blank_query_does_not_filter(self, empty_board, query):
        add_tasks(empty_board, 1, {"titulo": "alpha report"}, {"titulo": "beta plan"})

        assert list_ok(empty_board, 1, q=query).total == 2

    def test_parse_search_terms_drops_empty_terms(self):
        assert parse_search_terms(" Alpha OR beta OR  ") == ["alpha", "beta"]
        assert parse_search_terms("oregano") == ["oregano"]


class TestSorting:
    def test_priority_sort_is_descending_and_stable(self, empty_board):
        first_medium, high, second_medium, low = add_tasks(
            empty_board,
            1,
            {"titulo": "Primera media", "prioridad": "media"},
            {"titulo": "Alta", "prioridad": "alta"},
            {"titulo": "Segunda media", "prioridad": "media"},
            {"titulo": "Baja", "prioridad": "baja"},
        )

        page = list_ok(empty_board, 1, ordenar="prioridad")

        assert [t.id for t in page.items] == [high, first_medium, second_medium, low]

    def test_title_sort_is_ascending(self, empty_board):
        c, a, b = add_tasks(
            empty_board, 1, {"titulo": "Cocinar"}, {"titulo": "Aprender"}, {"titulo": "Barrer"}
        )

        page = list_ok(empty_board, 1, ordenar="titulo")

        assert [t.id for t in page.items] == [a, b, c]

    @pytest.mark.parametrize("params", [{}, {"ordenar": "fecha"}])
    def test_without_sort_key_collection_order_is_kept(self, empty_board, params):
        ids = add_tasks(empty_board, 1, {"titulo": "Cocinar"}, {"titulo": "Aprender"})

        assert [t.id for t in list_ok(empty_board, 1, **params).items] == ids


class TestFilters:
    def test_listing_never_returns_other_owners_tasks(self, board):
        add_tasks(board, 2, {"titulo": "Tarea de dos", "prioridad": "alta"})

        for params in ({}, {"prioridad": "alta"}, {"q": "tarea"}, {"usuario_id": "2"}):
            page = list_ok(board, 1, **params)
            assert all(t.owner_id == 1 for t in page.items)

    def test_usuario_id_is_intersected_with_owner(self, board):
        assert list_ok(board, 1, usuario_id="2").total == 0
        assert list_ok(board, 1, usuario_id="1").total == 2

    def test_predicates_are_combined(self, board):
        page = list_ok(board, 1, completada="false", prioridad="alta", categoria_id="1")

        assert [t.id for t in page.items] == [1]

    def test_completed_filter(self, board):
        assert [t.id for t in list_ok(board, 1, completada="true").items] == [2]
        assert [t.id for t in list_ok(board, 1, completada="false").items] == [1]

    def test_category_filter(self, board):
        assert [t.id for t in list_ok(board, 1, categoria_id="2").items] == [2]


class TestValidation:
    def test_every_invalid_parameter_is_reported(self, board):
        result = board.list_tasks(
            1,
            {
                "completada": "maybe",
                "prioridad": "urgente",
                "usuario_id": "0",
                "pagina": "-1",
                "limite": "101",
                "ordenar": "color",
            },
        )

        assert isinstance(result, Failure)
        assert result.kind is ErrorKind.VALIDATION_FAILED
        assert {e.field for e in result.errors} == {
            "completada",
            "prioridad",
            "usuario_id",
            "pagina",
            "limite",
            "ordenar",
        }

    @pytest.mark.parametrize("limit", ["0", "101", "diez"])
    def test_page_size_bounds(self, board, limit):
        result = board.list_tasks(1, {"limite": limit})

        assert isinstance(result, Failure)
        assert [e.field for e in result.errors] == ["limite"]

    def test_page_size_limits_are_inclusive(self, board):
        assert isinstance(board.list_tasks(1, {"limite": "1"}), Ok)
        assert isinstance(board.list_tasks(1, {"limite": "100"}), Ok)
