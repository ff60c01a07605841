import pytest

from app.utils.pagination import MAX_OFFSET, Pagination, page_count, paginate, positive_int


class TestPositiveInt:
    @pytest.mark.parametrize("raw, expected", [
        (3, 3),
        ("7", 7),
        (" 2 ", 2),
        ("0", None),
        ("-4", None),
        (0, None),
        ("abc", None),
        ("", None),
        (None, None),
        (True, None),
    ])
    def test_coercion(self, raw, expected):
        assert positive_int(raw) == expected


class TestPageCount:
    def test_exact_multiple(self):
        assert page_count(20, 10) == 2

    def test_rounds_up(self):
        assert page_count(21, 10) == 3

    def test_no_items(self):
        assert page_count(0, 10) == 0


class TestPaginate:
    def test_defaults(self):
        assert paginate(None, None, 10) == Pagination(page=1, per_page=10)

    def test_invalid_values_fall_back_to_defaults(self):
        assert paginate("-1", "zero", 21) == Pagination(page=1, per_page=21)

    def test_requested_values(self):
        pagination = paginate("3", "5", 10)
        assert pagination.page == 3
        assert pagination.per_page == 5
        assert pagination.offset == 10

    def test_per_page_capped(self):
        assert paginate(1, 500, 10, max_per_page=100).per_page == 100

    def test_no_cap(self):
        assert paginate(1, 500, 10, max_per_page=None).per_page == 500


def test_meta():
    meta = Pagination(page=2, per_page=2).meta(5)
    assert meta.model_dump() == {"total": 5, "pages": 3, "page": 2, "per_page": 2}


def test_offset_is_bounded():
    assert Pagination(page=10**20, per_page=10).offset == MAX_OFFSET
