from __future__ import annotations

import pytest

from roster.query.pagination import page_count, paginate

ITEMS = list(range(1, 24))


@pytest.mark.parametrize(
    "total,page_size,expected",
    [(0, 10, 0), (1, 10, 1), (10, 10, 1), (11, 10, 2), (50, 20, 3)],
)
def test_page_count_is_ceiling(total, page_size, expected):
    assert page_count(total, page_size) == expected


def test_pages_are_one_based():
    assert paginate(ITEMS, 1, 10) == list(range(1, 11))
    assert paginate(ITEMS, 3, 10) == [21, 22, 23]


def test_page_past_end_is_empty():
    assert paginate(ITEMS, 4, 10) == []
    assert paginate([], 1, 10) == []


def test_invalid_arguments_raise():
    with pytest.raises(ValueError):
        paginate(ITEMS, 0, 10)
    with pytest.raises(ValueError):
        paginate(ITEMS, 1, 0)
    with pytest.raises(ValueError):
        page_count(5, 0)
