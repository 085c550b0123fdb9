"""
Test Pagination Models
"""

import pytest
from pydantic import ValidationError

from paginator.exceptions import InvalidPropertyError
from paginator.models.pagination import PageLink, PaginationParams
from paginator.services.pagination_service import calculate


def test_state_named_access():
    """get() reads known fields"""
    state = calculate(95, 10, 3)
    assert state.get("current_page") == 3
    assert state.get("next_page") == 4
    assert state.get("last_page") == 10


def test_state_named_access_unknown():
    """get() fails fast on unknown names"""
    state = calculate(95, 10, 3)
    with pytest.raises(InvalidPropertyError) as exc_info:
        state.get("current_first_item")
    assert "current_first_item" in str(exc_info.value)
    with pytest.raises(AttributeError):
        state.get("has_next")


def test_state_derived_properties():
    state = calculate(25, 10, 2)
    assert state.has_next is True
    assert state.has_previous is True
    assert state.limit == 10
    assert state.is_empty is False
    assert list(state.page_range) == [1, 2, 3]

    empty = calculate(0, 10, 1)
    assert empty.is_empty is True
    assert empty.has_next is False
    assert list(empty.page_range) == []


def test_state_is_immutable():
    """Assignment raises instead of recomputing"""
    state = calculate(25, 10, 2)
    with pytest.raises(ValidationError):
        state.current_page = 3
    assert state.current_page == 2


def test_state_equality():
    assert calculate(25, 10, 2) == calculate(25, 10, 2)
    assert calculate(25, 10, 2) != calculate(25, 10, 3)


def test_pagination_params_defaults(monkeypatch):
    """Params keep raw values and take the page size from config"""
    params = PaginationParams()
    assert params.page == 1
    assert params.items_per_page == 10

    monkeypatch.setenv("PAGINATION_ITEMS_PER_PAGE", "15")
    assert PaginationParams(page=-2).items_per_page == 15
    assert PaginationParams(page=-2).page == -2


def test_page_link_serialization():
    link = PageLink(label="Next", url="/a?page=2", rel="next", page=2)
    assert link.model_dump() == {
        "label": "Next",
        "url": "/a?page=2",
        "rel": "next",
        "page": 2,
        "current": False,
    }
