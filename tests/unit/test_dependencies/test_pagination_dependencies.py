"""
Test Pagination Dependencies
"""

import pytest
from fastapi import Depends, FastAPI, Request
from fastapi.testclient import TestClient

from paginator.dependencies.pagination import pagination_params, query_string_url_builder
from paginator.models.pagination import PaginationParams
from paginator.services.link_service import render_links
from paginator.services.pagination_service import calculate


def build_app(**builder_kwargs) -> FastAPI:
    app = FastAPI()

    @app.get("/articles")
    async def list_articles(
        request: Request,
        params: PaginationParams = Depends(pagination_params(size_key="per_page")),
    ):
        state = calculate(95, params.items_per_page, params.page)
        url_for = query_string_url_builder(request, **builder_kwargs)
        return {
            "params": params.model_dump(),
            "current_page": state.current_page,
            "links": [link.model_dump() for link in render_links(state, url_for)],
        }

    @app.get("/items")
    async def list_items(params: PaginationParams = Depends(pagination_params(key="p"))):
        return params.model_dump()

    return app


@pytest.fixture
def client():
    with TestClient(build_app()) as test_client:
        yield test_client


def test_params_from_query(client):
    """Page and size are read from the query string unclamped"""
    data = client.get("/articles?page=3&per_page=20").json()
    assert data["params"] == {"page": 3, "items_per_page": 20}
    assert data["current_page"] == 3


def test_params_defaults(client):
    """Missing parameters fall back to page 1 and the configured size"""
    data = client.get("/articles").json()
    assert data["params"] == {"page": 1, "items_per_page": 10}


def test_params_garbage_page_clamps_to_first(client):
    """Non-integer pages end up on page 1"""
    data = client.get("/articles?page=abc").json()
    assert data["params"]["page"] == 0
    assert data["current_page"] == 1


def test_params_out_of_range_page_clamps(client):
    """Huge pages clamp to the last page"""
    data = client.get("/articles?page=999").json()
    assert data["params"]["page"] == 999
    assert data["current_page"] == 10


def test_params_custom_key(client):
    """The query key is configurable per dependency"""
    assert client.get("/items?p=4&page=9").json() == {"page": 4, "items_per_page": 10}


def test_params_key_from_env(monkeypatch):
    """PAGINATION_QUERY_KEY changes the default key"""
    monkeypatch.setenv("PAGINATION_QUERY_KEY", "pg")
    with TestClient(build_app()) as test_client:
        data = test_client.get("/articles?pg=2&page=5").json()
    assert data["params"]["page"] == 2


def test_url_builder_keeps_other_params(client):
    """Links keep the rest of the query and drop the page on page 1"""
    data = client.get("/articles?page=2&sort=title").json()
    links = {link["label"]: link["url"] for link in data["links"]}

    assert links["First"] == "http://testserver/articles?sort=title"
    assert links["Previous"] == "http://testserver/articles?sort=title"
    assert links["Next"] == "http://testserver/articles?sort=title&page=3"
    assert links["Last"] == "http://testserver/articles?sort=title&page=10"
    assert links["2"] is None


def test_url_builder_first_page_in_url():
    """first_page_in_url keeps page=1 in links"""
    with TestClient(build_app(first_page_in_url=True)) as test_client:
        data = test_client.get("/articles?page=2").json()
    links = {link["label"]: link["url"] for link in data["links"]}
    assert links["First"] == "http://testserver/articles?page=1"


@pytest.mark.parametrize("raw,expected", [("3abc", 3), ("2.5", 2), (" 4", 4), ("-2x", -2), ("+5", 5)])
def test_params_leading_integer(client, raw, expected):
    """Query values are read up to their first non-digit"""
    data = client.get("/articles", params={"page": raw}).json()
    assert data["params"]["page"] == expected
