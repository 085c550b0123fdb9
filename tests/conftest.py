"""
Test Configuration
"""

import pytest

from paginator.config import clear_config_groups

PAGINATION_ENV = (
    "PAGINATION_ITEMS_PER_PAGE",
    "PAGINATION_AUTO_HIDE",
    "PAGINATION_FIRST_PAGE_IN_URL",
    "PAGINATION_QUERY_KEY",
    "DEBUG",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_pagination_env(monkeypatch):
    """Isolate every test from ambient pagination settings"""
    for name in PAGINATION_ENV:
        monkeypatch.delenv(name, raising=False)
    clear_config_groups()
    yield
    clear_config_groups()


@pytest.fixture
def url_for():
    """Simple page -> URL builder"""
    return lambda page: f"/articles?page={page}"
