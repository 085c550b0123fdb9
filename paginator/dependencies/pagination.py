"""
Pagination dependencies for FastAPI dependency injection
"""

import logging
import re
from typing import Callable, Optional

from fastapi import Request

from paginator.config import get_config
from paginator.models.pagination import PaginationParams
from paginator.services.link_service import UrlBuilder

logger = logging.getLogger(__name__)

# Leading integer of a query value: "3abc" -> 3, "2.5" -> 2
LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _query_int(request: Request, key: str, default: int) -> int:
    raw = request.query_params.get(key)
    if raw is None or raw.strip() == "":
        return default
    match = LEADING_INT.match(raw)
    if match is None:
        # No leading digits reads as 0, which the calculator clamps up to page 1
        logger.debug(f"🔍 Non-integer query parameter {key}={raw!r}, treating as 0")
        return 0
    return int(match.group(1))


def pagination_params(
    key: Optional[str] = None,
    size_key: Optional[str] = None
) -> Callable[[Request], PaginationParams]:
    """
    Build a dependency that reads the requested page (and optionally the page
    size) from the query string. Values are passed through unclamped.

    Usage:
        @router.get("/articles")
        async def list_articles(params: PaginationParams = Depends(pagination_params())):
            state = calculate(total, params.items_per_page, params.page)
    """
    page_key = key or get_config().query_key

    async def dependency(request: Request) -> PaginationParams:
        default_size = get_config().items_per_page
        params = PaginationParams(
            page=_query_int(request, page_key, 1),
            items_per_page=_query_int(request, size_key, default_size) if size_key else default_size,
        )
        logger.debug(f"📥 Pagination params: page={params.page}, size={params.items_per_page}")
        return params

    return dependency


def query_string_url_builder(
    request: Request,
    key: Optional[str] = None,
    first_page_in_url: Optional[bool] = None
) -> UrlBuilder:
    """
    Page -> URL callable for links on the current request's URL.

    Other query parameters are kept. Page 1 drops the page parameter unless
    first_page_in_url is set.
    """
    config = get_config()
    page_key = key or config.query_key
    if first_page_in_url is None:
        first_page_in_url = config.first_page_in_url

    def url_for(page: int) -> str:
        page = max(1, int(page))
        if page == 1 and not first_page_in_url:
            return str(request.url.remove_query_params(page_key))
        return str(request.url.include_query_params(**{page_key: page}))

    return url_for
