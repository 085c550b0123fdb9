"""
Pagination service - derives pagination state from item count, page size and requested page.
"""

from typing import Any, Optional, Sequence
import logging

from paginator.exceptions import InvalidInputError
from paginator.models.pagination import PaginatedResponse, PaginationMeta, PaginationState

logger = logging.getLogger(__name__)


def _as_int(field: str, value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        logger.warning(f"⚠️ Rejected {field}={value!r}: not an integer")
        raise InvalidInputError(field, value) from None


def calculate(
    total_items: Any,
    items_per_page: Any,
    requested_page: Any = None
) -> PaginationState:
    """
    Compute a pagination state. Out-of-range inputs are clamped, never rejected:
    negative counts become 0, page sizes below 1 become 1 and the requested page
    is pulled into [1, max(1, total_pages)]. A missing page means page 1.

    Example:
        >>> calculate(95, 10, 3).first_item
        21
    """
    total_items = max(0, _as_int("total_items", total_items))
    items_per_page = max(1, _as_int("items_per_page", items_per_page))
    page = 1 if requested_page is None else _as_int("requested_page", requested_page)

    total_pages = -(-total_items // items_per_page)
    current_page = min(max(1, page), max(1, total_pages))
    first_item = min((current_page - 1) * items_per_page + 1, total_items)
    last_item = min(first_item + items_per_page - 1, total_items)

    return PaginationState(
        total_items=total_items,
        items_per_page=items_per_page,
        current_page=current_page,
        total_pages=total_pages,
        first_item=first_item,
        last_item=last_item,
        previous_page=current_page - 1 if current_page > 1 else None,
        next_page=current_page + 1 if current_page < total_pages else None,
        first_page=None if current_page == 1 else 1,
        last_page=None if current_page >= total_pages else total_pages,
        offset=(current_page - 1) * items_per_page,
    )


def valid_page(state: PaginationState, page: Any) -> bool:
    """Whether page is a clean positive integer that exists in state"""
    if isinstance(page, bool):
        return False
    if isinstance(page, str):
        if not (page.isascii() and page.isdigit()):
            return False
        page = int(page)
    elif not isinstance(page, int):
        return False
    return 0 < page <= state.total_pages


class PaginationService:
    """
    Pagination helpers for endpoints that page through results.
    """

    @staticmethod
    def calculate_offset(page: int, page_size: int) -> int:
        """Calculate SQL OFFSET from page number"""
        return (max(1, page) - 1) * max(1, page_size)

    @staticmethod
    def create_meta(state: PaginationState) -> PaginationMeta:
        """Create pagination metadata"""
        return PaginationMeta(
            current_page=state.current_page,
            page_size=state.items_per_page,
            total_items=state.total_items,
            total_pages=state.total_pages,
            has_next=state.has_next,
            has_prev=state.has_previous,
            next_page=state.next_page,
            prev_page=state.previous_page,
            first_item=state.first_item,
            last_item=state.last_item,
            offset=state.offset,
        )

    @staticmethod
    def paginate_items(
        items: Sequence[Any],
        page: Optional[int],
        page_size: int
    ) -> PaginatedResponse:
        """
        Slice an in-memory sequence down to one page.

        Returns:
            PaginatedResponse with the page's items and its metadata
        """
        state = calculate(len(items), page_size, page)
        page_items = list(items[state.offset:state.offset + state.items_per_page])

        logger.info(
            f"📄 Paginated: page={state.current_page}/{state.total_pages}, "
            f"size={state.items_per_page}, total={state.total_items}, returned={len(page_items)}"
        )

        return PaginatedResponse(items=page_items, meta=PaginationService.create_meta(state))


# Singleton
pagination_service = PaginationService()
