"""
Pagination models and schemas.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Generic, TypeVar, Optional, List
from datetime import datetime, timezone

from paginator.config import get_config
from paginator.exceptions import InvalidPropertyError

T = TypeVar('T')


class PaginationParams(BaseModel):
    """Request parameters for pagination (clamped later, not validated here)"""
    page: int = Field(1, description="Requested page number (1-indexed)")
    items_per_page: int = Field(
        default_factory=lambda: get_config().items_per_page,
        description="Items per page"
    )


class PaginationState(BaseModel):
    """
    Fully resolved pagination state.

    Build it with ``paginator.services.pagination_service.calculate``;
    instances are frozen and never updated in place.
    """
    model_config = ConfigDict(frozen=True)

    total_items: int
    items_per_page: int
    current_page: int
    total_pages: int
    first_item: int
    last_item: int
    previous_page: Optional[int] = None
    next_page: Optional[int] = None
    first_page: Optional[int] = None
    last_page: Optional[int] = None
    offset: int

    @property
    def has_next(self) -> bool:
        return self.next_page is not None

    @property
    def has_previous(self) -> bool:
        return self.previous_page is not None

    @property
    def limit(self) -> int:
        return self.items_per_page

    @property
    def is_empty(self) -> bool:
        return self.total_items == 0

    @property
    def page_range(self) -> range:
        return range(1, self.total_pages + 1)

    def get(self, name: str) -> Any:
        """Read a state field by name; unknown names raise InvalidPropertyError"""
        if name not in type(self).model_fields:
            raise InvalidPropertyError(name, type(self).__name__)
        return getattr(self, name)


class PaginationMeta(BaseModel):
    """Pagination metadata"""
    current_page: int
    page_size: int
    total_items: int
    total_pages: int
    has_next: bool
    has_prev: bool
    next_page: Optional[int]
    prev_page: Optional[int]
    first_item: int
    last_item: int
    offset: int


class PaginatedResponse(BaseModel, Generic[T]):
    """Generic paginated response"""
    success: bool = True
    items: List[T]
    meta: PaginationMeta
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class PageLink(BaseModel):
    """One entry of a rendered pagination link list"""
    model_config = ConfigDict(frozen=True)

    label: str
    url: Optional[str] = None
    rel: Optional[str] = None
    page: Optional[int] = None
    current: bool = False
