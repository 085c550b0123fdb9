"""
Paginator - keeps pagination inputs together and recomputes state on demand.
"""

import logging
from typing import Any, Dict, List, Optional

from paginator.config import PaginationConfig, config_group, get_config
from paginator.exceptions import InvalidPropertyError
from paginator.models.pagination import PageLink, PaginationState
from paginator.services.link_service import UrlBuilder, render_html, render_links
from paginator.services.pagination_service import calculate, valid_page

logger = logging.getLogger(__name__)

INPUT_KEYS = ("total_items", "items_per_page", "current_page")
SETUP_KEYS = INPUT_KEYS + ("auto_hide", "first_page_in_url", "group")


class Paginator:
    """
    Holds total_items, items_per_page and the requested page.

    Changing inputs goes through setup(), which recomputes the state only
    when one of the three inputs changed.

    Example:
        pager = Paginator(total_items=95, items_per_page=10, current_page=3)
        pager.offset                  # 20
        pager.setup(current_page=4)   # recomputed
        pager.links(lambda p: f"/articles?page={p}")
    """

    def __init__(
        self,
        total_items: int = 0,
        items_per_page: Optional[int] = None,
        current_page: Optional[int] = None,
        config: Optional[PaginationConfig] = None,
        **settings: Any
    ):
        self.config = (config or get_config()).merged(config_group())
        self._total_items: Any = 0
        self._items_per_page: Any = self.config.items_per_page
        self._requested_page: Any = None
        self._state: Optional[PaginationState] = None

        changes: Dict[str, Any] = dict(settings)
        changes["total_items"] = total_items
        if items_per_page is not None:
            changes["items_per_page"] = items_per_page
        if current_page is not None:
            changes["current_page"] = current_page
        self.setup(**changes)

    def setup(self, **changes: Any) -> "Paginator":
        """Apply settings; unknown keys raise InvalidPropertyError"""
        for key in changes:
            if key not in SETUP_KEYS:
                logger.warning(f"⚠️ Paginator.setup() got unknown key '{key}'")
                raise InvalidPropertyError(key, type(self).__name__)

        if "group" in changes:
            group_settings = config_group(changes.pop("group"))
            changes = {**{k: v for k, v in group_settings.items() if k in SETUP_KEYS}, **changes}

        total_items = changes.get("total_items", self._total_items)
        items_per_page = changes.get("items_per_page", self._items_per_page)
        requested_page = changes.get("current_page", self._requested_page)

        # Nothing is stored until the new state and config are both valid
        state = self._state
        if state is None or any(key in changes for key in INPUT_KEYS):
            state = calculate(total_items, items_per_page, requested_page)
        flags = {k: v for k, v in changes.items() if k not in INPUT_KEYS}
        flags["items_per_page"] = state.items_per_page
        config = self.config.merged(flags)

        self.config = config
        self._total_items = total_items
        self._items_per_page = items_per_page
        self._requested_page = requested_page
        if state is not self._state:
            self._commit(state)

        return self

    def recompute(self) -> PaginationState:
        """Rebuild the state from the current inputs"""
        return self._commit(calculate(self._total_items, self._items_per_page, self._requested_page))

    def _commit(self, state: PaginationState) -> PaginationState:
        self._state = state
        logger.debug(
            f"🔢 Pagination recomputed: page {self._state.current_page}/{self._state.total_pages}, "
            f"items {self._state.first_item}-{self._state.last_item} of {self._state.total_items}"
        )
        return self._state

    @property
    def state(self) -> PaginationState:
        return self._state

    @property
    def total_items(self) -> int:
        return self._state.total_items

    @property
    def items_per_page(self) -> int:
        return self._state.items_per_page

    @property
    def current_page(self) -> int:
        return self._state.current_page

    @property
    def total_pages(self) -> int:
        return self._state.total_pages

    @property
    def first_item(self) -> int:
        return self._state.first_item

    @property
    def last_item(self) -> int:
        return self._state.last_item

    @property
    def previous_page(self) -> Optional[int]:
        return self._state.previous_page

    @property
    def next_page(self) -> Optional[int]:
        return self._state.next_page

    @property
    def first_page(self) -> Optional[int]:
        return self._state.first_page

    @property
    def last_page(self) -> Optional[int]:
        return self._state.last_page

    @property
    def offset(self) -> int:
        return self._state.offset

    def valid_page(self, page: Any) -> bool:
        return valid_page(self._state, page)

    def links(self, url_for: UrlBuilder) -> List[PageLink]:
        return render_links(self._state, url_for, auto_hide=self.config.auto_hide)

    def render(self, url_for: UrlBuilder) -> str:
        return render_html(self.links(url_for))

    def __repr__(self) -> str:
        return (
            f"Paginator(total_items={self._state.total_items}, "
            f"items_per_page={self._state.items_per_page}, current_page={self._state.current_page})"
        )
