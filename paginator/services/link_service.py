"""
Link service - turns a pagination state into navigation links.
"""

from html import escape
from typing import Callable, Dict, List, Mapping, Optional
import logging

from paginator.config import get_config
from paginator.models.pagination import PageLink, PaginationState

logger = logging.getLogger(__name__)

UrlBuilder = Callable[[int], str]

DEFAULT_LABELS: Dict[str, str] = {
    "first": "First",
    "prev": "Previous",
    "next": "Next",
    "last": "Last",
}


def _nav_link(rel: str, target: Optional[int], url_for: UrlBuilder, labels: Mapping[str, str]) -> PageLink:
    if target is None:
        return PageLink(label=labels[rel], rel=rel)
    return PageLink(label=labels[rel], url=url_for(target), rel=rel, page=target)


def render_links(
    state: PaginationState,
    url_for: UrlBuilder,
    auto_hide: Optional[bool] = None,
    labels: Optional[Mapping[str, str]] = None
) -> List[PageLink]:
    """
    Build First, Previous, 1..N, Next, Last links for a state.

    Navigation entries without a target page have no URL and the current page
    is marked instead of linked. With auto_hide (config default) nothing is
    returned when there is at most one page.
    """
    if auto_hide is None:
        auto_hide = get_config().auto_hide
    if auto_hide and state.total_pages <= 1:
        logger.debug(f"🙈 Pagination hidden: {state.total_pages} page(s)")
        return []

    names = {**DEFAULT_LABELS, **(labels or {})}

    links = [
        _nav_link("first", state.first_page, url_for, names),
        _nav_link("prev", state.previous_page, url_for, names),
    ]
    for page in state.page_range:
        if page == state.current_page:
            links.append(PageLink(label=str(page), page=page, current=True))
        else:
            links.append(PageLink(label=str(page), url=url_for(page), page=page))
    links.append(_nav_link("next", state.next_page, url_for, names))
    links.append(_nav_link("last", state.last_page, url_for, names))

    return links


def render_html(links: List[PageLink]) -> str:
    """Render links as a <p class="pagination"> fragment; empty input renders nothing"""
    if not links:
        return ""

    parts = []
    for link in links:
        label = escape(link.label)
        if link.current:
            parts.append(f"<strong>{label}</strong>")
        elif link.url is None:
            parts.append(label)
        elif link.rel:
            parts.append(f'<a href="{escape(link.url)}" rel="{link.rel}">{label}</a>')
        else:
            parts.append(f'<a href="{escape(link.url)}">{label}</a>')

    return '<p class="pagination">\n\t' + "\n\t".join(parts) + "\n</p><!-- .pagination -->"
