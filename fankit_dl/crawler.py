"""Breadth-first discovery of fankit ids over the catalog listing pages."""

from __future__ import annotations

import logging
import time
from collections import deque
from typing import Deque, Iterable, Optional, Set, Tuple

from .config import URL_FANKIT_TOP
from .dom import DomGateway, anchor_hrefs
from .errors import IdentifierFormatError
from .identifiers import url_to_fankit_id, url_to_page_index
from .models import FankitId, ListPageIndex

logger = logging.getLogger("fankit_dl")

FIRST_PAGE = ListPageIndex(1)


def classify_hrefs(hrefs: Iterable[str]) -> Tuple[Set[FankitId], Set[ListPageIndex]]:
    """Split catalog hrefs into fankit ids and listing page indices.

    Hrefs outside the catalog, or matching neither URL shape, are dropped.
    """
    fankits: Set[FankitId] = set()
    list_pages: Set[ListPageIndex] = set()
    for href in hrefs:
        if not href.startswith(URL_FANKIT_TOP):
            continue
        try:
            fankits.add(url_to_fankit_id(href))
            continue
        except IdentifierFormatError:
            pass
        try:
            list_pages.add(url_to_page_index(href))
        except IdentifierFormatError:
            pass
    return fankits, list_pages


def load_list_page(
    gateway: DomGateway, index: ListPageIndex
) -> Tuple[Set[FankitId], Set[ListPageIndex]]:
    """Load one listing page and return the fankits and list pages it links to."""
    logger.debug("Loading list page: %s", index)
    document = gateway.load(index.to_url())
    return classify_hrefs(anchor_hrefs(document))


def _crawl(
    gateway: DomGateway,
    pending: Deque[ListPageIndex],
    done: Set[ListPageIndex],
    fankits: Set[FankitId],
    crawl_delay: float,
) -> Set[FankitId]:
    while pending:
        list_page = pending.popleft()
        if list_page in done:
            continue
        done.add(list_page)

        if crawl_delay > 0:
            time.sleep(crawl_delay)
        new_fankits, other_lists = load_list_page(gateway, list_page)
        pending.extend(page for page in other_lists if page not in done)
        fankits.update(new_fankits)

        logger.debug(
            "List pages done = %s, undone = %s",
            sorted(page.value for page in done),
            [page.value for page in pending],
        )
    return fankits


def discover_all(gateway: DomGateway, crawl_delay: float = 0.0) -> Set[FankitId]:
    """Visit every listing page reachable from page 1 and collect all fankit ids.

    ``crawl_delay`` seconds are waited before every page fetch except the
    first. Any page load failure aborts the crawl.
    """
    fankits, other_lists = load_list_page(gateway, FIRST_PAGE)
    done = {FIRST_PAGE}
    pending = deque(page for page in other_lists if page not in done)
    return _crawl(gateway, pending, done, fankits, crawl_delay)


def discover_if_new(
    gateway: DomGateway,
    known: Set[FankitId],
    crawl_delay: float,
) -> Optional[Set[FankitId]]:
    """Like :func:`discover_all`, but return ``None`` when page 1 has nothing new.

    The catalog lists the most recently added fankits first, so when every
    fankit on page 1 is already known the deeper pages are not fetched. A
    catalog that inserts older entries on later pages defeats this shortcut;
    such entries are only picked up by :func:`discover_all`.
    """
    fankits, other_lists = load_list_page(gateway, FIRST_PAGE)
    if fankits <= known:
        logger.info("No new fankits on the first list page")
        return None
    logger.debug("New fankits on the first list page: %s", sorted(f.value for f in fankits - known))

    done = {FIRST_PAGE}
    pending = deque(page for page in other_lists if page not in done)
    return _crawl(gateway, pending, done, fankits, crawl_delay)
