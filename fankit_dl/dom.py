"""Page fetching and generic node queries over parsed HTML."""

from __future__ import annotations

import logging
from typing import Callable, Iterator, List, Optional, Set, Tuple

import requests
from bs4 import BeautifulSoup
from bs4.element import NavigableString, PageElement, PreformattedString, Tag

from .config import DEFAULT_HEADERS, DEFAULT_REQUEST_TIMEOUT
from .errors import PageLoadError

logger = logging.getLogger("fankit_dl")


def create_session() -> requests.Session:
    session = requests.Session()
    session.headers.update(DEFAULT_HEADERS)
    return session


class DomGateway:
    """Fetches pages over HTTP and parses them into BeautifulSoup documents."""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_REQUEST_TIMEOUT,
    ) -> None:
        self.session = session or create_session()
        self.timeout = timeout

    def load(self, url: str) -> BeautifulSoup:
        """GET a page and return the parsed document.

        Raises:
            PageLoadError: on transport errors, non-success status codes or
                undecodable bodies.
        """
        logger.debug("Loading page: %s", url)
        try:
            resp = self.session.get(url, timeout=self.timeout)
            resp.raise_for_status()
            html = resp.text
        except (requests.RequestException, UnicodeDecodeError) as exc:
            raise PageLoadError(url, exc) from exc
        return BeautifulSoup(html, "html.parser")


def traverse(root: PageElement) -> Iterator[PageElement]:
    """Yield ``root`` and its descendants depth-first, in document order.

    Uses an explicit stack of ``(parent, next_child_index)`` frames, so deep
    documents do not hit the recursion limit. Each call starts a fresh walk.
    """
    yield root
    if not isinstance(root, Tag):
        return
    stack: List[Tuple[Tag, int]] = [(root, 0)]
    while stack:
        parent, index = stack[-1]
        if index >= len(parent.contents):
            stack.pop()
            continue
        stack[-1] = (parent, index + 1)
        child = parent.contents[index]
        yield child
        if isinstance(child, Tag) and child.contents:
            stack.append((child, 0))


def find_first(
    root: PageElement, predicate: Callable[[PageElement], bool]
) -> Optional[PageElement]:
    for node in traverse(root):
        if predicate(node):
            return node
    return None


def has_id(name: str, node: PageElement) -> bool:
    return isinstance(node, Tag) and node.get("id") == name


def has_class(name: str, node: PageElement) -> bool:
    if not isinstance(node, Tag):
        return False
    classes = node.get("class") or []
    if isinstance(classes, str):
        classes = classes.split()
    return name in classes


def text_content(node: PageElement) -> str:
    """Concatenate every text node under ``node``.

    Comments, doctypes and other declarations are not text.
    """
    return "".join(
        str(child)
        for child in traverse(node)
        if isinstance(child, NavigableString) and not isinstance(child, PreformattedString)
    )


def anchor_hrefs(node: PageElement) -> Set[str]:
    """Deduplicated ``href`` values of all ``<a>`` elements under ``node``."""
    hrefs: Set[str] = set()
    for child in traverse(node):
        if isinstance(child, Tag) and child.name == "a":
            href = child.get("href")
            if isinstance(href, str):
                hrefs.add(href)
    return hrefs
