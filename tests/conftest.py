"""Shared fixtures: an in-memory catalog served through a fake requests session."""

from __future__ import annotations

import time
from typing import Dict, Iterable, Iterator, List, Optional, Union

import pytest
import requests

from fankit_dl.config import URL_FANKIT_ITEM_BASE, URL_FANKIT_LIST_BASE, URL_FANKIT_TOP
from fankit_dl.dom import DomGateway

IMAGE_BASE = "https://priconne-redive.jp/wp-content/uploads/"

Route = Union[str, bytes, "FakeResponse", Exception]


def item_url(value: int) -> str:
    return f"{URL_FANKIT_ITEM_BASE}{value}/"


def list_url(value: int) -> str:
    if value <= 1:
        return URL_FANKIT_TOP
    return f"{URL_FANKIT_LIST_BASE}{value}/"


def list_page_html(items: Iterable[int] = (), pages: Iterable[int] = (), extra: Iterable[str] = ()) -> str:
    links = [f'<li><a href="{item_url(i)}">Fankit {i}</a></li>' for i in items]
    links += [f'<a class="page-numbers" href="{list_url(p)}">{p}</a>' for p in pages]
    links += [f'<a href="{href}">other</a>' for href in extra]
    return "<html><body><ul>{}</ul></body></html>".format("\n".join(links))


def detail_page_html(fankit_type: str, title: str, hrefs: Iterable[str] = ()) -> str:
    anchors = "".join(f'<a href="{href}">download</a>' for href in hrefs)
    return (
        "<html><body>"
        '<a href="https://priconne-redive.jp/outside.png">outside</a>'
        '<div id="contents">'
        f'<span class="label fankit-type">{fankit_type}</span>'
        f'<h2 class="title">{title}</h2>'
        f"<div class=\"images\">{anchors}</div>"
        "</div></body></html>"
    )


class FakeResponse:
    """Minimal stand-in for :class:`requests.Response`."""

    def __init__(self, body: Union[str, bytes] = b"", status_code: int = 200, chunks: Optional[List[bytes]] = None) -> None:
        self.content = body.encode("utf-8") if isinstance(body, str) else body
        self.status_code = status_code
        self._chunks = chunks
        self.closed = False

    @property
    def text(self) -> str:
        return self.content.decode("utf-8")

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)

    def iter_content(self, chunk_size: int = 1) -> Iterator[bytes]:
        if self._chunks is not None:
            yield from self._chunks
            return
        for start in range(0, len(self.content), chunk_size):
            yield self.content[start:start + chunk_size]

    def close(self) -> None:
        self.closed = True


class FakeSession:
    """Serves registered URLs and records every requested URL in order."""

    def __init__(self, routes: Optional[Dict[str, Route]] = None) -> None:
        self.routes: Dict[str, Route] = dict(routes or {})
        self.requested: List[str] = []

    def get(self, url: str, **kwargs) -> FakeResponse:
        self.requested.append(url)
        route = self.routes.get(url)
        if route is None:
            return FakeResponse(b"not found", status_code=404)
        if isinstance(route, Exception):
            raise route
        if isinstance(route, FakeResponse):
            return route
        return FakeResponse(route)


@pytest.fixture
def session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def gateway(session: FakeSession) -> DomGateway:
    return DomGateway(session=session, timeout=5.0)  # type: ignore[arg-type]


@pytest.fixture
def sleeps(monkeypatch: pytest.MonkeyPatch) -> List[float]:
    """Capture politeness delays instead of sleeping."""
    calls: List[float] = []
    monkeypatch.setattr(time, "sleep", calls.append)
    return calls
