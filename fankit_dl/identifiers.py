"""Conversion between fankit ids, listing page indices and their URLs."""

from __future__ import annotations

from .config import URL_FANKIT_ITEM_BASE, URL_FANKIT_LIST_BASE, URL_FANKIT_TOP
from .errors import IdentifierErrorKind, IdentifierFormatError
from .models import FankitId, ListPageIndex
from .utils import parse_decimal


def fankit_id_to_url(fankit_id: FankitId) -> str:
    return f"{URL_FANKIT_ITEM_BASE}{fankit_id.value}/"


def url_to_fankit_id(url: str) -> FankitId:
    """Parse ``<item-base><id>/`` into a :class:`FankitId`.

    Raises:
        IdentifierFormatError: ``BASE_MISMATCH`` when the URL is not under the
            item base, ``INVALID_PATH`` when the rest is not a decimal integer.
    """
    if not url.startswith(URL_FANKIT_ITEM_BASE):
        raise IdentifierFormatError(IdentifierErrorKind.BASE_MISMATCH, url)
    relpath = url[len(URL_FANKIT_ITEM_BASE):].rstrip("/")
    value = parse_decimal(relpath)
    if value is None:
        raise IdentifierFormatError(IdentifierErrorKind.INVALID_PATH, url)
    return FankitId(value)


def page_index_to_url(index: ListPageIndex) -> str:
    if index.value <= 1:
        return URL_FANKIT_TOP
    return f"{URL_FANKIT_LIST_BASE}{index.value}/"


def url_to_page_index(url: str) -> ListPageIndex:
    """Parse a listing page URL into a :class:`ListPageIndex`.

    The bare catalog root is page 1. Page 0 is rejected since it has no URL
    of its own.
    """
    if url.rstrip("/") == URL_FANKIT_TOP.rstrip("/"):
        return ListPageIndex(1)
    if not url.startswith(URL_FANKIT_LIST_BASE):
        raise IdentifierFormatError(IdentifierErrorKind.BASE_MISMATCH, url)
    relpath = url[len(URL_FANKIT_LIST_BASE):].rstrip("/")
    value = parse_decimal(relpath)
    if not value:
        raise IdentifierFormatError(IdentifierErrorKind.INVALID_PATH, url)
    return ListPageIndex(value)
