"""Data models used throughout the downloader pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet

from .utils import sanitize_component


@dataclass(frozen=True, order=True)
class FankitId:
    """Identifier of a single catalog entry."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError(f"Fankit id must not be negative: {self.value}")

    def __str__(self) -> str:
        return str(self.value)

    def to_url(self) -> str:
        from .identifiers import fankit_id_to_url

        return fankit_id_to_url(self)

    @classmethod
    def from_url(cls, url: str) -> "FankitId":
        from .identifiers import url_to_fankit_id

        return url_to_fankit_id(url)


@dataclass(frozen=True, order=True)
class ListPageIndex:
    """1-based index of a catalog listing page. Page 1 is the catalog root."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 1:
            raise ValueError(f"List page index must be at least 1: {self.value}")

    def __str__(self) -> str:
        return str(self.value)

    def to_url(self) -> str:
        from .identifiers import page_index_to_url

        return page_index_to_url(self)

    @classmethod
    def from_url(cls, url: str) -> "ListPageIndex":
        from .identifiers import url_to_page_index

        return url_to_page_index(url)


@dataclass(frozen=True)
class FankitInfo:
    """Metadata and image URLs parsed from a fankit detail page."""

    fankit_id: FankitId
    fankit_type: str
    title: str
    image_urls: FrozenSet[str]

    def item_name(self) -> str:
        """Directory name for the item: ``<id>-<type>-<title>``."""
        return "{}-{}-{}".format(
            self.fankit_id.value,
            sanitize_component(self.fankit_type),
            sanitize_component(self.title),
        )
