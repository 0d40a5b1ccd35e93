"""Metadata and image URL extraction for fankit detail pages."""

from __future__ import annotations

import logging

from bs4.element import PageElement

from .dom import DomGateway, anchor_hrefs, find_first, has_class, has_id, text_content
from .errors import ExtractionError
from .models import FankitId, FankitInfo
from .utils import normalize_whitespace

logger = logging.getLogger("fankit_dl")

IMAGE_SUFFIXES = (".jpg", ".png")


def _required_text(root: PageElement, class_name: str, fankit_id: FankitId, element: str) -> str:
    node = find_first(root, lambda node: has_class(class_name, node))
    if node is None:
        raise ExtractionError(fankit_id, element)
    return normalize_whitespace(text_content(node))


def extract_info(fankit_id: FankitId, document: PageElement) -> FankitInfo:
    """Build a :class:`FankitInfo` from a parsed detail page.

    Everything is read from under the ``#contents`` element: the type from the
    first ``.fankit-type``, the title from the first ``.title`` and the images
    from anchors whose href ends with ``.jpg`` or ``.png``.

    Raises:
        ExtractionError: if the contents element, the type or the title is
            missing.
    """
    contents = find_first(document, lambda node: has_id("contents", node))
    if contents is None:
        raise ExtractionError(fankit_id, "contents element")

    fankit_type = _required_text(contents, "fankit-type", fankit_id, "fankit type")
    title = _required_text(contents, "title", fankit_id, "fankit title")

    image_urls = frozenset(
        href.strip() for href in anchor_hrefs(contents) if href.endswith(IMAGE_SUFFIXES)
    )

    return FankitInfo(
        fankit_id=fankit_id,
        fankit_type=fankit_type,
        title=title,
        image_urls=image_urls,
    )


def load_info(gateway: DomGateway, fankit_id: FankitId) -> FankitInfo:
    """Fetch the fankit detail page and extract its metadata."""
    logger.debug("Loading fankit page: %s", fankit_id)
    document = gateway.load(fankit_id.to_url())
    info = extract_info(fankit_id, document)
    logger.debug("info = %r", info)
    return info
