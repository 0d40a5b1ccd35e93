"""High-level orchestration for mirroring fankits into the destination directory."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Iterable, Set

from .config import DownloadConfig
from .content import load_info
from .dom import DomGateway
from .images import download_images
from .models import FankitId

logger = logging.getLogger("fankit_dl")


@dataclass
class DownloadSummary:
    """Counters for a single downloader run."""

    skipped_items: int = 0
    downloaded_items: int = 0
    written_images: int = 0
    failed_images: int = 0


def run_downloads(
    gateway: DomGateway,
    config: DownloadConfig,
    discovered: Iterable[FankitId],
    inventory: Set[FankitId],
) -> DownloadSummary:
    """Download the images of every discovered fankit that is not on disk yet.

    A fankit page that cannot be loaded or parsed aborts the run, since the
    directory name comes from that page. Failures on single images are logged
    and skipped.
    """
    summary = DownloadSummary()
    for fankit_id in discovered:
        if fankit_id in inventory:
            logger.info("Skipping item %s", fankit_id)
            summary.skipped_items += 1
            continue

        info = load_info(gateway, fankit_id)
        item_name = info.item_name()
        logger.info("Downloading images in item %r", item_name)

        item_dir = config.dest_dir / item_name
        try:
            item_dir.mkdir()
        except OSError as exc:
            logger.error("Failed to create item dir %s: %s", item_dir, exc)

        result = download_images(
            gateway.session,
            info.image_urls,
            item_dir,
            config.request_timeout,
            config.chunk_size,
        )
        summary.downloaded_items += 1
        summary.written_images += result.written
        summary.failed_images += result.failed

        if config.crawl_delay > 0:
            time.sleep(config.crawl_delay)

    logger.info(
        "Finished: %d item(s) downloaded, %d skipped, %d image(s) written, %d failed",
        summary.downloaded_items,
        summary.skipped_items,
        summary.written_images,
        summary.failed_images,
    )
    return summary
