"""Configuration objects and constants for the downloader."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

# Common URL prefix for fankit-related pages. Doubles as listing page 1.
URL_FANKIT_TOP = "https://priconne-redive.jp/fankit02/"
URL_FANKIT_ITEM_BASE = URL_FANKIT_TOP
URL_FANKIT_LIST_BASE = "https://priconne-redive.jp/fankit02/page/"

DEFAULT_CRAWL_DELAY_MS = 1000
DEFAULT_REQUEST_TIMEOUT = 30.0
DEFAULT_CHUNK_SIZE = 64 * 1024
LOG_LEVEL_ENV = "FANKIT_DL_LOG_LEVEL"

DEFAULT_HEADERS = {
    "User-Agent": "fankit-dl/0.1 (+https://priconne-redive.jp/fankit02/)",
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
}


@dataclass
class DownloadConfig:
    """Top-level settings that control crawling and downloading behaviour."""

    dest_dir: Path
    crawl_delay: float = DEFAULT_CRAWL_DELAY_MS / 1000
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    chunk_size: int = DEFAULT_CHUNK_SIZE
