"""Command-line entry point for the fankit downloader."""

from __future__ import annotations

import argparse
import logging
import os
import sys
import time
from pathlib import Path
from typing import Sequence

from .config import DEFAULT_CRAWL_DELAY_MS, LOG_LEVEL_ENV, DownloadConfig
from .crawler import discover_if_new
from .dom import DomGateway
from .downloader import run_downloads
from .errors import FankitError
from .inventory import scan_inventory

logger = logging.getLogger("fankit_dl.cli")


def _non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {value}")
    return number


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Download Princess Connect! Re:Dive fankits that are not yet on disk.",
    )
    parser.add_argument(
        "--dest",
        default=None,
        type=Path,
        help="Directory where fankit directories are stored (default: current directory)",
    )
    parser.add_argument(
        "--crawl-delay",
        type=_non_negative_int,
        default=DEFAULT_CRAWL_DELAY_MS,
        help="Milliseconds to wait between consecutive page or item fetches",
    )
    return parser.parse_args(argv)


def _configure_logging() -> None:
    level_name = os.getenv(LOG_LEVEL_ENV, "INFO").upper()
    level = logging.getLevelName(level_name)
    logging.basicConfig(
        level=level if isinstance(level, int) else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,
    )
    if not isinstance(level, int):
        logger.warning("Unknown log level %s=%s; using INFO", LOG_LEVEL_ENV, level_name)


def run(config: DownloadConfig, gateway: DomGateway | None = None) -> None:
    """Mirror new fankits into ``config.dest_dir``."""
    gateway = gateway or DomGateway(timeout=config.request_timeout)
    logger.debug("base directory: %s", config.dest_dir)

    inventory = scan_inventory(config.dest_dir)
    logger.debug("%d fankit(s) already downloaded", len(inventory))

    fankits = discover_if_new(gateway, inventory, config.crawl_delay)
    if fankits is None:
        logger.info("No new fankits found")
        return
    logger.debug("fankits = %s", sorted(f.value for f in fankits))

    run_downloads(gateway, config, fankits, inventory)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    _configure_logging()

    config = DownloadConfig(
        dest_dir=(args.dest or Path.cwd()).resolve(),
        crawl_delay=args.crawl_delay / 1000,
    )

    overall_start = time.perf_counter()
    try:
        run(config)
    except (FankitError, OSError) as exc:
        logger.error("%s", exc)
        return 1
    logger.info("Finished in %.2fs", time.perf_counter() - overall_start)
    return 0


if __name__ == "__main__":
    sys.exit(main())
