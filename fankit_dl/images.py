"""Image downloading and durable persistence utilities."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

import requests

from .errors import StorageError
from .utils import filename_from_url

logger = logging.getLogger("fankit_dl")


@dataclass
class ImageResult:
    """Outcome of downloading the images of one item."""

    written: int = 0
    failed: int = 0


def write_image(path: Path, chunks: Iterable[bytes]) -> None:
    """Stream ``chunks`` into ``path``, then flush and fsync the file.

    Raises:
        StorageError: naming the step (create, write, flush or sync) that failed.
        requests.RequestException: if the body stream breaks mid-download.
    """
    try:
        file = open(path, "wb")
    except OSError as exc:
        raise StorageError(path, "create", exc) from exc
    step = "write"
    try:
        with file:
            for chunk in chunks:
                if chunk:
                    file.write(chunk)
            step = "flush"
            file.flush()
            step = "sync"
            os.fsync(file.fileno())
    except requests.RequestException:
        # RequestException subclasses OSError.
        raise
    except OSError as exc:
        raise StorageError(path, step, exc) from exc


def download_image(
    session: requests.Session,
    image_url: str,
    item_dir: Path,
    timeout: float,
    chunk_size: int,
) -> Path:
    """Download a single image into ``item_dir`` under its URL file name."""
    filename = filename_from_url(image_url)
    if not filename:
        raise ValueError(f"Image URL has no file name: {image_url!r}")
    resp = session.get(image_url, stream=True, timeout=timeout)
    try:
        resp.raise_for_status()
        destination = item_dir / filename
        write_image(destination, resp.iter_content(chunk_size=chunk_size))
    finally:
        resp.close()
    return destination


def download_images(
    session: requests.Session,
    image_urls: Iterable[str],
    item_dir: Path,
    timeout: float,
    chunk_size: int,
) -> ImageResult:
    """Download every image, logging and skipping the ones that fail."""
    result = ImageResult()
    for image_url in image_urls:
        logger.debug("Downloading image %s", image_url)
        try:
            destination = download_image(session, image_url, item_dir, timeout, chunk_size)
        except requests.RequestException as exc:
            logger.error("Failed to download image %s: %s", image_url, exc)
            result.failed += 1
            continue
        except StorageError as exc:
            logger.error("Skipping image %s: %s", image_url, exc)
            result.failed += 1
            continue
        except ValueError as exc:
            logger.error("Skipping image: %s", exc)
            result.failed += 1
            continue
        logger.debug("Saved image to %s", destination)
        result.written += 1
    return result
