"""Exception types raised by the downloader."""

from __future__ import annotations

import enum
from pathlib import Path
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .models import FankitId


class FankitError(Exception):
    """Base class for every error raised by fankit_dl."""


class IdentifierErrorKind(enum.Enum):
    BASE_MISMATCH = "Base URL mismatch"
    INVALID_PATH = "Invalid path"


class IdentifierFormatError(FankitError, ValueError):
    """A URL could not be parsed into a fankit id or a list page index."""

    def __init__(self, kind: IdentifierErrorKind, url: str) -> None:
        super().__init__(f"{kind.value}: {url!r}")
        self.kind = kind
        self.url = url


class PageLoadError(FankitError):
    """Fetching or decoding a page failed."""

    def __init__(self, url: str, cause: BaseException) -> None:
        super().__init__(f"Failed to load page {url!r}: {cause}")
        self.url = url
        self.cause = cause


class ExtractionError(FankitError):
    """A required element is missing from a fankit detail page."""

    def __init__(self, fankit_id: "FankitId", element: str) -> None:
        super().__init__(f"Failed to get {element} for fankit {fankit_id}")
        self.fankit_id = fankit_id
        self.element = element


class StorageError(FankitError):
    """Persisting a downloaded image failed at one of its write steps."""

    def __init__(self, path: Path, step: str, cause: Optional[BaseException] = None) -> None:
        message = f"Failed to {step} image file {path}"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)
        self.path = path
        self.step = step
        self.cause = cause
