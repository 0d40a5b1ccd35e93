"""Utility helpers for string normalization and path handling."""

from __future__ import annotations

import re

DECIMAL_PATTERN = re.compile(r"[0-9]+")
UNSAFE_PATH_CHARS = re.compile(r"[/\\\x00]")


def normalize_whitespace(value: str) -> str:
    """Collapse whitespace runs into single spaces and trim the ends."""
    return " ".join(value.split())


def parse_decimal(value: str) -> int | None:
    """Parse a plain ASCII decimal integer; signs, spaces and underscores are rejected."""
    if not DECIMAL_PATTERN.fullmatch(value):
        return None
    return int(value)


def sanitize_component(value: str) -> str:
    """Make a string safe to use as a single path component."""
    return UNSAFE_PATH_CHARS.sub("_", value)


def filename_from_url(url: str) -> str:
    """Return the text after the last ``/`` of a URL (may be empty)."""
    return url.rsplit("/", 1)[-1]
