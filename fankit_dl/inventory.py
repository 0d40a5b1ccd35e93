"""Detection of fankits already downloaded into the destination directory."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional, Set

from .models import FankitId
from .utils import parse_decimal

logger = logging.getLogger("fankit_dl")


def fankit_id_from_entry_name(name: str) -> Optional[FankitId]:
    """Parse the ``<id>`` prefix of a ``<id>-<type>-<title>`` entry name."""
    prefix, sep, _ = name.partition("-")
    if not sep:
        return None
    value = parse_decimal(prefix)
    if value is None:
        return None
    return FankitId(value)


def inventory_from_names(names: Iterable[str]) -> Set[FankitId]:
    inventory: Set[FankitId] = set()
    for name in names:
        fankit_id = fankit_id_from_entry_name(name)
        if fankit_id is None:
            logger.debug("Ignoring unrelated entry %r", name)
            continue
        inventory.add(fankit_id)
    return inventory


def scan_inventory(dest_dir: Path) -> Set[FankitId]:
    """Return the fankit ids that already have an entry in ``dest_dir``.

    Raises:
        OSError: if the directory cannot be listed.
    """
    return inventory_from_names(entry.name for entry in dest_dir.iterdir())
