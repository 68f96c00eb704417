"""
AptFinder State Store
JSON file holding every listing that has already been notified about.
"""

import os
import json
import logging
import tempfile
from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import List

from config import STATE_FILE

logger = logging.getLogger(__name__)


class MonitorError(Exception):
    """Base class for errors that abort a single check."""


class CorruptState(MonitorError):
    """State file is missing, unreadable, or not a list of listings."""


class PersistenceError(MonitorError):
    """State file could not be written."""


@dataclass
class Listing:
    """Represents one search result row."""
    id: str
    url: str
    title: str
    price: str
    date: str

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "Listing":
        """Build a Listing from a decoded state record.

        Raises:
            CorruptState: if the record is not an object with every field as a string
        """
        if not isinstance(data, dict):
            raise CorruptState(f"Expected an object, got {type(data).__name__}")
        values = {}
        for f in fields(cls):
            if f.name not in data:
                raise CorruptState(f"Listing record missing field '{f.name}'")
            if not isinstance(data[f.name], str):
                raise CorruptState(
                    f"Listing field '{f.name}' must be a string, got {type(data[f.name]).__name__}"
                )
            values[f.name] = data[f.name]
        return cls(**values)


def load_listings(path: Path = STATE_FILE) -> List[Listing]:
    """
    Read previously seen listings.

    Args:
        path: State file location

    Returns:
        Listings in stored order (newest first)

    Raises:
        CorruptState: if the file is missing or does not decode to a list of listings
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise CorruptState(f"Cannot read state file {path}: {e}") from e
    except ValueError as e:
        raise CorruptState(f"State file {path} is not valid JSON: {e}") from e

    if not isinstance(data, list):
        raise CorruptState(f"State file {path} must hold a list, got {type(data).__name__}")

    return [Listing.from_dict(item) for item in data]


def save_listings(listings: List[Listing], path: Path = STATE_FILE):
    """
    Replace the state file with the full listing sequence.

    The content is written to a temporary file beside the state file and then
    moved over it, so a failed write leaves the previous state intact.

    Raises:
        PersistenceError: if the write fails
    """
    path = Path(path)
    content = json.dumps([listing.to_dict() for listing in listings], indent=2, ensure_ascii=False)
    tmp_name = None
    try:
        fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(content)
        os.replace(tmp_name, path)
    except OSError as e:
        if tmp_name and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise PersistenceError(f"Cannot write state file {path}: {e}") from e

    logger.debug(f"Saved {len(listings)} listings to {path}")


def ensure_state_file(path: Path = STATE_FILE) -> bool:
    """Create an empty state file if none exists. Returns True if one was created."""
    if Path(path).exists():
        return False
    save_listings([], path)
    logger.info(f"Created empty state file {path}")
    return True


def trim_listings(listings: List[Listing], max_listings: int) -> List[Listing]:
    """Keep the first max_listings entries. Zero or less keeps everything."""
    if max_listings <= 0 or len(listings) <= max_listings:
        return listings
    logger.info(f"Retention: dropping {len(listings) - max_listings} oldest listings")
    return listings[:max_listings]
