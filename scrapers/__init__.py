"""AptFinder Scrapers Package"""

from .base import BaseScraper, FetchError
from .browser import BrowserSession, ensure_chromium
from .craigslist import CraigslistScraper, parse_listings

__all__ = [
    "BaseScraper",
    "BrowserSession",
    "CraigslistScraper",
    "FetchError",
    "ensure_chromium",
    "parse_listings",
]
