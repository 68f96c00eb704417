"""
AptFinder Base Scraper
Abstract base class for search result scrapers.
"""

from abc import ABC, abstractmethod
from typing import List

from store import Listing, MonitorError


class FetchError(MonitorError):
    """Search page could not be loaded or did not have the expected structure."""


class BaseScraper(ABC):
    """Abstract base class for search result scrapers."""

    def __init__(self, platform: str):
        """
        Initialize the scraper.

        Args:
            platform: Platform identifier (e.g., 'craigslist')
        """
        self.platform = platform

    @abstractmethod
    def fetch(self, search_url: str) -> List[Listing]:
        """
        Load a search page and extract its result rows.

        Args:
            search_url: Fully built search URL

        Returns:
            Listings in page order

        Raises:
            FetchError: on navigation failure or unexpected page structure
        """
        pass
