"""
AptFinder Craigslist Scraper
Renders a Craigslist search page with Playwright and extracts the result rows.
"""

import logging
from typing import List
from urllib.parse import urljoin

from playwright.sync_api import Error as PlaywrightError, TimeoutError as PlaywrightTimeout
from bs4 import BeautifulSoup

from .base import BaseScraper, FetchError
from store import Listing
from config import RESULTS_SELECTOR, NAVIGATION_TIMEOUT_MS

logger = logging.getLogger(__name__)


def parse_listings(html: str, base_url: str, selector: str = RESULTS_SELECTOR) -> List[Listing]:
    """Parse listings from search results HTML.

    Args:
        html: Page HTML content
        base_url: URL the page was loaded from, used to resolve relative links
        selector: CSS selector matching one result row

    Returns:
        Listings in page order. No matching rows gives an empty list.

    Raises:
        FetchError: if a result row lacks its id, title link, price or date
    """
    soup = BeautifulSoup(html, "html.parser")
    listings = []

    for row in soup.select(selector):
        listing_id = row.get("data-pid")
        title_link = row.select_one(".result-title")
        price = row.select_one(".result-price")
        date = row.select_one(".result-date")

        if not listing_id or title_link is None or price is None or date is None:
            raise FetchError(f"Result row does not match expected structure: {str(row)[:200]}")

        listings.append(Listing(
            id=listing_id,
            url=urljoin(base_url, title_link.get("href", "")),
            title=title_link.get_text(strip=True),
            price=price.get_text(strip=True),
            date=date.get("datetime", ""),
        ))

    return listings


class CraigslistScraper(BaseScraper):
    """Scraper for Craigslist using a rendered page (results may be filled in by script)."""

    def __init__(self, page, timeout_ms: int = NAVIGATION_TIMEOUT_MS):
        """
        Initialize Craigslist scraper.

        Args:
            page: Playwright page owned by the caller's BrowserSession
            timeout_ms: Navigation timeout
        """
        super().__init__("craigslist")
        self.page = page
        self.timeout_ms = timeout_ms

    def fetch(self, search_url: str) -> List[Listing]:
        try:
            self.page.goto(search_url, wait_until="domcontentloaded", timeout=self.timeout_ms)
            html = self.page.content()
        except PlaywrightTimeout as e:
            raise FetchError(f"Timed out loading {search_url}: {e}") from e
        except PlaywrightError as e:
            raise FetchError(f"Browser error loading {search_url}: {e}") from e

        listings = parse_listings(html, self.page.url or search_url)
        logger.info(f"{self.platform}: {len(listings)} listings on the page")
        return listings
