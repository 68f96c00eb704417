"""Tests for Craigslist result extraction."""

import logging

import pytest
from playwright.sync_api import Error as PlaywrightError, TimeoutError as PlaywrightTimeout

from scrapers import CraigslistScraper, FetchError, parse_listings

BASE_URL = "https://vancouver.craigslist.org/search/apa?sort=date"

HTML = """
<html>
  <body>
    <ul class="rows">
      <li class="result-row" data-pid="7401234567">
        <a href="https://vancouver.craigslist.org/van/apa/d/loft/7401234567.html" class="result-image"></a>
        <p class="result-info">
          <time class="result-date" datetime="2026-10-19 08:42" title="Mon 19 Oct">Oct 19</time>
          <a href="https://vancouver.craigslist.org/van/apa/d/loft/7401234567.html" class="result-title hdrlnk">Bright 2br loft</a>
          <span class="result-meta"><span class="result-price">$2,400</span></span>
        </p>
      </li>
      <li class="result-row" data-pid="7401230000">
        <p class="result-info">
          <time class="result-date" datetime="2026-10-19 07:10">Oct 19</time>
          <a href="/van/apa/d/house/7401230000.html" class="result-title hdrlnk">
            Garden suite near Main
          </a>
          <span class="result-meta"><span class="result-price">$1,950</span></span>
        </p>
      </li>
    </ul>
  </body>
</html>
"""

MISSING_PRICE = """
<ul>
  <li class="result-row" data-pid="1">
    <time class="result-date" datetime="2026-10-19 07:10">Oct 19</time>
    <a href="/van/apa/d/1.html" class="result-title">No price</a>
  </li>
</ul>
"""


class FakePage:
    def __init__(self, html="", error=None, url=BASE_URL):
        self.html = html
        self.error = error
        self.url = url
        self.visited = []

    def goto(self, url, wait_until=None, timeout=None):
        self.visited.append((url, wait_until))
        if self.error:
            raise self.error

    def content(self):
        return self.html


class TestParseListings:
    def test_extracts_rows_in_page_order(self):
        listings = parse_listings(HTML, BASE_URL)

        assert [l.id for l in listings] == ["7401234567", "7401230000"]
        first = listings[0]
        assert first.url == "https://vancouver.craigslist.org/van/apa/d/loft/7401234567.html"
        assert first.title == "Bright 2br loft"
        assert first.price == "$2,400"
        assert first.date == "2026-10-19 08:42"

    def test_resolves_relative_links(self):
        listings = parse_listings(HTML, BASE_URL)
        assert listings[1].url == "https://vancouver.craigslist.org/van/apa/d/house/7401230000.html"
        assert listings[1].title == "Garden suite near Main"

    def test_no_results(self):
        assert parse_listings("<html><body><p>nothing posted today</p></body></html>", BASE_URL) == []

    def test_missing_element(self):
        with pytest.raises(FetchError):
            parse_listings(MISSING_PRICE, BASE_URL)

    def test_missing_id(self):
        html = HTML.replace('data-pid="7401230000"', "")
        with pytest.raises(FetchError):
            parse_listings(html, BASE_URL)


class TestCraigslistScraper:
    def test_fetch(self):
        page = FakePage(HTML)
        listings = CraigslistScraper(page).fetch(BASE_URL)

        assert page.visited == [(BASE_URL, "domcontentloaded")]
        assert len(listings) == 2

    def test_timeout(self):
        page = FakePage(error=PlaywrightTimeout("Timeout 30000ms exceeded."))
        with pytest.raises(FetchError):
            CraigslistScraper(page).fetch(BASE_URL)

    def test_browser_error(self):
        page = FakePage(error=PlaywrightError("Target page, context or browser has been closed"))
        with pytest.raises(FetchError):
            CraigslistScraper(page).fetch(BASE_URL)

    def test_unexpected_structure(self):
        with pytest.raises(FetchError):
            CraigslistScraper(FakePage(MISSING_PRICE)).fetch(BASE_URL)

    def test_logs_platform_and_count(self, caplog):
        caplog.set_level(logging.INFO, logger="scrapers.craigslist")
        CraigslistScraper(FakePage(HTML)).fetch(BASE_URL)
        assert "craigslist: 2 listings on the page" in caplog.text
