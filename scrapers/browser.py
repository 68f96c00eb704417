"""
AptFinder Browser Session
Single long-lived Playwright browser and page shared by every check.
"""

import sys
import logging
import subprocess

from playwright.sync_api import sync_playwright
from playwright_stealth import Stealth

from config import HEADLESS, STEALTH, CHROME_EXECUTABLE, USER_AGENT

logger = logging.getLogger(__name__)


def ensure_chromium():
    """Install Playwright's Chromium if it cannot be launched. Skipped for a system Chrome."""
    if CHROME_EXECUTABLE:
        return

    try:
        with sync_playwright() as p:
            browser = p.chromium.launch(headless=True)
            browser.close()
    except Exception:
        logger.info("Installing Playwright Chromium browser (this may take a minute)...")
        subprocess.check_call(
            [sys.executable, "-m", "playwright", "install", "chromium"],
            stdout=subprocess.DEVNULL
        )


class BrowserSession:
    """Owns the Playwright instance, browser, context and page for the process lifetime."""

    def __init__(self, headless: bool = HEADLESS, executable_path: str = CHROME_EXECUTABLE,
                 stealth: bool = STEALTH):
        self.headless = headless
        self.executable_path = executable_path or None
        self.stealth = stealth
        self.playwright = None
        self.browser = None
        self.context = None
        self.page = None

    def start(self):
        """Launch the browser and open the page. Safe to call twice."""
        if self.page is not None:
            return self.page

        logger.info("Launching browser...")
        self.playwright = sync_playwright().start()
        self.browser = self.playwright.chromium.launch(
            headless=self.headless,
            executable_path=self.executable_path,
            args=[
                "--disable-blink-features=AutomationControlled",
                "--disable-dev-shm-usage",
                "--no-sandbox",
            ],
        )
        self.context = self.browser.new_context(
            viewport={"width": 1920, "height": 1080},
            user_agent=USER_AGENT,
        )
        self.page = self.context.new_page()

        if self.stealth:
            Stealth().apply_stealth_sync(self.page)

        logger.info("Browser ready")
        return self.page

    def close(self):
        """Close browser and clean up."""
        try:
            if self.context:
                self.context.close()
                self.context = None
            if self.browser:
                self.browser.close()
                self.browser = None
            if self.playwright:
                self.playwright.stop()
                self.playwright = None
            self.page = None
            logger.info("Browser closed")
        except Exception as e:
            logger.error(f"Error closing browser: {e}")
