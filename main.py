"""
AptFinder - Apartment Listing Monitor
Main entry point: logging, browser lifecycle and the polling loop.
"""

import sys
import signal
import logging
import argparse
from functools import partial

from config import (
    LOG_FILE,
    SEARCH_URL,
    STATE_FILE,
    CHECK_INTERVAL_SECONDS,
    MAX_STORED_LISTINGS,
    HEADLESS,
)
from monitor import Scheduler, run_cycle
from scrapers import BrowserSession, CraigslistScraper, ensure_chromium
from store import ensure_state_file

logger = logging.getLogger("AptFinder")


def setup_logging():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %I:%M:%S %p",
        handlers=[
            logging.FileHandler(LOG_FILE, encoding="utf-8"),
            logging.StreamHandler(sys.stdout),
        ],
    )


def run_monitor(once: bool = False, init_state: bool = False, headless: bool = HEADLESS) -> int:
    """
    Start the browser and poll the search page until stopped.

    Args:
        once: Run a single check and return
        init_state: Create an empty state file first if there is none
        headless: Hide the browser window

    Returns:
        Process exit code
    """
    logger.info("🏘 Starting to look...")
    logger.info(f"Search URL: {SEARCH_URL}")
    logger.info(f"State file: {STATE_FILE}")

    if init_state:
        ensure_state_file(STATE_FILE)

    ensure_chromium()
    session = BrowserSession(headless=headless)
    session.start()

    scraper = CraigslistScraper(session.page)
    cycle = partial(
        run_cycle,
        scraper,
        search_url=SEARCH_URL,
        state_file=STATE_FILE,
        max_listings=MAX_STORED_LISTINGS,
        interval_seconds=CHECK_INTERVAL_SECONDS,
    )
    scheduler = Scheduler(cycle, interval_seconds=CHECK_INTERVAL_SECONDS)

    def signal_handler(signum, frame):
        """Handle shutdown signals gracefully."""
        if not scheduler.running:
            # Second Ctrl+C = force exit immediately
            logger.info("Force exit...")
            sys.exit(1)
        logger.info("Shutdown signal received, stopping... (press Ctrl+C again to force)")
        scheduler.stop()

    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)

    try:
        if once:
            return 0 if scheduler.run_once() else 1

        logger.info(f"Monitoring started. Check interval: {CHECK_INTERVAL_SECONDS}s")
        logger.info("Press Ctrl+C to stop")
        scheduler.run()
    finally:
        session.close()
        logger.info("AptFinder stopped")

    return 0


def main():
    """Entry point with argument parsing."""
    parser = argparse.ArgumentParser(description="AptFinder - Apartment Listing Monitor")
    parser.add_argument(
        "--once",
        action="store_true",
        help="Run a single check and exit",
    )
    parser.add_argument(
        "--init-state",
        action="store_true",
        help="Create an empty state file if it does not exist",
    )
    parser.add_argument(
        "--headed",
        action="store_true",
        help="Show the browser window",
    )

    args = parser.parse_args()
    setup_logging()
    sys.exit(run_monitor(once=args.once, init_state=args.init_state, headless=HEADLESS and not args.headed))


if __name__ == "__main__":
    main()
