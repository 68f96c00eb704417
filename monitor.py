"""
AptFinder Monitor
One check (fetch, diff, notify, persist) and the fixed-interval scheduler that repeats it.
"""

import time
import logging
from datetime import datetime
from pathlib import Path
from typing import Callable, List, Optional

from config import CHECK_INTERVAL_SECONDS, MAX_STORED_LISTINGS, SEARCH_URL, STATE_FILE
from differ import find_new_listings
from notifier import notify
from scrapers import BaseScraper
from store import Listing, MonitorError, load_listings, save_listings, trim_listings

logger = logging.getLogger(__name__)


def timestamp(now: Optional[datetime] = None) -> str:
    """12-hour clock time, e.g. 3:07:09PM."""
    now = now or datetime.now()
    hour = now.hour % 12 or 12
    suffix = "PM" if now.hour >= 12 else "AM"
    return f"{hour}:{now.minute:02d}:{now.second:02d}{suffix}"


def run_cycle(scraper: BaseScraper, search_url: str = SEARCH_URL, state_file: Path = STATE_FILE,
              max_listings: int = MAX_STORED_LISTINGS,
              interval_seconds: int = CHECK_INTERVAL_SECONDS) -> List[Listing]:
    """
    Run one check.

    Previous state is loaded before the page is fetched, so a bad state file
    aborts the check without touching the browser. New listings are notified
    before the state is saved; a failed save means they are notified again
    next time.

    Returns:
        The new listings, newest first

    Raises:
        CorruptState, FetchError, PersistenceError
    """
    previous = load_listings(state_file)

    logger.info(f"🏠 Looking for new apartments at {timestamp()}...")
    current = scraper.fetch(search_url)
    new_listings = find_new_listings(current, previous)

    if not new_listings:
        minutes = max(1, round(interval_seconds / 60))
        logger.info(f"😞 No new apartments at this time, I'll check again in {minutes} mins!")
        return []

    logger.info(f"✨ Found {len(new_listings)} new apartments!")

    for listing in new_listings:
        logger.info(f'🏡 - "{listing.title}" for {listing.price} - {listing.url}')
        notify(listing)

    save_listings(trim_listings(new_listings + previous, max_listings), state_file)
    return new_listings


class Scheduler:
    """
    Runs a check immediately and then on every fixed-interval tick.

    Ticks are measured from the first run, not from the end of the previous
    check. Checks never overlap: a check that runs past one or more ticks
    causes those ticks to be skipped.
    """

    def __init__(self, cycle: Callable[[], object], interval_seconds: float = CHECK_INTERVAL_SECONDS,
                 clock: Callable[[], float] = time.monotonic, sleep: Callable[[float], None] = time.sleep):
        self.cycle = cycle
        self.interval = interval_seconds
        self._clock = clock
        self._sleep = sleep
        self.running = False
        self.check_count = 0

    def run_once(self) -> bool:
        """Run one check, containing any error. Returns True if it succeeded."""
        self.check_count += 1
        try:
            self.cycle()
            return True
        except MonitorError as e:
            logger.error(f"Check #{self.check_count} aborted: {e}")
        except Exception as e:
            logger.error(f"Check #{self.check_count} failed unexpectedly: {e}", exc_info=True)
        return False

    def run(self, max_checks: Optional[int] = None):
        """Loop until stop() is called (or max_checks checks have run)."""
        self.running = True
        next_tick = self._clock()

        while self.running:
            self.run_once()
            if max_checks is not None and self.check_count >= max_checks:
                break

            next_tick += self.interval
            now = self._clock()
            if now >= next_tick:
                missed = int((now - next_tick) // self.interval) + 1
                logger.warning(f"Check ran past the interval, skipping {missed} tick(s)")
                next_tick += missed * self.interval

            self._wait_until(next_tick)

        self.running = False

    def stop(self):
        self.running = False

    def _wait_until(self, deadline: float):
        # Short sleeps so a shutdown signal is noticed quickly
        while self.running:
            remaining = deadline - self._clock()
            if remaining <= 0:
                break
            self._sleep(min(1.0, remaining))
