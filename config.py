"""
AptFinder Configuration
Loads settings from environment variables and defines constants.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# State and log files live next to wherever the monitor is started from
BASE_DIR = Path.cwd()

# Search target (sort, price range, bedrooms, postal radius, posted today)
SEARCH_URL = os.getenv(
    "SEARCH_URL",
    "https://vancouver.craigslist.org/search/apa?sort=date&availabilityMode=0"
    "&max_price=3500&min_bedrooms=2&min_price=1900&postal=V5T2C2"
    "&postedToday=1&search_distance=2"
)
RESULTS_SELECTOR = os.getenv("RESULTS_SELECTOR", "li.result-row")

# Timing
CHECK_INTERVAL_SECONDS = int(os.getenv("CHECK_INTERVAL_SECONDS", "300"))
NAVIGATION_TIMEOUT_MS = int(os.getenv("NAVIGATION_TIMEOUT_MS", "30000"))

# File paths
STATE_FILE = BASE_DIR / os.getenv("STATE_FILE", "apartments.json")
LOG_FILE = BASE_DIR / os.getenv("LOG_FILE", "aptfinder.log")

# 0 keeps every listing ever seen
MAX_STORED_LISTINGS = int(os.getenv("MAX_STORED_LISTINGS", "0"))

# Browser settings
HEADLESS = os.getenv("HEADLESS", "true").lower() == "true"
STEALTH = os.getenv("STEALTH", "true").lower() == "true"
# e.g. /Applications/Google Chrome.app/Contents/MacOS/Google Chrome
CHROME_EXECUTABLE = os.getenv("CHROME_EXECUTABLE", "")

# Notifications
DESKTOP_NOTIFICATIONS = os.getenv("DESKTOP_NOTIFICATIONS", "true").lower() == "true"
NOTIFICATION_TITLE = os.getenv("NOTIFICATION_TITLE", "🏡 New apartment listed!")
NOTIFICATION_SOUND = os.getenv("NOTIFICATION_SOUND", "Apartment")

# Optional Discord mirror (empty disables it)
DISCORD_WEBHOOK_URL = os.getenv("DISCORD_WEBHOOK_URL", "")

# User agent for the browser context
USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/120.0.0.0 Safari/537.36"
)
