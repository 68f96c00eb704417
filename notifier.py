"""
AptFinder Notifier Module
Desktop notifications for new listings, with an optional Discord webhook mirror.

Delivery is best-effort: failures are logged and never raised to the caller.
"""

import logging
import requests
from datetime import datetime, timezone

from config import (
    DESKTOP_NOTIFICATIONS,
    DISCORD_WEBHOOK_URL,
    NOTIFICATION_SOUND,
    NOTIFICATION_TITLE,
)
from store import Listing

logger = logging.getLogger(__name__)

EMBED_COLOR = 0x5C2D91  # Craigslist purple

# The mirror posts inside the check, so a hung webhook delays the save by at most this
WEBHOOK_TIMEOUT_SECONDS = 3


def build_notification(listing: Listing) -> dict:
    """Desktop notification fields for a listing."""
    return {
        "title": NOTIFICATION_TITLE,
        "subtitle": listing.price,
        "message": listing.title,
        "open": listing.url,
        "sound": NOTIFICATION_SOUND,
    }


def _send_desktop(notification: dict):
    """Hand the notification to terminal-notifier. Does not wait for delivery."""
    # pync refuses to import outside macOS, so only load it when sending
    import pync

    message = notification.pop("message")
    pync.notify(message, **notification)


def _create_embed(listing: Listing) -> dict:
    """Create a Discord embed for a listing."""
    embed = {
        "title": (listing.title or "Listing")[:256],
        "color": EMBED_COLOR,
        "fields": [
            {"name": "Price", "value": listing.price or "Not listed", "inline": True},
            {"name": "Posted", "value": listing.date or "Unknown", "inline": True},
        ],
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }

    # Discord rejects embeds with invalid URLs
    if listing.url.startswith("http://") or listing.url.startswith("https://"):
        embed["url"] = listing.url

    return embed


def send_webhook(listing: Listing, webhook_url: str = DISCORD_WEBHOOK_URL) -> bool:
    """
    Mirror a listing to a Discord webhook.

    Returns:
        True if Discord accepted it, False otherwise (including when disabled)
    """
    if not webhook_url:
        return False

    try:
        response = requests.post(webhook_url, json={"embeds": [_create_embed(listing)]}, timeout=WEBHOOK_TIMEOUT_SECONDS)
    except requests.RequestException as e:
        logger.error(f"Failed to send listing to Discord: {e}")
        return False

    if response.status_code != 204:
        logger.error(f"Discord error {response.status_code}: {response.text}")
        return False

    logger.debug(f"Sent listing to Discord: {listing.title}")
    return True


def notify(listing: Listing):
    """Fire the notifications for one new listing. Never raises."""
    if DESKTOP_NOTIFICATIONS:
        try:
            _send_desktop(build_notification(listing))
        except Exception as e:
            logger.debug(f"Desktop notification failed for {listing.id}: {e}")

    if DISCORD_WEBHOOK_URL:
        send_webhook(listing, DISCORD_WEBHOOK_URL)
