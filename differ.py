"""Change detection between the current search results and the stored state."""

from typing import List

from store import Listing


def find_new_listings(current: List[Listing], previous: List[Listing]) -> List[Listing]:
    """Return the listings in current whose id is not in previous, in current's order."""
    seen_ids = {listing.id for listing in previous}
    return [listing for listing in current if listing.id not in seen_ids]
