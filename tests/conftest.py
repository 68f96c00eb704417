import pytest

from store import Listing


def make_listing(listing_id, **overrides):
    data = {
        "id": listing_id,
        "url": f"http://x/{listing_id}",
        "title": f"Apartment {listing_id}",
        "price": "$1900",
        "date": "2026-10-19 09:15",
    }
    data.update(overrides)
    return Listing(**data)


@pytest.fixture
def listing_factory():
    return make_listing
