# tests/conftest.py
import pytest
from campus_market.models import Listing

def make_listing(listing_id, **overrides):
    data = {
        "id": listing_id,
        "title": f"Item {listing_id}",
        "price": 10.0,
        "seller": "Test Seller",
        "sellerId": "u0",
        "postedTime": "2024-01-01T00:00:00+00:00",
    }
    data.update(overrides)
    return Listing(**data)

@pytest.fixture
def robarts_listings():
    return [
        make_listing("1", deleted=False, views=5, location="Robarts Library", sellerId="u1"),
        make_listing("2", deleted=True, views=100, location="Robarts Library", sellerId="u1"),
        make_listing("3", views=2, location="St. George Campus", sellerId="u2"),
    ]
