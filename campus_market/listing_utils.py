# campus_market/listing_utils.py
"""Pure query helpers over in-memory listing sequences.

Every function here takes a sequence of ``Listing`` records and returns a
new list; inputs are never mutated. Sorting relies on Python's stable sort,
so listings that compare equal keep their relative input order.
"""
import random
import time
from datetime import datetime, timezone
from typing import Iterable, List, Optional

from .models import Listing
from .schemas import ListingFilter
from .utils import logger

DEFAULT_FEATURED_COUNT = 4
SORT_OPTIONS = ("newest", "oldest", "price-low", "price-high")


def generate_listing_id() -> str:
    """Best-effort unique id: epoch milliseconds plus a random suffix.

    Two ids minted in the same millisecond collide one time in a thousand;
    the store checks for collisions before using one.
    """
    return f"listing-{int(time.time() * 1000)}-{random.randint(0, 999)}"


def is_listing_active(listing: Listing) -> bool:
    return not listing.deleted


def filter_active_listings(listings: Iterable[Listing]) -> List[Listing]:
    return [listing for listing in listings if is_listing_active(listing)]


def sort_listings_by_views(listings: Iterable[Listing], count: int = DEFAULT_FEATURED_COUNT) -> List[Listing]:
    """Most viewed active listings, at most ``count`` of them."""
    if isinstance(count, bool) or not isinstance(count, int) or count < 0:
        raise ValueError(f"count must be a non-negative integer, got {count!r}")
    ranked = sorted(filter_active_listings(listings), key=lambda l: l.views, reverse=True)
    return ranked[:count]


def filter_listings_by_location(listings: Iterable[Listing], location: Optional[str]) -> List[Listing]:
    if not location or location.strip() == "":
        active = filter_active_listings(listings)
        logger.debug("No location filter, returning all active listings: %d", len(active))
        return active

    needle = location.lower()
    filtered = [
        listing for listing in listings
        if is_listing_active(listing)
        and listing.location
        and needle in listing.location.lower()
    ]
    logger.debug("Filtered listings by location %r: %d", location, len(filtered))
    return filtered


def filter_listings_by_seller(listings: Iterable[Listing], seller_name: str) -> List[Listing]:
    """Match on the seller display name, exactly as typed.

    Display names can collide or change; prefer ``filter_listings_by_user_id``
    when the seller's id is known.
    """
    logger.debug("Getting listings for seller: %s", seller_name)
    return [
        listing for listing in listings
        if listing.seller == seller_name and is_listing_active(listing)
    ]


def filter_listings_by_user_id(listings: Iterable[Listing], user_id: str) -> List[Listing]:
    logger.debug("Getting user listings for user ID: %s", user_id)
    user_listings = [
        listing for listing in listings
        if is_listing_active(listing) and listing.seller_id == user_id
    ]
    logger.debug("User listings found: %d", len(user_listings))
    return user_listings


# browse filters

def matches_search(listing: Listing, query: Optional[str]) -> bool:
    if not query or not query.strip():
        return True
    needle = query.lower()
    return any(
        text and needle in text.lower()
        for text in (listing.title, listing.description)
    )


def matches_category(listing: Listing, category: Optional[str]) -> bool:
    if not category or not category.strip():
        return True
    return bool(listing.category) and listing.category.lower() == category.lower()


def matches_price(listing: Listing, min_price: Optional[float] = None, max_price: Optional[float] = None) -> bool:
    if min_price is not None and listing.price < min_price:
        return False
    if max_price is not None and listing.price > max_price:
        return False
    return True


def _posted_timestamp(listing: Listing) -> float:
    raw = (listing.posted_time or "").strip()
    if raw.endswith("Z"):
        raw = raw[:-1] + "+00:00"
    try:
        posted = datetime.fromisoformat(raw)
    except ValueError:
        return float("-inf")
    if posted.tzinfo is None:
        posted = posted.replace(tzinfo=timezone.utc)
    return posted.timestamp()


def sort_listings(listings: Iterable[Listing], sort_by: str = "newest") -> List[Listing]:
    if sort_by == "price-low":
        return sorted(listings, key=lambda l: l.price)
    if sort_by == "price-high":
        return sorted(listings, key=lambda l: l.price, reverse=True)
    if sort_by == "oldest":
        return sorted(listings, key=_posted_timestamp)
    if sort_by not in SORT_OPTIONS:
        logger.debug("Unknown sort option %r, falling back to newest", sort_by)
    return sorted(listings, key=_posted_timestamp, reverse=True)


def apply_filters(listings: Iterable[Listing], filters: Optional[ListingFilter] = None) -> List[Listing]:
    """Search, category, price and location filters, then the requested sort."""
    filters = filters or ListingFilter()
    candidates = filter_listings_by_location(listings, filters.location)
    matched = [
        listing for listing in candidates
        if matches_search(listing, filters.search)
        and matches_category(listing, filters.category)
        and matches_price(listing, filters.min_price, filters.max_price)
    ]
    return sort_listings(matched, filters.sort_by)
