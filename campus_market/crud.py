# campus_market/crud.py
"""Listing operations against the in-memory store.

Mirrors what the marketplace front end expects from its listings backend:
create, read, edit, soft delete, view counting, flagging and the canned
queries (featured, per seller, per user, per location). Lookups that miss
return ``None``/``False``; the API layer turns those into HTTP errors.
"""
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from . import listing_utils
from .models import FlaggedListing, Listing
from .schemas import ListingCreate, ListingFilter
from .store import ListingStore
from .utils import logger

MAX_ID_ATTEMPTS = 10
PROTECTED_FIELDS = ("id", "posted_time", "views", "seller_id", "seller", "deleted")

class NotListingOwner(PermissionError):
    """Raised when a user tries to change someone else's listing."""

def add_listing(store: ListingStore, data: ListingCreate, seller_id: str, seller_name: str = "") -> Listing:
    fields = data.model_dump()
    posted_time = datetime.now(timezone.utc).isoformat()
    for _ in range(MAX_ID_ATTEMPTS):
        listing = Listing(
            **fields,
            id=listing_utils.generate_listing_id(),
            seller=seller_name,
            seller_id=seller_id,
            posted_time=posted_time,
            views=0,
            deleted=False,
        )
        if store.insert_new(listing):
            logger.info("Created listing %s for seller %s", listing.id, seller_id)
            return listing
        logger.warning("Listing id %s already taken, generating another", listing.id)
    raise RuntimeError("could not allocate a unique listing id")

def get_listing(store: ListingStore, listing_id: str) -> Optional[Listing]:
    listing = store.get(listing_id)
    if listing is None:
        logger.debug("Listing %s not found", listing_id)
        return None
    if not listing_utils.is_listing_active(listing):
        logger.debug("Listing %s found but is deleted", listing_id)
        return None
    return listing

def list_listings(store: ListingStore, skip: int = 0, limit: int = 50, filters: Optional[ListingFilter] = None):
    items = listing_utils.apply_filters(store.snapshot(), filters)
    return {"total": len(items), "items": items[skip:skip + limit]}

def _check_owner(listing: Listing, user_id: Optional[str]) -> None:
    if user_id is not None and listing.seller_id != user_id:
        raise NotListingOwner(f"listing {listing.id} belongs to {listing.seller_id}")

def edit_listing(store: ListingStore, listing_id: str, updates: Dict[str, Any], user_id: Optional[str] = None) -> Optional[Listing]:
    """Apply ``updates`` to an active listing.

    With ``user_id`` set, raises ``NotListingOwner`` unless that user is the seller.
    """
    changes = {k: v for k, v in updates.items() if k not in PROTECTED_FIELDS and v is not None}

    def apply(obj):
        _check_owner(obj, user_id)
        return obj.model_copy(update=changes)

    updated = store.update(listing_id, apply)
    if updated:
        logger.info("Updated listing %s (%s)", listing_id, ", ".join(sorted(changes)) or "no changes")
    return updated

def remove_listing(store: ListingStore, listing_id: str, user_id: Optional[str] = None) -> bool:
    def mark_deleted(obj):
        _check_owner(obj, user_id)
        return obj.model_copy(update={"deleted": True})

    if not store.update(listing_id, mark_deleted):
        return False
    logger.info("Listing %s marked deleted", listing_id)
    return True

def increment_views(store: ListingStore, listing_id: str) -> Optional[Listing]:
    return store.update(listing_id, lambda obj: obj.model_copy(update={"views": obj.views + 1}))

def flag_listing(store: ListingStore, listing_id: str, reason: str, flagger_id: str) -> bool:
    if not get_listing(store, listing_id):
        return False
    store.add_flag(FlaggedListing(listing_id=listing_id, reason=reason, flagger_id=flagger_id))
    logger.info("Listing %s flagged by %s", listing_id, flagger_id)
    return True

def get_featured_listings(store: ListingStore, count: int = listing_utils.DEFAULT_FEATURED_COUNT) -> List[Listing]:
    return listing_utils.sort_listings_by_views(store.snapshot(), count)

def get_seller_listings(store: ListingStore, seller_name: str) -> List[Listing]:
    return listing_utils.filter_listings_by_seller(store.snapshot(), seller_name)

def get_user_listings(store: ListingStore, user_id: Optional[str]) -> List[Listing]:
    if not user_id:
        return []
    return listing_utils.filter_listings_by_user_id(store.snapshot(), user_id)

def filter_by_location(store: ListingStore, location: Optional[str]) -> List[Listing]:
    return listing_utils.filter_listings_by_location(store.snapshot(), location)

def clear_all_listings(store: ListingStore) -> None:
    logger.info("Clearing all listings from the store")
    store.clear()
