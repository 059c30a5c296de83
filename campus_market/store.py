# campus_market/store.py
"""In-memory listing store and the FastAPI dependency that hands it out.

Stands in for the hosted backend that owns listings in production. Nothing
is written to disk; the store lives as long as the process does.
"""
import threading
from typing import Callable, Dict, List, Optional

from .models import FlaggedListing, Listing

class ListingStore:
    def __init__(self, listings=None):
        self._lock = threading.Lock()
        self._listings: Dict[str, Listing] = {}
        self._flags: List[FlaggedListing] = []
        for listing in listings or ():
            self._listings[listing.id] = listing

    def __len__(self):
        with self._lock:
            return len(self._listings)

    def snapshot(self) -> List[Listing]:
        """Current listings in insertion order, deleted ones included."""
        with self._lock:
            return list(self._listings.values())

    def get(self, listing_id: str) -> Optional[Listing]:
        with self._lock:
            return self._listings.get(listing_id)

    def update(self, listing_id: str, fn: Callable[[Listing], Listing]) -> Optional[Listing]:
        """Replace an active listing with ``fn(listing)`` under the lock.

        Returns the stored result, or ``None`` when the listing is missing or
        already deleted. Exceptions raised by ``fn`` leave the listing as it was.
        """
        with self._lock:
            current = self._listings.get(listing_id)
            if current is None or current.deleted:
                return None
            updated = fn(current)
            self._listings[listing_id] = updated
            return updated

    def put(self, listing: Listing) -> Listing:
        with self._lock:
            self._listings[listing.id] = listing
        return listing

    def insert_new(self, listing: Listing) -> bool:
        """Add ``listing`` unless its id is taken. Returns whether it was added."""
        with self._lock:
            if listing.id in self._listings:
                return False
            self._listings[listing.id] = listing
            return True

    def add_flag(self, flag: FlaggedListing) -> None:
        with self._lock:
            self._flags.append(flag)

    def flags(self) -> List[FlaggedListing]:
        with self._lock:
            return list(self._flags)

    def clear(self) -> None:
        with self._lock:
            self._listings.clear()
            self._flags.clear()


_store = ListingStore()

def get_store():
    return _store

def reset_store(listings=None):
    """Swap in a fresh store; used on startup and by tests."""
    global _store
    _store = ListingStore(listings)
    return _store
