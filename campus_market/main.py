from fastapi import FastAPI
from campus_market.api.routes import router as api_router
from campus_market.mock_data import create_mock_listings
from campus_market.store import get_store
from campus_market.utils import env_flag, logger

# create FastAPI instance
app = FastAPI(title="Campus Market")
app.include_router(api_router)


@app.on_event("startup")
def on_startup_seed_listings():
    # Seed sample listings into an empty store for demos
    store = get_store()
    if env_flag("SEED_MOCK_LISTINGS") and len(store) == 0:
        for listing in create_mock_listings():
            store.put(listing)
        logger.info("Seeded %d mock listings", len(store))
