# campus_market/api/routes.py
from fastapi import APIRouter, Depends, Header, HTTPException, Query, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from typing import List, Optional
from .. import crud, schemas
from ..models import Listing
from ..services import CORS_HEADERS, hello_world
from ..store import ListingStore, get_store
from ..utils import env_int, logger

FEATURED_COUNT = env_int("FEATURED_COUNT", 4)

router = APIRouter()

def _require_user(user_id: Optional[str], action: str) -> str:
    if not user_id:
        logger.warning("Refusing to %s without a user id", action)
        raise HTTPException(status_code=401, detail=f"Sign in to {action}")
    return user_id

@router.get("/health")
def health():
    return {"status": "ok"}

@router.get("/listings", response_model=List[Listing])
def listings(
    skip: int = Query(0, ge=0),
    limit: int = Query(20, ge=0, le=200),
    search: Optional[str] = Query(None),
    category: Optional[str] = Query(None),
    location: Optional[str] = Query(None),
    min_price: Optional[float] = Query(None),
    max_price: Optional[float] = Query(None),
    sort_by: str = Query("newest"),
    store: ListingStore = Depends(get_store)
):
    filters = schemas.ListingFilter(
        search=search,
        category=category,
        location=location,
        min_price=min_price,
        max_price=max_price,
        sort_by=sort_by,
    )
    res = crud.list_listings(store, skip=skip, limit=limit, filters=filters)
    return res["items"]

@router.get("/listings/featured", response_model=List[Listing])
def featured_listings(count: int = Query(FEATURED_COUNT, ge=0), store: ListingStore = Depends(get_store)):
    return crud.get_featured_listings(store, count)

@router.get("/listings/by-location", response_model=List[Listing])
def listings_by_location(location: str = Query(""), store: ListingStore = Depends(get_store)):
    return crud.filter_by_location(store, location)

@router.get("/sellers/{seller_name}/listings", response_model=List[Listing])
def seller_listings(seller_name: str, store: ListingStore = Depends(get_store)):
    return crud.get_seller_listings(store, seller_name)

@router.get("/users/{user_id}/listings", response_model=List[Listing])
def user_listings(user_id: str, store: ListingStore = Depends(get_store)):
    return crud.get_user_listings(store, user_id)

@router.get("/listings/{listing_id}", response_model=Listing)
def get_listing(listing_id: str, store: ListingStore = Depends(get_store)):
    obj = crud.get_listing(store, listing_id)
    if not obj:
        raise HTTPException(status_code=404, detail="Listing not found")
    return obj

@router.post("/listings", response_model=Listing, status_code=201)
def create_listing(
    payload: schemas.ListingCreate,
    x_user_id: Optional[str] = Header(None),
    x_user_name: Optional[str] = Header(None),
    store: ListingStore = Depends(get_store)
):
    _require_user(x_user_id, "create a listing")
    return crud.add_listing(store, payload, seller_id=x_user_id, seller_name=x_user_name or "")

@router.patch("/listings/{listing_id}", response_model=Listing)
def update_listing(
    listing_id: str,
    payload: schemas.ListingUpdate,
    x_user_id: Optional[str] = Header(None),
    store: ListingStore = Depends(get_store)
):
    user_id = _require_user(x_user_id, "edit a listing")
    try:
        obj = crud.edit_listing(store, listing_id, updates=payload.model_dump(exclude_unset=True), user_id=user_id)
    except crud.NotListingOwner as e:
        logger.warning("User %s may not edit: %s", user_id, e)
        raise HTTPException(status_code=403, detail="Listing belongs to another user")
    if not obj:
        raise HTTPException(status_code=404, detail="Listing not found")
    return obj

@router.delete("/listings/{listing_id}")
def delete_listing(listing_id: str, x_user_id: Optional[str] = Header(None), store: ListingStore = Depends(get_store)):
    user_id = _require_user(x_user_id, "remove a listing")
    try:
        removed = crud.remove_listing(store, listing_id, user_id=user_id)
    except crud.NotListingOwner as e:
        logger.warning("User %s may not remove: %s", user_id, e)
        raise HTTPException(status_code=403, detail="Listing belongs to another user")
    if not removed:
        raise HTTPException(status_code=404, detail="Listing not found")
    return {"status": "deleted"}

@router.post("/listings/{listing_id}/views", response_model=Listing)
def record_view(listing_id: str, store: ListingStore = Depends(get_store)):
    obj = crud.increment_views(store, listing_id)
    if not obj:
        raise HTTPException(status_code=404, detail="Listing not found")
    return obj

@router.post("/listings/{listing_id}/flag")
def flag_listing(
    listing_id: str,
    payload: schemas.FlagRequest,
    x_user_id: Optional[str] = Header(None),
    store: ListingStore = Depends(get_store)
):
    _require_user(x_user_id, "flag a listing")
    if not crud.flag_listing(store, listing_id, payload.reason, x_user_id):
        raise HTTPException(status_code=404, detail="Listing not found")
    return {"status": "flagged"}

@router.options("/functions/hello-world")
def hello_world_preflight():
    return PlainTextResponse("ok", headers=CORS_HEADERS)

@router.api_route(
    "/functions/hello-world",
    methods=["GET", "POST"],
    responses={200: {"model": schemas.HelloResponse}, 400: {"model": schemas.ErrorResponse}},
)
async def hello_world_function(request: Request):
    try:
        body = await request.body()
        data = hello_world(body)
    except Exception as e:
        logger.error("Error processing request: %s", e)
        return JSONResponse({"error": str(e)}, status_code=400, headers=CORS_HEADERS)
    return JSONResponse(data, status_code=200, headers=CORS_HEADERS)
