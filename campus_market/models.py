# campus_market/models.py
"""Listing records as handed out by the listing store.

Absent ``views`` and ``deleted`` values are normalized here (to ``0`` and
``False``) so the query functions in ``listing_utils`` never have to
null-check them. Instances are frozen; state changes go through
``model_copy(update=...)`` in the store.
"""
from typing import List, Optional, Union
from pydantic import BaseModel, ConfigDict, Field, field_validator

class Listing(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str
    title: str
    price: float = Field(..., ge=0)
    image: str = ""
    category: Optional[str] = None
    condition: Optional[str] = None
    location: Optional[str] = None
    description: Optional[str] = None
    seller: str
    seller_id: str = Field(..., alias="sellerId")
    posted_time: str = Field(..., alias="postedTime")
    contact_method: Optional[str] = Field(None, alias="contactMethod")
    contact_info: Optional[str] = Field(None, alias="contactInfo")
    payment_methods: List[str] = Field(default_factory=list, alias="paymentMethods")
    views: Union[int, float] = 0
    shipping: bool = False
    deleted: bool = False

    @field_validator("views", mode="before")
    @classmethod
    def _views_default(cls, v):
        return 0 if v is None else v

    @field_validator("deleted", "shipping", mode="before")
    @classmethod
    def _flag_default(cls, v):
        return False if v is None else v


class FlaggedListing(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    listing_id: str = Field(..., alias="listingId")
    reason: str
    flagger_id: str = Field(..., alias="flaggerId")
