# campus_market/schemas.py
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional

class ListingCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(..., min_length=1, max_length=255)
    price: float = Field(..., ge=0)
    image: str = ""
    category: Optional[str] = None
    condition: Optional[str] = None
    location: Optional[str] = None
    description: Optional[str] = None
    contact_method: Optional[str] = Field(None, alias="contactMethod")
    contact_info: Optional[str] = Field(None, alias="contactInfo")
    payment_methods: List[str] = Field(default_factory=list, alias="paymentMethods")
    shipping: bool = False

class ListingUpdate(BaseModel):
    # id, postedTime, views, sellerId and seller are not editable
    model_config = ConfigDict(populate_by_name=True)

    title: Optional[str] = Field(None, min_length=1, max_length=255)
    price: Optional[float] = Field(None, ge=0)
    image: Optional[str] = None
    category: Optional[str] = None
    condition: Optional[str] = None
    location: Optional[str] = None
    description: Optional[str] = None
    contact_method: Optional[str] = Field(None, alias="contactMethod")
    contact_info: Optional[str] = Field(None, alias="contactInfo")
    payment_methods: Optional[List[str]] = Field(None, alias="paymentMethods")
    shipping: Optional[bool] = None

class ListingFilter(BaseModel):
    search: Optional[str] = None
    category: Optional[str] = None
    location: Optional[str] = None
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    sort_by: str = "newest"

class FlagRequest(BaseModel):
    reason: str = Field(..., min_length=1)

class HelloResponse(BaseModel):
    message: str
    timestamp: str

class ErrorResponse(BaseModel):
    error: str
