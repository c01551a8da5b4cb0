"""Pydantic schemas for Restaurant domain."""

from typing import Optional

from pydantic import field_validator, model_validator

from app.domain.schemas.common import CamelModel


class AddressRead(CamelModel):
    street: Optional[str] = None
    city: Optional[str] = None
    postcode: Optional[str] = None
    country: Optional[str] = None


class GeoPoint(CamelModel):
    type: str = "Point"
    coordinates: list[float]  # [longitude, latitude]


class RestaurantRead(CamelModel):
    id: str
    name: str
    description: Optional[str] = None
    cuisine: Optional[str] = None
    price_level: Optional[int] = None
    address: Optional[AddressRead] = None
    phone: Optional[str] = None
    website: Optional[str] = None
    location: Optional[GeoPoint] = None
    images: list[str] = []
    tags: list[str] = []
    hours: dict[str, str] = {}
    reservation_required: Optional[bool] = None
    upvote_count: int = 0
    downvote_count: int = 0
    vote_count: int = 0

    @field_validator("images", "tags", "hours", mode="before")
    @classmethod
    def none_as_empty(cls, v, info):
        if v is None:
            return {} if info.field_name == "hours" else []
        return v


class RestaurantFilter(CamelModel):
    """Structured predicates pushed down to the database.

    Price bounds are swapped when given in the wrong order and city names
    are trimmed with blanks dropped, so consumers can use them as-is.
    """

    cuisine: Optional[str] = None
    price_min: Optional[int] = None
    price_max: Optional[int] = None
    reservation_required: Optional[bool] = None
    open_now: Optional[bool] = None
    cities: list[str] = []

    @field_validator("cuisine")
    @classmethod
    def blank_cuisine_is_absent(cls, v: Optional[str]) -> Optional[str]:
        if v is None or not v.strip():
            return None
        return v

    @field_validator("cities", mode="before")
    @classmethod
    def clean_cities(cls, v):
        if not v:
            return []
        return [c.strip() for c in v if c is not None and c.strip()]

    @model_validator(mode="after")
    def order_price_bounds(self):
        if self.price_min is not None and self.price_max is not None and self.price_min > self.price_max:
            self.price_min, self.price_max = self.price_max, self.price_min
        return self
