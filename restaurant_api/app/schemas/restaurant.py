"""
Pydantic models for restaurant data.

``Restaurant`` is the record exchanged between the store, the service
and both API surfaces; ``id`` is ``None`` until the store assigns one.
``RestaurantCreate`` is the REST request body for create and update and
rejects blank ``name``/``address``.  ``RestaurantPage`` is the
pagination envelope returned by the list and search operations.

JSON uses camelCase keys (``phoneNumber``, ``totalPages``); Python code
uses the snake_case attribute names.
"""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


class RestaurantBase(BaseModel):
    name: str = Field(..., examples=["Gimbap Heaven"])
    address: str = Field(..., examples=["123-45 Yeoksam-dong, Gangnam-gu, Seoul"])
    phone_number: Optional[str] = Field(None, alias="phoneNumber", examples=["02-1234-5678"])

    model_config = {
        "populate_by_name": True,
    }


class RestaurantCreate(RestaurantBase):
    """Schema for creating or replacing a restaurant via REST."""

    @field_validator("name", "address")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("must not be blank")
        return v


class Restaurant(RestaurantBase):
    """A restaurant record; ``id`` is assigned by the store on insert."""

    id: Optional[int] = None

    model_config = {
        "populate_by_name": True,
        "from_attributes": True,
    }


class RestaurantPage(BaseModel):
    """One page of restaurants plus the totals needed to page through the rest."""

    content: List[Restaurant]
    total_pages: int = Field(..., alias="totalPages")
    total_elements: int = Field(..., alias="totalElements")
    size: int
    number: int

    model_config = {
        "populate_by_name": True,
    }
