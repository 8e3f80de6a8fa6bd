"""Pydantic models describing Product payloads."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator
from pydantic.alias_generators import to_camel

WIRE_DATETIME_FORMAT = "%Y-%m-%dT%H:%M:%S"

NAME_MIN_LENGTH = 3
NAME_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 500
# Codes and prices live in 32-bit INTEGER columns.
MAX_INT32 = 2_147_483_647


class ProductCreate(BaseModel):
    """Body of POST /products."""

    name: str = Field(
        ...,
        min_length=NAME_MIN_LENGTH,
        max_length=NAME_MAX_LENGTH,
        description="Product name (3-100 characters)",
    )
    description: str | None = Field(None, max_length=DESCRIPTION_MAX_LENGTH)
    price: int = Field(..., gt=0, le=MAX_INT32, description="Unit price, a positive integer")
    active: bool | None = Field(None, description="Defaults to true when omitted")

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Product name is required and cannot be blank")
        return v


class ProductUpdate(BaseModel):
    """Body of PUT /products/{code}; every field is optional (merge-patch)."""

    name: str | None = Field(
        None, min_length=NAME_MIN_LENGTH, max_length=NAME_MAX_LENGTH
    )
    description: str | None = Field(None, max_length=DESCRIPTION_MAX_LENGTH)
    price: int | None = Field(None, gt=0, le=MAX_INT32)
    active: bool | None = None


class ProductRead(BaseModel):
    product_code: int
    name: str
    description: str | None = None
    price: int
    active: bool
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    @field_serializer("created_at", "updated_at")
    def serialize_timestamp(self, value: datetime) -> str:
        return value.strftime(WIRE_DATETIME_FORMAT)


class SortInfo(BaseModel):
    property: str
    direction: str


class ProductPage(BaseModel):
    """One page of products plus paging metadata."""

    content: list[ProductRead]
    total_elements: int
    total_pages: int
    size: int
    number: int = Field(..., description="Zero-based page index")
    number_of_elements: int
    first: bool
    last: bool
    empty: bool
    sort: SortInfo

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
