from datetime import datetime
from decimal import Decimal
from typing import Literal
from pydantic import BaseModel, ConfigDict, Field, field_validator


class CreateProductRequest(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    description: str | None = None
    brand: str | None = Field(default=None, max_length=100)
    unit: str | None = Field(default=None, max_length=50)
    image_url: str | None = None
    price: Decimal = Field(ge=0, max_digits=10, decimal_places=2)
    discount: Decimal | None = Field(default=None, ge=0, le=100, decimal_places=2)
    rating: Decimal | None = Field(default=None, ge=0, le=5, decimal_places=2)
    availability: bool = True

    @field_validator('name')
    @classmethod
    def validate_name(cls, value):
        if not value.strip():
            raise ValueError('Name cannot be blank')
        return value.strip()


class UpdateProductRequest(BaseModel):
    """
    Partial update. Only the fields sent are changed.
    """
    name: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    brand: str | None = Field(default=None, max_length=100)
    unit: str | None = Field(default=None, max_length=50)
    image_url: str | None = None
    price: Decimal | None = Field(default=None, ge=0, max_digits=10, decimal_places=2)
    discount: Decimal | None = Field(default=None, ge=0, le=100, decimal_places=2)
    rating: Decimal | None = Field(default=None, ge=0, le=5, decimal_places=2)
    availability: bool | None = None


class ProductQuery(BaseModel):
    """
    Filtering, sorting and paging for the product listing.
    """
    name: str | None = None
    brand: str | None = None
    availability: bool | None = None
    price_gte: Decimal | None = Field(default=None, ge=0)
    price_lte: Decimal | None = Field(default=None, ge=0)
    rating_gte: Decimal | None = Field(default=None, ge=0)
    discount_gte: Decimal | None = Field(default=None, ge=0)
    sort_by: Literal["name", "price", "rating", "discount", "created_at"] = "created_at"
    order: Literal["asc", "desc"] = "desc"
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1, le=100)


class ProductResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str | None = None
    brand: str | None = None
    unit: str | None = None
    image_url: str | None = None
    price: Decimal
    discount: Decimal | None = None
    rating: Decimal | None = None
    availability: bool
    created_at: datetime | None = None
    updated_at: datetime | None = None
