from pydantic import BaseModel, Field
from datetime import datetime

from app.schemas.category import CategoryResponse


class ProductCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)

    price: int = Field(
        ...,
        ge=0,
        description="Unit price in the smallest currency unit",
    )

    stock: int = Field(0, ge=0)

    category_id: int | None = None


class ProductUpdate(BaseModel):
    name: str | None = Field(None, max_length=255)
    price: int | None = Field(None, ge=0)
    stock: int | None = Field(None, ge=0)
    category_id: int | None = None


class ProductResponse(BaseModel):
    id: int
    name: str
    price: int
    stock: int
    category_id: int | None
    deleted_at: datetime | None = None

    class Config:
        from_attributes = True


class ProductDetailResponse(ProductResponse):
    category: CategoryResponse | None = None
