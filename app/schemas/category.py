from pydantic import BaseModel, Field
from datetime import datetime


class CategoryCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: str = ""


class CategoryUpdate(BaseModel):
    # Only non-empty fields present in the request body are applied
    name: str | None = Field(None, max_length=255)
    description: str | None = None


class CategoryResponse(BaseModel):
    id: int
    name: str
    description: str
    deleted_at: datetime | None = None

    class Config:
        from_attributes = True
