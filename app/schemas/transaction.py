# schemas/transaction.py

from pydantic import BaseModel, Field
from datetime import datetime
from typing import List


class CheckoutItem(BaseModel):
    product_id: int
    quantity: int = Field(..., gt=0)


class CheckoutRequest(BaseModel):
    items: List[CheckoutItem] = Field(..., min_length=1)


class TransactionDetailResponse(BaseModel):
    id: int
    product_id: int
    product_name: str
    quantity: int
    subtotal: int

    class Config:
        from_attributes = True


class TransactionResponse(BaseModel):
    id: int
    total_amount: int
    created_at: datetime
    details: List[TransactionDetailResponse]

    class Config:
        from_attributes = True
