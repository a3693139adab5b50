# schemas/report.py

from pydantic import BaseModel
from datetime import date
from typing import Optional


class TopProduct(BaseModel):
    name: str
    quantity_sold: int


class SalesReportResponse(BaseModel):
    total_revenue: int
    total_transaction_count: int
    top_product: Optional[TopProduct] = None
    start_date: date
    end_date: date
