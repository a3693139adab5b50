# app/models/products.py

from sqlalchemy import CheckConstraint, Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship

from app.database import Base
from app.models.soft_delete import SoftDeleteMixin


class Product(SoftDeleteMixin, Base):
    __tablename__ = "product"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    price = Column(Integer, nullable=False, default=0)
    stock = Column(Integer, nullable=False, default=0)

    # No FK cascade: deleting a category leaves its products untouched
    category_id = Column(Integer, ForeignKey("category.id"), nullable=True, index=True)

    category = relationship("Category", back_populates="products")

    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_product_price_non_negative"),
        CheckConstraint("stock >= 0", name="ck_product_stock_non_negative"),
    )
