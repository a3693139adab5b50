# app/models/categories.py

from sqlalchemy import Column, Integer, String, Text
from sqlalchemy.orm import relationship

from app.database import Base
from app.models.soft_delete import SoftDeleteMixin


class Category(SoftDeleteMixin, Base):
    __tablename__ = "category"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=False, default="")

    products = relationship("Product", back_populates="category")
