# models/transactions.py

from sqlalchemy import Column, Integer, DateTime
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship

from app.database import Base
from app.models.soft_delete import SoftDeleteMixin


class Transaction(SoftDeleteMixin, Base):
    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True, index=True)

    total_amount = Column(Integer, nullable=False, default=0)

    created_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
        index=True,
    )

    details = relationship(
        "TransactionDetail",
        back_populates="transaction",
        cascade="all, delete-orphan",
        order_by="TransactionDetail.id",
    )
