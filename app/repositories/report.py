# app/repositories/report.py

from datetime import date, datetime

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError

from app.models.products import Product
from app.models.transactions import Transaction
from app.models.transaction_details import TransactionDetail
from app.repositories.base import BaseRepository
from app.schemas.report import SalesReportResponse, TopProduct


class ReportRepository(BaseRepository):

    def current_date(self) -> date:
        """Today's date according to the store's clock and timezone."""
        try:
            today = self.db.query(func.current_date()).scalar()
        except SQLAlchemyError as exc:
            raise self._store_error("read current date", exc) from exc

        # SQLite hands CURRENT_DATE back as text
        if isinstance(today, str):
            today = date.fromisoformat(today)

        return today

    def get_daily_report(self) -> SalesReportResponse:
        today = self.current_date()

        return self.get_report_by_range(
            datetime.combine(today, datetime.min.time()),
            datetime.combine(today, datetime.max.time()),
        )

    def get_report_by_range(self, start_dt: datetime, end_dt: datetime) -> SalesReportResponse:
        """Aggregate non-deleted transactions with created_at in [start_dt, end_dt]."""
        base_filter = [
            Transaction.active(),
            Transaction.created_at.between(start_dt, end_dt),
        ]

        try:
            total_revenue, total_transactions = (
                self.db.query(
                    func.coalesce(func.sum(Transaction.total_amount), 0),
                    func.count(Transaction.id),
                )
                .filter(*base_filter)
                .one()
            )

            top_row = (
                self.db.query(
                    Product.name.label("name"),
                    func.sum(TransactionDetail.quantity).label("quantity_sold"),
                )
                .join(TransactionDetail, TransactionDetail.product_id == Product.id)
                .join(Transaction, TransactionDetail.transaction_id == Transaction.id)
                .filter(*base_filter)
                .group_by(Product.id, Product.name)
                .order_by(func.sum(TransactionDetail.quantity).desc(), Product.id)
                .first()
            )
        except SQLAlchemyError as exc:
            raise self._store_error("build sales report", exc) from exc

        top_product = None
        if top_row is not None:
            top_product = TopProduct(
                name=top_row.name,
                quantity_sold=int(top_row.quantity_sold or 0),
            )

        return SalesReportResponse(
            total_revenue=int(total_revenue or 0),
            total_transaction_count=total_transactions or 0,
            top_product=top_product,
            start_date=start_dt.date(),
            end_date=end_dt.date(),
        )
