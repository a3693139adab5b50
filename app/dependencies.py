# app/dependencies.py

from fastapi import Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.repositories.category import CategoryRepository
from app.repositories.product import ProductRepository
from app.repositories.report import ReportRepository
from app.repositories.transaction import TransactionRepository
from app.services.category import CategoryService
from app.services.product import ProductService
from app.services.report import ReportService
from app.services.transaction import TransactionService

# Upper bound of the INTEGER primary keys; larger path ids are rejected as invalid
MAX_ID = 2_147_483_647


def get_category_service(db: Session = Depends(get_db)) -> CategoryService:
    return CategoryService(CategoryRepository(db))


def get_product_service(db: Session = Depends(get_db)) -> ProductService:
    return ProductService(ProductRepository(db), CategoryRepository(db))


def get_report_service(db: Session = Depends(get_db)) -> ReportService:
    return ReportService(ReportRepository(db))


def get_transaction_service(db: Session = Depends(get_db)) -> TransactionService:
    return TransactionService(TransactionRepository(db))
