# app/services/product.py

import logging

from app.core.exceptions import NotFoundError, ValidationError
from app.repositories.category import CategoryRepository
from app.repositories.product import ProductRepository
from app.schemas.product import ProductCreate, ProductUpdate
from app.services.category import merge_fields

logger = logging.getLogger("app.services")


class ProductService:
    UPDATABLE_FIELDS = ("name", "price", "stock", "category_id")

    def __init__(self, repo: ProductRepository, category_repo: CategoryRepository):
        self.repo = repo
        self.category_repo = category_repo

    def _ensure_category(self, category_id: int | None):
        if category_id is None:
            return
        try:
            self.category_repo.get_by_id(category_id)
        except NotFoundError:
            raise ValidationError(f"Category {category_id} does not exist")

    def get_all(self):
        return self.repo.get_all()

    def get_by_id(self, product_id: int):
        return self.repo.get_by_id(product_id)

    def create(self, data: ProductCreate):
        self._ensure_category(data.category_id)

        product = self.repo.create(
            name=data.name,
            price=data.price,
            stock=data.stock,
            category_id=data.category_id,
        )
        logger.info(f"Product {product.id} created")
        return product

    def update(self, product_id: int, data: ProductUpdate):
        existing = self.repo.get_by_id(product_id)
        values = merge_fields(existing, data, self.UPDATABLE_FIELDS)

        if values["category_id"] != existing.category_id:
            self._ensure_category(values["category_id"])

        product = self.repo.update(product_id, values)
        logger.info(f"Product {product_id} updated")
        return product

    def delete(self, product_id: int):
        self.repo.delete(product_id)
        logger.info(f"Product {product_id} deleted")
