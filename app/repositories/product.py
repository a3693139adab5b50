# app/repositories/product.py

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import contains_eager

from app.core.exceptions import NotFoundError
from app.models.products import Product
from app.repositories.base import BaseRepository


class ProductRepository(BaseRepository):

    def get_all(self):
        try:
            return (
                self.db.query(Product)
                .filter(Product.active())
                .order_by(Product.id)
                .all()
            )
        except SQLAlchemyError as exc:
            raise self._store_error("fetch products", exc) from exc

    def get_by_id(self, product_id: int) -> Product:
        """
        Fetch an active product together with its category in one
        LEFT JOIN. `product.category` is None when the referenced
        category row does not exist.
        """
        try:
            product = (
                self.db.query(Product)
                .outerjoin(Product.category)
                .options(contains_eager(Product.category))
                .filter(Product.id == product_id, Product.active())
                .first()
            )
        except SQLAlchemyError as exc:
            raise self._store_error("fetch product", exc) from exc

        if product is None:
            raise NotFoundError("Product not found")

        return product

    def create(self, name: str, price: int, stock: int, category_id: int | None) -> Product:
        product = Product(
            name=name,
            price=price,
            stock=stock,
            category_id=category_id,
        )

        try:
            self.db.add(product)
            self.db.commit()
            self.db.refresh(product)
        except SQLAlchemyError as exc:
            raise self._store_error("save product", exc) from exc

        return product

    def update(self, product_id: int, values: dict) -> Product:
        try:
            updated = (
                self.db.query(Product)
                .filter(Product.id == product_id, Product.active())
                .update(values, synchronize_session=False)
            )

            if updated == 0:
                self.db.rollback()
                raise NotFoundError("Product not found")

            self.db.commit()
        except SQLAlchemyError as exc:
            raise self._store_error("update product", exc) from exc

        return self.get_by_id(product_id)

    def delete(self, product_id: int):
        try:
            product = (
                self.db.query(Product)
                .filter(Product.id == product_id, Product.active())
                .with_for_update()
                .first()
            )

            if product is None:
                self.db.rollback()
                raise NotFoundError("Product not found")

            product.mark_deleted()
            self.db.commit()
        except SQLAlchemyError as exc:
            raise self._store_error("delete product", exc) from exc
