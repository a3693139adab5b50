# app/repositories/category.py

from sqlalchemy.exc import SQLAlchemyError

from app.core.exceptions import NotFoundError
from app.models.categories import Category
from app.repositories.base import BaseRepository


class CategoryRepository(BaseRepository):

    def get_all(self):
        try:
            return (
                self.db.query(Category)
                .filter(Category.active())
                .order_by(Category.id)
                .all()
            )
        except SQLAlchemyError as exc:
            raise self._store_error("fetch categories", exc) from exc

    def get_by_id(self, category_id: int) -> Category:
        try:
            category = (
                self.db.query(Category)
                .filter(Category.id == category_id, Category.active())
                .first()
            )
        except SQLAlchemyError as exc:
            raise self._store_error("fetch category", exc) from exc

        if category is None:
            raise NotFoundError("Category not found")

        return category

    def create(self, name: str, description: str = "") -> Category:
        category = Category(name=name, description=description)

        try:
            self.db.add(category)
            self.db.commit()
            self.db.refresh(category)
        except SQLAlchemyError as exc:
            raise self._store_error("save category", exc) from exc

        return category

    def update(self, category_id: int, values: dict) -> Category:
        """Replace the given columns on an active category."""
        try:
            updated = (
                self.db.query(Category)
                .filter(Category.id == category_id, Category.active())
                .update(values, synchronize_session=False)
            )

            if updated == 0:
                self.db.rollback()
                raise NotFoundError("Category not found")

            self.db.commit()
        except SQLAlchemyError as exc:
            raise self._store_error("update category", exc) from exc

        return self.get_by_id(category_id)

    def delete(self, category_id: int):
        try:
            category = (
                self.db.query(Category)
                .filter(Category.id == category_id, Category.active())
                .with_for_update()
                .first()
            )

            if category is None:
                self.db.rollback()
                raise NotFoundError("Category not found")

            category.mark_deleted()
            self.db.commit()
        except SQLAlchemyError as exc:
            raise self._store_error("delete category", exc) from exc
