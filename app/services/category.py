# app/services/category.py

import logging

from app.repositories.category import CategoryRepository
from app.schemas.category import CategoryCreate, CategoryUpdate

logger = logging.getLogger("app.services")


def merge_fields(existing, payload, fields) -> dict:
    """
    Build the full column set for an update: values present in `payload`
    win; absent fields, null and empty strings keep the stored value.
    """
    provided = {
        field: value
        for field, value in payload.model_dump(exclude_unset=True).items()
        if value is not None and value != ""
    }

    return {
        field: provided.get(field, getattr(existing, field))
        for field in fields
    }


class CategoryService:
    UPDATABLE_FIELDS = ("name", "description")

    def __init__(self, repo: CategoryRepository):
        self.repo = repo

    def get_all(self):
        return self.repo.get_all()

    def get_by_id(self, category_id: int):
        return self.repo.get_by_id(category_id)

    def create(self, data: CategoryCreate):
        category = self.repo.create(name=data.name, description=data.description)
        logger.info(f"Category {category.id} created")
        return category

    def update(self, category_id: int, data: CategoryUpdate):
        existing = self.repo.get_by_id(category_id)
        values = merge_fields(existing, data, self.UPDATABLE_FIELDS)

        category = self.repo.update(category_id, values)
        logger.info(f"Category {category_id} updated")
        return category

    def delete(self, category_id: int):
        self.repo.delete(category_id)
        logger.info(f"Category {category_id} deleted")
