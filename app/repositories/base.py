# app/repositories/base.py

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import StoreError

logger = logging.getLogger("app.repositories")


class BaseRepository:
    def __init__(self, db: Session):
        self.db = db

    def _store_error(self, action: str, exc: SQLAlchemyError) -> StoreError:
        # Leave the session usable for the rest of the request
        self.db.rollback()
        logger.error(f"Failed to {action}: {exc}")
        return StoreError(str(exc))
