# app/models/soft_delete.py

import enum
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime


class RecordState(str, enum.Enum):
    ACTIVE = "active"
    DELETED = "deleted"


class AlreadyDeletedError(Exception):
    pass


class SoftDeleteMixin:
    """
    Rows are never removed; deleting stamps deleted_at once.
    A null deleted_at means the row is active.
    """

    deleted_at = Column(DateTime(timezone=True), nullable=True)

    @property
    def state(self) -> RecordState:
        if self.deleted_at is None:
            return RecordState.ACTIVE
        return RecordState.DELETED

    @property
    def is_active(self) -> bool:
        return self.state is RecordState.ACTIVE

    def mark_deleted(self, at: datetime | None = None):
        if self.deleted_at is not None:
            raise AlreadyDeletedError(
                f"{type(self).__name__} {self.id} was already deleted at {self.deleted_at}"
            )
        self.deleted_at = at or datetime.now(timezone.utc)

    @classmethod
    def active(cls):
        # Filter expression selecting only active rows
        return cls.deleted_at.is_(None)
