from sqlalchemy import Column, DateTime, Enum as SQLEnum
from datetime import datetime
import enum


class EntityStatus(str, enum.Enum):
    ACTIVE = "active"
    DELETED = "deleted"


class TimestampMixin:
    """Creation/update timestamps shared by every catalog table."""

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)


class SoftDeleteMixin:
    """
    Logical deletion.

    Rows are never erased by the catalog; a deleted row keeps its data,
    moves to `EntityStatus.DELETED` and records when that happened. Read
    queries filter with `Model.active()` unless told to include deleted rows.
    """

    # Store enum values ('active'), not names, so partial indexes can match on them
    status = Column(
        SQLEnum(
            EntityStatus,
            native_enum=False,
            length=20,
            values_callable=lambda statuses: [s.value for s in statuses],
        ),
        default=EntityStatus.ACTIVE,
        nullable=False,
        index=True,
    )
    deleted_at = Column(DateTime, nullable=True)

    @property
    def is_active(self) -> bool:
        return self.status != EntityStatus.DELETED

    def soft_delete(self):
        self.status = EntityStatus.DELETED
        self.deleted_at = datetime.utcnow()

    @classmethod
    def active(cls):
        return cls.status == EntityStatus.ACTIVE
