"""Mixins for SQLAlchemy models."""

from datetime import UTC, datetime

from sqlalchemy import Column, DateTime, func


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(UTC)


class CreatedAtMixin:
    """Mixin to add a created_at timestamp column.

    Rows in this service are never updated, so there is no updated_at.
    The Python-side default keeps sub-second precision on SQLite, where
    the server default only resolves to whole seconds.
    """

    created_at = Column(
        DateTime(timezone=True),
        default=utcnow,
        server_default=func.now(),
        nullable=False,
        index=True,
    )
