"""User model."""

from sqlalchemy import Column, Integer, String

from design_studio.database import Base
from design_studio.models.mixins import CreatedAtMixin


class User(Base, CreatedAtMixin):
    """User model for authentication and design ownership."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    # Always stored lower-cased; uniqueness is therefore case-insensitive
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
