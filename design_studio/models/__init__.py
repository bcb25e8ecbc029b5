"""SQLAlchemy models."""

from design_studio.models.design import Design
from design_studio.models.enums import ItemType
from design_studio.models.user import User

__all__ = [
    "User",
    "Design",
    "ItemType",
]
