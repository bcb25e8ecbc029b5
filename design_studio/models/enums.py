"""Enums for model fields."""

from enum import Enum


class ItemType(str, Enum):
    """Garments a design can be applied to."""

    TSHIRT = "tshirt"
    PANTS = "pants"

    @classmethod
    def values(cls) -> list[str]:
        """All accepted wire values."""
        return [member.value for member in cls]
