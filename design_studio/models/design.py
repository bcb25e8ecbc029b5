"""Design model."""

from sqlalchemy import Column, Enum, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from design_studio.database import Base
from design_studio.models.enums import ItemType
from design_studio.models.mixins import CreatedAtMixin


class Design(Base, CreatedAtMixin):
    """A saved garment customization. Immutable once created."""

    __tablename__ = "designs"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    item_type = Column(
        Enum(
            ItemType,
            name="item_type",
            values_callable=lambda enum: [member.value for member in enum],
            validate_strings=True,
        ),
        nullable=False,
    )
    color = Column(String(64), nullable=False)  # expected hex-like, not enforced
    style = Column(String(255), nullable=True)
    text_overlay = Column(String(500), nullable=True)
    image_url = Column(String(500), nullable=True)

    # Relationships
    owner = relationship("User", backref="designs")
