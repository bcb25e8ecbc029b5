"""Design store: per-user saved customizations."""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from design_studio.exceptions import StorageError, ValidationError
from design_studio.models.design import Design
from design_studio.models.enums import ItemType
from design_studio.services.credentials import CredentialStore

logger = logging.getLogger(__name__)


def _optional(value: str | None) -> str | None:
    """Blank optional text is stored as absent."""
    if value is None:
        return None
    value = value.strip()
    return value or None


class DesignStore:
    """Inserts designs and lists them by owner. Designs are immutable."""

    def __init__(self, db: Session, credentials: CredentialStore):
        self.db = db
        self.credentials = credentials

    def create(
        self,
        owner_id: int,
        item_type: ItemType | str,
        color: str,
        style: str | None = None,
        text_overlay: str | None = None,
        image_url: str | None = None,
    ) -> Design:
        """Create a design for a user.

        Raises:
            ValidationError: missing/unknown item type, blank color, or an
                owner that does not exist.
            StorageError: the database rejected the write.
        """
        try:
            item = ItemType(item_type)
        except ValueError as e:
            raise ValidationError(
                f"itemType must be one of: {', '.join(ItemType.values())}"
            ) from e

        color = (color or "").strip()
        if not color:
            raise ValidationError("color is required")

        if self.credentials.find_by_id(owner_id) is None:
            raise ValidationError("Unknown user")

        design = Design(
            user_id=owner_id,
            item_type=item,
            color=color,
            style=_optional(style),
            text_overlay=_optional(text_overlay),
            image_url=_optional(image_url),
        )
        self.db.add(design)
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to create design for user {owner_id}: {e}")
            raise StorageError(str(e)) from e

        self.db.refresh(design)
        logger.info(f"Created design {design.id} for user {owner_id}")
        return design

    def list_by_owner(self, owner_id: int) -> list[Design]:
        """All designs of a user, newest first."""
        try:
            return (
                self.db.query(Design)
                .filter(Design.user_id == owner_id)
                .order_by(Design.created_at.desc(), Design.id.desc())
                .all()
            )
        except SQLAlchemyError as e:
            logger.error(f"Failed to list designs for user {owner_id}: {e}")
            raise StorageError(str(e)) from e
