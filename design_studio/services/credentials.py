"""Credential store: persistence of user identities."""

import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from design_studio.exceptions import DuplicateEmailError, StorageError, ValidationError
from design_studio.models.user import User

logger = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    """Canonical form used for storage and lookups.

    The only place emails are canonicalized: signup and login both go
    through it, so the same input always finds the same row.
    """
    return email.strip().lower()


class CredentialStore:
    """Creates and looks up users. Users are never updated or deleted."""

    def __init__(self, db: Session):
        self.db = db

    def find_by_email(self, email: str) -> User | None:
        """Get a user by email, ignoring case.

        Stored emails are already canonical, so this is an exact match.
        """
        normalized = normalize_email(email)
        if not normalized:
            return None
        try:
            return self.db.query(User).filter(User.email == normalized).first()
        except SQLAlchemyError as e:
            logger.error(f"Failed to look up user by email: {e}")
            raise StorageError(str(e)) from e

    def find_by_id(self, user_id: int) -> User | None:
        """Get a user by id."""
        try:
            return self.db.get(User, user_id)
        except SQLAlchemyError as e:
            logger.error(f"Failed to look up user {user_id}: {e}")
            raise StorageError(str(e)) from e

    def create_user(self, name: str, email: str, password_hash: str) -> User:
        """Create a new user.

        Raises:
            ValidationError: name, email or password hash is blank.
            DuplicateEmailError: the email is already registered (any case).
            StorageError: the database rejected the write for another reason.
        """
        name = (name or "").strip()
        normalized = normalize_email(email or "")
        if not name:
            raise ValidationError("Name is required")
        if not normalized:
            raise ValidationError("Email is required")
        if not password_hash:
            raise ValidationError("Password is required")

        if self.find_by_email(normalized) is not None:
            raise DuplicateEmailError()

        user = User(name=name, email=normalized, password_hash=password_hash)
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError as e:
            # Lost a race with a concurrent signup for the same email
            self.db.rollback()
            logger.info("Concurrent signup for an already registered email rejected")
            raise DuplicateEmailError() from e
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to create user: {e}")
            raise StorageError(str(e)) from e

        self.db.refresh(user)
        logger.info(f"Created user {user.id}")
        return user
