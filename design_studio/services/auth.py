"""Authentication service: signup and login workflows."""

import logging

from design_studio.exceptions import InvalidCredentialsError, ValidationError
from design_studio.models.user import User
from design_studio.services.credentials import CredentialStore
from design_studio.services.passwords import PasswordHasher
from design_studio.services.tokens import TokenService

logger = logging.getLogger(__name__)


class AuthService:
    """Ties the credential store, password hasher and token service together."""

    def __init__(
        self,
        credentials: CredentialStore,
        hasher: PasswordHasher,
        tokens: TokenService,
    ):
        self.credentials = credentials
        self.hasher = hasher
        self.tokens = tokens

    def signup(self, name: str, email: str, password: str) -> tuple[User, str]:
        """Register a new user and return it with a fresh token."""
        if not password:
            raise ValidationError("Password is required")
        user = self.credentials.create_user(name, email, self.hasher.hash(password))
        return user, self.tokens.issue(user)

    def authenticate(self, email: str, password: str) -> User:
        """Check an email/password pair.

        Unknown emails and wrong passwords fail identically, and both
        paths pay for one bcrypt verification.
        """
        user = self.credentials.find_by_email(email)
        if user is None:
            self.hasher.verify_dummy(password)
            logger.warning("Login failed: unknown account")
            raise InvalidCredentialsError()
        if not self.hasher.verify(password, user.password_hash):
            logger.warning(f"Login failed: wrong password for user {user.id}")
            raise InvalidCredentialsError()
        return user

    def login(self, email: str, password: str) -> tuple[User, str]:
        """Authenticate and return the user with a fresh token."""
        user = self.authenticate(email, password)
        return user, self.tokens.issue(user)
