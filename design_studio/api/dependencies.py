"""FastAPI dependencies for authentication, database and services."""

from datetime import timedelta
from functools import lru_cache
from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from design_studio.config import Settings, get_settings
from design_studio.database import get_db
from design_studio.exceptions import MissingTokenError
from design_studio.services.auth import AuthService
from design_studio.services.credentials import CredentialStore
from design_studio.services.designs import DesignStore
from design_studio.services.passwords import PasswordHasher
from design_studio.services.tokens import TokenClaims, TokenService
from design_studio.services.uploads import UploadStore

# Missing headers are reported as our own 401 rather than FastAPI's default
security = HTTPBearer(auto_error=False)


@lru_cache
def _password_hasher(rounds: int) -> PasswordHasher:
    return PasswordHasher(rounds=rounds)


def get_password_hasher(
    settings: Annotated[Settings, Depends(get_settings)],
) -> PasswordHasher:
    """Get the password hasher for the configured cost factor."""
    return _password_hasher(settings.bcrypt_rounds)


def get_token_service(
    settings: Annotated[Settings, Depends(get_settings)],
) -> TokenService:
    """Get token service configured from settings."""
    return TokenService(
        secret=settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        expires_in=timedelta(minutes=settings.jwt_expiration_minutes),
    )


def get_upload_store(
    settings: Annotated[Settings, Depends(get_settings)],
) -> UploadStore:
    """Get upload store rooted at the configured directory."""
    return UploadStore(settings.upload_dir, max_bytes=settings.max_upload_bytes)


def get_credential_store(
    db: Annotated[Session, Depends(get_db)],
) -> CredentialStore:
    """Get credential store bound to the request's session."""
    return CredentialStore(db)


def get_design_store(
    db: Annotated[Session, Depends(get_db)],
    credentials: Annotated[CredentialStore, Depends(get_credential_store)],
) -> DesignStore:
    """Get design store bound to the request's session."""
    return DesignStore(db, credentials)


def get_auth_service(
    credentials: Annotated[CredentialStore, Depends(get_credential_store)],
    hasher: Annotated[PasswordHasher, Depends(get_password_hasher)],
    tokens: Annotated[TokenService, Depends(get_token_service)],
) -> AuthService:
    """Get auth service with dependencies."""
    return AuthService(credentials, hasher, tokens)


def get_current_identity(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    tokens: Annotated[TokenService, Depends(get_token_service)],
) -> TokenClaims:
    """Get the authenticated identity from the bearer token.

    Trusts the signed claims as-is; the user table is not consulted.
    """
    if credentials is None or not credentials.credentials:
        raise MissingTokenError()
    return tokens.verify(credentials.credentials)
