"""Authentication API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from design_studio.api.dependencies import (
    get_auth_service,
    get_credential_store,
    get_current_identity,
)
from design_studio.exceptions import UserNotFoundError
from design_studio.schemas.auth import (
    AuthResponse,
    LoginRequest,
    MeResponse,
    SignupRequest,
    UserResponse,
)
from design_studio.services.auth import AuthService
from design_studio.services.credentials import CredentialStore
from design_studio.services.tokens import TokenClaims

router = APIRouter(tags=["auth"])


@router.post("/auth/signup", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def signup(
    user_data: SignupRequest,
    auth: Annotated[AuthService, Depends(get_auth_service)],
):
    """Register a new user."""
    user, token = auth.signup(user_data.name, user_data.email, user_data.password)
    return AuthResponse(token=token, user=UserResponse.model_validate(user))


@router.post("/auth/login", response_model=AuthResponse)
def login(
    credentials: LoginRequest,
    auth: Annotated[AuthService, Depends(get_auth_service)],
):
    """Login with email and password."""
    user, token = auth.login(credentials.email, credentials.password)
    return AuthResponse(token=token, user=UserResponse.model_validate(user))


@router.get("/me", response_model=MeResponse)
def get_me(
    identity: Annotated[TokenClaims, Depends(get_current_identity)],
    credentials: Annotated[CredentialStore, Depends(get_credential_store)],
):
    """Get the current user's record for the bearer token."""
    user = credentials.find_by_id(identity.user_id)
    if user is None:
        raise UserNotFoundError()
    return MeResponse(user=UserResponse.model_validate(user))
