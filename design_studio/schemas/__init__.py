"""Pydantic schemas for API requests and responses."""

from design_studio.schemas.auth import (
    AuthResponse,
    LoginRequest,
    MeResponse,
    SignupRequest,
    UserResponse,
)
from design_studio.schemas.design import (
    DesignCreate,
    DesignEnvelope,
    DesignListResponse,
    DesignResponse,
)
from design_studio.schemas.upload import UploadResponse

__all__ = [
    "SignupRequest",
    "LoginRequest",
    "UserResponse",
    "AuthResponse",
    "MeResponse",
    "DesignCreate",
    "DesignResponse",
    "DesignEnvelope",
    "DesignListResponse",
    "UploadResponse",
]
