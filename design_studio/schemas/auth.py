"""Authentication schemas."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SignupRequest(BaseModel):
    """User signup request.

    Email only gets a shape check here; canonical form (trimmed,
    lower-cased) is decided by the credential store so signup and login
    always agree.
    """

    name: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=1, max_length=128)

    @field_validator("email")
    @classmethod
    def email_has_local_and_domain(cls, value: str) -> str:
        """Reject values that cannot be an address at all."""
        local, at, domain = value.strip().rpartition("@")
        if not at or not local or not domain:
            raise ValueError("email must look like name@domain")
        return value


class LoginRequest(BaseModel):
    """User login request.

    Email is not format-checked here: a malformed address is simply an
    unknown account and must fail like any other bad credential.
    """

    email: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=1, max_length=128)


class UserResponse(BaseModel):
    """Public user information. Never includes the password hash."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str


class AuthResponse(BaseModel):
    """Authentication response with token and user info."""

    token: str
    user: UserResponse


class MeResponse(BaseModel):
    """Identity of the bearer of the current token."""

    user: UserResponse
