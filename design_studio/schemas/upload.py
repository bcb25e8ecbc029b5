"""Upload schemas."""

from pydantic import BaseModel


class UploadResponse(BaseModel):
    """Server-relative reference to a stored upload."""

    url: str
