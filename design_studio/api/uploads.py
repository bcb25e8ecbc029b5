"""Upload API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, File, UploadFile, status
from fastapi.responses import FileResponse
from starlette.concurrency import run_in_threadpool

from design_studio.api.dependencies import get_current_identity, get_upload_store
from design_studio.exceptions import NoFileProvidedError
from design_studio.schemas.upload import UploadResponse
from design_studio.services.tokens import TokenClaims
from design_studio.services.uploads import UploadStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["uploads"])


@router.post("/upload", response_model=UploadResponse, status_code=status.HTTP_201_CREATED)
async def upload_file(
    identity: Annotated[TokenClaims, Depends(get_current_identity)],
    uploads: Annotated[UploadStore, Depends(get_upload_store)],
    file: Annotated[UploadFile | None, File(description="Image to attach to a design")] = None,
):
    """Upload a file and get back its server-relative URL.

    Note: This endpoint must remain async because UploadFile.read() is async.
    Content type and size are not restricted unless MAX_UPLOAD_BYTES is set.
    """
    if file is None:
        raise NoFileProvidedError()

    data = await file.read()
    url = await run_in_threadpool(uploads.store, data, file.content_type)
    logger.info(f"User {identity.user_id} uploaded {url}")
    return UploadResponse(url=url)


@router.get("/uploads/{name}", response_class=FileResponse)
def get_upload(
    name: str,
    uploads: Annotated[UploadStore, Depends(get_upload_store)],
):
    """Serve a previously uploaded file verbatim."""
    return FileResponse(uploads.resolve(name))
