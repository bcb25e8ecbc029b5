"""Upload store: binary files kept on local disk under generated names."""

import logging
import mimetypes
import os
import tempfile
import uuid
from pathlib import Path

from design_studio.exceptions import (
    NoFileProvidedError,
    NotFoundError,
    StorageError,
    UploadTooLargeError,
)

logger = logging.getLogger(__name__)

URL_PREFIX = "/uploads"


def extension_for(content_type: str | None) -> str:
    """File extension for a MIME type, or "" when unknown."""
    if not content_type:
        return ""
    base_type = content_type.split(";", 1)[0].strip().lower()
    if base_type == "image/jpeg":
        return ".jpg"
    return mimetypes.guess_extension(base_type) or ""


class UploadStore:
    """Stores uploaded bytes and serves them back by reference.

    References look like ``/uploads/<name>``; the client prefixes them with
    its configured base URL. Names never come from the client.
    """

    def __init__(self, directory: str | Path, max_bytes: int | None = None):
        self.directory = Path(directory)
        self.max_bytes = max_bytes

    def ensure_directory(self) -> None:
        """Create the upload directory if it does not exist yet."""
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error(f"Cannot create upload directory {self.directory}: {e}")
            raise StorageError(str(e)) from e

    def store(self, data: bytes | None, content_type: str | None = None) -> str:
        """Write bytes under a fresh name and return their reference.

        Raises:
            NoFileProvidedError: nothing to store.
            UploadTooLargeError: over the configured size limit.
            StorageError: the write failed.
        """
        if not data:
            raise NoFileProvidedError()
        if self.max_bytes is not None and len(data) > self.max_bytes:
            raise UploadTooLargeError(f"File too large. Maximum size is {self.max_bytes} bytes.")

        self.ensure_directory()
        name = f"{uuid.uuid4().hex}{extension_for(content_type)}"
        target = self.directory / name

        # Write to a temp file first so readers never see a partial upload
        fd, tmp_path = tempfile.mkstemp(dir=self.directory, prefix=".upload-")
        try:
            with os.fdopen(fd, "wb") as fh:
                fh.write(data)
            os.replace(tmp_path, target)
        except OSError as e:
            logger.error(f"Failed to store upload {name}: {e}")
            try:
                os.unlink(tmp_path)
            except FileNotFoundError:
                pass
            raise StorageError(str(e)) from e

        logger.info(f"Stored upload {name} ({len(data)} bytes, {content_type})")
        return f"{URL_PREFIX}/{name}"

    def resolve(self, reference: str) -> Path:
        """Map a reference (or bare name) to the stored file.

        Raises:
            NotFoundError: unknown name, or one that points outside the
                upload directory.
        """
        name = reference
        if name.startswith(f"{URL_PREFIX}/"):
            name = name[len(URL_PREFIX) + 1 :]

        # Dot names cover "." and "..", and in-progress ".upload-*" temp files
        if not name or name.startswith(".") or "/" in name or "\\" in name:
            raise NotFoundError("File not found")

        root = self.directory.resolve()
        path = (root / name).resolve()
        if path.parent != root:
            logger.warning(f"Rejected upload reference outside upload dir: {reference!r}")
            raise NotFoundError("File not found")
        if not path.is_file():
            raise NotFoundError("File not found")
        return path
