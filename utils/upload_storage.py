"""
Upload storage for candidate documents.

Writes incoming multipart files into a single flat directory under a
generated, collision-resistant name and returns them as a PendingFileSet.
Type, extension, count and size are checked while writing; a rejected
request leaves nothing behind.
"""

import logging
import time
import uuid
from pathlib import Path
from typing import BinaryIO, Iterable, Optional, Protocol

from config.settings import settings
from services.exceptions import FileRejected
from services.intake_models import StoredFile
from services.pending_files import PendingFileSet

logger = logging.getLogger(__name__)

ALLOWED_MEDIA_TYPES = {
    "application/pdf",
    "application/msword",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
}
ALLOWED_EXTENSIONS = {".pdf", ".doc", ".docx"}

CHUNK_SIZE = 64 * 1024
FILE_NAME_PREFIX = "resume"


class IncomingFile(Protocol):
    """What the storage needs from an upload (FastAPI's UploadFile fits)."""
    filename: Optional[str]
    content_type: Optional[str]
    file: BinaryIO


def generate_file_name(original_name: str) -> str:
    """resume-<millis>-<uuid hex><ext>, extension taken from the original name."""
    extension = Path(original_name).suffix.lower()
    return f"{FILE_NAME_PREFIX}-{int(time.time() * 1000)}-{uuid.uuid4().hex}{extension}"


class UploadStorage:
    """Flat directory of stored documents."""

    def __init__(
        self,
        directory: Path,
        max_files: int = settings.MAX_UPLOAD_FILES,
        max_size: int = settings.MAX_UPLOAD_SIZE_BYTES,
    ):
        self.directory = Path(directory)
        self.max_files = max_files
        self.max_size = max_size

    def path_for(self, file_name: str) -> Path:
        return self.directory / file_name

    def save_all(self, uploads: Iterable[IncomingFile]) -> PendingFileSet:
        """
        Store every upload of one request.

        Args:
            uploads: Incoming files; entries without a filename are skipped

        Returns:
            PendingFileSet tracking the stored files

        Raises:
            FileRejected: too many files, disallowed type or extension, or
                a file over the size limit. Files already written for the
                request are deleted first.
        """
        uploads = [upload for upload in uploads if upload is not None and upload.filename]
        if len(uploads) > self.max_files:
            raise FileRejected(f"Too many files. Maximum is {self.max_files} files.")

        pending = PendingFileSet()
        try:
            for upload in uploads:
                self._check_type(upload)
                pending.add(self._write(upload))
        except Exception:
            pending.discard()
            raise
        return pending

    def _check_type(self, upload: IncomingFile) -> None:
        extension = Path(upload.filename).suffix.lower()
        if upload.content_type not in ALLOWED_MEDIA_TYPES or extension not in ALLOWED_EXTENSIONS:
            logger.info(f"Rejected upload {upload.filename!r} ({upload.content_type})")
            raise FileRejected("Invalid file type. Only PDF and DOC/DOCX files are allowed.")

    def _write(self, upload: IncomingFile) -> StoredFile:
        self.directory.mkdir(parents=True, exist_ok=True)
        file_name = generate_file_name(upload.filename)
        path = self.path_for(file_name)

        size = 0
        try:
            with open(path, "xb") as out:
                while True:
                    chunk = upload.file.read(CHUNK_SIZE)
                    if not chunk:
                        break
                    size += len(chunk)
                    if size > self.max_size:
                        raise FileRejected(
                            f"File size too large. Maximum size is {self.max_size // (1024 * 1024)}MB."
                        )
                    out.write(chunk)
        except Exception:
            path.unlink(missing_ok=True)
            raise

        logger.debug(f"Stored upload {upload.filename!r} as {file_name} ({size} bytes)")
        return StoredFile(
            file_name=file_name,
            original_name=upload.filename,
            media_type=upload.content_type,
            size=size,
            path=path,
        )


def get_upload_storage() -> UploadStorage:
    """
    Upload storage dependency for FastAPI.

    Usage:
        @router.post("/example")
        def example(storage: UploadStorage = Depends(get_upload_storage)):
            ...
    """
    return UploadStorage(Path(settings.UPLOAD_DIR))
