import mimetypes
import os
import time
from pathlib import Path
from typing import Iterable, Optional, Union
import aiofiles
import aiofiles.os
from src.core.config import ALLOWED_CONTENT_TYPES, MAX_UPLOAD_BYTES
from src.core.exceptions import NotFoundError, StorageError, ValidationError
from src.core.logging import logger
from src.db.models import StoredAttachment


class AttachmentStore:
    """
    Stores uploaded files in a flat directory under generated names of the
    form ``<epoch-ms>-<original-filename>``.
    """

    def __init__(
        self,
        root: Union[str, Path],
        max_bytes: int = MAX_UPLOAD_BYTES,
        allowed_types: Iterable[str] = ALLOWED_CONTENT_TYPES
    ):
        self.root = Path(root)
        self.max_bytes = max_bytes
        self.allowed_types = frozenset(allowed_types)

    def ensure_root(self) -> None:
        self.root.mkdir(parents=True, exist_ok=True)

    @staticmethod
    def sanitize(filename: Optional[str]) -> str:
        """Reduce a client-supplied name to its base name."""
        name = os.path.basename((filename or "").replace("\\", "/"))
        if name in ("", ".", ".."):
            raise NotFoundError("File not found")
        return name

    def validate(self, content_type: Optional[str], size: int) -> None:
        if content_type not in self.allowed_types:
            logger.warning("Rejected upload with content type %s", content_type)
            raise ValidationError("Only JPG, PNG, and PDF files are allowed")
        if size > self.max_bytes:
            logger.warning("Rejected upload of %d bytes (limit %d)", size, self.max_bytes)
            raise ValidationError(
                f"File too large: maximum size is {self.max_bytes // (1024 * 1024)}MB"
            )

    async def store(self, original_name: str, content_type: str, data: bytes) -> StoredAttachment:
        self.validate(content_type, len(data))
        base_name = os.path.basename((original_name or "").replace("\\", "/")) or "attachment"
        millis = int(time.time() * 1000)
        try:
            self.ensure_root()
            while True:
                stored_name = f"{millis}-{base_name}"
                try:
                    # exclusive create: an existing blob is never replaced
                    async with aiofiles.open(self.root / stored_name, "xb") as fh:
                        await fh.write(data)
                    break
                except FileExistsError:
                    millis += 1
        except OSError as exc:
            logger.error("Failed to write attachment %s: %s", base_name, exc)
            raise StorageError("Failed to store attachment") from exc
        return StoredAttachment(
            name=original_name,
            content_type=content_type,
            path=stored_name,
            size=len(data)
        )

    async def exists(self, filename: str) -> bool:
        try:
            name = self.sanitize(filename)
        except NotFoundError:
            return False
        return await aiofiles.os.path.isfile(self.root / name)

    async def resolve(self, filename: str) -> Path:
        name = self.sanitize(filename)
        path = self.root / name
        if not await aiofiles.os.path.isfile(path):
            raise NotFoundError("File not found")
        return path

    async def delete(self, filename: str) -> None:
        try:
            await aiofiles.os.remove(self.root / self.sanitize(filename))
        except FileNotFoundError:
            return
        except OSError as exc:
            logger.error("Failed to remove attachment %s: %s", filename, exc)

    @staticmethod
    def guess_type(filename: str) -> str:
        guessed, _ = mimetypes.guess_type(filename)
        return guessed or "application/octet-stream"
