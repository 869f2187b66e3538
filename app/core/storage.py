# app/core/storage.py

import os
import time
from pathlib import Path

from fastapi import UploadFile
from loguru import logger
from starlette.concurrency import run_in_threadpool

from app.core.config import settings
from app.core.exceptions import InvalidArgument


class FileStore:
    """
    Local disk store for student documents.

    Files are written to ``upload_dir`` and named by upload time in
    milliseconds plus the original extension. The path handed back is
    relative to ``public_dir`` so it can be served as a static URL.
    """

    def __init__(self, upload_dir: str, public_dir: str, max_size: int = settings.MAX_UPLOAD_SIZE):
        self.upload_dir = Path(upload_dir)
        self.public_dir = Path(public_dir)
        self.max_size = max_size

    def _target_for(self, filename: str | None) -> Path:
        ext = os.path.splitext(filename or "")[1].lower()
        stamp = int(time.time() * 1000)
        target = self.upload_dir / f"{stamp}{ext}"
        # several files can arrive within the same millisecond
        while target.exists():
            stamp += 1
            target = self.upload_dir / f"{stamp}{ext}"
        return target

    def relative_path(self, target: Path) -> str:
        try:
            return target.relative_to(self.public_dir).as_posix()
        except ValueError:
            return target.as_posix()

    async def save(self, file: UploadFile) -> str:
        content = await file.read()

        if len(content) > self.max_size:
            raise InvalidArgument(
                f"File too large. Maximum size is {self.max_size // (1024 * 1024)}MB."
            )

        self.upload_dir.mkdir(parents=True, exist_ok=True)
        target = self._target_for(file.filename)
        await run_in_threadpool(target.write_bytes, content)

        stored = self.relative_path(target)
        logger.info(f"Stored upload '{file.filename}' as {stored}")
        return stored


def get_file_store() -> FileStore:
    return FileStore(settings.UPLOAD_DIR, settings.PUBLIC_DIR)
