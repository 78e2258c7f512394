"""Scoped temporary storage for uploads awaiting indexing."""

import logging
import time
import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

logger = logging.getLogger(__name__)


def _staged_name(filename: str) -> str:
    suffix = Path(filename).suffix.lower()
    return f"file-{int(time.time() * 1000)}-{uuid.uuid4().hex[:9]}{suffix}"


def remove_staged_file(path: Path) -> None:
    """Delete a staged upload, logging instead of raising on failure."""
    try:
        path.unlink(missing_ok=True)
    except OSError as e:
        logger.warning(f"Failed to clean up staged upload {path}: {e}")


@contextmanager
def staged_upload(content: bytes, filename: str, upload_dir: Path) -> Iterator[Path]:
    """Write an upload to disk for the duration of the block.

    The file is removed exactly once when the block exits, whether it
    completes, raises, or is cancelled. Removal failures are only logged.

    Args:
        content: Uploaded bytes.
        filename: Original filename, used for the staged file's extension.
        upload_dir: Directory to stage into; created if missing.

    Yields:
        Path of the staged file.
    """
    upload_dir.mkdir(parents=True, exist_ok=True)
    path = upload_dir / _staged_name(filename)
    try:
        path.write_bytes(content)
        logger.debug(f"Staged upload {filename} at {path}")
        yield path
    finally:
        remove_staged_file(path)
