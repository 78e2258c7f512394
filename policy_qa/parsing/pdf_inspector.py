"""Local PDF inspection using pypdf.

The indexing service does the real extraction. This only reads the page count
so it can be kept in the session's file metadata, and never rejects a file.
"""

import io
import logging

from pypdf import PdfReader
from pypdf.errors import PdfReadError

logger = logging.getLogger(__name__)

PDF_MAGIC_BYTES = b"%PDF"


def has_pdf_header(file_content: bytes) -> bool:
    """Check whether content starts with the PDF magic bytes."""
    return file_content.lstrip()[:10].startswith(PDF_MAGIC_BYTES)


def count_pages(file_content: bytes) -> int | None:
    """Return the page count of a PDF, or None if it cannot be read locally.

    Args:
        file_content: Raw bytes of the PDF file.

    Returns:
        Number of pages, or None for unreadable content.
    """
    if not has_pdf_header(file_content):
        logger.debug("Skipping page count: content has no PDF header")
        return None

    try:
        reader = PdfReader(io.BytesIO(file_content))
        return len(reader.pages)
    except PdfReadError as e:
        logger.warning(f"Corrupt or invalid PDF, page count unavailable: {e}")
    except Exception as e:
        logger.warning(f"Failed to read PDF page count: {e}")
    return None
