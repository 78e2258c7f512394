"""Local PDF helpers.

Text extraction and indexing happen in the external service; this package only
reads what is cheap to know before upload (header check, page count).
"""

from policy_qa.parsing.pdf_inspector import count_pages, has_pdf_header

__all__ = ["count_pages", "has_pdf_header"]
