"""Client for the external document-QA (indexing) service.

Responsibilities:
    - Upload PDFs for indexing and return the service-minted pdf_id
    - Ask questions against an indexed pdf_id
    - Normalize the service's varying answer shapes into plain text
    - Map transport failures to typed UpstreamError subclasses
"""

from policy_qa.indexing.client import IndexingClient, IndexResult
from policy_qa.indexing.config import IndexingConfig, get_indexing_config
from policy_qa.indexing.normalizer import normalize_answer

__all__ = [
    "IndexResult",
    "IndexingClient",
    "IndexingConfig",
    "get_indexing_config",
    "normalize_answer",
]
