"""Error taxonomy for the document session layer.

Routes translate these into HTTP status codes:
    - DocumentValidationError: 400, caller supplied bad input
    - DocumentNotFoundError: 404, question asked before the document was indexed
    - UpstreamError: 502, the external indexing service failed
"""


class DocumentSessionError(Exception):
    """Base class for document session failures."""

    pass


class DocumentValidationError(DocumentSessionError):
    """Raised when a request is rejected before any network call."""

    pass


class DocumentNotFoundError(DocumentSessionError):
    """Raised when a question targets an identifier missing from the cache."""

    def __init__(self, document_id: str) -> None:
        self.document_id = document_id
        super().__init__(
            f"PDF with id '{document_id}' not found. "
            "Please upload the PDF first using /hackrx/upload."
        )


class UpstreamError(DocumentSessionError):
    """Raised when the external indexing service fails or breaks its contract."""

    pass


class IndexingError(UpstreamError):
    """Raised when indexing a document fails."""

    pass


class QueryError(UpstreamError):
    """Raised when answering a question fails.

    Attributes:
        question: The question that was being asked.
    """

    def __init__(self, message: str, question: str | None = None) -> None:
        self.question = question
        super().__init__(message)
