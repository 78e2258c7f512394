"""Document session orchestration.

Ties the indexing client to the session cache:

    upload  -> validate -> stage -> index -> cache.put -> pdf_id
    question -> validate -> cache.get -> query -> normalized answer

A failed indexing attempt leaves nothing in the cache, so the caller simply
uploads again. Questions against an identifier that was never indexed in this
process fail locally with DocumentNotFoundError and never reach the service.
"""

import logging
from collections.abc import Iterable
from datetime import UTC, datetime
from pathlib import Path

from policy_qa.errors import DocumentNotFoundError, DocumentValidationError
from policy_qa.indexing.client import IndexingClient
from policy_qa.indexing.config import IndexingConfig, get_indexing_config
from policy_qa.models.schemas import (
    AnalysisResult,
    FileMetadata,
    SessionRecord,
    UploadResult,
)
from policy_qa.parsing.pdf_inspector import count_pages
from policy_qa.sessions.cache import SessionCache
from policy_qa.sessions.staging import staged_upload

logger = logging.getLogger(__name__)

UPLOAD_MESSAGE = "PDF uploaded & indexed"
PDF_MEDIA_TYPE = "application/pdf"
PDF_EXTENSION = ".pdf"


def _validate_document(
    content: bytes | None,
    filename: str | None,
    media_type: str | None,
) -> None:
    """Reject uploads that are not PDFs before spending indexing time on them.

    Raises:
        DocumentValidationError: If content is missing or not a PDF.
    """
    if not content:
        raise DocumentValidationError("No PDF file uploaded")

    if not filename:
        raise DocumentValidationError("Filename is required")

    declared = (media_type or "").split(";")[0].strip().lower()
    if not filename.lower().endswith(PDF_EXTENSION) or declared != PDF_MEDIA_TYPE:
        raise DocumentValidationError("Only PDF files are supported")


def _clean_questions(questions: Iterable[str | None]) -> list[str]:
    return [q.strip() for q in questions if q and q.strip()]


class DocumentSessionManager:
    """Orchestrates upload-and-index and question answering per document.

    Args:
        client: Client for the external indexing service.
        cache: Session store shared by all requests.
        upload_dir: Directory used to stage uploads during indexing.
    """

    def __init__(
        self,
        client: IndexingClient,
        cache: SessionCache,
        upload_dir: Path,
    ) -> None:
        self._client = client
        self._cache = cache
        self._upload_dir = upload_dir

    @property
    def cache(self) -> SessionCache:
        return self._cache

    async def upload_and_index(
        self,
        content: bytes | None,
        filename: str | None,
        media_type: str | None,
    ) -> UploadResult:
        """Index an uploaded PDF and remember its session.

        Args:
            content: Uploaded file bytes.
            filename: Original filename.
            media_type: Declared content type of the upload.

        Returns:
            UploadResult with the service-minted identifier.

        Raises:
            DocumentValidationError: Missing file or not a PDF.
            IndexingError: The indexing service failed.
        """
        _validate_document(content, filename, media_type)

        with staged_upload(content, filename, self._upload_dir) as path:
            with path.open("rb") as staged:
                result = await self._client.index(staged, filename)

            logger.info(f"ML API returned pdf_id: {result.document_id}")

            record = SessionRecord(
                document_id=result.document_id,
                file=FileMetadata(
                    name=filename,
                    media_type=media_type,
                    size=len(content),
                    path=str(path),
                    page_count=count_pages(content),
                ),
                indexed_at=datetime.now(UTC),
                index_response=result.raw,
            )

            if self._cache.has(result.document_id):
                logger.info(f"PDF {result.document_id} already indexed, updating cache")
            self._cache.put(result.document_id, record)

        logger.info(f"PDF {result.document_id} successfully indexed and cached")
        return UploadResult(document_id=result.document_id, message=UPLOAD_MESSAGE)

    async def answer_question(self, document_id: str | None, question: str | None) -> str:
        """Answer a question about a previously indexed document.

        Args:
            document_id: Identifier returned by upload_and_index.
            question: Natural-language question.

        Returns:
            Normalized answer text.

        Raises:
            DocumentValidationError: Missing identifier or question.
            DocumentNotFoundError: Identifier not indexed in this process.
            QueryError: The query service failed.
        """
        document_id = document_id or ""
        question = (question or "").strip()
        if not document_id.strip():
            raise DocumentValidationError("pdf_id is required")
        if not question:
            raise DocumentValidationError("question is required")

        if self._cache.get(document_id) is None:
            logger.info(f"Query for unknown pdf_id: {document_id}")
            raise DocumentNotFoundError(document_id)

        answer = await self._client.query(document_id, question)
        logger.info(f"Query completed for PDF {document_id}")
        return answer

    async def analyze_with_questions(
        self,
        content: bytes | None,
        filename: str | None,
        media_type: str | None,
        questions: Iterable[str | None],
    ) -> AnalysisResult:
        """Index a document once, then ask each question in order.

        Questions are asked one at a time. The first failure aborts the rest
        and is raised; answers collected so far are dropped.

        Args:
            content: Uploaded file bytes.
            filename: Original filename.
            media_type: Declared content type.
            questions: Questions to ask; blank entries are skipped.

        Returns:
            AnalysisResult with one answer per non-blank question, in order.
            With no usable questions the document is still indexed and
            ``answers`` is empty.

        Raises:
            DocumentValidationError: Invalid file.
            IndexingError: Indexing failed.
            QueryError: A question failed; ``question`` names it.
        """
        cleaned = _clean_questions(questions)
        upload = await self.upload_and_index(content, filename, media_type)

        answers: list[str] = []
        for question in cleaned:
            answers.append(await self.answer_question(upload.document_id, question))

        return AnalysisResult(
            document_id=upload.document_id,
            questions=cleaned,
            answers=answers,
        )


# Module-level singleton instance
_session_manager: DocumentSessionManager | None = None


def create_session_manager(config: IndexingConfig | None = None) -> DocumentSessionManager:
    """Build a manager wired to the configured indexing service.

    Args:
        config: Optional configuration. Loads from environment if not provided.

    Returns:
        A new DocumentSessionManager with an empty cache.
    """
    config = config or get_indexing_config()
    return DocumentSessionManager(
        client=IndexingClient(config),
        cache=SessionCache(max_entries=config.cache_max_entries),
        upload_dir=config.upload_dir,
    )


def get_session_manager() -> DocumentSessionManager:
    """Get or create the global session manager.

    All requests share one manager so they share one session cache.

    Returns:
        The DocumentSessionManager instance.
    """
    global _session_manager
    if _session_manager is None:
        _session_manager = create_session_manager()
    return _session_manager
