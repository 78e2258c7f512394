"""Document endpoints: upload-and-index, question, and batch analysis.

Translates session-layer errors into HTTP status codes:
    400 invalid input, 404 unknown pdf_id, 413 oversized file,
    502 indexing service failure.
"""

import logging

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, status

from policy_qa.errors import (
    DocumentNotFoundError,
    DocumentSessionError,
    DocumentValidationError,
    UpstreamError,
)
from policy_qa.indexing.config import MAX_UPLOAD_SIZE
from policy_qa.models.schemas import (
    AnalyzeResponse,
    AnswerBody,
    QueryResponse,
    QuestionAnswer,
    UploadResponse,
)
from policy_qa.sessions.manager import DocumentSessionManager, get_session_manager

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/hackrx", tags=["documents"])


def _to_http_error(error: DocumentSessionError) -> HTTPException:
    """Map a session-layer error to the matching HTTP error."""
    if isinstance(error, DocumentValidationError):
        code = status.HTTP_400_BAD_REQUEST
    elif isinstance(error, DocumentNotFoundError):
        code = status.HTTP_404_NOT_FOUND
    elif isinstance(error, UpstreamError):
        code = status.HTTP_502_BAD_GATEWAY
    else:
        code = status.HTTP_500_INTERNAL_SERVER_ERROR
    return HTTPException(status_code=code, detail=str(error))


async def _read_upload(file: UploadFile | None) -> bytes | None:
    """Read upload content and validate size.

    Args:
        file: The uploaded file, if any.

    Returns:
        File content as bytes, or None when no file was sent.

    Raises:
        HTTPException: 413 if file exceeds size limit.
    """
    if file is None:
        return None

    content = await file.read()

    if len(content) > MAX_UPLOAD_SIZE:
        size_mb = len(content) / (1024 * 1024)
        raise HTTPException(
            status_code=status.HTTP_413_CONTENT_TOO_LARGE,
            detail=f"File size ({size_mb:.1f}MB) exceeds maximum allowed (10MB)",
        )

    return content


@router.post("/upload", response_model=UploadResponse)
async def upload_pdf(
    file: UploadFile | None = File(None),
    manager: DocumentSessionManager = Depends(get_session_manager),
) -> UploadResponse:
    """Upload a PDF and have it indexed by the document-QA service.

    Args:
        file: The PDF to index (multipart/form-data field ``file``).

    Returns:
        UploadResponse with the pdf_id to use for questions.

    Raises:
        400: No file, or not a PDF.
        413: File exceeds 10MB limit.
        502: Indexing service failed.
    """
    content = await _read_upload(file)

    try:
        result = await manager.upload_and_index(
            content,
            file.filename if file else None,
            file.content_type if file else None,
        )
    except DocumentSessionError as e:
        logger.warning(f"PDF upload failed: {e}")
        raise _to_http_error(e) from e

    return UploadResponse(pdf_id=result.document_id, message=result.message)


@router.post("/query", response_model=QueryResponse)
async def query_pdf(
    pdf_id: str | None = Form(None),
    question: str | None = Form(None),
    manager: DocumentSessionManager = Depends(get_session_manager),
) -> QueryResponse:
    """Ask a question about a previously uploaded PDF.

    Args:
        pdf_id: Identifier returned by /hackrx/upload.
        question: Natural-language question.

    Returns:
        QueryResponse shaped as {"answer": {"answer": ...}}.

    Raises:
        400: Missing pdf_id or question.
        404: pdf_id was not uploaded in this server process.
        502: Query service failed.
    """
    try:
        answer = await manager.answer_question(pdf_id, question)
    except DocumentSessionError as e:
        logger.warning(f"PDF query failed: {e}")
        raise _to_http_error(e) from e

    return QueryResponse(answer=AnswerBody(answer=answer))


@router.post("/analyze", response_model=AnalyzeResponse)
async def analyze_pdf(
    file: UploadFile | None = File(None),
    questions: list[str] | None = Form(None),
    manager: DocumentSessionManager = Depends(get_session_manager),
) -> AnalyzeResponse:
    """Upload a PDF and answer several questions about it in one call.

    Questions are answered in order; if any fails, the whole request fails
    and no answers are returned.

    Args:
        file: The PDF to index.
        questions: Repeated form field ``questions``.

    Returns:
        AnalyzeResponse with the pdf_id and one answer per question.
    """
    content = await _read_upload(file)

    try:
        result = await manager.analyze_with_questions(
            content,
            file.filename if file else None,
            file.content_type if file else None,
            questions or [],
        )
    except DocumentSessionError as e:
        logger.warning(f"PDF analysis failed: {e}")
        raise _to_http_error(e) from e

    return AnalyzeResponse(
        pdf_id=result.document_id,
        answers=[
            QuestionAnswer(question=q, answer=a)
            for q, a in zip(result.questions, result.answers, strict=True)
        ],
    )
