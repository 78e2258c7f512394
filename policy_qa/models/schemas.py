from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class FileMetadata(BaseModel):
    """Details of an uploaded file at the moment it was indexed.

    Attributes:
        name: Original filename as sent by the client.
        media_type: Declared content type.
        size: Size in bytes.
        path: Staging path the upload was written to.
        page_count: Number of pages, if the PDF could be read locally.
    """

    name: str
    media_type: str | None = None
    size: int = Field(ge=0)
    path: str
    page_count: int | None = None


class SessionRecord(BaseModel):
    """Cached session for one indexed document.

    Attributes:
        document_id: Identifier minted by the indexing service.
        file: Metadata of the file that was indexed.
        indexed_at: UTC time the indexing call succeeded.
        index_response: Raw response body of the indexing call.
    """

    document_id: str
    file: FileMetadata
    indexed_at: datetime
    index_response: Any = None


class UploadResult(BaseModel):
    """Outcome of a successful upload-and-index."""

    document_id: str
    message: str


class UploadResponse(BaseModel):
    """Response body of POST /hackrx/upload.

    Attributes:
        pdf_id: Identifier to use for subsequent questions.
        message: Human-readable confirmation.
    """

    pdf_id: str
    message: str


class AnswerBody(BaseModel):
    answer: str


class QueryResponse(BaseModel):
    """Response body of POST /hackrx/query, shaped as {"answer": {"answer": ...}}."""

    answer: AnswerBody


class QuestionAnswer(BaseModel):
    question: str
    answer: str


class AnalyzeResponse(BaseModel):
    """Response body of POST /hackrx/analyze.

    Attributes:
        pdf_id: Identifier the document was indexed under.
        answers: One entry per asked question, in request order.
    """

    pdf_id: str
    answers: list[QuestionAnswer] = Field(default_factory=list)


class AnalysisResult(BaseModel):
    """Outcome of indexing a document and asking a batch of questions.

    Attributes:
        document_id: Identifier the document was indexed under.
        questions: The asked questions, trimmed, blanks removed.
        answers: Answers in the same order as ``questions``.
    """

    document_id: str
    questions: list[str]
    answers: list[str]
