"""Pydantic models for session state and API responses.

Models:
    - FileMetadata: Uploaded file details captured at indexing time
    - SessionRecord: Cached session for one indexed document
    - UploadResult / AnalysisResult: Manager-level outcomes
    - UploadResponse / QueryResponse / AnalyzeResponse: HTTP response bodies
"""

from policy_qa.models.schemas import (
    AnalysisResult,
    AnalyzeResponse,
    AnswerBody,
    FileMetadata,
    QueryResponse,
    QuestionAnswer,
    SessionRecord,
    UploadResponse,
    UploadResult,
)

__all__ = [
    "AnalysisResult",
    "AnalyzeResponse",
    "AnswerBody",
    "FileMetadata",
    "QueryResponse",
    "QuestionAnswer",
    "SessionRecord",
    "UploadResponse",
    "UploadResult",
]
