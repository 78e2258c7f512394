"""HTTP client for the external document-QA service.

Wraps the two remote calls the session layer needs:

    - POST {ML_API_URL}/hackrx/upload: index a PDF, returns {"pdf_id": ...}
    - POST {ML_API_URL}/hackrx/query: answer a question about an indexed PDF

Transport failures, non-2xx responses and malformed success bodies are all
turned into IndexingError / QueryError so callers never see raw httpx errors.
"""

import logging
from dataclasses import dataclass
from typing import Any, BinaryIO

import httpx

from policy_qa.errors import IndexingError, QueryError
from policy_qa.indexing.config import IndexingConfig
from policy_qa.indexing.normalizer import normalize_answer

logger = logging.getLogger(__name__)

_UPLOAD_PATH = "/hackrx/upload"
_QUERY_PATH = "/hackrx/query"
_HEADERS = {"Accept": "application/json"}


@dataclass(frozen=True)
class IndexResult:
    """Successful indexing outcome.

    Attributes:
        document_id: Identifier minted by the service.
        raw: Full decoded response body.
    """

    document_id: str
    raw: dict[str, Any]


def _decode_body(response: httpx.Response) -> Any:
    """Return the JSON body, or the raw text when the body is not JSON."""
    try:
        return response.json()
    except ValueError:
        return response.text


def _error_message(response: httpx.Response) -> str:
    """Pick the service's own error message, falling back to the status line."""
    body = _decode_body(response)
    if isinstance(body, dict):
        for key in ("error", "detail", "message"):
            if body.get(key):
                return str(body[key])
    return f"HTTP {response.status_code} from indexing service"


class IndexingClient:
    """Async client for the indexing and query endpoints.

    A fresh httpx.AsyncClient is opened per call so that each call carries
    its own timeout. Tests inject an httpx.MockTransport via ``transport``.
    """

    def __init__(
        self,
        config: IndexingConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config
        self._transport = transport

    def _client(self, timeout: float) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self._config.api_url,
            timeout=timeout,
            headers=_HEADERS,
            transport=self._transport,
        )

    async def index(self, file: bytes | BinaryIO, filename: str) -> IndexResult:
        """Send a document to the service for indexing.

        Args:
            file: PDF content as bytes or an open binary file.
            filename: Original filename forwarded to the service.

        Returns:
            IndexResult with the service-minted identifier.

        Raises:
            IndexingError: On transport failure, non-2xx status, or a success
                body without a pdf_id.
        """
        logger.info(f"Uploading PDF to ML API for indexing: {filename}")

        try:
            async with self._client(self._config.upload_timeout) as client:
                response = await client.post(
                    _UPLOAD_PATH,
                    files={"file": (filename, file, "application/pdf")},
                )
        except httpx.TimeoutException as e:
            logger.error(f"ML API upload timed out for {filename}: {e}")
            raise IndexingError(
                f"ML API upload failed: timed out after {self._config.upload_timeout:g}s"
            ) from e
        except httpx.HTTPError as e:
            logger.error(f"ML API upload transport error for {filename}: {e}")
            raise IndexingError(f"ML API upload failed: {e}") from e

        logger.debug(f"ML API upload response status: {response.status_code}")

        if response.is_error:
            message = _error_message(response)
            logger.error(f"ML API upload error ({response.status_code}): {message}")
            raise IndexingError(f"ML API upload failed: {message}")

        body = _decode_body(response)
        document_id = body.get("pdf_id") if isinstance(body, dict) else None
        if not document_id:
            logger.error(f"ML API upload response missing pdf_id: {body!r}")
            raise IndexingError(
                "ML API upload failed: service did not return a pdf_id in response"
            )

        return IndexResult(document_id=str(document_id), raw=body)

    async def query(self, document_id: str, question: str) -> str:
        """Ask a question against a previously indexed document.

        Args:
            document_id: Identifier returned by ``index``.
            question: Natural-language question.

        Returns:
            Normalized answer text.

        Raises:
            QueryError: On transport failure or non-2xx status.
        """
        logger.info(f"Querying ML API with pdf_id {document_id}: {question!r}")

        try:
            async with self._client(self._config.query_timeout) as client:
                response = await client.post(
                    _QUERY_PATH,
                    data={"pdf_id": document_id, "question": question},
                )
        except httpx.TimeoutException as e:
            logger.error(f"ML API query timed out for {document_id}: {e}")
            raise QueryError(
                f"ML API query failed: timed out after {self._config.query_timeout:g}s",
                question=question,
            ) from e
        except httpx.HTTPError as e:
            logger.error(f"ML API query transport error for {document_id}: {e}")
            raise QueryError(f"ML API query failed: {e}", question=question) from e

        if response.is_error:
            message = _error_message(response)
            logger.error(f"ML API query error ({response.status_code}): {message}")
            raise QueryError(f"ML API query failed: {message}", question=question)

        return normalize_answer(_decode_body(response))
