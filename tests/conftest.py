"""Pytest fixtures and shared test configuration.

Provides reusable fixtures for unit and integration tests.

Fixtures:
    - indexing_service: Scriptable stand-in for the external document-QA service
    - indexing_config: Config pointing at the stand-in, staging into tmp_path
    - session_manager: DocumentSessionManager wired to the stand-in
    - async_client: HTTPX client for API testing
    - sample_pdf: Small valid PDF generated with pypdf
"""

import io
from collections.abc import AsyncGenerator, Callable
from pathlib import Path

import httpx
import pytest
from httpx import ASGITransport, AsyncClient
from pypdf import PdfWriter

from policy_qa.api.app import app
from policy_qa.indexing.client import IndexingClient
from policy_qa.indexing.config import IndexingConfig
from policy_qa.sessions.cache import SessionCache
from policy_qa.sessions.manager import DocumentSessionManager, get_session_manager

ML_API_URL = "http://ml-api.test"

Handler = Callable[[httpx.Request], httpx.Response]


def form_fields(request: httpx.Request) -> dict[str, str]:
    """Decode the url-encoded form body of a query request."""
    return dict(httpx.QueryParams(request.content.decode()))


class FakeIndexingService:
    """Deterministic stand-in for the external indexing service.

    Uploads return {"pdf_id": "abc123"} and queries echo the question unless
    a test replaces ``on_upload`` / ``on_query``. Every request is recorded.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.on_upload: Handler = lambda request: httpx.Response(
            200, json={"pdf_id": "abc123"}
        )
        self.on_query: Handler = lambda request: httpx.Response(
            200, json={"answer": {"answer": f"Answer to {form_fields(request)['question']}"}}
        )

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.path == "/hackrx/upload":
            return self.on_upload(request)
        if request.url.path == "/hackrx/query":
            return self.on_query(request)
        return httpx.Response(404, json={"error": "unknown endpoint"})

    def paths(self) -> list[str]:
        return [request.url.path for request in self.requests]


@pytest.fixture
def indexing_service() -> FakeIndexingService:
    return FakeIndexingService()


@pytest.fixture
def upload_dir(tmp_path: Path) -> Path:
    return tmp_path / "uploads"


@pytest.fixture
def indexing_config(upload_dir: Path) -> IndexingConfig:
    return IndexingConfig(api_url=ML_API_URL, upload_dir=upload_dir, cache_max_entries=None)


@pytest.fixture
def indexing_client(
    indexing_config: IndexingConfig,
    indexing_service: FakeIndexingService,
) -> IndexingClient:
    return IndexingClient(indexing_config, transport=httpx.MockTransport(indexing_service))


@pytest.fixture
def session_manager(
    indexing_client: IndexingClient,
    upload_dir: Path,
) -> DocumentSessionManager:
    return DocumentSessionManager(
        client=indexing_client,
        cache=SessionCache(),
        upload_dir=upload_dir,
    )


@pytest.fixture
def sample_pdf() -> bytes:
    """Return a two-page PDF built in memory."""
    writer = PdfWriter()
    writer.add_blank_page(width=612, height=792)
    writer.add_blank_page(width=612, height=792)
    buffer = io.BytesIO()
    writer.write(buffer)
    return buffer.getvalue()


@pytest.fixture
async def async_client(
    session_manager: DocumentSessionManager,
) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for API testing.

    Routes are served by ``session_manager`` instead of the global singleton.

    Yields:
        Configured AsyncClient for making test requests.
    """
    app.dependency_overrides[get_session_manager] = lambda: session_manager
    transport = ASGITransport(app=app)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client
    finally:
        app.dependency_overrides.clear()
