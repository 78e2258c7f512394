"""Indexing service configuration with environment variable loading.

Pydantic-based configuration for the external document-QA service and the
local session layer that fronts it.
"""

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Load environment variables from .env file
load_dotenv()

# 10MB, same ceiling the upload route enforces
MAX_UPLOAD_SIZE = 10 * 1024 * 1024


def _optional_int(name: str) -> int | None:
    value = os.getenv(name, "").strip()
    return int(value) if value else None


class IndexingConfig(BaseModel):
    """Configuration for the external indexing service client.

    Attributes:
        api_url: Base URL of the document-QA service.
        upload_timeout: Seconds allowed for indexing a document.
        query_timeout: Seconds allowed for answering a single question.
        upload_dir: Directory where uploads are staged before indexing.
        cache_max_entries: LRU bound for the session cache (None = unbounded).
    """

    # Env-derived defaults go through the same validators as explicit values
    model_config = ConfigDict(validate_default=True)

    api_url: str = Field(
        default_factory=lambda: os.getenv("ML_API_URL", ""),
        description="Base URL of the external indexing service",
    )
    upload_timeout: float = Field(
        default_factory=lambda: float(os.getenv("ML_UPLOAD_TIMEOUT") or "120"),
        gt=0,
        description="Timeout in seconds for the indexing call",
    )
    query_timeout: float = Field(
        default_factory=lambda: float(os.getenv("ML_QUERY_TIMEOUT") or "60"),
        gt=0,
        description="Timeout in seconds for the query call",
    )
    upload_dir: Path = Field(
        default_factory=lambda: Path(os.getenv("UPLOAD_DIR") or "./uploads"),
        description="Staging directory for uploaded files",
    )
    cache_max_entries: int | None = Field(
        default_factory=lambda: _optional_int("SESSION_CACHE_MAX_ENTRIES"),
        ge=1,
        description="Maximum cached sessions before LRU eviction",
    )

    @field_validator("api_url")
    @classmethod
    def validate_api_url(cls, v: str) -> str:
        """Validate that the service URL is provided and strip trailing slashes."""
        if not v or not v.strip():
            raise ValueError("ML_API_URL is required. Set it in .env")
        return v.strip().rstrip("/")


def get_indexing_config() -> IndexingConfig:
    """Create indexing configuration from environment.

    Returns:
        Configured IndexingConfig instance.

    Raises:
        ValueError: If ML_API_URL is not set.
    """
    return IndexingConfig()
