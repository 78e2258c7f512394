"""Policy QA - proxy and session cache for an external document-QA service.

Components:
    - api: HTTP endpoints for upload, query and batch analysis
    - indexing: Client for the external indexing service and answer normalization
    - sessions: In-memory session cache and upload/query orchestration
    - parsing: Local PDF inspection
    - models: Session records and response schemas
"""

__version__ = "0.1.0"
