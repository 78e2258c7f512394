"""Test package for Policy QA.

Structure:
    - unit/: Cache, normalizer, client, staging and manager in isolation
    - integration/: HTTP endpoints through the FastAPI app

The external document-QA service is replaced by an httpx.MockTransport stub.
"""
