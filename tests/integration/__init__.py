"""Integration tests for the HTTP endpoints.

Requests go through the real FastAPI app via ASGITransport; only the external
indexing service is stubbed.
"""
