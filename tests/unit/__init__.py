"""Unit tests for individual components in isolation.

Coverage:
    - indexing/: Answer normalization and the HTTP client
    - sessions/: Cache, upload staging and session orchestration
    - parsing/: Local PDF inspection
"""
