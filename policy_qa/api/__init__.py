"""FastAPI endpoints for the policy QA proxy.

Endpoints:
    - GET /api/health: Service health status
    - GET /api: Endpoint summary
    - POST /hackrx/upload: Upload and index a PDF
    - POST /hackrx/query: Ask a question about an indexed PDF
    - POST /hackrx/analyze: Upload a PDF and ask several questions
"""

from policy_qa.api.app import app, create_app

__all__ = ["app", "create_app"]
