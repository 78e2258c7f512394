"""Answer extraction from the indexing service's query responses.

The service has returned several shapes over time, so the answer is looked up
in a fixed order and the first non-empty match wins:

    1. {"answer": {"answer": "..."}}
    2. {"answer": "..."}
    3. {"response": "..."}
    4. anything else, rendered as text
"""

import json
from collections.abc import Mapping
from typing import Any


def _as_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False, default=str)


def normalize_answer(response: Any) -> str:
    """Extract a display-able answer string from a query response.

    Args:
        response: Decoded JSON body (or raw text) returned by the service.

    Returns:
        The answer text. Never raises for an unexpected shape.
    """
    if isinstance(response, Mapping):
        answer = response.get("answer")
        if isinstance(answer, Mapping):
            if answer.get("answer"):
                return _as_text(answer["answer"])
        elif answer:
            return _as_text(answer)

        if response.get("response"):
            return _as_text(response["response"])

    if isinstance(response, str):
        return response

    return json.dumps(response, ensure_ascii=False, default=str)
