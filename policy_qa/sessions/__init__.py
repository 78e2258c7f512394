"""Document sessions: cache, staging and orchestration.

Sessions are held in memory only and are lost on restart.
"""

from policy_qa.sessions.cache import SessionCache
from policy_qa.sessions.manager import (
    DocumentSessionManager,
    create_session_manager,
    get_session_manager,
)

__all__ = [
    "DocumentSessionManager",
    "SessionCache",
    "create_session_manager",
    "get_session_manager",
]
