"""In-memory store of scorecard session documents"""

import logging
from typing import Dict, List, Optional

from scorecard_server.models.interview import InterviewDocument

logger = logging.getLogger(__name__)

class SessionStore:
    """
    Process-wide mapping of session id -> InterviewDocument.

    Volatile: nothing survives a restart. Entries are never expired;
    delete() is the only way a session leaves the store.

    Callers get copies from get() and list_all(), so the stored entry
    only ever changes through set() or delete().
    """

    def __init__(self):
        self._sessions: Dict[str, InterviewDocument] = {}

    def get(self, session_id: str) -> Optional[InterviewDocument]:
        document = self._sessions.get(session_id)
        if document is None:
            return None
        return document.model_copy(deep=True)

    def set(self, session_id: str, document: InterviewDocument) -> None:
        self._sessions[session_id] = document.model_copy(deep=True)

    def delete(self, session_id: str) -> bool:
        """Remove a session. Returns False if it was not stored."""
        if session_id not in self._sessions:
            return False
        del self._sessions[session_id]
        logger.info(f"Session removed from store: {session_id}")
        return True

    def list_all(self) -> List[InterviewDocument]:
        return [document.model_copy(deep=True) for document in self._sessions.values()]

    def count(self) -> int:
        return len(self._sessions)

    def clear(self) -> None:
        self._sessions.clear()

    def __contains__(self, session_id: str) -> bool:
        return session_id in self._sessions
