"""Global state management for scorecard sessions"""

import asyncio
import time
from typing import Dict, Optional

from scorecard_server.core.session_store import SessionStore

# Global state
session_store = SessionStore()
session_locks: Dict[Optional[str], asyncio.Lock] = {}  # {session_id: lock}, None for unjoined connections
started_at = time.monotonic()

def get_session_lock(session_id: Optional[str]) -> asyncio.Lock:
    """
    Lock serializing every event on one session.

    Created on first use from inside the running event loop. Different
    sessions never wait on each other.
    """
    lock = session_locks.get(session_id)
    if lock is None:
        lock = session_locks[session_id] = asyncio.Lock()
    return lock
