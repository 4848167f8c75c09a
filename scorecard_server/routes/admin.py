from fastapi import APIRouter, Request, Response, status
from fastapi.responses import JSONResponse
from scorecard_server.config.settings import settings
from scorecard_server.core.state import get_session_lock, session_store, started_at
from scorecard_server.services.scorecard import category_averages
from scorecard_server.websocket.handler import session_broker
import logging
import resource
import sys
import time

logger = logging.getLogger(__name__)

router = APIRouter(tags=["admin"])

ADMIN_PATH_PREFIXES = (
    "/session-stats",
    "/active-sessions",
    "/terminate-session/",
    "/session-summary/",
)

PREFLIGHT_HEADERS = {
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
}

def _memory_usage_mb() -> int:
    """Peak resident set size of this process in MB"""
    usage = resource.getrusage(resource.RUSAGE_SELF).ru_maxrss
    # Linux reports kilobytes, macOS reports bytes
    if sys.platform == "darwin":
        usage = usage / 1024
    return round(usage / 1024)

# ============ Preflight ============

async def preflight(request: Request, call_next):
    """
    HTTP middleware answering OPTIONS on the admin surface with an empty 200.

    Registered outside CORSMiddleware, whose own preflight reply carries
    a body and rejects unlisted request headers. Cross-origin headers are
    only added for the trusted origin.
    """
    if request.method != "OPTIONS" or not request.url.path.startswith(ADMIN_PATH_PREFIXES):
        return await call_next(request)

    response = Response(status_code=status.HTTP_200_OK)
    response.headers["Vary"] = "Origin"
    if request.headers.get("origin") == settings.ALLOWED_ORIGIN:
        response.headers["Access-Control-Allow-Origin"] = settings.ALLOWED_ORIGIN
        response.headers.update(PREFLIGHT_HEADERS)
    return response

# ============ Stats ============

@router.get("/session-stats")
async def session_stats():
    """
    Process-level counters for the dashboard.
    Informational only.
    """
    return {
        "activeSessions": session_store.count(),
        "memoryUsage": f"{_memory_usage_mb()}MB",
        "uptime": f"{round(time.monotonic() - started_at)}s",
    }

# ============ Listing ============

@router.get("/active-sessions")
async def active_sessions():
    """
    List every stored session without scores or comments.

    Returns:
        [{id, candidateName, interviewer1, interviewer2, specialization, automationTools}, ...]
    """
    return [document.to_summary() for document in session_store.list_all()]

@router.get("/session-summary/{session_id}")
async def session_summary(session_id: str):
    """Per-category score averages for one session"""
    document = session_store.get(session_id)
    if document is None:
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"error": "Session not found"})

    return {
        "sessionId": session_id,
        "candidateName": document.candidate_name,
        "categories": category_averages(document),
    }

# ============ Termination ============

@router.post("/terminate-session/{session_id}")
async def terminate_session(session_id: str):
    """
    Delete a session and notify everyone still viewing it.

    A later join with the same id starts from an empty document.
    """
    async with get_session_lock(session_id):
        document = session_store.get(session_id)
        if document is None:
            logger.warning(f"Terminate requested for unknown session: {session_id}")
            return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"error": "Session not found"})

        session_store.delete(session_id)
        await session_broker.notify_terminated(session_id, settings.TERMINATION_MESSAGE)

    logger.info(f"🛑 Session terminated: {session_id} ({document.candidate_name})")

    return {
        "message": "Session terminated successfully",
        "sessionId": session_id,
        "candidateName": document.candidate_name,
    }
