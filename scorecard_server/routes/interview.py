"""Interview routes - real-time scorecard WebSocket"""

import json
import logging
from fastapi import APIRouter, WebSocket, WebSocketDisconnect
from scorecard_server.websocket.handler import session_broker

logger = logging.getLogger(__name__)

router = APIRouter(tags=["interview"])

@router.websocket("/ws")
async def websocket_endpoint(websocket: WebSocket):
    """
    WebSocket endpoint for collaborative scorecard editing.

    Message Types (client -> server):
        join: {type: "join", id, candidateName, interviewer1, interviewer2}
        update-interview: {type, interviewId, interviewData}
        update-specialization: {type, interviewId, specialization}
        update-automation-tools: {type, interviewId, automationTools}
        update-skill-score: {type, interviewId, skillId, interviewer, score}
        update-comment: {type, interviewId, categoryId, interviewer, comment}
        ping: {type: "ping"}

    Message Types (server -> client):
        interview-data: {type, data: full document}
        session-terminated: {type, message}
        error: {type, message, event, details?}
        pong: {type: "pong"}

    A reconnecting client simply joins again and receives the latest
    stored document.
    """
    try:
        connection_id = await session_broker.connect(websocket)
    except Exception as e:
        logger.error(f"❌ WebSocket accept failed: {e}")
        return

    try:
        while True:
            data = await websocket.receive_text()

            try:
                message = json.loads(data)
            except json.JSONDecodeError as e:
                logger.warning(f"Invalid JSON message: {str(e)}")
                await session_broker.send_error(connection_id, "Invalid JSON")
                continue

            await session_broker.dispatch(connection_id, message)

    except WebSocketDisconnect:
        logger.info(f"Client disconnected: {connection_id}")
    except Exception as e:
        logger.error(f"WebSocket error: {e}")
    finally:
        session_broker.disconnect(connection_id)
