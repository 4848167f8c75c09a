from fastapi import WebSocket
from pydantic import ValidationError
from typing import Any, Dict, List, Optional, Set
import logging
import uuid

from scorecard_server.core.session_store import SessionStore
from scorecard_server.core.state import get_session_lock, session_store
from scorecard_server.models.events import (
    JoinEvent,
    UpdateAutomationToolsEvent,
    UpdateCommentEvent,
    UpdateInterviewEvent,
    UpdateSkillScoreEvent,
    UpdateSpecializationEvent,
)
from scorecard_server.models.interview import InterviewDocument
from scorecard_server.services.interview_service import InterviewService
from scorecard_server.utils.broadcast import broadcast_update

logger = logging.getLogger(__name__)

INTERVIEW_DATA = "interview-data"
SESSION_TERMINATED = "session-terminated"

class SessionBroker:
    """
    Relay scorecard events between connections and the session store.

    Every connection belongs to at most one session group. Joining a
    different session leaves the previous group first.

    Fan-out rules:
    - join: stored document goes back to the joining connection only
    - update-interview: everyone in the group except the sender
    - field-level updates: everyone in the group, sender included
    """

    def __init__(self, store: SessionStore):
        self.store = store
        self.active_connections: Dict[str, WebSocket] = {}  # {connection_id: websocket}
        self.memberships: Dict[str, str] = {}  # {connection_id: session_id}
        self.groups: Dict[str, Set[str]] = {}  # {session_id: {connection_id}}

        self._events = {
            "join": (JoinEvent, self.handle_join),
            "join-interview": (JoinEvent, self.handle_join),
            "update-interview": (UpdateInterviewEvent, self.handle_update_interview),
            "update-specialization": (UpdateSpecializationEvent, self.handle_update_specialization),
            "update-automation-tools": (UpdateAutomationToolsEvent, self.handle_update_automation_tools),
            "update-skill-score": (UpdateSkillScoreEvent, self.handle_update_skill_score),
            "update-comment": (UpdateCommentEvent, self.handle_update_comment),
        }

    # ============ Connection Lifecycle ============

    async def connect(self, websocket: WebSocket) -> str:
        """
        Accept WebSocket connection and register it.

        Args:
            websocket: WebSocket connection

        Returns:
            Connection id used for every later call
        """
        await websocket.accept()
        connection_id = uuid.uuid4().hex
        self.active_connections[connection_id] = websocket

        logger.info(f"WebSocket connected: connection={connection_id}, client={websocket.client}")
        return connection_id

    def disconnect(self, connection_id: str):
        """
        Forget a connection and drop it from its group. No broadcast.

        Args:
            connection_id: Connection id
        """
        self.leave_group(connection_id)
        self.active_connections.pop(connection_id, None)

        logger.info(f"WebSocket disconnected: connection={connection_id}")

    # ============ Group Membership ============

    def join_group(self, connection_id: str, session_id: str):
        current = self.memberships.get(connection_id)
        if current == session_id:
            return
        if current is not None:
            self.leave_group(connection_id)

        self.groups.setdefault(session_id, set()).add(connection_id)
        self.memberships[connection_id] = session_id

    def leave_group(self, connection_id: str):
        session_id = self.memberships.pop(connection_id, None)
        if session_id is None:
            return

        members = self.groups.get(session_id)
        if members is not None:
            members.discard(connection_id)
            if not members:
                del self.groups[session_id]

    def group_members(self, session_id: str) -> List[str]:
        return sorted(self.groups.get(session_id, ()))

    # ============ Sending ============

    async def send_personal(self, connection_id: str, data: dict):
        """
        Send message to a specific connection.

        Args:
            connection_id: Connection id
            data: Data to send
        """
        websocket = self.active_connections.get(connection_id)
        if websocket is None:
            return
        try:
            await websocket.send_json(data)
        except Exception as e:
            logger.error(f"Failed to send message to {connection_id}: {str(e)}")

    async def broadcast(self, session_id: str, data: dict, exclude: Optional[str] = None):
        """
        Send message to every connection in a session group.

        Args:
            session_id: Session whose group receives the message
            data: Data to send
            exclude: Connection id to skip (the sender, for full replaces)
        """
        targets = [
            (connection_id, self.active_connections[connection_id])
            for connection_id in self.group_members(session_id)
            if connection_id != exclude and connection_id in self.active_connections
        ]
        failed = await broadcast_update(targets, data)
        for connection_id in failed:
            self.disconnect(connection_id)

    async def send_error(
        self,
        connection_id: str,
        message: str,
        event: Optional[str] = None,
        details: Optional[List[Dict[str, Any]]] = None
    ):
        payload = {"type": "error", "message": message, "event": event}
        if details:
            payload["details"] = details
        await self.send_personal(connection_id, payload)

    @staticmethod
    def _document_message(document: InterviewDocument) -> dict:
        return {"type": INTERVIEW_DATA, "data": document.to_wire()}

    # ============ Dispatch ============

    async def dispatch(self, connection_id: str, message: Any):
        """
        Validate one inbound message and run its handler.

        Invalid messages are answered with an "error" event and never
        reach the store. Handlers for one session run one at a time under
        that session's lock, so an event and its fan-out complete before
        the next event on the same session starts. Other sessions proceed
        independently.

        Args:
            connection_id: Sender connection id
            message: Decoded JSON message
        """
        if not isinstance(message, dict):
            logger.warning(f"Rejected non-object message from {connection_id}")
            await self.send_error(connection_id, "Message must be a JSON object")
            return

        event_type = message.get("type")

        if event_type == "ping":
            # Queued behind in-flight events on the same session so the pong follows their fan-out
            async with get_session_lock(self.memberships.get(connection_id)):
                await self.send_personal(connection_id, {"type": "pong"})
            return

        registered = self._events.get(event_type) if isinstance(event_type, str) else None
        if registered is None:
            logger.warning(f"Unknown message type: {event_type}")
            await self.send_error(connection_id, "Unknown message type", event=event_type)
            return

        model, handler = registered
        try:
            event = model.model_validate(message)
        except ValidationError as e:
            logger.warning(f"Invalid {event_type} payload from {connection_id}: {e.error_count()} error(s)")
            details = [
                {"loc": [str(part) for part in error["loc"]], "msg": error["msg"]}
                for error in e.errors()
            ]
            await self.send_error(connection_id, "Invalid payload", event=event_type, details=details)
            return

        try:
            async with get_session_lock(event.session_id):
                await handler(connection_id, event)
        except Exception:
            logger.exception(f"Error handling {event_type} from {connection_id}")
            await self.send_error(connection_id, "Internal error", event=event_type)

    # ============ Event Handlers ============

    async def handle_join(self, connection_id: str, event: JoinEvent):
        document = self.store.get(event.id)
        if document is None:
            document = InterviewService.create_interview(
                event.id,
                candidate_name=event.candidate_name,
                interviewer1=event.interviewer1,
                interviewer2=event.interviewer2,
            )
            self.store.set(event.id, document)

        self.join_group(connection_id, event.id)
        logger.info(f"Connection {connection_id} joined interview {event.id}")

        await self.send_personal(connection_id, self._document_message(document))

    async def handle_update_interview(self, connection_id: str, event: UpdateInterviewEvent):
        # Full replace is trusted as-is; only the key is pinned to the event's id
        document = event.interview_data.model_copy(update={"id": event.interview_id})
        self.store.set(event.interview_id, document)

        await self.broadcast(event.interview_id, self._document_message(document), exclude=connection_id)

    async def handle_update_specialization(self, connection_id: str, event: UpdateSpecializationEvent):
        document = self.store.get(event.interview_id)
        if document is None:
            logger.debug(f"update-specialization for unknown interview {event.interview_id}")
            return

        updated = InterviewService.change_specialization(document, event.specialization)
        await self._commit(event.interview_id, updated)

    async def handle_update_automation_tools(self, connection_id: str, event: UpdateAutomationToolsEvent):
        document = self.store.get(event.interview_id)
        if document is None:
            logger.debug(f"update-automation-tools for unknown interview {event.interview_id}")
            return

        updated = InterviewService.change_automation_tools(document, event.automation_tools)
        if updated is None:
            logger.debug(f"Ignoring tool change for interview {event.interview_id}: not on automation track")
            return
        await self._commit(event.interview_id, updated)

    async def handle_update_skill_score(self, connection_id: str, event: UpdateSkillScoreEvent):
        document = self.store.get(event.interview_id)
        if document is None:
            logger.debug(f"update-skill-score for unknown interview {event.interview_id}")
            return

        updated = InterviewService.set_skill_score(document, event.skill_id, event.interviewer, event.score)
        await self._commit(event.interview_id, updated)

    async def handle_update_comment(self, connection_id: str, event: UpdateCommentEvent):
        document = self.store.get(event.interview_id)
        if document is None:
            logger.debug(f"update-comment for unknown interview {event.interview_id}")
            return

        updated = InterviewService.set_comment(document, event.category_id, event.interviewer, event.comment)
        await self._commit(event.interview_id, updated)

    async def _commit(self, session_id: str, document: InterviewDocument):
        self.store.set(session_id, document)
        await self.broadcast(session_id, self._document_message(document))

    # ============ Administration ============

    async def notify_terminated(self, session_id: str, message: str) -> int:
        """
        Tell every connection in a session group that the session is gone,
        then dissolve the group. Caller must already hold the session's lock.

        Returns:
            Number of connections notified
        """
        members = self.group_members(session_id)
        await self.broadcast(session_id, {"type": SESSION_TERMINATED, "message": message})

        for connection_id in members:
            self.leave_group(connection_id)
        self.groups.pop(session_id, None)

        logger.info(f"Session {session_id} terminated, notified {len(members)} connection(s)")
        return len(members)

    def reset(self):
        """Drop all groups and connections (used between tests)."""
        self.active_connections.clear()
        self.memberships.clear()
        self.groups.clear()

# Global broker instance
session_broker = SessionBroker(session_store)
