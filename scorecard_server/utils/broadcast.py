"""Broadcast utilities"""

import logging
from typing import Any, Dict, Iterable, List, Tuple
from fastapi import WebSocket

logger = logging.getLogger(__name__)

async def broadcast_update(
    targets: Iterable[Tuple[str, WebSocket]],
    message: Dict[str, Any]
) -> List[str]:
    """
    Send message to every (connection_id, websocket) target.
    Returns the ids whose send failed so the caller can drop them.
    """
    failed = []
    for connection_id, websocket in targets:
        try:
            await websocket.send_json(message)
        except Exception as e:
            logger.error(f"Broadcast error to {connection_id}: {e}")
            failed.append(connection_id)
    return failed
