import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from scorecard_server.core.state import session_locks, session_store
from scorecard_server.websocket.handler import session_broker


@pytest.fixture(autouse=True)
def clean_state():
    session_store.clear()
    session_broker.reset()
    session_locks.clear()
    try:
        yield
    finally:
        session_store.clear()
        session_broker.reset()
        session_locks.clear()


@pytest.fixture(scope="session")
def client():
    from scorecard_server.main import app

    with TestClient(app) as test_client:
        yield test_client
