from scorecard_server.config.settings import settings
from scorecard_server.core.state import session_store
from scorecard_server.models.interview import InterviewDocument


def _join(ws, session_id, **names):
    ws.send_json({"type": "join", "id": session_id, **names})
    return ws.receive_json()["data"]


def test_session_stats(client):
    session_store.set("a", InterviewDocument(id="a"))
    session_store.set("b", InterviewDocument(id="b"))

    payload = client.get("/session-stats").json()

    assert payload["activeSessions"] == 2
    assert payload["memoryUsage"].endswith("MB")
    assert payload["uptime"].endswith("s")
    assert int(payload["uptime"][:-1]) >= 0


def test_active_sessions_are_redacted(client):
    with client.websocket_connect("/ws") as ws:
        _join(ws, "s1", candidateName="Ana", interviewer1="Bo", interviewer2="Cy")
        ws.send_json({"type": "update-specialization", "interviewId": "s1", "specialization": "manual"})
        ws.receive_json()

    response = client.get("/active-sessions")

    assert response.status_code == 200
    assert response.json() == [{
        "id": "s1",
        "candidateName": "Ana",
        "interviewer1": "Bo",
        "interviewer2": "Cy",
        "specialization": "manual",
        "automationTools": [],
    }]


def test_active_sessions_empty(client):
    assert client.get("/active-sessions").json() == []


def test_terminate_unknown_session(client):
    response = client.post("/terminate-session/missing")

    assert response.status_code == 404
    assert response.json() == {"error": "Session not found"}


def test_terminate_notifies_viewers_and_resets_session(client):
    with client.websocket_connect("/ws") as first, client.websocket_connect("/ws") as second:
        _join(first, "s1", candidateName="Ana", interviewer1="Bo", interviewer2="Cy")
        _join(second, "s1")
        first.send_json({"type": "update-specialization", "interviewId": "s1", "specialization": "manual"})
        first.receive_json()
        second.receive_json()

        response = client.post("/terminate-session/s1")

        assert response.status_code == 200
        assert response.json() == {
            "message": "Session terminated successfully",
            "sessionId": "s1",
            "candidateName": "Ana",
        }
        for ws in (first, second):
            assert ws.receive_json() == {"type": "session-terminated", "message": settings.TERMINATION_MESSAGE}

        assert client.get("/active-sessions").json() == []

        # Fresh document on the same id
        data = _join(first, "s1", candidateName="Dee")
        assert data["candidateName"] == "Dee"
        assert data["specialization"] is None
        assert data["skills"] == []


def test_scorecard_scenario(client):
    with client.websocket_connect("/ws") as ws:
        _join(ws, "s1", candidateName="Ana", interviewer1="Bo", interviewer2="Cy")

        ws.send_json({"type": "update-specialization", "interviewId": "s1", "specialization": "automation"})
        ws.receive_json()
        ws.send_json({"type": "update-automation-tools", "interviewId": "s1", "automationTools": ["playwright"]})
        data = ws.receive_json()["data"]

        skill_ids = {s["skillId"] for s in data["skills"]}
        assert skill_ids == {
            "javascript-basics", "css-selectors", "html-knowledge",
            "test-design", "bug-reporting", "test-planning",
            "debugging-skills", "analytical-thinking",
            "playwright-basics", "playwright-trace", "playwright-debugging",
        }

        ws.send_json({
            "type": "update-skill-score",
            "interviewId": "s1",
            "skillId": "playwright-basics",
            "interviewer": "interviewer1",
            "score": 3,
        })
        data = ws.receive_json()["data"]
        slot = next(s for s in data["skills"] if s["skillId"] == "playwright-basics")
        assert slot == {"skillId": "playwright-basics", "interviewer1Score": 3, "interviewer2Score": None}

        summary = client.get("/session-summary/s1").json()
        playwright = next(c for c in summary["categories"] if c["categoryId"] == "playwright-specific")
        assert playwright["interviewer1Average"] == 3.0
        assert playwright["interviewer2Average"] is None

        assert client.post("/terminate-session/s1").status_code == 200
        assert ws.receive_json()["type"] == "session-terminated"

    assert client.get("/active-sessions").json() == []


def test_session_summary_unknown(client):
    response = client.get("/session-summary/missing")

    assert response.status_code == 404
    assert response.json() == {"error": "Session not found"}


def test_preflight_returns_empty_success(client):
    response = client.options("/terminate-session/s1")

    assert response.status_code == 200
    assert response.content == b""


def test_browser_preflight_returns_empty_success(client):
    response = client.options(
        "/terminate-session/s1",
        headers={
            "Origin": settings.ALLOWED_ORIGIN,
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "content-type, x-requested-with",
        },
    )

    assert response.status_code == 200
    assert response.content == b""
    assert response.headers["access-control-allow-origin"] == settings.ALLOWED_ORIGIN
    assert "POST" in response.headers["access-control-allow-methods"]


def test_preflight_from_other_origin_gets_no_cors_headers(client):
    response = client.options(
        "/active-sessions",
        headers={"Origin": "http://evil.example", "Access-Control-Request-Method": "GET"},
    )

    assert response.status_code == 200
    assert response.content == b""
    assert "access-control-allow-origin" not in response.headers


def test_cors_headers_for_trusted_origin(client):
    response = client.get("/active-sessions", headers={"Origin": settings.ALLOWED_ORIGIN})

    assert response.headers["access-control-allow-origin"] == settings.ALLOWED_ORIGIN


def test_cors_headers_withheld_from_other_origins(client):
    response = client.get("/active-sessions", headers={"Origin": "http://evil.example"})

    assert "access-control-allow-origin" not in response.headers


def test_health(client):
    assert client.get("/health").json()["status"] == "healthy"


def test_endpoints_resolve_to_project_package(client):
    modules = {route.endpoint.__module__ for route in client.app.routes if hasattr(route, "endpoint")}

    assert "scorecard_server.routes.admin" in modules
    assert "scorecard_server.routes.interview" in modules
    assert all(module.startswith(("scorecard_server.", "fastapi.")) for module in modules)
