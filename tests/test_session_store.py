from scorecard_server.core.session_store import SessionStore
from scorecard_server.models.interview import InterviewDocument


def test_get_set_delete():
    store = SessionStore()
    assert store.get("s1") is None

    store.set("s1", InterviewDocument(id="s1", candidate_name="Ana"))

    assert "s1" in store
    assert store.get("s1").candidate_name == "Ana"
    assert store.count() == 1
    assert store.delete("s1") is True
    assert store.delete("s1") is False
    assert store.get("s1") is None


def test_returned_documents_are_copies():
    store = SessionStore()
    document = InterviewDocument(id="s1", candidate_name="Ana")
    store.set("s1", document)

    document.candidate_name = "changed after set"
    fetched = store.get("s1")
    fetched.candidate_name = "changed after get"

    assert store.get("s1").candidate_name == "Ana"


def test_list_all_and_clear():
    store = SessionStore()
    store.set("a", InterviewDocument(id="a"))
    store.set("b", InterviewDocument(id="b"))

    assert sorted(d.id for d in store.list_all()) == ["a", "b"]

    store.clear()
    assert store.list_all() == []
    assert store.count() == 0
