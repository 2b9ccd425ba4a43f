from datetime import datetime, timedelta, timezone

from interview_prep.store.base import QUESTIONS, SESSIONS
from interview_prep.store.sql import SqlStore


def _session(id, user_id="u1", title="T"):
    now = datetime(2024, 1, 1, 9, 0)
    return {"id": id, "user_id": user_id, "title": title, "created_at": now, "updated_at": now}


def test_insert_and_select(db):
    store = SqlStore(db)
    row = store.insert(SESSIONS, _session("s1"))

    assert row["id"] == "s1"
    assert row["title"] == "T"
    assert row["job_title"] is None
    assert store.select(SESSIONS, id="s1", user_id="u1") == [row]
    assert store.select(SESSIONS, id="s1", user_id="u2") == []


def test_select_without_filter_returns_all(db):
    store = SqlStore(db)
    store.insert(SESSIONS, _session("s1"))
    store.insert(SESSIONS, _session("s2", user_id="u2"))

    assert {r["id"] for r in store.select(SESSIONS)} == {"s1", "s2"}


def test_update_returns_updated_rows(db):
    store = SqlStore(db)
    store.insert(SESSIONS, _session("s1"))

    rows = store.update(SESSIONS, {"title": "New"}, id="s1", user_id="u1")
    assert [r["title"] for r in rows] == ["New"]

    assert store.update(SESSIONS, {"title": "x"}, id="s1", user_id="u2") == []
    assert store.select(SESSIONS, id="s1")[0]["title"] == "New"


def test_delete_returns_deleted_rows(db):
    store = SqlStore(db)
    store.insert(SESSIONS, _session("s1"))
    store.insert(QUESTIONS, {
        "id": "q1", "session_id": "s1", "order_index": 1, "question": "Q",
        "created_at": datetime(2024, 1, 1),
    })

    assert store.delete(QUESTIONS, id="q1", session_id="other") == []
    deleted = store.delete(QUESTIONS, id="q1", session_id="s1")
    assert [r["id"] for r in deleted] == ["q1"]
    assert store.select(QUESTIONS) == []


def test_datetimes_are_read_back_as_utc(db):
    store = SqlStore(db)
    kst = timezone(timedelta(hours=9))
    store.insert(SESSIONS, {
        **_session("s1"),
        "scheduled_at": datetime(2024, 5, 1, 10, 0, tzinfo=kst),
    })

    row = store.select(SESSIONS, id="s1")[0]
    assert row["scheduled_at"] == datetime(2024, 5, 1, 1, 0, tzinfo=timezone.utc)
    assert row["scheduled_at"].tzinfo == timezone.utc
    # tz 없는 값은 UTC 로 간주
    assert row["created_at"] == datetime(2024, 1, 1, 9, 0, tzinfo=timezone.utc)
