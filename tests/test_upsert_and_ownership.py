from interview_prep.services.ownership import owned_session_ids, require_owned_session, session_owned_by
from interview_prep.services.upsert import Insert, Update, plan_upsert
from interview_prep.errors import NotFound
from interview_prep.store.base import SESSIONS

import pytest


def test_plan_upsert_variants():
    assert plan_upsert(None, {"a": 1}) == Insert({"a": 1})
    assert plan_upsert("", {"a": 1}) == Insert({"a": 1})
    assert plan_upsert("q-1", {"a": 1}) == Update("q-1", {"a": 1})


def test_plan_upsert_copies_fields():
    fields = {"a": 1}
    op = plan_upsert(None, fields)
    fields["a"] = 2
    assert op.fields == {"a": 1}


def test_session_ownership(store):
    store.insert(SESSIONS, {"id": "s1", "user_id": "u1", "title": "T"})
    store.insert(SESSIONS, {"id": "s2", "user_id": "u2", "title": "T"})

    assert session_owned_by(store, "s1", "u1")
    assert not session_owned_by(store, "s2", "u1")
    assert not session_owned_by(store, "nope", "u1")
    assert owned_session_ids(store, "u1") == {"s1"}

    require_owned_session(store, "s1", "u1")
    with pytest.raises(NotFound):
        require_owned_session(store, "s2", "u1")
