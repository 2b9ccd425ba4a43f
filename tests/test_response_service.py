import pytest

from interview_prep.errors import NotFound, Unauthorized
from interview_prep.schemas.question import SaveQuestionIn
from interview_prep.schemas.response import ListResponsesIn, SaveResponseIn
from interview_prep.schemas.session import CreateSessionIn
from interview_prep.services.question_service import QuestionService
from interview_prep.services.response_service import ResponseService
from interview_prep.services.session_service import SessionService
from interview_prep.store.base import RESPONSES


@pytest.fixture
def seeded(store, clock, ctx_a, ctx_b):
    sessions = SessionService(store, clock=clock)
    questions = QuestionService(store, clock=clock)

    s1 = sessions.create(ctx_a, CreateSessionIn(title="S1"))
    s2 = sessions.create(ctx_a, CreateSessionIn(title="S2"))
    sb = sessions.create(ctx_b, CreateSessionIn(title="B"))

    q1 = questions.save(ctx_a, SaveQuestionIn(sessionId=s1["id"], orderIndex=1, question="Q1"))
    q2 = questions.save(ctx_a, SaveQuestionIn(sessionId=s2["id"], orderIndex=1, question="Q2"))
    qb = questions.save(ctx_b, SaveQuestionIn(sessionId=sb["id"], orderIndex=1, question="QB"))
    return {"s1": s1, "s2": s2, "sb": sb, "q1": q1, "q2": q2, "qb": qb}


@pytest.fixture
def svc(store, clock):
    return ResponseService(store, clock=clock)


def test_save_inserts_response(svc, ctx_a, seeded):
    response = svc.save(ctx_a, SaveResponseIn(
        sessionId=seeded["s1"]["id"], questionId=seeded["q1"]["id"], answer="I build APIs", score=7,
    ))

    assert response["id"]
    assert response["score"] == 7
    assert response["feedback"] is None


def test_question_from_other_session_is_not_found(svc, ctx_a, seeded):
    with pytest.raises(NotFound):
        svc.save(ctx_a, SaveResponseIn(
            sessionId=seeded["s1"]["id"], questionId=seeded["q2"]["id"], answer="x",
        ))


def test_foreign_session_is_not_found(svc, ctx_a, seeded):
    with pytest.raises(NotFound):
        svc.save(ctx_a, SaveResponseIn(
            sessionId=seeded["sb"]["id"], questionId=seeded["qb"]["id"], answer="x",
        ))


def test_update_replaces_fields(svc, ctx_a, seeded):
    created = svc.save(ctx_a, SaveResponseIn(
        sessionId=seeded["s1"]["id"], questionId=seeded["q1"]["id"], answer="first", score=3, feedback="meh",
    ))
    updated = svc.save(ctx_a, SaveResponseIn(
        id=created["id"], sessionId=seeded["s1"]["id"], questionId=seeded["q1"]["id"], answer="second",
    ))

    assert updated["id"] == created["id"]
    assert updated["answer"] == "second"
    assert updated["score"] is None
    assert updated["feedback"] is None


def test_tamper_guard_on_update(svc, ctx_a, seeded):
    created = svc.save(ctx_a, SaveResponseIn(
        sessionId=seeded["s1"]["id"], questionId=seeded["q1"]["id"], answer="first",
    ))

    with pytest.raises(NotFound):
        svc.save(ctx_a, SaveResponseIn(
            id=created["id"], sessionId=seeded["s2"]["id"], questionId=seeded["q2"]["id"], answer="moved",
        ))


def test_list_never_leaks_other_users_rows(svc, ctx_a, ctx_b, seeded):
    mine = svc.save(ctx_a, SaveResponseIn(sessionId=seeded["s1"]["id"], questionId=seeded["q1"]["id"], answer="a"))
    theirs = svc.save(ctx_b, SaveResponseIn(sessionId=seeded["sb"]["id"], questionId=seeded["qb"]["id"], answer="b"))

    assert [r["id"] for r in svc.list(ctx_a)] == [mine["id"]]
    assert [r["id"] for r in svc.list(ctx_a, ListResponsesIn(questionId=seeded["qb"]["id"]))] == []
    assert [r["id"] for r in svc.list(ctx_b)] == [theirs["id"]]


def test_list_filters(svc, ctx_a, seeded):
    r1 = svc.save(ctx_a, SaveResponseIn(sessionId=seeded["s1"]["id"], questionId=seeded["q1"]["id"], answer="a"))
    r2 = svc.save(ctx_a, SaveResponseIn(sessionId=seeded["s2"]["id"], questionId=seeded["q2"]["id"], answer="b"))

    assert {r["id"] for r in svc.list(ctx_a, None)} == {r1["id"], r2["id"]}
    assert [r["id"] for r in svc.list(ctx_a, ListResponsesIn(sessionId=seeded["s2"]["id"]))] == [r2["id"]]
    assert [r["id"] for r in svc.list(ctx_a, ListResponsesIn(questionId=seeded["q1"]["id"]))] == [r1["id"]]
    assert svc.list(ctx_a, ListResponsesIn(sessionId=seeded["s1"]["id"], questionId=seeded["q2"]["id"])) == []


def test_list_with_foreign_session_filter_is_not_found(svc, ctx_a, seeded):
    with pytest.raises(NotFound):
        svc.list(ctx_a, ListResponsesIn(sessionId=seeded["sb"]["id"]))


def test_list_requires_user(svc, anonymous):
    with pytest.raises(Unauthorized):
        svc.list(anonymous)


def test_resave_refreshes_created_at_by_default(svc, ctx_a, seeded):
    created = svc.save(ctx_a, SaveResponseIn(
        sessionId=seeded["s1"]["id"], questionId=seeded["q1"]["id"], answer="first",
    ))
    updated = svc.save(ctx_a, SaveResponseIn(
        id=created["id"], sessionId=seeded["s1"]["id"], questionId=seeded["q1"]["id"], answer="second",
    ))

    assert updated["created_at"] > created["created_at"]


def test_resave_keeps_created_at_when_refresh_disabled(store, clock, ctx_a, seeded):
    svc = ResponseService(store, clock=clock, refresh_created_at=False)
    created = svc.save(ctx_a, SaveResponseIn(
        sessionId=seeded["s1"]["id"], questionId=seeded["q1"]["id"], answer="first",
    ))
    updated = svc.save(ctx_a, SaveResponseIn(
        id=created["id"], sessionId=seeded["s1"]["id"], questionId=seeded["q1"]["id"], answer="second",
    ))

    assert updated["answer"] == "second"
    assert updated["created_at"] == created["created_at"]


def test_resave_with_unknown_id_is_not_found(svc, ctx_a, seeded, store):
    with pytest.raises(NotFound) as exc:
        svc.save(ctx_a, SaveResponseIn(
            id="missing", sessionId=seeded["s1"]["id"], questionId=seeded["q1"]["id"], answer="x",
        ))

    assert exc.value.message == "Response not found."
    assert exc.value.detail == {"message": "not_found", "detail": "Response not found."}
    assert store.select(RESPONSES) == []
