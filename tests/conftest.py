import os
import tempfile
from datetime import datetime, timedelta, timezone

# 앱 import 전에 테스트용 환경 변수 세팅
_tmp_dir = tempfile.mkdtemp(prefix="interview_prep_test_")
os.environ["DATABASE_URL"] = f"sqlite:///{_tmp_dir}/test.db"
os.environ["DATA_BACKEND"] = "sql"
os.environ["SUPABASE_JWT_SECRET"] = "test-secret"
os.environ["SUPABASE_JWT_AUDIENCE"] = "authenticated"
os.environ.pop("SUPABASE_ISSUER", None)

import pytest
from fastapi.testclient import TestClient
from jose import jwt

from interview_prep.db.base import Base, SessionLocal, create_tables, engine
from interview_prep.services.identity import RequestContext
from interview_prep.store.memory import MemoryStore

JWT_SECRET = "test-secret"


class TickingClock:
    """호출할 때마다 1초씩 증가하는 시계"""

    def __init__(self, start=None):
        self.now = start or datetime(2024, 1, 1, 9, 0, tzinfo=timezone.utc)

    def __call__(self):
        self.now += timedelta(seconds=1)
        return self.now


def make_token(sub, email=None, secret=JWT_SECRET, **extra):
    claims = {
        "sub": sub,
        "email": email or f"{sub}@example.com",
        "aud": "authenticated",
        "exp": int((datetime.now(timezone.utc) + timedelta(minutes=5)).timestamp()),
    }
    claims.update(extra)
    return jwt.encode(claims, secret, algorithm="HS256")


def auth_header(sub):
    return {"Authorization": f"Bearer {make_token(sub)}"}


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def clock():
    return TickingClock()


@pytest.fixture
def ctx_a():
    return RequestContext(user={"id": "user-a", "email": "a@example.com"})


@pytest.fixture
def ctx_b():
    return RequestContext(user={"id": "user-b", "email": "b@example.com"})


@pytest.fixture
def anonymous():
    return RequestContext()


@pytest.fixture
def db_tables():
    create_tables()
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db(db_tables):
    session = SessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture
def client(db_tables):
    from interview_prep.main import app

    with TestClient(app) as c:
        yield c
