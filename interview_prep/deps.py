# interview_prep/deps.py
import logging
from contextlib import contextmanager
from functools import lru_cache

from fastapi import Depends, Header

from interview_prep.config import settings
from interview_prep.db.base import SessionLocal
from interview_prep.services.identity import RequestContext, verify_bearer
from interview_prep.services.question_service import QuestionService
from interview_prep.services.response_service import ResponseService
from interview_prep.services.session_service import SessionService
from interview_prep.store.base import DataStore
from interview_prep.store.sql import SqlStore
from interview_prep.store.supabase_store import SupabaseStore, create_supabase_client

logger = logging.getLogger(__name__)

# ----------------------------
# DB 세션
# ----------------------------
@contextmanager
def db_session():
    db = SessionLocal()
    try:
        yield db
        db.commit()  # commit 포함
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()

@lru_cache(maxsize=1)
def _supabase_client():
    return create_supabase_client()

# ----------------------------
# 데이터 접근 (DATA_BACKEND 로 선택)
# ----------------------------
def get_store():
    # supabase 백엔드는 SQLAlchemy 세션을 열지 않음
    if settings.data_backend == "supabase":
        yield SupabaseStore(_supabase_client())
        return

    with db_session() as db:
        yield SqlStore(db)

# ----------------------------
# 현재 사용자 컨텍스트
# ----------------------------
async def get_request_context(
    authorization: str | None = Header(None),
) -> RequestContext:
    """
    토큰이 없거나 검증에 실패하면 user=None 인 컨텍스트를 돌려주고,
    401 판단은 각 액션(require_user)에서 한다.
    """
    if not authorization:
        return RequestContext()

    try:
        claims = await verify_bearer(authorization)
    except ValueError as e:
        logger.warning("[AUTH] verify_bearer failed: %r", e)
        return RequestContext()

    return RequestContext(user={
        "id": claims["user_id"],
        "email": claims.get("email"),
    })

# ----------------------------
# 액션 서비스
# ----------------------------
def get_session_service(store: DataStore = Depends(get_store)) -> SessionService:
    return SessionService(store)

def get_question_service(store: DataStore = Depends(get_store)) -> QuestionService:
    return QuestionService(store)

def get_response_service(store: DataStore = Depends(get_store)) -> ResponseService:
    return ResponseService(store)
