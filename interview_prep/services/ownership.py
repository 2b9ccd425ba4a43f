# interview_prep/services/ownership.py
# 세션 소유권 검증 (세션 하위 데이터를 다루는 모든 액션에서 공용)
import logging
from typing import Set

from interview_prep.errors import NotFound
from interview_prep.store.base import SESSIONS, DataStore

logger = logging.getLogger(__name__)


def session_owned_by(store: DataStore, session_id: str, user_id: str) -> bool:
    return bool(store.select(SESSIONS, id=session_id, user_id=user_id))


def require_owned_session(store: DataStore, session_id: str, user_id: str) -> None:
    if not session_owned_by(store, session_id, user_id):
        logger.warning("[OWNERSHIP] session=%s not owned by user=%s", session_id, user_id)
        raise NotFound("Session not found.")


def owned_session_ids(store: DataStore, user_id: str) -> Set[str]:
    return {s["id"] for s in store.select(SESSIONS, user_id=user_id)}
