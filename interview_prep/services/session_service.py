"""
면접 연습 세션 비즈니스 로직
- 세션 생성 / 수정 / 목록 / 삭제
- 모든 조회·변경은 (id, user_id) 로 범위 제한
"""
import logging
from typing import List, Optional

from interview_prep.errors import NotFound
from interview_prep.schemas.session import CreateSessionIn, DeleteSessionIn, UpdateSessionIn
from interview_prep.services.base import ActionService
from interview_prep.services.identity import RequestContext, require_user
from interview_prep.store.base import SESSIONS, Row

logger = logging.getLogger(__name__)


class SessionService(ActionService):
    """세션 관련 비즈니스 로직"""

    def create(self, context: Optional[RequestContext], payload: CreateSessionIn) -> Row:
        """
        세션 생성. id 가 없으면 새로 발급하고 created_at = updated_at 으로 저장

        Returns:
            생성된 세션
        """
        user = require_user(context)
        now = self.clock()

        session = self.store.insert(SESSIONS, {
            "id": payload.id if payload.id is not None else self.new_id(),
            "user_id": user["id"],
            "title": payload.title,
            "job_title": payload.job_title,
            "company_name": payload.company_name,
            "mode": payload.mode,
            "scheduled_at": payload.scheduled_at,
            "duration_minutes": payload.duration_minutes,
            "created_at": now,
            "updated_at": now,
        })
        logger.info("[SESSION] created id=%s user=%s", session["id"], user["id"])
        return session

    def update(self, context: Optional[RequestContext], payload: UpdateSessionIn) -> Row:
        """
        세션 수정 (보낸 필드만 반영)

        변경할 필드가 하나도 없으면 쓰기 없이 기존 행을 그대로 반환한다.

        Raises:
            NotFound: 세션이 없거나 내 세션이 아님
        """
        user = require_user(context)

        existing = self.store.select(SESSIONS, id=payload.id, user_id=user["id"])
        if not existing:
            logger.warning("[SESSION] update rejected id=%s user=%s", payload.id, user["id"])
            raise NotFound("Session not found.")

        patch = payload.patch()
        if not patch:
            return existing[0]

        rows = self.store.update(
            SESSIONS,
            {**patch, "updated_at": self.clock()},
            id=payload.id,
            user_id=user["id"],
        )
        # 조회 이후 삭제된 경우
        if not rows:
            raise NotFound("Session not found.")

        logger.info("[SESSION] updated id=%s fields=%s", payload.id, sorted(patch))
        return rows[0]

    def list(self, context: Optional[RequestContext]) -> List[Row]:
        user = require_user(context)
        return self.store.select(SESSIONS, user_id=user["id"])

    def delete(self, context: Optional[RequestContext], payload: DeleteSessionIn) -> Row:
        user = require_user(context)

        deleted = self.store.delete(SESSIONS, id=payload.id, user_id=user["id"])
        if not deleted:
            logger.warning("[SESSION] delete rejected id=%s user=%s", payload.id, user["id"])
            raise NotFound("Session not found.")

        logger.info("[SESSION] deleted id=%s user=%s", payload.id, user["id"])
        return deleted[0]
