"""
답변 비즈니스 로직
- 답변 저장 (id 있으면 수정, 없으면 생성)
- 내 세션의 답변 목록 조회
"""
import logging
from typing import List, Optional

from interview_prep.errors import NotFound
from interview_prep.schemas.response import ListResponsesIn, SaveResponseIn
from interview_prep.services.base import ActionService
from interview_prep.services.identity import RequestContext, require_user
from interview_prep.services.ownership import owned_session_ids, require_owned_session
from interview_prep.services.upsert import Insert, Update, plan_upsert
from interview_prep.store.base import QUESTIONS, RESPONSES, Row

logger = logging.getLogger(__name__)


class ResponseService(ActionService):

    def save(self, context: Optional[RequestContext], payload: SaveResponseIn) -> Row:
        user = require_user(context)
        require_owned_session(self.store, payload.session_id, user["id"])

        # 질문이 같은 세션 소속인지 확인
        question = self.store.select(QUESTIONS, id=payload.question_id, session_id=payload.session_id)
        if not question:
            logger.warning(
                "[RESPONSE] question=%s not in session=%s", payload.question_id, payload.session_id
            )
            raise NotFound("Question not found.")

        op = plan_upsert(payload.id, {
            "session_id": payload.session_id,
            "question_id": payload.question_id,
            "answer": payload.answer,
            "score": payload.score,
            "feedback": payload.feedback,
        })
        if isinstance(op, Update):
            return self.update(op)
        return self.insert(op)

    def insert(self, op: Insert) -> Row:
        response = self.store.insert(RESPONSES, {
            "id": self.new_id(),
            **op.fields,
            "created_at": self.clock(),
        })
        logger.info("[RESPONSE] created id=%s session=%s", response["id"], response["session_id"])
        return response

    def update(self, op: Update) -> Row:
        existing = self.store.select(RESPONSES, id=op.id)
        if not existing or existing[0]["session_id"] != op.fields["session_id"]:
            logger.warning("[RESPONSE] update rejected id=%s session=%s", op.id, op.fields["session_id"])
            raise NotFound("Response not found.")

        values = dict(op.fields)
        if self.refresh_created_at:
            values["created_at"] = self.clock()

        rows = self.store.update(RESPONSES, values, id=op.id)
        if not rows:
            raise NotFound("Response not found.")

        logger.info("[RESPONSE] updated id=%s", op.id)
        return rows[0]

    def list(self, context: Optional[RequestContext], payload: Optional[ListResponsesIn] = None) -> List[Row]:
        """
        내 세션에 속한 답변만 반환

        전체 답변을 가져온 뒤 메모리에서 거른다 (소규모 데이터 기준).
        sessionId 필터가 내 세션이 아니면 NotFound.
        """
        user = require_user(context)
        payload = payload or ListResponsesIn()

        allowed = owned_session_ids(self.store, user["id"])
        if payload.session_id and payload.session_id not in allowed:
            logger.warning("[RESPONSE] list rejected session=%s user=%s", payload.session_id, user["id"])
            raise NotFound("Session not found.")

        responses = self.store.select(RESPONSES)
        return [
            r for r in responses
            if r["session_id"] in allowed
            and (not payload.session_id or r["session_id"] == payload.session_id)
            and (not payload.question_id or r["question_id"] == payload.question_id)
        ]
