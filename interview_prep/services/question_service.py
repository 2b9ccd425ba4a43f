"""
세션 질문 비즈니스 로직
- 질문 저장 (id 있으면 수정, 없으면 생성)
- 질문 삭제
"""
import logging
from typing import Optional

from interview_prep.errors import NotFound
from interview_prep.schemas.question import DeleteQuestionIn, SaveQuestionIn
from interview_prep.services.base import ActionService
from interview_prep.services.identity import RequestContext, require_user
from interview_prep.services.ownership import require_owned_session
from interview_prep.services.upsert import Insert, Update, plan_upsert
from interview_prep.store.base import QUESTIONS, Row

logger = logging.getLogger(__name__)


class QuestionService(ActionService):

    def save(self, context: Optional[RequestContext], payload: SaveQuestionIn) -> Row:
        user = require_user(context)
        require_owned_session(self.store, payload.session_id, user["id"])

        op = plan_upsert(payload.id, {
            "session_id": payload.session_id,
            "order_index": payload.order_index,
            "question": payload.question,
            "ideal_answer": payload.ideal_answer,
        })
        if isinstance(op, Update):
            return self.update(op)
        return self.insert(op)

    def insert(self, op: Insert) -> Row:
        question = self.store.insert(QUESTIONS, {
            "id": self.new_id(),
            **op.fields,
            "created_at": self.clock(),
        })
        logger.info("[QUESTION] created id=%s session=%s", question["id"], question["session_id"])
        return question

    def update(self, op: Update) -> Row:
        """
        질문 전체 덮어쓰기. 다른 세션의 질문 id 를 끼워 넣은 요청은 NotFound
        """
        existing = self.store.select(QUESTIONS, id=op.id)
        if not existing or existing[0]["session_id"] != op.fields["session_id"]:
            logger.warning("[QUESTION] update rejected id=%s session=%s", op.id, op.fields["session_id"])
            raise NotFound("Question not found.")

        values = dict(op.fields)
        if self.refresh_created_at:
            values["created_at"] = self.clock()

        rows = self.store.update(QUESTIONS, values, id=op.id)
        if not rows:
            raise NotFound("Question not found.")

        logger.info("[QUESTION] updated id=%s", op.id)
        return rows[0]

    def delete(self, context: Optional[RequestContext], payload: DeleteQuestionIn) -> Row:
        user = require_user(context)
        require_owned_session(self.store, payload.session_id, user["id"])

        deleted = self.store.delete(QUESTIONS, id=payload.id, session_id=payload.session_id)
        if not deleted:
            logger.warning("[QUESTION] delete rejected id=%s session=%s", payload.id, payload.session_id)
            raise NotFound("Question not found.")

        logger.info("[QUESTION] deleted id=%s session=%s", payload.id, payload.session_id)
        return deleted[0]
