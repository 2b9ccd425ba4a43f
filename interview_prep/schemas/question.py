from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from interview_prep.schemas.base import ActionInput, ActionModel

# -- Request --

# 질문 저장(id 있으면 수정, 없으면 생성) - 요청
class SaveQuestionIn(ActionInput):
    id: Optional[str] = None
    session_id: str
    order_index: int = Field(..., gt=0, strict=True, description="세션 내 질문 순서 (1부터)")
    question: str
    ideal_answer: Optional[str] = None

    @field_validator("question")
    @classmethod
    def validate_question(cls, v: str) -> str:
        if not v:
            raise ValueError("Question is required")
        return v


class DeleteQuestionIn(ActionInput):
    id: str
    session_id: str


# -- Response --

class QuestionOut(ActionModel):
    id: str
    session_id: str
    order_index: int
    question: str
    ideal_answer: Optional[str] = None
    created_at: datetime


class QuestionEnvelope(ActionModel):
    question: QuestionOut
