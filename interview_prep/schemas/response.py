from datetime import datetime
from typing import List, Optional

from pydantic import Field, field_validator

from interview_prep.schemas.base import ActionInput, ActionModel

# -- Request --

# 답변 저장(id 있으면 수정, 없으면 생성) - 요청
class SaveResponseIn(ActionInput):
    id: Optional[str] = None
    session_id: str
    question_id: str
    answer: str
    score: Optional[int] = Field(None, strict=True)
    feedback: Optional[str] = None

    @field_validator("answer")
    @classmethod
    def validate_answer(cls, v: str) -> str:
        if not v:
            raise ValueError("Answer is required")
        return v


class ListResponsesIn(ActionInput):
    session_id: Optional[str] = None
    question_id: Optional[str] = None


# -- Response --

class ResponseOut(ActionModel):
    id: str
    session_id: str
    question_id: str
    answer: str
    score: Optional[int] = None
    feedback: Optional[str] = None
    created_at: datetime


class ResponseEnvelope(ActionModel):
    response: ResponseOut


class ResponseListEnvelope(ActionModel):
    responses: List[ResponseOut]
