from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import Field, field_validator

from interview_prep.schemas.base import ActionInput, ActionModel

# -- Request --

# 세션 생성 - 요청
class CreateSessionIn(ActionInput):
    id: Optional[str] = None
    title: str = Field(..., description="세션 제목")
    job_title: Optional[str] = None
    company_name: Optional[str] = None
    mode: Optional[str] = None
    scheduled_at: Optional[datetime] = None
    duration_minutes: Optional[int] = Field(None, gt=0, strict=True, description="진행 시간(분)")

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        if not v:
            raise ValueError("Title is required")
        return v


# 세션 수정 - 요청 (보낸 필드만 반영)
class UpdateSessionIn(ActionInput):
    id: str
    title: Optional[str] = Field(None, min_length=1)
    job_title: Optional[str] = None
    company_name: Optional[str] = None
    mode: Optional[str] = None
    scheduled_at: Optional[datetime] = None
    duration_minutes: Optional[int] = Field(None, gt=0, strict=True)

    def patch(self) -> Dict[str, Any]:
        # 보낸 필드만 반영 (null 은 스키마에서 이미 거부됨)
        return self.model_dump(exclude_unset=True, exclude={"id"})


class ListSessionsIn(ActionInput):
    pass


class DeleteSessionIn(ActionInput):
    id: str


# -- Response --

class SessionOut(ActionModel):
    id: str
    user_id: str
    title: str
    job_title: Optional[str] = None
    company_name: Optional[str] = None
    mode: Optional[str] = None
    scheduled_at: Optional[datetime] = None
    duration_minutes: Optional[int] = None
    created_at: datetime
    updated_at: datetime


class SessionEnvelope(ActionModel):
    session: SessionOut


class SessionListEnvelope(ActionModel):
    sessions: List[SessionOut]
