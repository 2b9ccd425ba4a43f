from typing import Optional

from fastapi import APIRouter, Body, Depends

from interview_prep.deps import get_request_context, get_session_service
from interview_prep.schemas.session import (
    CreateSessionIn,
    DeleteSessionIn,
    ListSessionsIn,
    SessionEnvelope,
    SessionListEnvelope,
    UpdateSessionIn,
)
from interview_prep.services.identity import RequestContext
from interview_prep.services.session_service import SessionService

router = APIRouter(prefix="/api/actions", tags=["sessions"])


# 세션 생성
@router.post("/createSession", response_model=SessionEnvelope)
def create_session(
    payload: CreateSessionIn,
    context: RequestContext = Depends(get_request_context),
    svc: SessionService = Depends(get_session_service),
):
    return {"session": svc.create(context, payload)}


# 세션 수정 (보낸 필드만)
@router.post("/updateSession", response_model=SessionEnvelope)
def update_session(
    payload: UpdateSessionIn,
    context: RequestContext = Depends(get_request_context),
    svc: SessionService = Depends(get_session_service),
):
    return {"session": svc.update(context, payload)}


# 내 세션 목록
@router.post("/listSessions", response_model=SessionListEnvelope)
def list_sessions(
    payload: Optional[ListSessionsIn] = Body(None),
    context: RequestContext = Depends(get_request_context),
    svc: SessionService = Depends(get_session_service),
):
    return {"sessions": svc.list(context)}


# 세션 삭제
@router.post("/deleteSession", response_model=SessionEnvelope)
def delete_session(
    payload: DeleteSessionIn,
    context: RequestContext = Depends(get_request_context),
    svc: SessionService = Depends(get_session_service),
):
    return {"session": svc.delete(context, payload)}
