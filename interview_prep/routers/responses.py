from typing import Optional

from fastapi import APIRouter, Body, Depends

from interview_prep.deps import get_request_context, get_response_service
from interview_prep.schemas.response import (
    ListResponsesIn,
    ResponseEnvelope,
    ResponseListEnvelope,
    SaveResponseIn,
)
from interview_prep.services.identity import RequestContext
from interview_prep.services.response_service import ResponseService

router = APIRouter(prefix="/api/actions", tags=["responses"])


# 답변 저장 (id 있으면 수정)
@router.post("/saveResponse", response_model=ResponseEnvelope)
def save_response(
    payload: SaveResponseIn,
    context: RequestContext = Depends(get_request_context),
    svc: ResponseService = Depends(get_response_service),
):
    return {"response": svc.save(context, payload)}


# 답변 목록 (sessionId / questionId 필터 선택)
@router.post("/listResponses", response_model=ResponseListEnvelope)
def list_responses(
    payload: Optional[ListResponsesIn] = Body(None),
    context: RequestContext = Depends(get_request_context),
    svc: ResponseService = Depends(get_response_service),
):
    return {"responses": svc.list(context, payload)}
