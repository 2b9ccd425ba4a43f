from fastapi import APIRouter, Depends

from interview_prep.deps import get_question_service, get_request_context
from interview_prep.schemas.question import DeleteQuestionIn, QuestionEnvelope, SaveQuestionIn
from interview_prep.services.identity import RequestContext
from interview_prep.services.question_service import QuestionService

router = APIRouter(prefix="/api/actions", tags=["questions"])


# 질문 저장 (id 있으면 수정)
@router.post("/saveQuestion", response_model=QuestionEnvelope)
def save_question(
    payload: SaveQuestionIn,
    context: RequestContext = Depends(get_request_context),
    svc: QuestionService = Depends(get_question_service),
):
    return {"question": svc.save(context, payload)}


# 질문 삭제
@router.post("/deleteQuestion", response_model=QuestionEnvelope)
def delete_question(
    payload: DeleteQuestionIn,
    context: RequestContext = Depends(get_request_context),
    svc: QuestionService = Depends(get_question_service),
):
    return {"question": svc.delete(context, payload)}
