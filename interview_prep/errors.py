# interview_prep/errors.py
# 액션 레이어 에러. HTTPException 을 상속해서 라우터에서 별도 변환 없이 그대로 응답됨
from fastapi import HTTPException


class ActionError(HTTPException):
    status_code = 500
    code = "action_error"

    def __init__(self, message: str):
        self.message = message
        super().__init__(
            status_code=self.status_code,
            detail={"message": self.code, "detail": message},
        )


class Unauthorized(ActionError):
    status_code = 401
    code = "unauthorized"


class NotFound(ActionError):
    # 존재하지 않음 / 내 것이 아님 을 구분하지 않음
    status_code = 404
    code = "not_found"
