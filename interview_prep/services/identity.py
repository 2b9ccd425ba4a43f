# interview_prep/services/identity.py
# 요청 컨텍스트에서 현재 사용자 확인 + Supabase access token(HS256) 검증
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from jose import JWTError, jwt

from interview_prep.config import settings
from interview_prep.errors import Unauthorized

logger = logging.getLogger(__name__)


@dataclass
class RequestContext:
    # 인증 미들웨어(get_request_context)가 채워주는 값. 비로그인이면 None
    user: Optional[Dict[str, Any]] = None


def require_user(context: Optional[RequestContext]) -> Dict[str, Any]:
    user = context.user if context is not None else None
    if not user:
        raise Unauthorized("You must be signed in to perform this action.")
    return user


async def verify_bearer(authorization: str | None) -> Dict[str, str | None]:
    """
    - Authorization: Bearer <access_token> 헤더에서 토큰을 꺼내서
    - Supabase JWT secret(HS256)으로 검증하고
    - 기본적인 클레임(sub, email)을 반환한다.
    """
    if not authorization:
        raise ValueError("missing Authorization header")

    parts = authorization.split(" ", 1)
    if len(parts) != 2 or parts[0].lower() != "bearer":
        raise ValueError("invalid Authorization header")

    token = parts[1].strip()
    if not token:
        raise ValueError("invalid Authorization header")

    secret = settings.supabase_jwt_secret
    if not secret:
        raise ValueError("SUPABASE_JWT_SECRET is not configured")

    decode_kwargs = {
        "key": secret,
        "algorithms": ["HS256"],  # Supabase access token 의 alg
        "options": {
            "verify_aud": bool(settings.supabase_jwt_audience),
            "verify_iss": bool(settings.supabase_issuer),
        },
    }
    if settings.supabase_jwt_audience:
        decode_kwargs["audience"] = settings.supabase_jwt_audience  # "authenticated"
    if settings.supabase_issuer:
        decode_kwargs["issuer"] = settings.supabase_issuer

    try:
        claims = jwt.decode(token, **decode_kwargs)
    except JWTError as e:
        raise ValueError("invalid token") from e

    user_id = claims.get("sub")
    if not user_id:
        raise ValueError("invalid token: missing sub")

    return {
        "user_id": user_id,
        "email": claims.get("email"),
    }
