# interview_prep/services/base.py
"""
액션 서비스 공통
- 데이터 접근(DataStore)은 생성자에서 주입
- 시간/ID 생성도 주입 가능 (테스트용)
"""
import uuid
from datetime import datetime, timezone
from typing import Callable, Optional

from interview_prep.config import settings
from interview_prep.store.base import DataStore


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def new_id() -> str:
    return str(uuid.uuid4())


class ActionService:
    def __init__(
        self,
        store: DataStore,
        clock: Callable[[], datetime] = utcnow,
        id_factory: Callable[[], str] = new_id,
        refresh_created_at: Optional[bool] = None,
    ):
        self.store = store
        self.clock = clock
        self.new_id = id_factory
        # 수정 시 created_at 도 현재 시각으로 갱신 (기존 동작). 설정으로 끌 수 있음
        if refresh_created_at is None:
            refresh_created_at = settings.refresh_created_at_on_save
        self.refresh_created_at = refresh_created_at
