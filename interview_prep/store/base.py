# interview_prep/store/base.py
"""
액션 레이어가 사용하는 데이터 접근 인터페이스.

- select / insert / update / delete 네 가지 연산만 제공
- 조건은 컬럼=값 의 AND 조합(keyword args)으로만 표현
- 행은 snake_case 컬럼명을 키로 하는 dict
"""
from typing import Any, Dict, List, Optional, Protocol

SESSIONS = "interview_sessions"
QUESTIONS = "interview_questions"
RESPONSES = "interview_responses"

Row = Dict[str, Any]


class DataStore(Protocol):
    def select(self, table: str, **eq: Any) -> List[Row]:
        """조건에 맞는 모든 행 (저장 순서)"""
        ...

    def insert(self, table: str, values: Row) -> Optional[Row]:
        """삽입 후 저장된 행 반환"""
        ...

    def update(self, table: str, values: Row, **eq: Any) -> List[Row]:
        """조건에 맞는 행을 갱신하고 갱신된 행 목록 반환 (없으면 빈 리스트)"""
        ...

    def delete(self, table: str, **eq: Any) -> List[Row]:
        """조건에 맞는 행을 삭제하고 삭제된 행 목록 반환 (없으면 빈 리스트)"""
        ...
