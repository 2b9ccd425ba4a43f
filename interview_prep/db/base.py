"""
공용 DB 베이스/세션 팩토리.
SessionLocal, engine, Base 정의는 interview_prep.db.session 한 곳에서 관리한다.
"""
from interview_prep.db.session import engine, SessionLocal, Base

__all__ = ["engine", "SessionLocal", "Base", "create_tables"]


def create_tables() -> None:
    # 모델 모듈을 import 해야 metadata 에 테이블이 등록됨
    from interview_prep.models import sessions, questions, responses  # noqa: F401

    Base.metadata.create_all(bind=engine)
