# interview_prep/db/session.py
# SQLAlchemy 기본 세팅. DB URL은 .env의 DATABASE_URL을 사용.

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base

from interview_prep.config import settings  # Settings() 인스턴스

DATABASE_URL = settings.database_url

if not DATABASE_URL:
    raise RuntimeError("DATABASE_URL 환경변수가 설정되어 있지 않습니다.")


def _engine_kwargs(url: str) -> dict:
    if url.startswith("sqlite"):
        # 요청 스레드와 커넥션 생성 스레드가 다를 수 있음
        return {"connect_args": {"check_same_thread": False}}
    return {
        "pool_pre_ping": True,  # 끊어진 커넥션 자동 감지
        "pool_size": 30,
        "max_overflow": 0,      # 풀 크기 초과 연결 금지
        "pool_timeout": 30,     # 풀 고갈 시 대기 시간(초) 후 Timeout
    }


engine = create_engine(DATABASE_URL, **_engine_kwargs(DATABASE_URL))

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()
