# interview_prep/config.py

from dotenv import load_dotenv
from pathlib import Path
from typing import List, Literal
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()  # .env 파일 먼저 읽기

BASE_DIR = Path(__file__).resolve().parent.parent

class Settings(BaseSettings):
    # 환경 구분
    app_env: str = "local"
    log_level: str = "INFO"

    # DB
    database_url: str = "sqlite:///./interview_prep.db"   # DATABASE_URL
    data_backend: Literal["sql", "supabase"] = "sql"       # DATA_BACKEND
    auto_create_tables: bool = True

    # Supabase
    supabase_url: str | None = None                # SUPABASE_URL
    supabase_service_role_key: str | None = None   # SUPABASE_SERVICE_ROLE_KEY
    supabase_jwt_secret: str | None = None         # SUPABASE_JWT_SECRET
    supabase_issuer: str | None = None             # SUPABASE_ISSUER
    supabase_jwt_audience: str | None = "authenticated"  # SUPABASE_JWT_AUDIENCE

    # 질문/답변 저장 시 created_at 갱신 여부 (기존 동작 유지: True)
    refresh_created_at_on_save: bool = True

    cors_origins: List[str] = ["*"]

    model_config = SettingsConfigDict(
        env_file=str(BASE_DIR / ".env"),  # 루트 .env 절대경로
        env_file_encoding="utf-8",
        extra="ignore",                   # 필요 없는 env 무시
    )

settings = Settings()
