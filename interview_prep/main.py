# interview_prep/main.py

# ------------------------
# 환경 변수 / 로깅
# ------------------------
import logging
from contextlib import asynccontextmanager

from interview_prep.config import settings

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# ------------------------
# FastAPI, CORS 미들웨어 import
# ------------------------
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from interview_prep.db.base import create_tables
from interview_prep.routers import questions as questions_router
from interview_prep.routers import responses as responses_router
from interview_prep.routers import sessions as sessions_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    # sql 백엔드일 때만 테이블 생성 (supabase 는 외부에서 관리)
    if settings.auto_create_tables and settings.data_backend == "sql":
        create_tables()
        logger.info("tables ready (env=%s)", settings.app_env)
    yield

# ------------------------
# 1) FastAPI 앱 생성
# ------------------------
app = FastAPI(title="Interview Practice API", lifespan=lifespan)

# ------------------------
# 2) CORS 미들웨어 추가
# ------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=False,  # 쿠키 안 쓰면 False
    allow_methods=["*"],
    allow_headers=["*"],
)

# ------------------------
# 3) 라우터 등록
# ------------------------
app.include_router(sessions_router.router)
app.include_router(questions_router.router)
app.include_router(responses_router.router)

# ------------------------
# 4) health check
# ------------------------
@app.get("/")
@app.get("/health")
def root():
    return {"ok": True}
